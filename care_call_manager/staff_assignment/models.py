"""
Data models for care call assignment.
"""

from typing import Dict, List
from dataclasses import dataclass
import pandas as pd


# A roster row keyed by its spreadsheet column names
Record = Dict[str, str]

# Staff name -> records assigned to that staff member, sorted by display name
AssignmentTable = Dict[str, List[Record]]

STAFF_FIELD = 'StaffMemberAssigned'
CALLED_FIELD = 'Called'
LOGGED_IN_FIELD = 'LoggedInCM'

FLAG_FALSE = 'FALSE'


@dataclass
class AssignmentResult:
    """Results of distributing one month's roster across the staff."""

    month: str
    assignments: AssignmentTable

    @property
    def staff_counts(self) -> Dict[str, int]:
        """Number of records held by each staff member."""
        return {staff: len(records) for staff, records in self.assignments.items()}

    @property
    def total_records(self) -> int:
        """Total number of assigned records."""
        return sum(len(records) for records in self.assignments.values())

    @property
    def is_balanced(self) -> bool:
        """True when no two staff members' counts differ by more than one."""
        counts = list(self.staff_counts.values())
        if not counts:
            return True
        return max(counts) - min(counts) <= 1

    def to_dataframe(self) -> pd.DataFrame:
        """Convert assignments to a pandas DataFrame, one row per record."""
        rows = [dict(record) for records in self.assignments.values() for record in records]
        return pd.DataFrame(rows)

    def get_summary_report(self) -> str:
        """Generate a text summary report."""
        report = []
        report.append(f"=== CARE CALL ASSIGNMENTS: {self.month.upper()} ===")
        report.append(f"Total records: {self.total_records}")
        report.append(f"Staff members: {len(self.assignments)}")
        report.append("")
        report.append("STAFF COUNTS:")
        for name, count in self.staff_counts.items():
            report.append(f"  {name}: {count} agents")

        return "\n".join(report)
