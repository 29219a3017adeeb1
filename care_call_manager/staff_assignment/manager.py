"""
Care call assignment manager.

Holds one working session: the loaded roster, the staff list, the selected
month and the current assignments. Any change to the roster, staff or month
invalidates the assignments until they are processed again.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config import MONTHS, default_staff_list
from ..roster.loader import RosterSource, clean_roster, load_roster
from .distribution import distribute, swap
from .models import AssignmentResult, AssignmentTable, Record
from .printing import format_print_list

logger = logging.getLogger(__name__)


class CareCallAssignmentManager:
    """
    Manages roster data, staff and assignments for a monthly care call round.

    Assignments are only available after ``process_assignments`` and are
    dropped whenever the inputs they were built from change.
    """

    def __init__(self,
                 staff_names: Optional[Sequence[str]] = None,
                 month: str = 'January',
                 excluded_names: Optional[Sequence[str]] = None):
        """
        Initialize manager.

        Args:
            staff_names: Initial staff list (defaults to the configured staff)
            month: Initially selected month
            excluded_names: Names the roster loader leaves out
        """
        if month not in MONTHS:
            raise ValueError(f"Month must be one of {list(MONTHS)}")

        self.staff_list: List[str] = []
        for name in (default_staff_list() if staff_names is None else staff_names):
            self.add_staff(name)
        self.month = month
        self.excluded_names = excluded_names
        self.roster: List[Record] = []

        self.reset_state()

    def reset_state(self) -> None:
        """Drop the current assignments and print list."""
        self.assignments: AssignmentTable = {}
        self.printed_list = ''
        self.is_processed = False

    # Inputs

    def load_roster(self, source: RosterSource, filename: Optional[str] = None) -> int:
        """
        Load a roster CSV, replacing any previous roster.

        Returns:
            Number of records kept after filtering
        """
        records = load_roster(source, filename=filename, excluded_names=self.excluded_names)
        self.roster = records
        self.reset_state()
        logger.info("Successfully loaded %d records", len(records))
        return len(records)

    def set_roster(self, rows: Sequence[Dict[str, Any]]) -> int:
        """Use already-parsed rows as the roster, applying the same filtering as a CSV load."""
        self.roster = clean_roster(rows, self.excluded_names)
        self.reset_state()
        return len(self.roster)

    @property
    def roster_columns(self) -> List[str]:
        """Column names of the first roster record."""
        return list(self.roster[0].keys()) if self.roster else []

    def add_staff(self, name: str) -> bool:
        """
        Add a staff member.

        Returns:
            False if the name is blank or already present, True otherwise
        """
        name = name.strip()
        if not name or name in self.staff_list:
            return False
        self.staff_list.append(name)
        self.reset_state()
        return True

    def remove_staff(self, index: int) -> str:
        """Remove the staff member at ``index`` and return their name."""
        if not 0 <= index < len(self.staff_list):
            raise IndexError(f"No staff member at position {index}")
        name = self.staff_list.pop(index)
        self.reset_state()
        return name

    def set_month(self, month: str) -> None:
        """Select the month whose seed drives the next distribution."""
        if month not in MONTHS:
            raise ValueError(f"Month must be one of {list(MONTHS)}")
        self.month = month
        self.reset_state()

    # Assignment

    def process_assignments(self) -> AssignmentResult:
        """
        Distribute the roster across the staff for the selected month.

        Raises:
            ValueError: if no roster is loaded or the staff list is empty;
                the session is left unchanged
        """
        if not self.roster or not self.staff_list:
            raise ValueError("Please upload roster data and ensure you have staff members configured.")

        self.assignments = distribute(self.roster, self.staff_list, self.month)
        self.printed_list = ''
        self.is_processed = True
        return self.get_result()

    def _require_processed(self) -> None:
        if not self.is_processed:
            raise ValueError("Please process assignments first.")

    def get_result(self) -> AssignmentResult:
        """Current assignments wrapped as an AssignmentResult."""
        self._require_processed()
        return AssignmentResult(month=self.month, assignments=self.assignments)

    def get_record(self, staff: str, index: int) -> Record:
        """Record at ``index`` in a staff member's list."""
        self._require_processed()
        if staff not in self.assignments:
            raise ValueError(f"Unknown staff member: {staff!r}")
        records = self.assignments[staff]
        if not 0 <= index < len(records):
            raise IndexError(f"{staff} has no record at position {index}")
        return records[index]

    def swap(self, source_staff: str, record_index: int, target_staff: str) -> AssignmentTable:
        """
        Move the record at ``record_index`` from one staff member to another.

        The target hands back its alphabetically nearest record so both
        counts stay the same.
        """
        record = self.get_record(source_staff, record_index)
        swap(self.assignments, source_staff, record, target_staff)
        return self.assignments

    def swap_targets(self, staff: str) -> List[str]:
        """Staff members a record held by ``staff`` can be moved to."""
        return [name for name in self.staff_list if name != staff]

    def staff_counts(self) -> Dict[str, int]:
        """Records per staff member, empty until assignments are processed."""
        if not self.is_processed:
            return {}
        return {staff: len(records) for staff, records in self.assignments.items()}

    # Output

    def generate_print_list(self) -> str:
        """Build and keep the comma-separated contact list."""
        self._require_processed()
        self.printed_list = format_print_list(self.assignments)
        return self.printed_list

    def get_state(self) -> Dict[str, Any]:
        """Summary of the session for status displays."""
        return {
            'month': self.month,
            'staff_names': list(self.staff_list),
            'roster_records': len(self.roster),
            'roster_columns': self.roster_columns,
            'is_processed': self.is_processed,
            'staff_counts': self.staff_counts()
        }
