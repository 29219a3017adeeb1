"""
Flattened contact list for printing or pasting into a spreadsheet.
"""

from typing import Dict, List

from ..roster.fields import (
    ANNIVERSARY_FIELDS,
    BIRTHDAY_FIELDS,
    EMAIL_FIELDS,
    NOT_AVAILABLE,
    PHONE_FIELDS,
    START_DATE_FIELDS,
    display_name,
    flip_name,
    resolve_field,
)
from .models import AssignmentTable, Record


def contact_row(staff: str, record: Record) -> Dict[str, str]:
    """Resolved contact fields for one assigned record."""
    return {
        'staff': staff,
        'name': flip_name(display_name(record)),
        'phone': resolve_field(record, PHONE_FIELDS),
        'email': resolve_field(record, EMAIL_FIELDS),
        'birthday': resolve_field(record, BIRTHDAY_FIELDS),
        'start_date': resolve_field(record, START_DATE_FIELDS),
        'anniversary': resolve_field(record, ANNIVERSARY_FIELDS)
    }


def print_rows(table: AssignmentTable) -> List[Dict[str, str]]:
    """Contact rows for every record, staff in table order, empty staff skipped."""
    return [
        contact_row(staff, record)
        for staff, records in table.items()
        if records
        for record in records
    ]


def format_line(row: Dict[str, str]) -> str:
    parts = [row['staff'], row['name'], row['phone'], row['email']]
    dates = [row['birthday'], row['start_date'], row['anniversary']]
    # Date columns are left off entirely for rosters that carry none of them
    if any(value != NOT_AVAILABLE for value in dates):
        parts.extend([row['birthday'], row['start_date']])
        if row['anniversary'] != NOT_AVAILABLE:
            parts.append(row['anniversary'])
    return ', '.join(parts)


def format_print_list(table: AssignmentTable) -> str:
    """
    Render the assignment table as one comma-separated line per record.

    Line layout: ``staff, First Last, phone, email[, birthday, start date[, anniversary]]``.
    Every line ends with a newline.
    """
    return ''.join(format_line(row) + '\n' for row in print_rows(table))
