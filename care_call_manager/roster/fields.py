"""
Field lookup for loosely structured roster records.

Roster exports change their column headers from month to month, so every
field is looked up through an ordered list of candidate column names.
"""

import unicodedata
from typing import Any, Mapping, Sequence, Tuple


NOT_AVAILABLE = 'N/A'

NAME_FIELDS = ['Full Name', 'Name', 'Employee Name', 'full name', 'name']
PHONE_FIELDS = ['Phone', 'Assoc Phone', 'Phone Number', 'Mobile', 'phone', 'mobile']
EMAIL_FIELDS = ['Email', 'Assoc Email', 'Email Address', 'email']
BIRTHDAY_FIELDS = ['Birthday', 'Bday', 'Birth Date', 'DOB', 'birthday', 'bday']
START_DATE_FIELDS = ['MC Start Date', 'Start Date', 'Hire Date', 'Date Hired', 'start date', 'hire date']
ANNIVERSARY_FIELDS = [
    'Anniversary', 'Anniversary Date', 'Work Anniversary', 'Service Anniversary',
    'Hire Anniversary', 'Employment Anniversary', 'Tenure Anniversary', 'MC Anniversary',
    'anniversary', 'work anniversary', 'service anniversary', 'hire anniversary',
    'employment anniversary', 'mc anniversary', 'Anniv', 'anniv'
]


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ''


def resolve_field(record: Mapping[str, Any], candidate_fields: Sequence[str]) -> str:
    """
    Return the first non-blank value among the candidate columns.

    Exact, case-sensitive column names are tried first, in candidate order.
    After that each candidate is matched against the record's columns
    case-insensitively, where either name may contain the other; only the
    first matching column is considered per candidate.

    Args:
        record: Roster row keyed by column name
        candidate_fields: Column names in priority order

    Returns:
        The matched value as a string, or ``"N/A"`` when nothing matches
    """
    for field in candidate_fields:
        if field in record and not _is_blank(record[field]):
            return str(record[field])

    keys = list(record.keys())
    for field in candidate_fields:
        field_lower = field.lower()
        matching_key = next(
            (key for key in keys
             if field_lower in key.lower() or key.lower() in field_lower),
            None
        )
        if matching_key is not None and not _is_blank(record[matching_key]):
            return str(record[matching_key])

    return NOT_AVAILABLE


def display_name(record: Mapping[str, Any]) -> str:
    """Resolved name of a roster record as it appears in the export."""
    return resolve_field(record, NAME_FIELDS)


def flip_name(name: str) -> str:
    """Turn ``"Last, First"`` into ``"First Last"``; other names pass through."""
    if ',' not in name:
        return name
    last, _, first = name.partition(',')
    return f"{first.strip()} {last.strip()}"


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize('NFKD', value)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def name_sort_key(name: str) -> Tuple[str, str, str]:
    """
    Collation key for display names.

    Names compare ignoring accents and case first, then unaccented before
    accented, then lower case ahead of upper case.
    """
    folded = name.casefold()
    return (_strip_accents(folded), folded, name.swapcase())
