"""
Month-seeded distribution of roster records across staff.

Implements the assignment rules:
1. Records and staff are shuffled with a fixed, month-keyed sequence so the
   same month always produces the same split
2. Records are divided evenly; the first ``len(records) % len(staff)`` staff
   in shuffled order receive one extra
3. Each staff member's list is kept in alphabetical order by display name,
   including after manual swaps
"""

import logging
from typing import List, Sequence, TypeVar

from ..config import MONTHS
from ..roster.fields import display_name, name_sort_key
from .models import (
    AssignmentTable,
    CALLED_FIELD,
    FLAG_FALSE,
    LOGGED_IN_FIELD,
    Record,
    STAFF_FIELD,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

LCG_MODULUS = 233280
RECORD_SHUFFLE_CONSTANTS = (9301, 49297)
STAFF_SHUFFLE_CONSTANTS = (7919, 31847)


def month_seed(month: str) -> int:
    """Seed for a month name: 1 for January through 12 for December."""
    if month not in MONTHS:
        raise ValueError(f"Month must be one of {list(MONTHS)}, got {month!r}")
    return MONTHS.index(month) + 1


def seeded_shuffle(items: Sequence[T],
                   seed: int,
                   multiplier: int,
                   increment: int,
                   modulus: int = LCG_MODULUS) -> List[T]:
    """
    Fisher-Yates shuffle driven by a single linear congruential value.

    The value ``(seed * multiplier + increment) % modulus`` is computed once
    and reused at every step, so the permutation depends only on the seed
    and the number of items.

    Returns:
        A shuffled copy; ``items`` is left untouched
    """
    shuffled = list(items)
    value = (seed * multiplier + increment) % modulus
    for i in range(len(shuffled) - 1, 0, -1):
        j = value % (i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def sort_records(records: List[Record]) -> None:
    """Sort records in place by display name."""
    records.sort(key=lambda record: name_sort_key(display_name(record)))


def distribute(records: Sequence[Record], staff_names: Sequence[str], month: str) -> AssignmentTable:
    """
    Split records across staff for the given month.

    Args:
        records: Cleaned roster records
        staff_names: Unique staff names; their order feeds the shuffle
        month: Month name selecting the shuffle seed

    Returns:
        Table keyed by staff name in ``staff_names`` order. Records are
        stamped copies of the inputs.

    Raises:
        ValueError: for an empty roster, empty or duplicate staff, or an
            unknown month
    """
    if not records:
        raise ValueError("Cannot distribute an empty roster")
    if not staff_names:
        raise ValueError("Cannot distribute without staff members")
    if len(set(staff_names)) != len(staff_names):
        raise ValueError(f"Staff names must be unique: {list(staff_names)}")

    seed = month_seed(month)

    shuffled_records = seeded_shuffle(records, seed, *RECORD_SHUFFLE_CONSTANTS)
    shuffled_staff = seeded_shuffle(staff_names, seed, *STAFF_SHUFFLE_CONSTANTS)

    base_assignments = len(shuffled_records) // len(shuffled_staff)
    extra_assignments = len(shuffled_records) % len(shuffled_staff)

    table: AssignmentTable = {staff: [] for staff in staff_names}

    record_index = 0
    for staff_index, staff in enumerate(shuffled_staff):
        count = base_assignments + (1 if staff_index < extra_assignments else 0)
        for record in shuffled_records[record_index:record_index + count]:
            assigned = dict(record)
            assigned[STAFF_FIELD] = staff
            assigned[CALLED_FIELD] = FLAG_FALSE
            assigned[LOGGED_IN_FIELD] = FLAG_FALSE
            table[staff].append(assigned)
        record_index += count

    for staff_records in table.values():
        sort_records(staff_records)

    logger.info("Distributed %d records across %d staff for %s (seed %d)",
                len(records), len(staff_names), month, seed)
    return table


def _index_by_identity(records: List[Record], target: Record) -> int:
    for i, record in enumerate(records):
        if record is target:
            return i
    return -1


def swap(table: AssignmentTable, source_staff: str, source_record: Record, target_staff: str) -> AssignmentTable:
    """
    Move a record to another staff member and send one back in exchange.

    The record handed back is the first one in the target's list whose
    display name sorts after the moved record, or the target's last record
    if none does. Nothing is handed back when the target list is empty.

    The table is modified in place and returned.

    Raises:
        ValueError: if either staff name is not in the table or the record
            is not in the source staff's list; the table is left unchanged
    """
    if source_staff == target_staff:
        return table

    if source_staff not in table:
        raise ValueError(f"Unknown source staff member: {source_staff!r}")
    if target_staff not in table:
        raise ValueError(f"Unknown target staff member: {target_staff!r}")

    source_index = _index_by_identity(table[source_staff], source_record)
    if source_index < 0:
        raise ValueError(f"Record is not assigned to {source_staff!r}")

    table[source_staff].pop(source_index)

    source_key = name_sort_key(display_name(source_record))
    target_records = sorted(table[target_staff], key=lambda record: name_sort_key(display_name(record)))

    record_to_swap = next(
        (record for record in target_records
         if name_sort_key(display_name(record)) > source_key),
        None
    )
    if record_to_swap is None and target_records:
        record_to_swap = target_records[-1]

    source_record[STAFF_FIELD] = target_staff
    if record_to_swap is not None:
        record_to_swap[STAFF_FIELD] = source_staff
        table[target_staff].pop(_index_by_identity(table[target_staff], record_to_swap))
        table[source_staff].append(record_to_swap)

    table[target_staff].append(source_record)

    sort_records(table[source_staff])
    sort_records(table[target_staff])

    logger.debug("Moved %s from %s to %s, returned %s",
                 display_name(source_record), source_staff, target_staff,
                 display_name(record_to_swap) if record_to_swap is not None else None)
    return table
