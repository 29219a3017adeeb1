"""
Roster module for loading records and resolving their fields.
"""

from .fields import (
    NOT_AVAILABLE,
    display_name,
    flip_name,
    name_sort_key,
    resolve_field,
)
from .loader import RosterError, clean_roster, load_roster

__all__ = [
    "NOT_AVAILABLE",
    "RosterError",
    "clean_roster",
    "display_name",
    "flip_name",
    "load_roster",
    "name_sort_key",
    "resolve_field",
]
