"""
Staff assignment module for distributing and rebalancing care calls.
"""

from .distribution import distribute, seeded_shuffle, swap
from .manager import CareCallAssignmentManager
from .models import AssignmentResult, AssignmentTable, Record
from .printing import format_print_list

__all__ = [
    "AssignmentResult",
    "AssignmentTable",
    "CareCallAssignmentManager",
    "Record",
    "distribute",
    "format_print_list",
    "seeded_shuffle",
    "swap",
]
