"""
Care Call Manager

Distributes a monthly agent roster across care call staff and produces a
printable contact list.
"""



from .roster import load_roster, resolve_field
from .staff_assignment.manager import CareCallAssignmentManager
from .staff_assignment.models import AssignmentResult
from .staff_assignment.distribution import distribute, swap
from .staff_assignment.printing import format_print_list

__all__ = [
    "AssignmentResult",
    "CareCallAssignmentManager",
    "distribute",
    "format_print_list",
    "load_roster",
    "resolve_field",
    "swap",
]
