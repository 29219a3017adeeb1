#!/usr/bin/env python3
"""
Example usage of the Care Call Manager.

Loads a roster CSV, distributes it across the configured staff for a month,
demonstrates a manual swap and writes the printable contact list.

Usage:
    python example_usage.py [roster.csv] [month]
"""

import logging
import sys

from care_call_manager import CareCallAssignmentManager
from care_call_manager.config import load_config, load_env
from care_call_manager.roster import RosterError, display_name


def main(argv):
    print("=== Care Call Manager Demo ===\n")

    load_env()
    config = load_config()
    logging.basicConfig(level=config.log_level)

    roster_path = argv[1] if len(argv) > 1 else 'data/roster.csv'
    month = argv[2] if len(argv) > 2 else config.default_month

    manager = CareCallAssignmentManager(
        staff_names=config.staff_names,
        month=month,
        excluded_names=config.excluded_names
    )

    # 1. Load roster
    print(f"1. Loading roster from {roster_path}...")
    try:
        count = manager.load_roster(roster_path)
    except FileNotFoundError:
        print(f"Error: {roster_path} not found")
        return 1
    except RosterError as e:
        print(f"Error: {e}")
        return 1
    print(f"Loaded {count} agents")
    print(f"   Columns found: {', '.join(manager.roster_columns)}")

    # 2. Distribute
    print(f"\n2. Processing assignments for {manager.month}...")
    result = manager.process_assignments()
    print(result.get_summary_report())

    # 3. Swap the first record of the first staff member with the next staff member
    staff_with_records = [staff for staff, records in manager.assignments.items() if records]
    if len(staff_with_records) >= 2:
        source, target = staff_with_records[0], staff_with_records[1]
        moved = display_name(manager.assignments[source][0])
        print(f"\n3. Swapping {moved} from {source} to {target}...")
        manager.swap(source, 0, target)
        for staff, count in manager.staff_counts().items():
            print(f"     {staff}: {count} agents")

    # 4. Print list
    print("\n4. Print list:")
    print(manager.generate_print_list())

    # 5. Export
    assignments_df = manager.get_result().to_dataframe()
    assignments_df.to_csv('assignments_output.csv', index=False)
    print("   ✓ Assignments saved to assignments_output.csv")

    print("\n=== Demo Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
