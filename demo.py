#!/usr/bin/env python3
"""
Demo script showing basic usage of profilekit.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from profilekit.profiles.memory import MemoryProfile
from profilekit.profiles.changes import ProfileChangeType


def demo_values():
    """Demonstrate reading and writing entries."""
    print("=" * 60)
    print("1. SECTIONS AND ENTRIES")
    print("=" * 60)

    profile = MemoryProfile("app.ini")
    profile.set_value("Window", "Width", 800)
    profile.set_value("Window", "Title", "Main")

    print(f"Sections: {profile.get_section_names()}")
    print(f"Width as int:  {profile.get_typed_value('Window', 'Width', int)}")
    print(f"Width as bool: {profile.get_typed_value('Window', 'Width', bool)}")
    print(f"Title as int:  {profile.get_typed_value('Window', 'Title', int)}")
    return profile


def demo_notifications(profile: MemoryProfile):
    """Demonstrate vetoing changes."""
    print("\n" + "=" * 60)
    print("2. CHANGE NOTIFICATIONS")
    print("=" * 60)

    def guard_width(sender, e):
        if e.change_type == ProfileChangeType.SET_VALUE and e.entry == "Width":
            e.cancel = e.value > 4096

    profile.changing.subscribe(guard_width)
    profile.changed.subscribe(lambda sender, e: print(f"  changed: {e.change_type.value} {e.entry}={e.value!r}"))

    profile.set_value("Window", "Width", 10000)
    print(f"Width after vetoed change: {profile.get_value('Window', 'Width')}")
    profile.set_value("Window", "Width", 1024)


def demo_data_set(profile: MemoryProfile):
    """Demonstrate tabular export and import."""
    print("\n" + "=" * 60)
    print("3. DATA SETS")
    print("=" * 60)

    data_set = profile.get_data_set()
    for table in data_set:
        print(f"Table {table.name}: columns={table.column_names} rows={table.rows}")

    frozen = profile.clone_read_only()
    copy = MemoryProfile("copy.ini")
    copy.set_data_set(frozen.get_data_set())
    print(f"Imported copy: {copy.to_dict()}")


if __name__ == "__main__":
    profile = demo_values()
    demo_notifications(profile)
    demo_data_set(profile)
