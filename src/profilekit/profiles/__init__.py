"""Profiles module - hierarchical settings containers.

A profile is a named set of sections, each holding named entries with one
value apiece. The abstract Profile implements:
- A one-way read-only lock
- Cancellable change notification
- Lossy typed value access
- Import and export through tabular DataSets

Backends only supply storage primitives.
"""

from profilekit.profiles.base import Profile, ReadOnlyProfile
from profilekit.profiles.changes import (
    ProfileChangedArgs,
    ProfileChangeType,
    ProfileChangingArgs,
    ProfileEvent,
)
from profilekit.profiles.coercion import ValueType, coerce_value
from profilekit.profiles.memory import MemoryProfile
from profilekit.profiles.loader import ProfileLoader, load_profile

__all__ = [
    "Profile",
    "ReadOnlyProfile",
    "ProfileChangedArgs",
    "ProfileChangeType",
    "ProfileChangingArgs",
    "ProfileEvent",
    "ValueType",
    "coerce_value",
    "MemoryProfile",
    "ProfileLoader",
    "load_profile",
]
