"""
profilekit - Storage-agnostic settings profiles.

Profiles are named, hierarchical key/value containers (sections, entries,
values) with change notification, a read-only lock, and conversion to and
from tabular data sets. Concrete storage backends subclass Profile.
"""

__version__ = "0.1.0"

from profilekit.errors import (
    ProfileError,
    ProfileStateError,
    ReadOnlyProfileError,
    ProfileNameError,
    ProfileArgumentError,
    CoercionError,
)
from profilekit.profiles.base import Profile, ReadOnlyProfile
from profilekit.profiles.changes import ProfileChangeType, ProfileChangedArgs, ProfileChangingArgs
from profilekit.profiles.coercion import ValueType
from profilekit.profiles.memory import MemoryProfile
from profilekit.tabular.base import DataSet, DataTable, DataColumn

__all__ = [
    "ProfileError",
    "ProfileStateError",
    "ReadOnlyProfileError",
    "ProfileNameError",
    "ProfileArgumentError",
    "CoercionError",
    "Profile",
    "ReadOnlyProfile",
    "ProfileChangeType",
    "ProfileChangedArgs",
    "ProfileChangingArgs",
    "ValueType",
    "MemoryProfile",
    "DataSet",
    "DataTable",
    "DataColumn",
]
