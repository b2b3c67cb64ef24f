"""Utility functions for profilekit."""

from profilekit.utils.helpers import (
    default_profile_name,
    to_nested_dict,
    trim_name,
)

__all__ = [
    "default_profile_name",
    "to_nested_dict",
    "trim_name",
]
