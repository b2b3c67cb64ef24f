"""Utility helper functions."""

from typing import TYPE_CHECKING, Any

from profilekit.errors import ProfileArgumentError

if TYPE_CHECKING:
    from profilekit.profiles.base import ReadOnlyProfile

DEFAULT_NAME_WITHOUT_EXTENSION = "profile"


def trim_name(value: str | None, argument: str) -> str:
    """Validate and trim a section, entry or profile name.

    Args:
        value: The name to check
        argument: Argument name used in the error message

    Returns:
        The name with surrounding whitespace removed

    Raises:
        ProfileArgumentError: If value is None
    """
    if value is None:
        raise ProfileArgumentError(argument)
    return str(value).strip()


def default_profile_name(extension: str = "") -> str:
    """Build the default profile name for a backend.

    Args:
        extension: Backend-specific suffix such as ".ini"

    Returns:
        The default name
    """
    return f"{DEFAULT_NAME_WITHOUT_EXTENSION}{extension}"


def to_nested_dict(profile: "ReadOnlyProfile") -> dict[str, dict[str, Any]]:
    """Read every section and entry of a profile into a nested dictionary.

    Args:
        profile: Profile to read

    Returns:
        Mapping of section name to a mapping of entry name to value
    """
    result: dict[str, dict[str, Any]] = {}
    for section in profile.get_section_names() or []:
        result[section] = {
            entry: profile.get_value(section, entry)
            for entry in profile.get_entry_names(section) or []
        }
    return result
