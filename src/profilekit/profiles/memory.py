"""In-memory profile backend.

Keeps sections and entries in ordered dictionaries. Useful as a scratch
profile, for tests, and as the target of YAML snapshots.
"""

import copy
import logging
from typing import Any, Mapping

from profilekit.profiles.base import Profile
from profilekit.profiles.changes import ProfileChangeType
from profilekit.utils.helpers import default_profile_name

logger = logging.getLogger(__name__)


class MemoryProfile(Profile):
    """Profile whose data lives only in process memory."""

    extension = ".mem"

    def __init__(
        self,
        name: str | None = None,
        sections: Mapping[str, Mapping[str, Any]] | None = None,
    ):
        """Initialize the profile.

        Args:
            name: Profile name; defaults to ``default_name``
            sections: Initial data as ``{section: {entry: value}}``. Names are
                trimmed and None values are skipped. No notifications are raised.
        """
        super().__init__(name)
        self._sections: dict[str, dict[str, Any]] = {}
        for section, entries in (sections or {}).items():
            target = self._sections.setdefault(self._verify_section(section), {})
            for entry, value in entries.items():
                if value is not None:
                    target[self._verify_entry(entry)] = value

    @property
    def default_name(self) -> str:
        return default_profile_name(self.extension)

    def get_section_names(self) -> list[str]:
        return list(self._sections)

    def get_entry_names(self, section: str) -> list[str] | None:
        entries = self._sections.get(self._verify_section(section))
        if entries is None:
            return None
        return list(entries)

    def get_value(self, section: str, entry: str) -> Any:
        section = self._verify_section(section)
        entry = self._verify_entry(entry)
        return self._sections.get(section, {}).get(entry)

    def set_value(self, section: str, entry: str, value: Any) -> None:
        self._verify_not_read_only()
        self._verify_name()
        section = self._verify_section(section)
        entry = self._verify_entry(entry)

        if value is None:
            self.remove_entry(section, entry)
            return

        if not self._raise_change_event(True, ProfileChangeType.SET_VALUE, section, entry, value):
            return

        self._sections.setdefault(section, {})[entry] = value
        logger.debug("Set [%s] %s in profile '%s'", section, entry, self.name)
        self._raise_change_event(False, ProfileChangeType.SET_VALUE, section, entry, value)

    def remove_entry(self, section: str, entry: str) -> None:
        self._verify_not_read_only()
        self._verify_name()
        section = self._verify_section(section)
        entry = self._verify_entry(entry)

        entries = self._sections.get(section)
        if entries is None or entry not in entries:
            return

        if not self._raise_change_event(True, ProfileChangeType.REMOVE_ENTRY, section, entry, None):
            return

        del entries[entry]
        logger.debug("Removed [%s] %s from profile '%s'", section, entry, self.name)
        self._raise_change_event(False, ProfileChangeType.REMOVE_ENTRY, section, entry, None)

    def remove_section(self, section: str) -> None:
        self._verify_not_read_only()
        self._verify_name()
        section = self._verify_section(section)

        if section not in self._sections:
            return

        if not self._raise_change_event(True, ProfileChangeType.REMOVE_SECTION, section, None, None):
            return

        del self._sections[section]
        logger.debug("Removed section [%s] from profile '%s'", section, self.name)
        self._raise_change_event(False, ProfileChangeType.REMOVE_SECTION, section, None, None)

    def clear(self) -> None:
        """Remove all sections at once."""
        self._verify_not_read_only()
        self._verify_name()

        if not self._raise_change_event(True, ProfileChangeType.OTHER, None, "clear", None):
            return

        self._sections.clear()
        self._raise_change_event(False, ProfileChangeType.OTHER, None, "clear", None)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Get a deep copy of the data as ``{section: {entry: value}}``."""
        return copy.deepcopy(self._sections)

    def clone(self) -> "MemoryProfile":
        profile = MemoryProfile(self._name)
        profile._sections = copy.deepcopy(self._sections)
        profile._copy_state(self)
        return profile
