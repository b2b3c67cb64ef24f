"""Profile Loader for YAML snapshots of in-memory profiles."""

import logging
from pathlib import Path
from typing import Any

import yaml

from profilekit.profiles.base import Profile, ReadOnlyProfile
from profilekit.profiles.memory import MemoryProfile
from profilekit.utils.helpers import to_nested_dict

logger = logging.getLogger(__name__)


class ProfileLoader:
    """Loads and saves MemoryProfiles as YAML documents.

    Documents look like::

        name: app.ini
        read_only: false
        sections:
          Window:
            Width: 800
    """

    def load_file(self, path: Path | str) -> MemoryProfile:
        """Load a profile from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded MemoryProfile instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loading profile from %s", path)
        return self._parse_profile(data)

    def load_from_string(self, content: str) -> MemoryProfile:
        """Load a profile from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded MemoryProfile instance
        """
        data = yaml.safe_load(content)
        return self._parse_profile(data)

    def _parse_profile(self, data: dict[str, Any] | None) -> MemoryProfile:
        """Build a profile from the parsed YAML structure."""
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile document must be a mapping, got {type(data).__name__}")

        name = data.get("name")
        profile = MemoryProfile(None if name is None else str(name))
        for section, entries in (data.get("sections") or {}).items():
            if not isinstance(entries, dict):
                raise ValueError(f"Section '{section}' must be a mapping of entries")
            for entry, value in entries.items():
                profile.set_value(str(section), str(entry), value)

        # applied last so the entries above can still be written
        read_only = data.get("read_only", False)
        if not isinstance(read_only, bool):
            raise ValueError(f"read_only must be a boolean, got {read_only!r}")
        profile.read_only = read_only
        return profile

    def save_file(self, profile: ReadOnlyProfile, path: Path | str) -> None:
        """Save a profile to a YAML file.

        Args:
            profile: The profile to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self._profile_to_dict(profile)

        with open(path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.debug("Saved profile '%s' to %s", profile.name, path)

    def _profile_to_dict(self, profile: ReadOnlyProfile) -> dict[str, Any]:
        """Convert a profile to a dictionary for YAML serialization.

        Read-only views that are not Profiles have no lock of their own and
        are saved as locked.
        """
        return {
            "name": profile.name,
            "read_only": profile.read_only if isinstance(profile, Profile) else True,
            "sections": to_nested_dict(profile),
        }


def load_profile(path: Path | str) -> MemoryProfile:
    """Convenience function to load a profile from a file.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded MemoryProfile instance
    """
    loader = ProfileLoader()
    return loader.load_file(path)
