"""Base classes for Profiles.

A profile is a named, hierarchical settings container: sections hold
entries, entries hold one value each. Backends supply the storage through a
small set of primitive operations; everything else (the read-only lock,
change notification, typed access and tabular import/export) lives here and
is built on top of those primitives.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any

from profilekit.errors import (
    CoercionError,
    ProfileArgumentError,
    ProfileNameError,
    ReadOnlyProfileError,
)
from profilekit.profiles.changes import (
    ProfileChangedArgs,
    ProfileChangeType,
    ProfileChangingArgs,
    ProfileEvent,
)
from profilekit.profiles.coercion import (
    ValueType,
    coerce_value,
    default_for,
    resolve_value_type,
)
from profilekit.tabular.base import DataSet
from profilekit.utils.helpers import trim_name

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()


class ReadOnlyProfile(ABC):
    """Query surface of a profile. Offers no mutation and no events."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name identifying the profile's data source."""

    @abstractmethod
    def get_value(self, section: str, entry: str) -> Any:
        """Get the raw value of an entry.

        Args:
            section: Section name
            entry: Entry name

        Returns:
            The stored value or None if the section or entry does not exist

        Raises:
            ProfileArgumentError: If section or entry is None
        """

    @abstractmethod
    def get_typed_value(
        self,
        section: str,
        entry: str,
        value_type: ValueType | type | str,
        default: Any = _NO_DEFAULT,
    ) -> Any:
        """Get the value of an entry converted to a primitive type."""

    @abstractmethod
    def has_section(self, section: str) -> bool:
        """Check whether a section exists."""

    @abstractmethod
    def has_entry(self, section: str, entry: str) -> bool:
        """Check whether an entry exists in a section."""

    @abstractmethod
    def get_section_names(self) -> list[str] | None:
        """Get the names of all sections.

        Returns:
            Section names, or None if the data source does not exist
        """

    @abstractmethod
    def get_entry_names(self, section: str) -> list[str] | None:
        """Get the names of all entries of a section.

        Returns:
            Entry names, or None if the section does not exist
        """

    @abstractmethod
    def get_data_set(self) -> DataSet | None:
        """Export the profile into a tabular DataSet."""

    @abstractmethod
    def clone(self) -> "ReadOnlyProfile":
        """Create an independent copy of the profile."""

    def __contains__(self, section: object) -> bool:
        if not isinstance(section, str):
            return False
        return self.has_section(section)


class Profile(ReadOnlyProfile):
    """Abstract mutable profile shared by every storage backend.

    Backends implement the primitives ``default_name``, ``get_section_names``,
    ``get_entry_names``, ``get_value``, ``set_value``, ``remove_entry``,
    ``remove_section`` and ``clone``. Mutating primitives are expected to
    call ``_verify_not_read_only`` first and to bracket the actual change
    with ``_raise_change_event``.

    Subscribers are attached to ``changing`` (cancellable, before the change)
    and ``changed`` (after the change) and are called as
    ``handler(profile, args)``.
    """

    def __init__(self, name: str | None = None):
        """Initialize the profile.

        Args:
            name: Profile name; the backend's default name is used if None
        """
        self._name = self.default_name if name is None else name.strip()
        self._read_only = False
        self.changing = ProfileEvent()
        self.changed = ProfileEvent()

    @property
    @abstractmethod
    def default_name(self) -> str:
        """Name used when none is given at construction."""

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._verify_not_read_only()
        value = trim_name(value, "name")
        if value == self._name:
            return

        if not self._raise_change_event(True, ProfileChangeType.NAME, None, None, value):
            return

        self._name = value
        self._raise_change_event(False, ProfileChangeType.NAME, None, None, value)

    @property
    def read_only(self) -> bool:
        return self._read_only

    @read_only.setter
    def read_only(self, value: bool) -> None:
        # the lock is one-way; any assignment on a locked profile is refused
        self._verify_not_read_only()
        value = bool(value)
        if not value:
            return

        if not self._raise_change_event(True, ProfileChangeType.READ_ONLY, None, None, value):
            return

        self._read_only = value
        self._raise_change_event(False, ProfileChangeType.READ_ONLY, None, None, value)

    @abstractmethod
    def set_value(self, section: str, entry: str, value: Any) -> None:
        """Write the value of an entry, creating the section if needed.

        Setting a value of None removes the entry.

        Raises:
            ReadOnlyProfileError: If the profile is read-only
            ProfileNameError: If the profile has no name
            ProfileArgumentError: If section or entry is None
        """

    @abstractmethod
    def remove_entry(self, section: str, entry: str) -> None:
        """Remove an entry from a section.

        Raises:
            ReadOnlyProfileError: If the profile is read-only
        """

    @abstractmethod
    def remove_section(self, section: str) -> None:
        """Remove a section and all of its entries.

        Raises:
            ReadOnlyProfileError: If the profile is read-only
        """

    @abstractmethod
    def clone(self) -> "Profile":
        """Create an independent copy of the profile, including its state."""

    def get_typed_value(
        self,
        section: str,
        entry: str,
        value_type: ValueType | type | str,
        default: Any = _NO_DEFAULT,
    ) -> Any:
        """Get the value of an entry converted to a primitive type.

        This is a lossy convenience accessor: a missing entry or a value that
        cannot be converted yields the type's zero value (or ``default`` when
        given) instead of an error. Targets other than the primitive
        ValueTypes are not converted and yield ``default`` or None.

        Args:
            section: Section name
            entry: Entry name
            value_type: A ValueType, its string value, or ``bool``/``int``/``float``
            default: Value returned when the conversion is not possible

        Returns:
            The converted value or the fallback
        """
        value = self.get_value(section, entry)
        target = resolve_value_type(value_type)
        if target is None:
            return None if default is _NO_DEFAULT else default

        fallback = default_for(target) if default is _NO_DEFAULT else default
        if value is None:
            return fallback
        try:
            return coerce_value(value, target)
        except CoercionError as e:
            logger.debug("Falling back to %r for [%s] %s: %s", fallback, section, entry, e)
            return fallback

    def has_section(self, section: str) -> bool:
        sections = self.get_section_names()
        if sections is None:
            return False
        return self._verify_section(section) in sections

    def has_entry(self, section: str, entry: str) -> bool:
        entries = self.get_entry_names(section)
        if entries is None:
            return False
        return self._verify_entry(entry) in entries

    def clone_read_only(self) -> ReadOnlyProfile:
        """Create a frozen copy of the profile.

        The copy keeps the subscribers of this profile and is locked without
        raising a READ_ONLY change.
        """
        profile = self.clone()
        profile._read_only = True
        return profile

    def get_data_set(self) -> DataSet | None:
        """Export the profile into a DataSet.

        Every section becomes a table named after it. Every entry becomes a
        column typed by its value's runtime type, and each table gets exactly
        one row holding the values.

        Returns:
            The DataSet, or None if the backend has no data source

        Raises:
            ProfileNameError: If the profile has no name
        """
        self._verify_name()

        sections = self.get_section_names()
        if sections is None:
            return None

        data_set = DataSet(name=self.name)
        for section in sections:
            table = data_set.add_table(section)
            values = []
            for entry in self.get_entry_names(section) or []:
                value = self.get_value(section, entry)
                table.add_column(entry, type(value))
                values.append(value)
            table.add_row(values)

        logger.debug("Exported %d sections from profile '%s'", len(data_set), self.name)
        return data_set

    def set_data_set(self, data_set: DataSet) -> None:
        """Import the first row of every table of a DataSet.

        Each table name is used as a section and each column name as an
        entry. Tables without rows are skipped and rows after the first are
        ignored. Values are written through ``set_value``.

        Args:
            data_set: The DataSet to import

        Raises:
            ProfileArgumentError: If data_set is None
            ReadOnlyProfileError: If the profile is read-only
            ProfileNameError: If the profile has no name
            ValueError: If a first row does not match its table's columns
        """
        if data_set is None:
            raise ProfileArgumentError("data_set")
        self._verify_not_read_only()
        self._verify_name()

        tables = [table for table in data_set.tables if table.rows]
        for table in tables:
            if len(table.rows[0]) != len(table.columns):
                raise ValueError(
                    f"First row of table '{table.name}' has {len(table.rows[0])} values, "
                    f"expected {len(table.columns)}"
                )

        for table in tables:
            for column, value in zip(table.columns, table.rows[0]):
                self.set_value(table.name, column.name, value)

        logger.debug("Imported %d tables into profile '%s'", len(tables), self.name)

    def _copy_state(self, source: "Profile") -> None:
        """Copy name, lock and subscribers from another profile.

        Subscriber lists are copied, so later subscriptions on either
        profile do not affect the other.
        """
        self._name = source._name
        self._read_only = source._read_only
        self.changing = source.changing.copy()
        self.changed = source.changed.copy()

    def _verify_section(self, section: str) -> str:
        return trim_name(section, "section")

    def _verify_entry(self, entry: str) -> str:
        return trim_name(entry, "entry")

    def _verify_name(self) -> None:
        if not self._name:
            raise ProfileNameError()

    def _verify_not_read_only(self) -> None:
        if self._read_only:
            raise ReadOnlyProfileError()

    def _raise_change_event(
        self,
        changing: bool,
        change_type: ProfileChangeType,
        section: str | None,
        entry: str | None,
        value: Any,
    ) -> bool:
        """Notify subscribers of a change.

        Args:
            changing: True before the change, False after it
            change_type: Kind of change
            section: Affected section
            entry: Affected entry, or the property/method name for OTHER
            value: New value

        Returns:
            Whether the caller should apply the change. Always True after
            the change.
        """
        if changing:
            if not self.changing:
                return True

            args = ProfileChangingArgs(
                change_type=change_type, section=section, entry=entry, value=value
            )
            self._on_changing(args)
            if args.cancel:
                logger.debug(
                    "Change %s of profile '%s' cancelled (section=%r, entry=%r)",
                    change_type.value, self._name, section, entry,
                )
            return not args.cancel

        if self.changed:
            self._on_changed(
                ProfileChangedArgs(
                    change_type=change_type, section=section, entry=entry, value=value
                )
            )
        return True

    def _on_changing(self, args: ProfileChangingArgs) -> None:
        for handler in self.changing:
            handler(self, args)
            if args.cancel:
                break

    def _on_changed(self, args: ProfileChangedArgs) -> None:
        for handler in self.changed:
            handler(self, args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, read_only={self._read_only})"
