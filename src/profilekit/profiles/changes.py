"""Change notification records and subscriber lists.

Every mutation of a profile is reported twice: once before it happens
through a cancellable ``ProfileChangingArgs`` and once after it happened
through an immutable ``ProfileChangedArgs``.
"""

from enum import Enum
from typing import Any, Callable, Iterator

from pydantic import BaseModel, ConfigDict, Field


class ProfileChangeType(str, Enum):
    """Kinds of profile mutations."""

    NAME = "name"
    READ_ONLY = "read_only"
    SET_VALUE = "set_value"
    REMOVE_ENTRY = "remove_entry"
    REMOVE_SECTION = "remove_section"
    OTHER = "other"


class ProfileChangedArgs(BaseModel):
    """Describes a change that has been applied to a profile.

    For ``OTHER`` changes, ``entry`` holds the name of the property or
    method that caused the change instead of a settings entry.
    """

    model_config = ConfigDict(frozen=True)

    change_type: ProfileChangeType = Field(..., frozen=True, description="Kind of change")
    section: str | None = Field(default=None, frozen=True, description="Affected section")
    entry: str | None = Field(default=None, frozen=True, description="Affected entry")
    value: Any = Field(default=None, frozen=True, description="New value")


class ProfileChangingArgs(ProfileChangedArgs):
    """Describes a change that is about to be applied.

    A subscriber vetoes the change by setting ``cancel`` to True.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    cancel: bool = Field(default=False, description="Set to True to veto the change")


ProfileChangingHandler = Callable[[Any, ProfileChangingArgs], None]
ProfileChangedHandler = Callable[[Any, ProfileChangedArgs], None]


class ProfileEvent:
    """Ordered list of subscribers to one notification channel."""

    def __init__(self, handlers: list[Callable[[Any, Any], None]] | None = None):
        self._handlers: list[Callable[[Any, Any], None]] = list(handlers or [])

    def subscribe(self, handler: Callable[[Any, Any], None]) -> None:
        """Append a handler; it will be invoked after all earlier ones."""
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[[Any, Any], None]) -> bool:
        """Remove the most recently added registration of a handler.

        Returns:
            True if removed, False if the handler was not subscribed
        """
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return True
        return False

    def clear(self) -> None:
        self._handlers.clear()

    def copy(self) -> "ProfileEvent":
        return ProfileEvent(self._handlers)

    def __iter__(self) -> Iterator[Callable[[Any, Any], None]]:
        # snapshot so handlers may unsubscribe while being notified
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)
