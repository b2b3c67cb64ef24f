"""Exceptions raised by profiles."""


class ProfileError(Exception):
    """Base error for profile operations."""


class ProfileStateError(ProfileError, RuntimeError):
    """Raised when an operation is not allowed in the profile's current state."""


class ReadOnlyProfileError(ProfileStateError):
    """Raised when a read-only profile is asked to change."""

    def __init__(self, message: str = "Operation not allowed because the profile is read-only"):
        super().__init__(message)


class ProfileNameError(ProfileStateError):
    """Raised when an operation needs a profile name and none is set."""

    def __init__(self, message: str = "Operation not allowed because the profile name is empty"):
        super().__init__(message)


class ProfileArgumentError(ProfileError, ValueError):
    """Raised when a required argument is missing."""

    def __init__(self, argument: str):
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument


class CoercionError(ProfileError, ValueError):
    """Raised when a value cannot be converted to the requested type."""
