"""Errors raised by the lending domain."""


class LendingError(Exception):
    """Base error for booking state failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EntityNotFound(LendingError):
    """A device or user id does not resolve to a stored entity."""


class DeviceUnavailable(LendingError):
    """A booking transition does not fit the device's current state."""
