"""Booking state engine.

Availability of a device is never stored. It is derived from the device's most
recent booking: a device is available when it has never been booked or when its
latest booking has been returned.

The functions here take already-loaded entities and hand back results for the
caller to persist. They never touch the session and never raise; failures are
returned as :class:`Err`.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar, Union

from app.errors import DeviceUnavailable, LendingError
from app.models import Booking, Device, User

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: LendingError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok[T], Err]


@dataclass(frozen=True)
class DeviceInfo:
    device: Device
    latest_booking: Optional[Booking]
    is_available: bool


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def compute_availability(latest_booking: Optional[Booking]) -> bool:
    """Return True unless the latest booking is still open."""
    return latest_booking is None or latest_booking.returned_at is not None


def authorize_booking(
    device: Device,
    user: User,
    latest_booking: Optional[Booking],
    now: Optional[datetime] = None,
) -> Result[Booking]:
    """Build a new open booking of ``device`` for ``user``.

    The booking is not persisted. Fails with DeviceUnavailable when the
    device already has an open booking.
    """
    if not compute_availability(latest_booking):
        return Err(DeviceUnavailable("Device is already booked"))

    booking = Booking(device=device, user=user, booked_at=now or utcnow(), returned_at=None)
    return Ok(booking)


def authorize_return(
    latest_booking: Optional[Booking],
    now: Optional[datetime] = None,
) -> Result[Booking]:
    """Close the open booking. Fails when there is nothing to return."""
    if latest_booking is None:
        return Err(DeviceUnavailable("Device has no open booking"))
    if compute_availability(latest_booking):
        return Err(DeviceUnavailable("Device is available, no return needed"))

    latest_booking.returned_at = now or utcnow()
    return Ok(latest_booking)


def assemble_device_info(device: Device, latest_booking: Optional[Booking]) -> DeviceInfo:
    return DeviceInfo(
        device=device,
        latest_booking=latest_booking,
        is_available=compute_availability(latest_booking),
    )
