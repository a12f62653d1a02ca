import logging

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.booking_state import (
    DeviceInfo,
    Err,
    Ok,
    Result,
    assemble_device_info,
    authorize_booking,
    authorize_return,
)
from app.db import get_db
from app.errors import DeviceUnavailable, EntityNotFound
from app.models import Booking
from app.repository import BookingStore

logger = logging.getLogger(__name__)


class DeviceService:
    """Loads entities, runs the booking state engine and persists the outcome."""

    def __init__(self, store: BookingStore):
        self.store = store

    def get_info(self, device_id: int) -> Result[DeviceInfo]:
        device = self.store.find_device_by_id(device_id)
        if device is None:
            return Err(EntityNotFound("Device not found"))

        latest = self.store.find_latest_booking_for_device(device_id)
        return Ok(assemble_device_info(device, latest))

    def book_device(self, device_id: int, user_id: int) -> Result[Booking]:
        device = self.store.find_device_by_id(device_id)
        if device is None:
            return Err(EntityNotFound("Device not found"))
        user = self.store.find_user_by_id(user_id)
        if user is None:
            return Err(EntityNotFound("User not found"))

        latest = self.store.find_latest_booking_for_device(device_id)
        result = authorize_booking(device, user, latest)
        if not result.is_ok():
            logger.info("Rejected booking of device %s: %s", device_id, result.error.message)
            return result

        try:
            booking = self.store.save_booking(result.value)
        except IntegrityError:
            # another request opened a booking between our read and write
            logger.warning("Concurrent booking of device %s rejected", device_id)
            return Err(DeviceUnavailable("Device is already booked"))

        logger.info("Device %s booked by user %s (booking %s)", device_id, user_id, booking.id)
        return Ok(booking)

    def return_device(self, device_id: int) -> Result[Booking]:
        # Unknown devices have no booking either, so they fail as unavailable.
        latest = self.store.find_latest_booking_for_device(device_id)
        result = authorize_return(latest)
        if not result.is_ok():
            logger.info("Rejected return of device %s: %s", device_id, result.error.message)
            return result

        booking = self.store.save_booking(result.value)
        logger.info("Device %s returned (booking %s)", device_id, booking.id)
        return Ok(booking)


def get_device_service(db: Session = Depends(get_db)) -> DeviceService:
    return DeviceService(BookingStore(db))
