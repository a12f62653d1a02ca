from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Booking, Device, User


class BookingStore:
    """Storage for devices, users and their booking history."""

    def __init__(self, db: Session):
        self.db = db

    def find_device_by_id(self, device_id: int) -> Optional[Device]:
        return self.db.get(Device, device_id)

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_latest_booking_for_device(self, device_id: int) -> Optional[Booking]:
        return (
            self.db.query(Booking)
            .filter(Booking.device_id == device_id)
            .order_by(Booking.booked_at.desc(), Booking.id.desc())
            .first()
        )

    def save_booking(self, booking: Booking) -> Booking:
        """Insert a new booking or flush the return of an existing one."""
        self.db.add(booking)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(booking)
        return booking
