from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from app.db import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)

class Device(Base):
    __tablename__ = "devices"
    id = Column(Integer, primary_key=True)
    name = Column(String(60), nullable=False)

class Booking(Base):
    __tablename__ = "bookings"
    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    booked_at = Column(DateTime(timezone=True), nullable=False)
    returned_at = Column(DateTime(timezone=True))  # NULL while the booking is open

    device = relationship("Device", lazy="joined")
    user = relationship("User", lazy="joined")

    __table_args__ = (
        Index("ix_bookings_device_booked_at", "device_id", "booked_at"),
        # at most one open booking per device
        Index(
            "uq_bookings_open_device",
            "device_id",
            unique=True,
            sqlite_where=text("returned_at IS NULL"),
            postgresql_where=text("returned_at IS NULL"),
        ),
    )
