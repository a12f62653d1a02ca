import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.database_url

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # Import models here to create tables
    from app.models import User, Device, Booking
    Base.metadata.create_all(bind=engine)

    if not settings.seed_demo_data:
        return

    # Seed the demo pool if empty
    db = SessionLocal()
    try:
        if db.query(Device).first():
            return
        user = User(id=1, name="User #1")
        devices = [Device(id=i, name=f"Device #{i}") for i in range(1, 5)]
        db.add(user)
        db.add_all(devices)
        db.flush()

        # Device #1 is free, #2 and #3 are booked, #4 was booked and returned
        now = datetime.now(timezone.utc)
        booked_at = now - timedelta(minutes=15)
        db.add_all([
            Booking(device=devices[1], user=user, booked_at=booked_at),
            Booking(device=devices[2], user=user, booked_at=booked_at),
            Booking(device=devices[3], user=user, booked_at=booked_at, returned_at=now),
        ])
        db.commit()
        logger.info("Seeded %d demo devices", len(devices))
    finally:
        db.close()
