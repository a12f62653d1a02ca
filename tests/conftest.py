# tests/conftest.py
import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

os.environ["SKIP_DB_INIT"] = "1"

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db import Base, get_db
from app.models import User, Device, Booking
from app.main import app

@pytest.fixture(scope="function")
def test_db_session():
    # temp DB
    tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    tmp.close()
    db_url = f"sqlite:///{tmp.name}"

    # test engine / Session
    engine = create_engine(db_url, connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
        os.unlink(tmp.name)

@pytest.fixture(scope="function")
def client(test_db_session):
    def override_get_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()

# —— Factories ——
@pytest.fixture
def make_user(test_db_session):
    def _make_user(user_id=1, name="User #1"):
        u = User(id=user_id, name=name)
        test_db_session.add(u)
        test_db_session.commit()
        return u
    return _make_user

@pytest.fixture
def make_device(test_db_session):
    def _make_device(device_id=1, name=None):
        d = Device(id=device_id, name=name or f"Device #{device_id}")
        test_db_session.add(d)
        test_db_session.commit()
        return d
    return _make_device

@pytest.fixture
def make_booking(test_db_session):
    def _make_booking(device, user, minutes_ago=15, returned=False):
        now = datetime.now(timezone.utc)
        b = Booking(
            device=device,
            user=user,
            booked_at=now - timedelta(minutes=minutes_ago),
            returned_at=now if returned else None,
        )
        test_db_session.add(b)
        test_db_session.commit()
        return b
    return _make_booking
