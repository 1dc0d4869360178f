import os

# the app builds its engine at import time, point it at an in-memory db first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.session import engine, SessionLocal
from app.main import app
from app.services.business import DaySchedule, TimeSlot, WEEKDAYS


@pytest.fixture()
def db_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db(db_tables):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_tables):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def uniform_hours():
    """every day open 11:00-22:00, last order 21:30."""
    return {
        day: DaySchedule(time_slots=[TimeSlot("11:00", "22:00", "21:30")])
        for day in WEEKDAYS
    }


@pytest.fixture()
def split_hours_payload():
    """monday closed, lunch and dinner service on every other day."""
    payload = {}
    for day in WEEKDAYS:
        if day == "monday":
            payload[day] = {"is_closed": True, "time_slots": []}
        else:
            payload[day] = {
                "is_closed": False,
                "time_slots": [
                    {"open_time": "11:00", "close_time": "15:00", "last_order_time": "14:30"},
                    {"open_time": "17:30", "close_time": "22:00", "last_order_time": "21:30"},
                ],
            }
    return payload
