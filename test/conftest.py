import os
import pytest
from fastapi.testclient import TestClient

# Test-Umgebung setzen
os.environ["TESTING"] = "1"
os.environ["DATABASE_URL"] = "sqlite://"

from app import create_app
from models import ReservationCreate, TableCreate
from storage import Storage

TODAY = "2024-06-01"
OTHER_DAY = "2024-01-01"

# ---------------------------------------------------------
# Storage Fixture: frische In-Memory DB, feste "heute"-Uhr
# ---------------------------------------------------------
@pytest.fixture
def storage():
    s = Storage("sqlite://", today=lambda: TODAY)
    yield s
    s.close()

@pytest.fixture
def client(storage):
    with TestClient(create_app(storage, seed=False)) as c:
        yield c

# ---------------------------------------------------------
# Helper: Table / Reservation anlegen
# ---------------------------------------------------------
@pytest.fixture
def make_table(storage):
    def _make(number=1, capacity=4, **fields):
        data = {"number": number, "capacity": capacity, "x": 10, "y": 20, "width": 60, "height": 60}
        data.update(fields)
        return storage.tables.create_table(TableCreate(**data))
    return _make

@pytest.fixture
def make_reservation(storage):
    def _make(table_id, date=TODAY, time="19:00", **fields):
        data = {
            "table_id": table_id,
            "customer_name": "John Doe",
            "customer_phone": "+49 170 1234567",
            "guests": 2,
            "date": date,
            "time": time,
        }
        data.update(fields)
        return storage.reservations.create_reservation(ReservationCreate(**data))
    return _make
