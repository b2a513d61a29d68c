import logging

from models import ReservationCreate, TableCreate

logger = logging.getLogger(__name__)

DEFAULT_TABLES = [
    # White hall
    {"number": 1, "name": "Main", "capacity": 2, "x": 50, "y": 80, "width": 60, "height": 60, "status": "available", "shape": "round", "hall_id": "white"},
    {"number": 2, "name": "By the window", "capacity": 2, "x": 150, "y": 80, "width": 60, "height": 60, "status": "reserved", "shape": "round", "hall_id": "white"},
    {"number": 3, "name": "Family", "capacity": 4, "x": 250, "y": 80, "width": 80, "height": 60, "status": "occupied", "shape": "rectangular", "hall_id": "white"},
    {"number": 4, "name": "Large", "capacity": 6, "x": 50, "y": 200, "width": 100, "height": 60, "status": "available", "shape": "rectangular", "hall_id": "white"},
    # Bar
    {"number": 5, "name": "Bar counter", "capacity": 2, "x": 50, "y": 80, "width": 60, "height": 60, "status": "reserved", "shape": "round", "hall_id": "bar"},
    {"number": 6, "name": "High top", "capacity": 4, "x": 150, "y": 80, "width": 80, "height": 60, "status": "available", "shape": "rectangular", "hall_id": "bar"},
    {"number": 7, "name": "Cocktail", "capacity": 2, "x": 250, "y": 80, "width": 60, "height": 60, "status": "occupied", "shape": "round", "hall_id": "bar"},
    # Vaulted hall
    {"number": 8, "name": "Under the arch", "capacity": 6, "x": 100, "y": 120, "width": 100, "height": 60, "status": "available", "shape": "rectangular", "hall_id": "vaulted"},
    {"number": 9, "name": "Central", "capacity": 8, "x": 250, "y": 120, "width": 120, "height": 80, "status": "reserved", "shape": "rectangular", "hall_id": "vaulted"},
    {"number": 10, "name": "Corner", "capacity": 4, "x": 50, "y": 250, "width": 80, "height": 60, "status": "available", "shape": "rectangular", "hall_id": "vaulted"},
    # Fourth hall
    {"number": 11, "name": "Quiet", "capacity": 2, "x": 80, "y": 100, "width": 60, "height": 60, "status": "available", "shape": "round", "hall_id": "fourth"},
    {"number": 12, "name": "Business", "capacity": 4, "x": 180, "y": 100, "width": 80, "height": 60, "status": "reserved", "shape": "rectangular", "hall_id": "fourth"},
    # Banquet hall
    {"number": 13, "name": "Presidium", "capacity": 10, "x": 100, "y": 150, "width": 140, "height": 100, "status": "reserved", "shape": "rectangular", "hall_id": "banquet"},
    {"number": 14, "name": "Grand", "capacity": 12, "x": 300, "y": 150, "width": 160, "height": 100, "status": "available", "shape": "rectangular", "hall_id": "banquet"},
    {"number": 15, "name": "Festive", "capacity": 8, "x": 50, "y": 300, "width": 120, "height": 80, "status": "occupied", "shape": "rectangular", "hall_id": "banquet"},
]

SAMPLE_RESERVATIONS = [
    {"table_id": 2, "customer_name": "Ivan Smirnov", "customer_phone": "+7 (999) 123-45-67", "guests": 4, "time": "19:30", "duration": 120, "comment": "Window seat please. Birthday!"},
    {"table_id": 3, "customer_name": "Maria Kozlova", "customer_phone": "+7 (999) 765-43-21", "guests": 2, "time": "12:15", "duration": 90, "comment": ""},
    {"table_id": 5, "customer_name": "Anna Sidorova", "customer_phone": "+7 (999) 456-78-90", "guests": 4, "time": "19:15", "duration": 120, "comment": ""},
]


def seed_default_data(storage):
    """
    Fills an empty storage with the demo floor plan and today's sample bookings.

    Table statuses are taken as listed; the sample reservations are written
    without running the table status synchronization.
    """
    if storage.tables.list_tables():
        logger.info("Tables already present, skipping seed")
        return

    for fields in DEFAULT_TABLES:
        storage.tables.create_table(TableCreate(**fields))

    today = storage.today()
    with storage.lock, storage.session_factory() as db:
        try:
            for fields in SAMPLE_RESERVATIONS:
                storage.reservations.add(db, ReservationCreate(date=today, status="active", **fields))
            db.commit()
        except Exception:
            db.rollback()
            raise

    logger.info("Seeded %s tables and %s reservations for %s", len(DEFAULT_TABLES), len(SAMPLE_RESERVATIONS), today)
