import logging
import threading
from typing import Optional

from config import DATABASE_URL, DEFAULT_HALL_ID
from database import create_db_engine, create_session_factory
from helper import today_iso
from models import Reservation, ReservationDB, ReservationStatus, Table, TableDB, TableWithReservations
from reservation_store import ReservationStore
from table_store import TableStore

logger = logging.getLogger(__name__)


class Storage:
    """
    Owns the database engine, the write lock and both entity stores.

    Built once when the application starts and disposed with close(). The
    single re-entrant lock serializes all store operations, so a reservation
    write and the table status change it causes are applied as one unit.
    """

    def __init__(self, database_url: str = DATABASE_URL, today=today_iso, default_hall_id: str = DEFAULT_HALL_ID):
        self.engine = create_db_engine(database_url)
        self.session_factory = create_session_factory(self.engine)
        self.lock = threading.RLock()
        self.today = today
        self.tables = TableStore(self.session_factory, self.lock, default_hall_id)
        self.reservations = ReservationStore(self.session_factory, self.lock, self.tables, today)

    def get_tables_with_reservations(
        self,
        date: Optional[str] = None,
        hall_id: Optional[str] = None
    ) -> list[TableWithReservations]:
        """
        Joins every table with its reservations for one date (default today).

        current_reservation is the first active reservation of that date in
        store order, not the earliest by time of day.
        """
        target_date = date or self.today()

        with self.lock, self.session_factory() as db:
            query = db.query(TableDB)
            if hall_id is not None:
                query = query.filter(TableDB.hall_id == hall_id)
            tables = query.order_by(TableDB.id.asc()).all()

            by_table: dict[int, list[Reservation]] = {}
            reservations = db.query(ReservationDB).filter(
                ReservationDB.date == target_date
            ).order_by(ReservationDB.id.asc()).all()
            for r in reservations:
                by_table.setdefault(r.table_id, []).append(Reservation.model_validate(r))

            result = []
            for table in tables:
                todays = by_table.get(table.id, [])
                current = next((r for r in todays if r.status == ReservationStatus.ACTIVE), None)
                result.append(TableWithReservations(
                    **Table.model_validate(table).model_dump(),
                    current_reservation=current,
                    today_reservations=todays
                ))

        logger.debug("Built %s table views for %s", len(result), target_date)
        return result

    def close(self):
        self.engine.dispose()
