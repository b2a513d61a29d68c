import logging
from typing import Optional
from sqlalchemy.orm import Session

from config import DEFAULT_DURATION
from helper import mark_table_reserved, release_table_if_idle, today_iso
from models import Reservation, ReservationCreate, ReservationDB, ReservationStatus, ReservationUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"comment", "start_time", "end_time"}


def _clear_time_window(db_res: ReservationDB):
    # start/end only exist while the reservation is time limited
    if not db_res.has_time_limit:
        db_res.start_time = None
        db_res.end_time = None
    else:
        db_res.start_time = db_res.start_time or None
        db_res.end_time = db_res.end_time or None


class ReservationStore:
    """
    Authoritative record of all reservations.

    Creating and deleting a reservation also moves the referenced table's
    status through the table store, in the same transaction.
    """

    def __init__(self, session_factory, lock, tables, today=today_iso):
        self._session_factory = session_factory
        self._lock = lock
        self._tables = tables
        self._today = today

    def list_reservations(self) -> list[Reservation]:
        return self._list()

    def get_reservation(self, id: int) -> Optional[Reservation]:
        with self._lock, self._session_factory() as db:
            res = db.get(ReservationDB, id)
            return Reservation.model_validate(res) if res else None

    def list_reservations_by_date(self, date: str) -> list[Reservation]:
        return self._list(ReservationDB.date == date)

    def list_reservations_by_table(self, table_id: int) -> list[Reservation]:
        return self._list(ReservationDB.table_id == table_id)

    def create_reservation(self, fields: ReservationCreate) -> Reservation:
        with self._lock, self._session_factory() as db:
            try:
                db_res = self.add(db, fields)
                mark_table_reserved(db, self._tables, db_res.table_id)
                db.commit()
            except Exception:
                db.rollback()
                raise
            logger.info(
                "Created reservation %s for table %s on %s %s",
                db_res.id, db_res.table_id, db_res.date, db_res.time
            )
            return Reservation.model_validate(db_res)

    def update_reservation(self, id: int, fields: ReservationUpdate) -> Optional[Reservation]:
        # "" and null both clear an optional field
        changes = {
            field: (value or None) if field in NULLABLE_FIELDS else value
            for field, value in fields.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        with self._lock, self._session_factory() as db:
            try:
                db_res = db.get(ReservationDB, id)
                if not db_res:
                    logger.warning("Reservation %s not found, update skipped", id)
                    return None
                for field, value in changes.items():
                    setattr(db_res, field, value)
                _clear_time_window(db_res)
                db.commit()
            except Exception:
                db.rollback()
                raise
            logger.debug("Updated reservation %s: %s", id, changes)
            return Reservation.model_validate(db_res)

    def delete_reservation(self, id: int) -> bool:
        with self._lock, self._session_factory() as db:
            try:
                db_res = db.get(ReservationDB, id)
                if not db_res:
                    logger.warning("Reservation %s not found, nothing deleted", id)
                    return False
                db.delete(db_res)
                db.flush()
                release_table_if_idle(db, self._tables, db_res, self._today())
                db.commit()
            except Exception:
                db.rollback()
                raise
            logger.info("Deleted reservation %s (table %s, %s)", id, db_res.table_id, db_res.date)
            return True

    def add(self, db: Session, fields: ReservationCreate) -> ReservationDB:
        """Normalizes optionals and adds the row to an open session, without touching the table."""
        db_res = ReservationDB(
            table_id=fields.table_id,
            customer_name=fields.customer_name,
            customer_phone=fields.customer_phone,
            guests=fields.guests,
            date=fields.date,
            time=fields.time,
            duration=fields.duration or DEFAULT_DURATION,
            comment=fields.comment or None,
            status=fields.status or ReservationStatus.ACTIVE.value,
            has_time_limit=bool(fields.has_time_limit),
            start_time=fields.start_time,
            end_time=fields.end_time
        )
        _clear_time_window(db_res)
        db.add(db_res)
        db.flush()
        return db_res

    def _list(self, *criteria) -> list[Reservation]:
        with self._lock, self._session_factory() as db:
            reservations = db.query(ReservationDB).filter(*criteria).order_by(ReservationDB.id.asc()).all()
            return [Reservation.model_validate(r) for r in reservations]
