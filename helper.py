import logging
from datetime import UTC, datetime
from sqlalchemy.orm import Session

from models import ReservationDB, ReservationStatus, TableStatus

logger = logging.getLogger(__name__)


def today_iso() -> str:
    """Current calendar date (UTC) in the YYYY-MM-DD form reservations use."""
    return datetime.now(UTC).date().isoformat()


def mark_table_reserved(db: Session, tables, table_id: int):
    """
    Marks the table of a freshly created reservation as reserved.

    Runs for every new reservation regardless of its date, inside the
    transaction that inserted the reservation.
    """
    table = tables.apply(db, table_id, {"status": TableStatus.RESERVED.value})
    if not table:
        logger.warning("Reservation references unknown table %s, status not updated", table_id)
        return None
    logger.info("Table %s marked %s", table_id, table.status)
    return table


def release_table_if_idle(db: Session, tables, deleted: ReservationDB, today: str):
    """
    Re-evaluates a table's status after one of its reservations was deleted.

    The table goes back to available when it has no active reservation left
    for today. Deleting a reservation for any other day leaves the status
    untouched. The deleted row must already be flushed out of the session.
    """
    if deleted.date != today:
        logger.debug(
            "Deleted reservation %s is dated %s, not %s; table %s unchanged",
            deleted.id, deleted.date, today, deleted.table_id
        )
        return None

    active_today = db.query(ReservationDB).filter(
        ReservationDB.table_id == deleted.table_id,
        ReservationDB.date == today,
        ReservationDB.status == ReservationStatus.ACTIVE.value
    ).count()

    if active_today:
        logger.debug("Table %s still has %s active reservation(s) today", deleted.table_id, active_today)
        return None

    table = tables.apply(db, deleted.table_id, {"status": TableStatus.AVAILABLE.value})
    if table:
        logger.info("Table %s released, no active reservation left for %s", deleted.table_id, today)
    return table
