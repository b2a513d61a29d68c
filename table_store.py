import logging
from typing import Optional
from sqlalchemy.orm import Session

from config import DEFAULT_HALL_ID
from models import Table, TableCreate, TableDB, TableShape, TableStatus, TableUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"name"}


class TableStore:
    """
    Authoritative record of all tables and their current status.

    The store knows nothing about reservations. Every public method runs
    under the shared storage lock and returns detached pydantic snapshots,
    or None when the id does not exist.
    """

    def __init__(self, session_factory, lock, default_hall_id: str = DEFAULT_HALL_ID):
        self._session_factory = session_factory
        self._lock = lock
        self._default_hall_id = default_hall_id

    def list_tables(self, hall_id: Optional[str] = None) -> list[Table]:
        with self._lock, self._session_factory() as db:
            query = db.query(TableDB)
            if hall_id is not None:
                query = query.filter(TableDB.hall_id == hall_id)
            tables = query.order_by(TableDB.id.asc()).all()
            return [Table.model_validate(t) for t in tables]

    def get_table(self, id: int) -> Optional[Table]:
        with self._lock, self._session_factory() as db:
            table = db.get(TableDB, id)
            return Table.model_validate(table) if table else None

    def create_table(self, fields: TableCreate) -> Table:
        with self._lock, self._session_factory() as db:
            try:
                db_table = self.add(db, fields)
                db.commit()
            except Exception:
                db.rollback()
                raise
            logger.info("Created table %s (number %s, hall %s)", db_table.id, db_table.number, db_table.hall_id)
            return Table.model_validate(db_table)

    def update_table(self, id: int, fields: TableUpdate) -> Optional[Table]:
        # "" and null both clear an optional field
        changes = {
            field: (value or None) if field in NULLABLE_FIELDS else value
            for field, value in fields.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        return self._update(id, changes)

    def update_table_status(self, id: int, status: TableStatus) -> Optional[Table]:
        return self._update(id, {"status": TableStatus(status).value})

    def add(self, db: Session, fields: TableCreate) -> TableDB:
        """Normalizes unset optionals and adds the row to an open session."""
        db_table = TableDB(
            number=fields.number,
            name=fields.name or None,
            capacity=fields.capacity,
            x=fields.x,
            y=fields.y,
            width=fields.width,
            height=fields.height,
            status=fields.status or TableStatus.AVAILABLE.value,
            shape=fields.shape or TableShape.ROUND.value,
            hall_id=fields.hall_id or self._default_hall_id
        )
        db.add(db_table)
        db.flush()
        return db_table

    def apply(self, db: Session, id: int, fields: dict) -> Optional[TableDB]:
        """Merges fields into a table inside the caller's transaction."""
        db_table = db.get(TableDB, id)
        if not db_table:
            return None
        for field, value in fields.items():
            setattr(db_table, field, value)
        db.flush()
        return db_table

    def _update(self, id: int, fields: dict) -> Optional[Table]:
        with self._lock, self._session_factory() as db:
            try:
                db_table = self.apply(db, id, fields)
                if not db_table:
                    logger.warning("Table %s not found, update skipped", id)
                    return None
                db.commit()
            except Exception:
                db.rollback()
                raise
            logger.debug("Updated table %s: %s", id, fields)
            return Table.model_validate(db_table)
