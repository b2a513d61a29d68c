import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from database import get_storage
from models import Table, TableCreate, TableResponse, TableStatusUpdate, TableUpdate, TableWithReservations
from models.Reservation import DATE_PATTERN
from storage import Storage

logger = logging.getLogger(__name__)

table_router = APIRouter(
    tags=["Table"]
)

@table_router.get("/tables-with-reservations", response_model=list[TableWithReservations], tags=["Table"])
def get_tables_with_reservations(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN),
    hall_id: Optional[str] = Query(default=None, alias="hallId"),
    storage: Storage = Depends(get_storage)
):
    """
    Retrieves all tables joined with their reservations for one date.

    Args:
        date (str, optional): Target date (YYYY-MM-DD), defaults to today.
        hall_id (str, optional): Only return tables of this hall.

    Returns:
        list: One entry per table with `currentReservation` and `todayReservations`.
    """
    try:
        return storage.get_tables_with_reservations(date, hall_id)
    except Exception as e:
        logger.exception("Failed to build table overview")
        raise HTTPException(status_code=500, detail=str(e))


@table_router.get("/tables", response_model=list[Table], tags=["Table"])
def get_tables(
    hall_id: Optional[str] = Query(default=None, alias="hallId"),
    storage: Storage = Depends(get_storage)
):
    try:
        return storage.tables.list_tables(hall_id)
    except Exception as e:
        logger.exception("Failed to list tables")
        raise HTTPException(status_code=500, detail=str(e))


@table_router.get("/tables/{id}", response_model=Table, tags=["Table"])
def get_table(id: int, storage: Storage = Depends(get_storage)):
    try:
        table = storage.tables.get_table(id)
        if not table:
            raise HTTPException(status_code=404, detail="Table not found")
        return table
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to load table %s", id)
        raise HTTPException(status_code=500, detail=str(e))


@table_router.post("/tables", response_model=Table, tags=["Table"])
def create_table(table: TableCreate, storage: Storage = Depends(get_storage)):
    try:
        return storage.tables.create_table(table)
    except Exception as e:
        logger.exception("Failed to create table")
        raise HTTPException(status_code=500, detail=str(e))


@table_router.put("/tables/{id}", response_model=TableResponse, tags=["Table"])
@table_router.patch("/tables/{id}", response_model=TableResponse, tags=["Table"])
def update_table(id: int, updated_table: TableUpdate, storage: Storage = Depends(get_storage)):
    """
    Merges the submitted fields into an existing table.

    Fields missing from the body keep their current value.
    """
    try:
        table = storage.tables.update_table(id, updated_table)
        if not table:
            raise HTTPException(status_code=404, detail="Table not found")
        return {"success": True, "table": table}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to update table %s", id)
        raise HTTPException(status_code=500, detail=str(e))


@table_router.patch("/tables/{id}/status", response_model=TableResponse, tags=["Table"])
def update_table_status(id: int, body: TableStatusUpdate, storage: Storage = Depends(get_storage)):
    try:
        table = storage.tables.update_table_status(id, body.status)
        if not table:
            raise HTTPException(status_code=404, detail="Table not found")
        return {"success": True, "table": table}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to update status of table %s", id)
        raise HTTPException(status_code=500, detail=str(e))
