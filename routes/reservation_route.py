import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from database import get_storage
from models import Reservation, ReservationCreate, ReservationResponse, ReservationUpdate
from models.Reservation import DATE_PATTERN
from storage import Storage

logger = logging.getLogger(__name__)

reservation_router = APIRouter(
    tags=["Reservation"]
)

@reservation_router.get("/reservations", response_model=list[Reservation], tags=["Reservation"])
def get_reservations(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN),
    table_id: Optional[int] = Query(default=None, alias="tableId"),
    storage: Storage = Depends(get_storage)
):
    """
    Lists reservations, optionally narrowed to one date and/or one table.

    Returns:
        list: Reservations in creation order.
    """
    try:
        if date is not None and table_id is not None:
            return [r for r in storage.reservations.list_reservations_by_table(table_id) if r.date == date]
        if date is not None:
            return storage.reservations.list_reservations_by_date(date)
        if table_id is not None:
            return storage.reservations.list_reservations_by_table(table_id)
        return storage.reservations.list_reservations()
    except Exception as e:
        logger.exception("Failed to list reservations")
        raise HTTPException(status_code=500, detail=str(e))


@reservation_router.get("/reservations/{id}", response_model=Reservation, tags=["Reservation"])
def get_reservation(id: int, storage: Storage = Depends(get_storage)):
    try:
        reservation = storage.reservations.get_reservation(id)
        if not reservation:
            raise HTTPException(status_code=404, detail="Reservation not found")
        return reservation
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to load reservation %s", id)
        raise HTTPException(status_code=500, detail=str(e))


@reservation_router.post("/reservations", response_model=ReservationResponse, tags=["Reservation"])
def create_reservation(reservation: ReservationCreate, storage: Storage = Depends(get_storage)):
    """
    Books a table. The table is marked reserved as a side effect.

    Raises:
        HTTPException: 400 if the referenced table does not exist.
    """
    try:
        if not storage.tables.get_table(reservation.table_id):
            raise HTTPException(status_code=400, detail="Table not found")

        created = storage.reservations.create_reservation(reservation)
        return {"success": True, "reservation": created}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to create reservation")
        raise HTTPException(status_code=500, detail=str(e))


@reservation_router.put("/reservations/{id}", response_model=ReservationResponse, tags=["Reservation"])
@reservation_router.patch("/reservations/{id}", response_model=ReservationResponse, tags=["Reservation"])
def update_reservation(id: int, updated_reservation: ReservationUpdate, storage: Storage = Depends(get_storage)):
    try:
        if updated_reservation.table_id is not None and not storage.tables.get_table(updated_reservation.table_id):
            raise HTTPException(status_code=400, detail="Table not found")

        reservation = storage.reservations.update_reservation(id, updated_reservation)
        if not reservation:
            raise HTTPException(status_code=404, detail="Reservation not found")
        return {"success": True, "reservation": reservation}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to update reservation %s", id)
        raise HTTPException(status_code=500, detail=str(e))


@reservation_router.delete("/reservations/{id}", tags=["Reservation"])
def delete_reservation(id: int, storage: Storage = Depends(get_storage)):
    try:
        if not storage.reservations.delete_reservation(id):
            raise HTTPException(status_code=404, detail="Reservation not found")
        return {"success": True}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to delete reservation %s", id)
        raise HTTPException(status_code=500, detail=str(e))
