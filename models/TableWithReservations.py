from typing import Optional
from models.Table import Table
from models.Reservation import Reservation


class TableWithReservations(Table):
    current_reservation: Optional[Reservation] = None
    today_reservations: list[Reservation] = []
