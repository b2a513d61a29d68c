from .Base import Base
from .Table import Table, TableCreate, TableResponse, TableShape, TableStatus, TableStatusUpdate, TableUpdate
from .TableDB import TableDB
from .Reservation import Reservation, ReservationCreate, ReservationResponse, ReservationStatus, ReservationUpdate
from .ReservationDB import ReservationDB
from .TableWithReservations import TableWithReservations
