from datetime import UTC, datetime
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from models.Base import Base

class ReservationDB(Base):
    __tablename__ = "reservation"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    table_id = Column(Integer, ForeignKey("table.id"), index=True)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    guests = Column(Integer, nullable=False)
    date = Column(String, nullable=False, index=True)
    time = Column(String, nullable=False)
    duration = Column(Integer, nullable=False, default=120)
    comment = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")
    has_time_limit = Column(Boolean, nullable=False, default=False)
    start_time = Column(String, nullable=True)
    end_time = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(UTC).replace(tzinfo=None))

    table = relationship("TableDB", back_populates="reservations")
