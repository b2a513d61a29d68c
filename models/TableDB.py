from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.orm import relationship
from models.Base import Base

class TableDB(Base):
    __tablename__ = "table"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    number = Column(Integer, nullable=False)
    name = Column(String, nullable=True)
    capacity = Column(Integer, nullable=False)
    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    status = Column(String, nullable=False, default="available")
    shape = Column(String, nullable=False, default="round")
    hall_id = Column(String, nullable=False, index=True)

    reservations = relationship("ReservationDB", back_populates="table")
