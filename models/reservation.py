# models/reservation.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from core.db import Base

RESERVATION_STATUSES = ("pending", "confirmed", "completed", "cancelled")


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_name = Column(String, nullable=False)
    phone = Column(String, nullable=False, index=True)
    email = Column(String, nullable=True)
    date = Column(String, nullable=False)  # YYYY-MM-DD
    time = Column(String, nullable=False)  # HH:MM
    guests = Column(Integer, nullable=False, default=2)
    status = Column(String, default="pending")
    special_requests = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def reference(self):
        """Short code shown on the confirmation screen."""
        return f"RES-{self.id[:8].upper()}"
