# models/contact_message.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text
from core.db import Base

MESSAGE_STATUSES = ("unread", "read", "replied")


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String, default="unread")
    reply_message = Column(Text, nullable=True)
    reply_sent_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
