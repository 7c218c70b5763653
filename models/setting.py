# models/setting.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON
from core.db import Base


class Setting(Base):
    """Key/value row. Keys in use: "business" and "hero_banner"."""
    __tablename__ = "settings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    key = Column(String, unique=True, nullable=False, index=True)
    value = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
