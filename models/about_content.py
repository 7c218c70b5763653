# models/about_content.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Text
from core.db import Base


class AboutContent(Base):
    __tablename__ = "about_content"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    content = Column(Text, nullable=False)
    years_experience = Column(Integer, default=0)
    menu_items_count = Column(Integer, default=0)
    image_1_url = Column(String, nullable=True)
    image_2_url = Column(String, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
