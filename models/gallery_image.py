# models/gallery_image.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from core.db import Base


class GalleryImage(Base):
    __tablename__ = "gallery"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    storage_path = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
