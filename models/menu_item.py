# models/menu_item.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Numeric, Boolean, DateTime, Text
from core.db import Base

MENU_STATUSES = ("active", "inactive")


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    description = Column(Text, default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False)  # Appetizers, Entrees, Desserts, Beverages
    image_url = Column(String, nullable=True)
    image_path = Column(String, nullable=True)  # storage key, used on delete
    status = Column(String, default="active")
    featured = Column(Boolean, default=False)
    badges = Column(String, default="")  # comma separated: Vegan,Spicy
    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def badge_list(self):
        return [b.strip() for b in (self.badges or "").split(",") if b.strip()]

    @property
    def is_active(self):
        return self.status == "active"

    def __repr__(self):
        return f"<MenuItem {self.name} {self.price}>"
