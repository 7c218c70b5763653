# models/admin.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from core.db import Base

ADMIN_ROLES = ("super_admin", "admin")


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, unique=True, nullable=False)  # auth provider identity
    email = Column(String, unique=True, nullable=False, index=True)
    role = Column(String, default="admin")
    password_hash = Column(String, nullable=True)  # local auth backend only
    created_at = Column(DateTime, default=datetime.utcnow)
