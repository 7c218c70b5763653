# models/audit_log.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from core.db import Base


class AuditLog(Base):
    """One row per admin console action (menu edits, replies, status changes)."""
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_email = Column(String, nullable=False, index=True)
    action = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<AuditLog {self.timestamp} {self.user_email}: {self.action}>"
