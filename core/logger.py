# core/logger.py
import logging
import logging.config
import sys
from datetime import datetime
from pathlib import Path

from core.config import LOG_DIR, LOG_LEVEL
from core.db import SessionLocal
from models.audit_log import AuditLog

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL, log_dir: str = LOG_DIR):
    """Configure console + rotating file logging once at startup."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level.upper(),
                "formatter": "simple",
                "stream": sys.stdout,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": str(Path(log_dir) / "app.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["console", "file"],
        },
        "loggers": {
            # SQL echo is noisy at INFO
            "sqlalchemy.engine": {"level": "WARNING"},
            "httpx": {"level": "WARNING"},
        },
    })


def log_action(user_email: str, action: str, session_factory=SessionLocal):
    """Record an admin action into the audit log."""
    session = session_factory()
    try:
        session.add(AuditLog(user_email=user_email or "unknown", action=action, timestamp=datetime.utcnow()))
        session.commit()
    except Exception as e:
        # The audit trail never blocks the action it describes
        logger.error("Audit log error: %s", e)
        session.rollback()
    finally:
        session.close()
