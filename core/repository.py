# core/repository.py
"""
Generic CRUD over one SQLAlchemy model.

Each call opens its own short session from the factory so repositories can
be shared between the UI thread and the polling threads. Database failures
are translated into the app error taxonomy:

- missing/blank required field  -> ValidationError (before touching the DB)
- IntegrityError                -> ValidationError
- any other SQLAlchemyError     -> RepositoryError
- unknown id on update/delete   -> NotFoundError
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.db import SessionLocal
from core.errors import NotFoundError, RepositoryError, ValidationError
from core.validators import require_fields

logger = logging.getLogger(__name__)


class Repository:
    model = None
    order_by: Sequence = ()
    required_fields: Sequence[str] = ()
    # Columns callers may never set directly
    protected_fields: Sequence[str] = ("id", "created_at")

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    @contextmanager
    def session(self):
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except IntegrityError as ex:
            db.rollback()
            logger.warning("%s constraint violation: %s", self.entity_name, ex.orig)
            raise ValidationError(f"{self.entity_name} violates a constraint: {ex.orig}") from ex
        except SQLAlchemyError as ex:
            db.rollback()
            logger.error("%s repository error: %s", self.entity_name, ex)
            raise RepositoryError(f"Could not reach the {self.entity_name} store: {ex}") from ex
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _columns(self):
        return {c.name for c in self.model.__table__.columns}

    def _clean(self, record: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(record) - self._columns()
        if unknown:
            raise ValidationError(f"Unknown {self.entity_name} field(s): {', '.join(sorted(unknown))}")
        return {k: v for k, v in record.items() if k not in self.protected_fields}

    # ===================== READ =====================

    def get_all(self) -> List[Any]:
        with self.session() as db:
            stmt = select(self.model).order_by(*self.order_by)
            return list(db.scalars(stmt).all())

    def get(self, record_id) -> Optional[Any]:
        with self.session() as db:
            return db.get(self.model, record_id)

    def get_or_raise(self, record_id):
        row = self.get(record_id)
        if row is None:
            raise NotFoundError(f"{self.entity_name} {record_id} not found")
        return row

    def count(self, **filters) -> int:
        with self.session() as db:
            stmt = select(func.count()).select_from(self.model)
            for column, value in filters.items():
                stmt = stmt.where(getattr(self.model, column) == value)
            return db.scalar(stmt) or 0

    # ===================== WRITE =====================

    def create(self, record: Dict[str, Any]):
        require_fields(record, self.required_fields)
        values = self._clean(record)
        with self.session() as db:
            row = self.model(**values)
            db.add(row)
            db.flush()
            db.refresh(row)
        logger.info("Created %s %s", self.entity_name, row.id)
        return row

    def update(self, record_id, partial: Dict[str, Any]):
        values = self._clean(partial)
        required = [f for f in self.required_fields if f in values]
        require_fields(values, required)
        with self.session() as db:
            row = db.get(self.model, record_id)
            if row is None:
                raise NotFoundError(f"{self.entity_name} {record_id} not found")
            for key, value in values.items():
                setattr(row, key, value)
            db.flush()
            db.refresh(row)
        logger.info("Updated %s %s (%s)", self.entity_name, record_id, ", ".join(sorted(values)))
        return row

    def delete(self, record_id) -> None:
        with self.session() as db:
            row = db.get(self.model, record_id)
            if row is None:
                raise NotFoundError(f"{self.entity_name} {record_id} not found")
            db.delete(row)
        logger.info("Deleted %s %s", self.entity_name, record_id)
