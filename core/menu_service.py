# core/menu_service.py
import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy import select, or_

from core.db import SessionLocal
from core.errors import ValidationError
from core.repository import Repository
from core.storage import MENU_PREFIX, get_object_store
from models.menu_item import MenuItem, MENU_STATUSES

logger = logging.getLogger(__name__)

CATEGORIES = ["Appetizers", "Entrees", "Desserts", "Beverages"]
BADGES = ["Vegetarian", "Vegan", "Gluten-Free", "Spicy"]


def parse_price(value) -> Decimal:
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, AttributeError):
        raise ValidationError("Price must be a number")
    if price < 0:
        raise ValidationError("Price cannot be negative")
    return price.quantize(Decimal("0.01"))


class MenuRepository(Repository):
    model = MenuItem
    order_by = (MenuItem.category.asc(), MenuItem.name.asc())
    required_fields = ("name", "price", "category")

    def __init__(self, session_factory=SessionLocal, storage=None):
        super().__init__(session_factory)
        self.storage = storage or get_object_store()

    def _normalize(self, record):
        record = dict(record)
        if "price" in record and record["price"] is not None:
            record["price"] = parse_price(record["price"])
        if "status" in record and record["status"] not in MENU_STATUSES:
            raise ValidationError(f"Status must be one of {', '.join(MENU_STATUSES)}")
        if isinstance(record.get("badges"), (list, tuple)):
            record["badges"] = ",".join(record["badges"])
        return record

    def create(self, record):
        return super().create(self._normalize(record))

    def update(self, record_id, partial):
        return super().update(record_id, self._normalize(partial))

    def get_available(self, featured_only: bool = False, category: str = None, search: str = None):
        """Storefront listing: active items, optionally featured / one category / name search."""
        with self.session() as db:
            stmt = select(MenuItem).where(MenuItem.status == "active")
            if featured_only:
                stmt = stmt.where(MenuItem.featured.is_(True))
            if category and category != "All":
                stmt = stmt.where(MenuItem.category == category)
            if search:
                pattern = f"%{search.strip()}%"
                stmt = stmt.where(or_(MenuItem.name.ilike(pattern), MenuItem.description.ilike(pattern)))
            return list(db.scalars(stmt.order_by(*self.order_by)).all())

    def upload_image(self, filename: str, data: bytes):
        """Store a menu photo; returns (storage_path, public_url)."""
        return self.storage.upload_image(MENU_PREFIX, filename, data)

    def delete(self, record_id):
        item = self.get_or_raise(record_id)
        if item.image_path:
            try:
                self.storage.remove([item.image_path])
            except Exception as ex:
                # Orphaned blob is preferable to a dangling row
                logger.warning("Storage delete failed for %s: %s", item.image_path, ex)
        super().delete(record_id)
