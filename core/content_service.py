# core/content_service.py
"""
Singleton-ish marketing content: the about page, business settings and the
hero banner. Each get() returns None when nothing is stored yet and each
update() upserts the single logical row.
"""
import logging

from sqlalchemy import select

from core.errors import RepositoryError
from core.repository import Repository
from models.about_content import AboutContent
from models.setting import Setting

logger = logging.getLogger(__name__)

BUSINESS_KEY = "business"
HERO_BANNER_KEY = "hero_banner"


class AboutRepository(Repository):
    model = AboutContent
    required_fields = ("content",)
    protected_fields = ("id", "updated_at")

    def get(self, record_id=None):
        with self.session() as db:
            return db.scalars(select(AboutContent).limit(1)).first()

    def update(self, content, partial=None):
        # update(content_dict) upserts; update(id, partial) keeps the base signature
        if partial is not None:
            return super().update(content, partial)
        existing = self.get()
        if existing:
            return super().update(existing.id, content)
        return self.create(content)


class _KeyedSettingRepository(Repository):
    model = Setting
    key = None

    def get(self, record_id=None):
        with self.session() as db:
            row = db.scalars(select(Setting).where(Setting.key == self.key)).first()
            return dict(row.value) if row else None

    def update(self, value: dict, partial=None):
        with self.session() as db:
            row = db.scalars(select(Setting).where(Setting.key == self.key)).first()
            if row:
                # Assign a new dict so the JSON column is flagged dirty
                row.value = {**(row.value or {}), **value}
            else:
                row = Setting(key=self.key, value=dict(value))
                db.add(row)
            db.flush()
            stored = dict(row.value)
        logger.info("Updated %s settings", self.key)
        return stored


class SettingsRepository(_KeyedSettingRepository):
    """Phone, email, address and display business hours."""
    key = BUSINESS_KEY


class HeroBannerRepository(_KeyedSettingRepository):
    """image_url, title, subtitle for the home screen hero."""
    key = HERO_BANNER_KEY

    def get(self, record_id=None):
        try:
            return super().get()
        except RepositoryError as ex:
            # The hero falls back to the bundled image
            logger.error("Failed to load hero banner: %s", ex)
            return None
