# core/gallery_service.py
import logging

from core.db import SessionLocal
from core.repository import Repository
from core.storage import GALLERY_PREFIX, get_object_store
from models.gallery_image import GalleryImage

logger = logging.getLogger(__name__)


class GalleryRepository(Repository):
    model = GalleryImage
    order_by = (GalleryImage.created_at.desc(),)
    required_fields = ("title", "image_url")

    def __init__(self, session_factory=SessionLocal, storage=None):
        super().__init__(session_factory)
        self.storage = storage or get_object_store()

    def upload(self, filename: str, data: bytes, title: str) -> GalleryImage:
        """Upload the file then record it. The row keeps the storage key for deletion."""
        path, url = self.storage.upload_image(GALLERY_PREFIX, filename, data)
        return self.create({"title": title or filename, "image_url": url, "storage_path": path})

    def delete(self, record_id) -> None:
        image = self.get_or_raise(record_id)
        if image.storage_path:
            try:
                self.storage.remove([image.storage_path])
            except Exception as ex:
                logger.error("Storage delete error for %s: %s", image.storage_path, ex)
        super().delete(record_id)
