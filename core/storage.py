# core/storage.py
"""
Binary object store for uploaded images.

Every upload gets a fresh random key (no dedup, no hashing). Keys look like
``gallery/k3j9x0c2ab-1718021234567.jpg``.
"""
import logging
import mimetypes
import os
import time
import uuid
from pathlib import Path
from typing import Iterable

from core.config import STORAGE_BACKEND, STORAGE_BUCKET, UPLOAD_DIR
from core.errors import RepositoryError

logger = logging.getLogger(__name__)

GALLERY_PREFIX = "gallery"
MENU_PREFIX = "menu"
HERO_PREFIX = "hero"


def make_object_path(prefix: str, filename: str) -> str:
    ext = os.path.splitext(filename)[1].lstrip(".").lower() or "bin"
    return f"{prefix}/{uuid.uuid4().hex[:12]}-{int(time.time() * 1000)}.{ext}"


class ObjectStore:
    """Interface: upload bytes under a key, resolve a public URL, remove keys."""

    def upload(self, path: str, data: bytes, content_type: str = None) -> None:
        raise NotImplementedError

    def public_url(self, path: str) -> str:
        raise NotImplementedError

    def remove(self, paths: Iterable[str]) -> None:
        raise NotImplementedError

    def upload_image(self, prefix: str, filename: str, data: bytes):
        """Upload under a fresh key; returns (path, public_url)."""
        path = make_object_path(prefix, filename)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        self.upload(path, data, content_type)
        return path, self.public_url(path)


class LocalObjectStore(ObjectStore):
    """Files under a local uploads directory; URLs are plain paths Flet can load."""

    def __init__(self, root: str = UPLOAD_DIR):
        self.root = Path(root)

    def upload(self, path, data, content_type=None):
        dest = self.root / path
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(data)
        except OSError as ex:
            raise RepositoryError(f"Upload failed: {ex}") from ex
        logger.info("Stored %s (%d bytes)", dest, len(data))

    def public_url(self, path):
        return (self.root / path).as_posix()

    def remove(self, paths):
        for path in paths:
            target = self.root / path
            if not target.exists():
                raise RepositoryError(f"Object not found: {path}")
            target.unlink()


class SupabaseObjectStore(ObjectStore):
    """Hosted storage bucket through the supabase client."""

    def __init__(self, client, bucket: str = STORAGE_BUCKET):
        self.client = client
        self.bucket = bucket

    def _bucket(self):
        return self.client.storage.from_(self.bucket)

    def upload(self, path, data, content_type=None):
        try:
            self._bucket().upload(path, data, {"content-type": content_type or "application/octet-stream"})
        except Exception as ex:
            raise RepositoryError(f"Upload failed: {ex}") from ex

    def public_url(self, path):
        return self._bucket().get_public_url(path)

    def remove(self, paths):
        try:
            self._bucket().remove(list(paths))
        except Exception as ex:
            raise RepositoryError(f"Storage delete failed: {ex}") from ex


def get_object_store() -> ObjectStore:
    if STORAGE_BACKEND == "supabase":
        from core.supabase_client import get_supabase_client
        return SupabaseObjectStore(get_supabase_client())
    return LocalObjectStore()
