from dataclasses import dataclass
from decimal import Decimal

import pytest

from core.app_state import AppState, Repositories
from core.auth_service import AdminAuthGate, LocalAuthProvider
from core.db import Base, make_engine, make_session_factory
from core.errors import RepositoryError
from core.storage import LocalObjectStore, ObjectStore

# Register every table on Base before create_all
from models.about_content import AboutContent
from models.admin import Admin
from models.audit_log import AuditLog
from models.contact_message import ContactMessage
from models.gallery_image import GalleryImage
from models.menu_item import MenuItem
from models.reservation import Reservation
from models.setting import Setting

SUPER_ADMIN = "owner@ernemako.com"


@dataclass
class FakeItem:
    id: str
    name: str
    price: Decimal
    image_url: str = None
    category: str = "Entrees"


class BrokenStore(ObjectStore):
    """Uploads work, removals always fail."""

    def __init__(self):
        self.uploaded = {}

    def upload(self, path, data, content_type=None):
        self.uploaded[path] = data

    def public_url(self, path):
        return f"https://cdn.example.com/{path}"

    def remove(self, paths):
        raise RepositoryError("bucket unavailable")


class RecordingRelay:
    def __init__(self, fail_with=None):
        self.sent = []
        self.fail_with = fail_with

    def send(self, to, subject, message, reply_to=None):
        if self.fail_with:
            raise self.fail_with
        self.sent.append({"to": to, "subject": subject, "message": message, "reply_to": reply_to})
        return "msg_123"


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def storage(tmp_path):
    return LocalObjectStore(tmp_path / "uploads")


@pytest.fixture
def auth_provider(session_factory):
    return LocalAuthProvider(session_factory)


@pytest.fixture
def repos(session_factory, storage, auth_provider):
    repos = Repositories(session_factory, storage=storage, auth_provider=auth_provider)
    repos.admins.super_admin_email = SUPER_ADMIN
    return repos


@pytest.fixture
def relay():
    return RecordingRelay()


@pytest.fixture
def state(repos, auth_provider, relay):
    from core.reply_service import ReplyService
    auth = AdminAuthGate(provider=auth_provider, super_admin_email=SUPER_ADMIN)
    return AppState(repos=repos, auth=auth, reply_service=ReplyService(repos.contact, relay=relay))


@pytest.fixture
def jollof():
    return FakeItem(id="item-1", name="Jollof Rice", price=Decimal("15.00"))


@pytest.fixture
def kelewele():
    return FakeItem(id="item-2", name="Kelewele", price=Decimal("8.00"), category="Appetizers")
