from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.menu_service import MenuRepository
from conftest import BrokenStore


@pytest.fixture
def menu(repos):
    repo = repos.menu
    repo.create({"name": "Jollof Rice", "price": "15.00", "category": "Entrees", "featured": True})
    repo.create({"name": "Kelewele", "price": "8.00", "category": "Appetizers",
                 "description": "Spicy fried plantain", "badges": ["Vegan", "Spicy"]})
    repo.create({"name": "Bofrot", "price": "6.00", "category": "Desserts", "status": "inactive", "featured": True})
    return repo


def test_available_excludes_inactive(menu):
    names = [item.name for item in menu.get_available()]
    assert "Bofrot" not in names
    assert sorted(names) == ["Jollof Rice", "Kelewele"]


def test_available_featured_only(menu):
    assert [item.name for item in menu.get_available(featured_only=True)] == ["Jollof Rice"]


def test_available_by_category_and_all(menu):
    assert [i.name for i in menu.get_available(category="Appetizers")] == ["Kelewele"]
    assert len(menu.get_available(category="All")) == 2


def test_search_matches_name_and_description(menu):
    assert [i.name for i in menu.get_available(search="plantain")] == ["Kelewele"]
    assert [i.name for i in menu.get_available(search="jollof")] == ["Jollof Rice"]


def test_badges_list_is_stored_comma_separated(menu):
    item = menu.get_available(category="Appetizers")[0]
    assert item.badges == "Vegan,Spicy"
    assert item.badge_list == ["Vegan", "Spicy"]


def test_price_stored_as_decimal(menu):
    item = menu.get_available(category="Entrees")[0]
    assert Decimal(item.price) == Decimal("15.00")


def test_invalid_status_rejected(repos):
    with pytest.raises(ValidationError, match="Status must be one of"):
        repos.menu.create({"name": "Waakye", "price": "12", "category": "Entrees", "status": "sold-out"})


def test_upload_image_and_delete_removes_blob(repos, storage):
    path, url = repos.menu.upload_image("waakye.JPG", b"jpeg-bytes")
    assert path.startswith("menu/") and path.endswith(".jpg")
    item = repos.menu.create({"name": "Waakye", "price": "12", "category": "Entrees",
                              "image_url": url, "image_path": path})
    assert (storage.root / path).exists()
    repos.menu.delete(item.id)
    assert not (storage.root / path).exists()
    assert repos.menu.get(item.id) is None


def test_delete_survives_storage_failure(session_factory):
    repo = MenuRepository(session_factory, BrokenStore())
    path, url = repo.upload_image("sobolo.png", b"png")
    item = repo.create({"name": "Sobolo", "price": "5", "category": "Beverages", "image_url": url, "image_path": path})
    repo.delete(item.id)
    assert repo.get(item.id) is None
