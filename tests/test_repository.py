import pytest

from core.errors import NotFoundError, ValidationError
from core.menu_service import parse_price


def make_item(repo, **overrides):
    record = {"name": "Jollof Rice", "price": "15", "category": "Entrees"}
    record.update(overrides)
    return repo.create(record)


def test_create_get_and_count(repos):
    item = make_item(repos.menu)
    assert repos.menu.get(item.id).name == "Jollof Rice"
    assert repos.menu.count() == 1
    assert repos.menu.count(category="Desserts") == 0


def test_blank_required_field_rejected(repos):
    with pytest.raises(ValidationError, match="Name is required"):
        make_item(repos.menu, name="  ")


def test_unknown_field_rejected(repos):
    with pytest.raises(ValidationError, match="Unknown MenuItem field"):
        make_item(repos.menu, spiciness=3)


def test_id_cannot_be_overridden(repos):
    item = make_item(repos.menu, id="chosen-by-caller")
    assert item.id != "chosen-by-caller"


def test_update_and_delete_unknown_id(repos):
    with pytest.raises(NotFoundError):
        repos.menu.update("missing", {"name": "x"})
    with pytest.raises(NotFoundError):
        repos.menu.delete("missing")


def test_get_or_raise(repos):
    with pytest.raises(NotFoundError):
        repos.menu.get_or_raise("missing")


def test_integrity_error_becomes_validation_error(repos):
    repos.admins.create({"user_id": "u1", "email": "a@ernemako.com"})
    with pytest.raises(ValidationError, match="constraint"):
        repos.admins.create({"user_id": "u2", "email": "a@ernemako.com"})


@pytest.mark.parametrize("raw, message", [("abc", "Price must be a number"), ("-1", "Price cannot be negative")])
def test_parse_price_errors(raw, message):
    with pytest.raises(ValidationError, match=message):
        parse_price(raw)


def test_parse_price_quantizes():
    assert str(parse_price(" 12.5 ")) == "12.50"
