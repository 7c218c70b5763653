import pytest

from core.errors import ValidationError
from core.validators import (
    is_valid_email, require_fields, validate_email, validate_party_size, validate_password,
)


@pytest.mark.parametrize("email, ok", [
    ("ama@example.com", True),
    ("first.last+tag@sub.example.gh", True),
    ("ama@example", False),
    ("@example.com", False),
    ("", False),
    (None, False),
])
def test_is_valid_email(email, ok):
    assert is_valid_email(email) is ok


def test_validate_email_strips():
    assert validate_email("  ama@example.com ") == "ama@example.com"
    with pytest.raises(ValidationError, match="Email is required"):
        validate_email("   ")


def test_require_fields_names_first_blank():
    with pytest.raises(ValidationError, match="Customer name is required"):
        require_fields({"customer_name": " ", "phone": ""}, ("customer_name", "phone"))
    require_fields({"guests": 0}, ("guests",))


@pytest.mark.parametrize("value, expected", [("1", 1), (20, 20)])
def test_party_size_bounds(value, expected):
    assert validate_party_size(value) == expected


@pytest.mark.parametrize("value", [0, 21, None, "two"])
def test_party_size_invalid(value):
    with pytest.raises(ValidationError):
        validate_party_size(value)


def test_password_rules():
    assert validate_password("secret1") == "secret1"
    with pytest.raises(ValidationError):
        validate_password("12345")
    with pytest.raises(ValidationError, match="do not match"):
        validate_password("secret1", "secret2")
