"""
Client-side form validation, run before any backend call.
"""
import re

from core.errors import ValidationError

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
MIN_PASSWORD_LENGTH = 6
MAX_PARTY_SIZE = 20


def is_valid_email(email_str: str) -> bool:
    """Check if email format is valid"""
    return bool(email_str) and EMAIL_PATTERN.match(email_str) is not None


def require_fields(record: dict, fields) -> None:
    """Raise ValidationError naming the first missing/blank field."""
    for field in fields:
        value = record.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            label = field.replace("_", " ").capitalize()
            raise ValidationError(f"{label} is required")


def validate_email(email_str: str) -> str:
    email_str = (email_str or "").strip()
    if not email_str:
        raise ValidationError("Email is required")
    if not is_valid_email(email_str):
        raise ValidationError("Invalid email address")
    return email_str


def validate_password(password: str, confirm: str = None) -> str:
    if not password:
        raise ValidationError("Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if confirm is not None and confirm != password:
        raise ValidationError("Passwords do not match")
    return password


def validate_party_size(value) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Party size must be a number")
    if size < 1 or size > MAX_PARTY_SIZE:
        raise ValidationError(f"Party size must be between 1 and {MAX_PARTY_SIZE}")
    return size
