import pytest

from core.admin_service import create_super_admin
from core.errors import NotFoundError, PermissionDeniedError, ValidationError
from conftest import SUPER_ADMIN


@pytest.fixture
def admins(repos, session_factory):
    create_super_admin(session_factory, SUPER_ADMIN, "secret1")
    return repos.admins


def test_super_admin_bootstrap_is_idempotent(session_factory, admins):
    again = create_super_admin(session_factory, SUPER_ADMIN, "different")
    assert again.role == "super_admin"
    assert admins.count() == 1


def test_super_admin_bootstrap_needs_password(session_factory):
    with pytest.raises(ValidationError):
        create_super_admin(session_factory, "new-owner@ernemako.com", None)


def test_super_admin_creates_admin_who_can_sign_in(admins, auth_provider):
    admin = admins.create_admin("staff@ernemako.com", "staff123", SUPER_ADMIN)
    assert admin.role == "admin"
    assert auth_provider.sign_in("staff@ernemako.com", "staff123").email == "staff@ernemako.com"


def test_regular_admin_cannot_create_admins(admins):
    admins.create_admin("staff@ernemako.com", "staff123", SUPER_ADMIN)
    with pytest.raises(PermissionDeniedError, match="Only the super admin"):
        admins.create_admin("other@ernemako.com", "other123", "staff@ernemako.com")


def test_duplicate_admin_rejected(admins):
    admins.create_admin("staff@ernemako.com", "staff123", SUPER_ADMIN)
    with pytest.raises(ValidationError, match="already exists"):
        admins.create_admin("staff@ernemako.com", "staff456", SUPER_ADMIN)


def test_short_password_rejected(admins):
    with pytest.raises(ValidationError, match="at least 6"):
        admins.create_admin("staff@ernemako.com", "123", SUPER_ADMIN)


def test_delete_admin(admins):
    admin = admins.create_admin("staff@ernemako.com", "staff123", SUPER_ADMIN)
    with pytest.raises(PermissionDeniedError):
        admins.delete_admin(admin.user_id, "staff@ernemako.com")
    admins.delete_admin(admin.user_id, SUPER_ADMIN)
    assert admins.find_by_email("staff@ernemako.com") is None


def test_super_admin_cannot_be_removed(admins):
    owner = admins.find_by_email(SUPER_ADMIN)
    with pytest.raises(PermissionDeniedError, match="cannot be removed"):
        admins.delete_admin(owner.user_id, SUPER_ADMIN)


def test_delete_unknown_admin(admins):
    with pytest.raises(NotFoundError):
        admins.delete_admin("nobody", SUPER_ADMIN)
