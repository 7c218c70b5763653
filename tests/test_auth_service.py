from datetime import datetime, timedelta

import pytest

from core.admin_service import create_super_admin
from core.auth_service import AdminAuthGate, hash_password, verify_password
from core.errors import AuthError, ValidationError
from core.session_manager import SessionStore
from conftest import SUPER_ADMIN


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 6, 3, 12, 0)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gate(session_factory, auth_provider, clock):
    create_super_admin(session_factory, SUPER_ADMIN, "secret1")
    return AdminAuthGate(provider=auth_provider, sessions=SessionStore(timeout=60, clock=clock),
                         super_admin_email=SUPER_ADMIN)


def test_password_hashing():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("secret1", None)
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_session_expires_after_timeout(clock):
    sessions = SessionStore(timeout=60, clock=clock)
    sessions.start_session("a@x.com")
    clock.advance(30)
    assert sessions.is_session_active("a@x.com", return_remaining=True) == (True, 30)
    clock.advance(31)
    assert sessions.is_session_active("a@x.com") is False
    assert sessions.refresh_session("a@x.com") is False


def test_refresh_extends_session(clock):
    sessions = SessionStore(timeout=60, clock=clock)
    sessions.start_session("a@x.com")
    clock.advance(50)
    assert sessions.refresh_session("a@x.com")
    clock.advance(50)
    assert sessions.is_session_active("a@x.com")


def test_sign_in_and_out(gate):
    user = gate.sign_in(SUPER_ADMIN, "secret1")
    assert user.email == SUPER_ADMIN
    assert gate.is_authenticated
    assert gate.current_email == SUPER_ADMIN
    gate.sign_out()
    assert not gate.is_authenticated
    assert gate.current_email is None


def test_wrong_password(gate):
    with pytest.raises(AuthError, match="Invalid email or password"):
        gate.sign_in(SUPER_ADMIN, "nope")
    assert not gate.is_authenticated


def test_unknown_email(gate):
    with pytest.raises(AuthError):
        gate.sign_in("ghost@ernemako.com", "secret1")


def test_sign_in_validates_before_backend(gate):
    with pytest.raises(ValidationError, match="Invalid email"):
        gate.sign_in("owner", "secret1")
    with pytest.raises(ValidationError, match="Password is required"):
        gate.sign_in(SUPER_ADMIN, "")


def test_idle_session_expires_and_touch_keeps_it(gate, clock):
    gate.sign_in(SUPER_ADMIN, "secret1")
    clock.advance(45)
    assert gate.touch()
    clock.advance(45)
    assert gate.is_authenticated
    clock.advance(61)
    assert not gate.is_authenticated
    assert not gate.touch()


def test_only_super_admin_manages_admins(gate):
    assert not gate.can_manage_admins()
    gate.sign_in(SUPER_ADMIN, "secret1")
    assert gate.can_manage_admins()
    assert not gate.can_manage_admins("staff@ernemako.com")


def test_change_password(gate):
    with pytest.raises(AuthError, match="Please sign in again"):
        gate.change_password("newpass1", "newpass1")
    gate.sign_in(SUPER_ADMIN, "secret1")
    with pytest.raises(ValidationError, match="Passwords do not match"):
        gate.change_password("newpass1", "newpass2")
    gate.change_password("newpass1", "newpass1")
    gate.sign_out()
    with pytest.raises(AuthError):
        gate.sign_in(SUPER_ADMIN, "secret1")
    gate.sign_in(SUPER_ADMIN, "newpass1")
