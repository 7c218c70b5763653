from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from core.admin_service import create_super_admin
from core.app_state import AppState
from core.auth_service import AdminAuthGate
from core.errors import AuthError, RepositoryError, ValidationError
from core.session_manager import SessionStore
from core.navigator import Screen
from conftest import SUPER_ADMIN


@pytest.fixture
def toasts(state):
    seen = []
    state.set_toast_sink(lambda message, kind: seen.append((kind, message)))
    return seen


def booking(**overrides):
    record = {"customer_name": "Ama", "phone": "0241234567", "date": "2024-06-08", "time": "19:00", "guests": 2}
    record.update(overrides)
    return record


def test_submit_guard(state):
    assert state.begin_submit("payment")
    assert not state.begin_submit("payment")
    assert state.is_submitting("payment")
    state.end_submit("payment")
    assert state.begin_submit("payment")


def test_cart_toast_on_add(state, toasts, jollof):
    state.cart.add_to_cart(jollof, 2)
    assert toasts == [("success", "2 Jollof Rice added to cart")]


def test_checkout_clears_cart_and_goes_home(state, toasts, jollof, kelewele):
    state.cart.add_to_cart(jollof)
    state.cart.add_to_cart(kelewele, 2)
    state.navigate(Screen.PAYMENT)
    total = state.complete_checkout()
    assert total == Decimal("34.10")
    assert state.cart.is_empty
    assert state.navigator.current == Screen.HOME
    assert toasts[-1] == ("success", "Order completed successfully!")


def test_reservation_flow(state, repos):
    reservation = state.submit_reservation(booking())
    assert state.last_confirmation_code == reservation.reference
    assert state.last_confirmation_code.startswith("RES-")
    assert state.navigator.current == Screen.CONFIRMATION_RESERVATION
    assert repos.reservations.count_pending() == 1


def test_reservation_double_submit_is_ignored(state, repos):
    state.begin_submit("reservation")
    assert state.submit_reservation(booking()) is None
    assert repos.reservations.count() == 0


def test_failed_reservation_releases_guard(state):
    with pytest.raises(ValidationError):
        state.submit_reservation(booking(guests=0))
    assert not state.is_submitting("reservation")
    assert state.navigator.current == Screen.HOME


def test_waitlist(state):
    first = state.join_waitlist({"name": "Kwame", "phone": "0200000001", "party_size": 3})
    state.join_waitlist({"name": "Efua", "phone": "0200000002", "party_size": 2})
    assert first["code"].startswith("WL-")
    assert state.navigator.current == Screen.CONFIRMATION_WAITLIST
    assert state.waitlist_position("0200000002") == 2
    assert state.waitlist_position(" 0200000001 ") == 1
    assert state.waitlist_position("0999999999") is None


def test_waitlist_requires_name(state):
    with pytest.raises(ValidationError, match="Name is required"):
        state.join_waitlist({"name": "", "phone": "0200000001", "party_size": 2})


def test_contact_form(state, repos):
    message = state.submit_contact({"name": "Kofi", "email": "kofi@example.com", "message": "Hi"})
    assert message.status == "unread"
    assert repos.contact.count_unread() == 1


def test_reply_through_state(state, repos, relay):
    message = state.submit_contact({"name": "Kofi", "email": "kofi@example.com", "message": "Hi"})
    state.reply_service.send_reply(message, "Hello Kofi")
    assert relay.sent[0]["to"] == "kofi@example.com"
    assert repos.contact.get(message.id).status == "replied"


def test_customer_register_and_sign_out(state):
    customer = state.customer_register("Ama Mensah", "ama@example.com", "secret1", "secret1")
    assert customer == {"name": "Ama Mensah", "email": "ama@example.com"}
    assert state.navigator.current == Screen.DASHBOARD
    state.customer_sign_out()
    assert state.customer is None
    assert state.navigator.current == Screen.HOME


def test_customer_register_password_mismatch(state):
    with pytest.raises(ValidationError, match="Passwords do not match"):
        state.customer_register("Ama", "ama@example.com", "secret1", "secret2")


def test_admin_dashboard_requires_sign_in(state, session_factory):
    create_super_admin(session_factory, SUPER_ADMIN, "secret1")
    state.navigate(Screen.ADMIN_DASHBOARD)
    assert state.navigator.rendered_screen == Screen.ADMIN_LOGIN

    with pytest.raises(AuthError):
        state.admin_sign_in(SUPER_ADMIN, "wrong1")
    state.admin_sign_in(SUPER_ADMIN, "secret1")
    assert state.navigator.rendered_screen == Screen.ADMIN_DASHBOARD

    state.admin_sign_out()
    assert not state.auth.is_authenticated
    assert state.navigator.current == Screen.HOME


def test_waitlist_codes_are_unique(state):
    codes = [
        state.join_waitlist({"name": f"Guest {n}", "phone": f"02000000{n:02d}", "party_size": 2})["code"]
        for n in range(1, 31)
    ]
    assert len(set(codes)) == 30
    assert codes[:2] == ["WL-01", "WL-02"]


def test_load_turns_read_failures_into_toasts(state, toasts):
    def failing():
        raise RepositoryError("store down")

    assert state.load(failing, []) == []
    assert state.load(lambda: [1, 2]) == [1, 2]
    assert toasts == [("error", "store down")]


class FailingSignOutProvider:
    def __init__(self, inner):
        self.inner = inner

    def sign_in(self, email, password):
        return self.inner.sign_in(email, password)

    def sign_out(self):
        raise AuthError("Sign out failed: network unreachable")


def test_expired_admin_session_returns_to_login_even_if_sign_out_fails(repos, auth_provider, session_factory):
    clock = {"now": datetime(2024, 6, 3, 12, 0)}
    sessions = SessionStore(timeout=60, clock=lambda: clock["now"])
    gate = AdminAuthGate(provider=FailingSignOutProvider(auth_provider), sessions=sessions,
                         super_admin_email=SUPER_ADMIN)
    state = AppState(repos=repos, auth=gate)
    create_super_admin(session_factory, SUPER_ADMIN, "secret1")
    state.admin_sign_in(SUPER_ADMIN, "secret1")

    assert state.expire_admin_session() is False
    clock["now"] += timedelta(seconds=61)
    assert state.expire_admin_session() is True
    assert state.navigator.current == Screen.ADMIN_LOGIN
    assert state.auth.current_email is None
    assert state.expire_admin_session() is False
