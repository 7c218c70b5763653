# core/app_state.py
"""
Application state container passed by reference to every screen.

Holds the cart, the navigator, the admin auth gate and the repositories,
and implements the storefront flows that span more than one of them
(checkout, reservation, waitlist, contact form, sign-in).
"""
import logging
import itertools
import threading
from typing import Callable, Dict, List, Optional

from core.admin_service import AdminRepository
from core.auth_service import AdminAuthGate
from core.cart_service import Cart
from core.contact_service import ContactRepository
from core.content_service import AboutRepository, HeroBannerRepository, SettingsRepository
from core.db import SessionLocal
from core.errors import AppError, ValidationError
from core.gallery_service import GalleryRepository
from core.menu_service import MenuRepository
from core.navigator import Navigator, Screen
from core.reply_service import ReplyService
from core.reservation_service import ReservationRepository
from core.storage import get_object_store
from core.validators import require_fields, validate_email, validate_party_size, validate_password

logger = logging.getLogger(__name__)


class Repositories:
    """One repository per entity, sharing a session factory and object store."""

    def __init__(self, session_factory=SessionLocal, storage=None, auth_provider=None):
        storage = storage or get_object_store()
        self.storage = storage
        self.menu = MenuRepository(session_factory, storage)
        self.gallery = GalleryRepository(session_factory, storage)
        self.reservations = ReservationRepository(session_factory)
        self.contact = ContactRepository(session_factory)
        self.about = AboutRepository(session_factory)
        self.settings = SettingsRepository(session_factory)
        self.hero_banner = HeroBannerRepository(session_factory)
        self.admins = AdminRepository(session_factory, provider=auth_provider)


class AppState:

    def __init__(self, repos: Repositories = None, auth: AdminAuthGate = None, reply_service: ReplyService = None):
        self.repos = repos or Repositories()
        self.auth = auth or AdminAuthGate(provider=self.repos.admins.provider)
        self.reply_service = reply_service or ReplyService(self.repos.contact)
        self.cart = Cart(notify=self.toast)
        self.navigator = Navigator(is_admin_authenticated=lambda: self.auth.is_authenticated)
        self.customer: Optional[Dict] = None
        self.last_confirmation_code = ""
        self.waitlist: List[Dict] = []
        self._waitlist_numbers = itertools.count(1)
        self._toast_sink: Optional[Callable[[str, str], None]] = None
        self._in_flight = set()
        self._lock = threading.Lock()

    # ===================== TOASTS =====================

    def set_toast_sink(self, sink: Callable[[str, str], None]):
        self._toast_sink = sink

    def toast(self, message: str, kind: str = "success"):
        logger.info("Toast [%s]: %s", kind, message)
        if self._toast_sink:
            self._toast_sink(message, kind)

    def navigate(self, screen):
        return self.navigator.navigate(screen)

    def load(self, read: Callable, default=None):
        """Run a repository read for a view. A failure becomes an error toast and the default."""
        try:
            return read()
        except AppError as ex:
            logger.error("View read failed: %s", ex)
            self.toast(str(ex), "error")
            return default

    # ===================== DOUBLE-SUBMIT GUARD =====================

    def begin_submit(self, key: str) -> bool:
        with self._lock:
            if key in self._in_flight:
                return False
            self._in_flight.add(key)
            return True

    def end_submit(self, key: str):
        with self._lock:
            self._in_flight.discard(key)

    def is_submitting(self, key: str) -> bool:
        return key in self._in_flight

    def _guarded(self, key: str, action: Callable):
        if not self.begin_submit(key):
            logger.info("Ignored duplicate %s submit", key)
            return None
        try:
            return action()
        finally:
            self.end_submit(key)

    # ===================== STOREFRONT FLOWS =====================

    def complete_checkout(self):
        """Payment done: clear the cart in one reset and go home."""
        total = self.cart.total
        self.cart.clear()
        self.navigate(Screen.HOME)
        self.toast("Order completed successfully!")
        logger.info("Checkout completed (%s)", total)
        return total

    def submit_reservation(self, data: dict):
        def action():
            reservation = self.repos.reservations.create(data)
            self.last_confirmation_code = reservation.reference
            self.navigate(Screen.CONFIRMATION_RESERVATION)
            return reservation
        return self._guarded("reservation", action)

    def join_waitlist(self, data: dict) -> Optional[Dict]:
        def action():
            require_fields(data, ("name", "phone"))
            entry = {
                "name": data["name"].strip(),
                "phone": data["phone"].strip(),
                "party_size": validate_party_size(data.get("party_size")),
                "code": f"WL-{next(self._waitlist_numbers):02d}",
            }
            self.waitlist.append(entry)
            self.last_confirmation_code = entry["code"]
            self.navigate(Screen.CONFIRMATION_WAITLIST)
            return entry
        return self._guarded("waitlist", action)

    def waitlist_position(self, phone: str) -> Optional[int]:
        """1-based position for a phone number, or None."""
        for position, entry in enumerate(self.waitlist, start=1):
            if entry["phone"] == (phone or "").strip():
                return position
        return None

    def submit_contact(self, data: dict):
        return self._guarded("contact", lambda: self.repos.contact.create(data))

    # ===================== CUSTOMER ACCOUNT =====================

    def customer_sign_in(self, email: str, password: str):
        """Customer accounts are local to this app session."""
        email = validate_email(email)
        if not password:
            raise ValidationError("Password is required")
        self.customer = {"name": email.split("@")[0].title(), "email": email}
        self.navigate(Screen.DASHBOARD)
        return self.customer

    def customer_register(self, name: str, email: str, password: str, confirm: str):
        require_fields({"name": name}, ("name",))
        email = validate_email(email)
        validate_password(password, confirm)
        self.customer = {"name": name.strip(), "email": email}
        self.navigate(Screen.DASHBOARD)
        return self.customer

    def customer_sign_out(self):
        self.customer = None
        self.navigate(Screen.HOME)

    # ===================== ADMIN =====================

    def admin_sign_in(self, email: str, password: str):
        user = self.auth.sign_in(email, password)
        self.navigate(Screen.ADMIN_DASHBOARD)
        return user

    def admin_sign_out(self):
        self.auth.sign_out()
        self.navigate(Screen.HOME)

    def expire_admin_session(self) -> bool:
        """Send an idle admin back to the login screen. Returns True when the session had expired."""
        if self.navigator.current != Screen.ADMIN_DASHBOARD or self.auth.is_authenticated:
            return False
        logger.info("Admin session expired")
        try:
            self.auth.sign_out()
        except AppError as ex:
            logger.warning("Sign out after expiry failed: %s", ex)
        self.navigate(Screen.ADMIN_LOGIN)
        self.toast("Session expired. Please sign in again.", "info")
        return True
