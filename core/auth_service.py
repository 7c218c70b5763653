# core/auth_service.py
import bcrypt
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select

from core.config import AUTH_BACKEND, SUPER_ADMIN_EMAIL
from core.db import SessionLocal
from core.errors import AuthError, ValidationError
from core.session_manager import SessionStore
from core.validators import validate_email, validate_password
from models.admin import Admin

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash in the table
        return False


@dataclass
class AuthUser:
    user_id: str
    email: str
    password_hash: Optional[str] = None


# ===================== PROVIDERS =====================

class LocalAuthProvider:
    """Credentials checked against bcrypt hashes on the admins table."""

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def _find(self, db, email):
        return db.scalars(select(Admin).where(Admin.email == email)).first()

    def sign_in(self, email: str, password: str) -> AuthUser:
        with self.session_factory() as db:
            admin = self._find(db, email)
            if not admin or not verify_password(password, admin.password_hash):
                raise AuthError("Invalid email or password")
            return AuthUser(user_id=admin.user_id, email=admin.email)

    def sign_up(self, email: str, password: str) -> AuthUser:
        return AuthUser(user_id=str(uuid.uuid4()), email=email, password_hash=hash_password(password))

    def sign_out(self):
        pass

    def update_password(self, email: str, new_password: str):
        with self.session_factory() as db:
            admin = self._find(db, email)
            if not admin:
                raise AuthError("No admin account for this session")
            admin.password_hash = hash_password(new_password)
            db.commit()


class SupabaseAuthProvider:
    """Hosted auth through the supabase client."""

    def __init__(self, client=None):
        if client is None:
            from core.supabase_client import get_supabase_client
            client = get_supabase_client()
        self.client = client

    def sign_in(self, email, password):
        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as ex:
            raise AuthError(str(ex) or "Invalid email or password") from ex
        if not response or not response.user:
            raise AuthError("Invalid email or password")
        return AuthUser(user_id=response.user.id, email=response.user.email)

    def sign_up(self, email, password):
        try:
            response = self.client.auth.sign_up({"email": email, "password": password})
        except Exception as ex:
            raise AuthError(f"Could not create account: {ex}") from ex
        if not response or not response.user:
            raise AuthError("Could not create account")
        return AuthUser(user_id=response.user.id, email=email)

    def sign_out(self):
        try:
            self.client.auth.sign_out()
        except Exception as ex:
            raise AuthError(f"Sign out failed: {ex}") from ex

    def update_password(self, email, new_password):
        try:
            self.client.auth.update_user({"password": new_password})
        except Exception as ex:
            raise AuthError(f"Password update failed: {ex}") from ex


def get_auth_provider(session_factory=SessionLocal):
    if AUTH_BACKEND == "supabase":
        return SupabaseAuthProvider()
    return LocalAuthProvider(session_factory)


# ===================== GATE =====================

class AdminAuthGate:
    """
    Admin console access. The super-admin check is a UI gate only; the
    backend's row policies are the real boundary.
    """

    def __init__(self, provider=None, sessions: SessionStore = None, super_admin_email: str = SUPER_ADMIN_EMAIL):
        self.provider = provider or get_auth_provider()
        self.sessions = sessions or SessionStore()
        self.super_admin_email = super_admin_email
        self._email: Optional[str] = None

    @property
    def current_email(self) -> Optional[str]:
        return self._email if self.is_authenticated else None

    @property
    def is_authenticated(self) -> bool:
        return bool(self._email) and self.sessions.is_session_active(self._email)

    def sign_in(self, email: str, password: str) -> AuthUser:
        email = validate_email(email)
        if not password:
            raise ValidationError("Password is required")
        user = self.provider.sign_in(email, password)
        self._email = user.email
        self.sessions.start_session(user.email)
        logger.info("Admin signed in: %s", user.email)
        return user

    def sign_out(self):
        email = self._email
        self._email = None
        if email:
            self.sessions.end_session(email)
        self.provider.sign_out()
        logger.info("Admin signed out: %s", email)

    def touch(self) -> bool:
        """Extend the session on activity."""
        return bool(self._email) and self.sessions.refresh_session(self._email)

    def can_manage_admins(self, email: str = None) -> bool:
        email = email or self.current_email
        return bool(email) and email == self.super_admin_email

    def change_password(self, new_password: str, confirm: str = None):
        if not self.is_authenticated:
            raise AuthError("Please sign in again")
        validate_password(new_password, confirm)
        self.provider.update_password(self._email, new_password)
        logger.info("Password changed for %s", self._email)
