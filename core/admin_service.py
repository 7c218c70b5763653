import logging

from sqlalchemy import select

from core.auth_service import get_auth_provider, hash_password
from core.config import SUPER_ADMIN_EMAIL
from core.db import SessionLocal
from core.errors import NotFoundError, PermissionDeniedError, ValidationError
from core.repository import Repository
from core.validators import validate_email, validate_password
from models.admin import Admin

logger = logging.getLogger(__name__)


class AdminRepository(Repository):
    model = Admin
    order_by = (Admin.created_at.desc(),)
    required_fields = ("user_id", "email")

    def __init__(self, session_factory=SessionLocal, provider=None, super_admin_email: str = SUPER_ADMIN_EMAIL):
        super().__init__(session_factory)
        self.provider = provider or get_auth_provider(session_factory)
        self.super_admin_email = super_admin_email

    def _require_super_admin(self, acting_email: str):
        if acting_email != self.super_admin_email:
            raise PermissionDeniedError("Only the super admin can manage admin accounts")

    def find_by_email(self, email: str):
        with self.session() as db:
            return db.scalars(select(Admin).where(Admin.email == email)).first()

    def create_admin(self, email: str, password: str, acting_email: str) -> Admin:
        """Register credentials with the auth provider, then add the admins row."""
        self._require_super_admin(acting_email)
        email = validate_email(email)
        validate_password(password)
        if self.find_by_email(email):
            raise ValidationError("An admin with this email already exists")

        user = self.provider.sign_up(email, password)
        return self.create({
            "user_id": user.user_id,
            "email": email,
            "role": "admin",
            "password_hash": user.password_hash,
        })

    def delete_admin(self, user_id: str, acting_email: str) -> None:
        """
        Remove from the admins table. Hosted auth users stay in the provider
        (deleting them needs the service role key) but lose console access.
        """
        self._require_super_admin(acting_email)
        with self.session() as db:
            admin = db.scalars(select(Admin).where(Admin.user_id == user_id)).first()
            if admin is None:
                raise NotFoundError(f"Admin {user_id} not found")
            if admin.role == "super_admin":
                raise PermissionDeniedError("The super admin account cannot be removed")
            db.delete(admin)
        logger.info("Admin %s removed by %s", user_id, acting_email)


def create_super_admin(session_factory=SessionLocal, email: str = SUPER_ADMIN_EMAIL, password: str = None):
    """Bootstrap the single super admin (local auth backend). Idempotent."""
    repo = AdminRepository(session_factory, provider=None)
    existing = repo.find_by_email(email)
    if existing:
        logger.info("Super admin already exists.")
        return existing
    if not password:
        raise ValidationError("Super admin password is required")
    admin = repo.create({
        "user_id": f"local-{email}",
        "email": email,
        "role": "super_admin",
        "password_hash": hash_password(password),
    })
    logger.info("Super admin created: %s", email)
    return admin
