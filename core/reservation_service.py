# core/reservation_service.py
from sqlalchemy import select

from core.errors import ValidationError
from core.repository import Repository
from core.validators import validate_email, validate_party_size
from models.reservation import Reservation, RESERVATION_STATUSES

# Forward path pending -> confirmed -> completed; cancel from any open state
ALLOWED_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"completed", "cancelled"},
    "completed": set(),
    "cancelled": set(),
}
OPEN_STATUSES = ("pending", "confirmed")


def can_transition(current: str, new: str) -> bool:
    return new == current or new in ALLOWED_TRANSITIONS.get(current, set())


class ReservationRepository(Repository):
    model = Reservation
    order_by = (Reservation.date.desc(), Reservation.time.desc())
    required_fields = ("customer_name", "phone", "date", "time", "guests")

    def create(self, reservation):
        """Customer-facing booking. Status always starts as pending."""
        record = dict(reservation)
        record["guests"] = validate_party_size(record.get("guests"))
        if record.get("email"):
            record["email"] = validate_email(record["email"])
        record["status"] = "pending"
        return super().create(record)

    def update_status(self, record_id, status: str) -> Reservation:
        if status not in RESERVATION_STATUSES:
            raise ValidationError(f"Unknown reservation status: {status}")
        current = self.get_or_raise(record_id)
        if not can_transition(current.status, status):
            raise ValidationError(f"Cannot move a {current.status} reservation to {status}")
        return self.update(record_id, {"status": status})

    def find_by_phone(self, phone: str):
        """Existing-booking lookup, newest first."""
        phone = (phone or "").strip()
        if not phone:
            raise ValidationError("Phone is required")
        with self.session() as db:
            stmt = select(Reservation).where(Reservation.phone == phone).order_by(Reservation.created_at.desc())
            return list(db.scalars(stmt).all())

    def count_pending(self) -> int:
        return self.count(status="pending")
