# core/contact_service.py
from datetime import datetime

from core.errors import ValidationError
from core.repository import Repository
from core.validators import validate_email
from models.contact_message import ContactMessage, MESSAGE_STATUSES


class ContactRepository(Repository):
    model = ContactMessage
    order_by = (ContactMessage.created_at.desc(),)
    required_fields = ("name", "email", "message")

    def create(self, message):
        """Public contact form submission. Status always starts as unread."""
        record = dict(message)
        record["email"] = validate_email(record.get("email"))
        record["status"] = "unread"
        record.pop("reply_message", None)
        record.pop("reply_sent_at", None)
        return super().create(record)

    def update_status(self, record_id, status: str, reply_message: str = None) -> ContactMessage:
        if status not in MESSAGE_STATUSES:
            raise ValidationError(f"Unknown message status: {status}")
        values = {"status": status}
        if reply_message:
            values["reply_message"] = reply_message
            values["reply_sent_at"] = datetime.utcnow()
        return self.update(record_id, values)

    def mark_read(self, record_id) -> ContactMessage:
        """Opening an unread message marks it read; replied messages stay replied."""
        message = self.get_or_raise(record_id)
        if message.status != "unread":
            return message
        return self.update_status(record_id, "read")

    def count_unread(self) -> int:
        return self.count(status="unread")
