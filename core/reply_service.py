import logging

from core.config import APP_NAME, BUSINESS_EMAIL
from core.email_service import EmailRelayClient
from core.errors import ValidationError

logger = logging.getLogger(__name__)


class ReplyService:
    """
    Admin reply to a contact message: send through the relay, then record
    the reply on the row. A relay failure leaves the row untouched so the
    admin can resubmit.
    """

    def __init__(self, contact_repo, relay: EmailRelayClient = None, business_email: str = BUSINESS_EMAIL):
        self.contact_repo = contact_repo
        self.relay = relay or EmailRelayClient()
        self.business_email = business_email

    def subject_for(self, message) -> str:
        return f"Re: Your message to {APP_NAME}"

    def send_reply(self, message, reply_text: str):
        reply_text = (reply_text or "").strip()
        if not reply_text:
            raise ValidationError("Reply message cannot be empty")

        self.relay.send(
            to=message.email,
            subject=self.subject_for(message),
            message=reply_text,
            reply_to=self.business_email,
        )
        updated = self.contact_repo.update_status(message.id, "replied", reply_text)
        logger.info("Reply recorded for message %s", message.id)
        return updated
