import html
import logging

import httpx

from core.config import APP_NAME, BUSINESS_ADDRESS, BUSINESS_EMAIL, BUSINESS_PHONE, RELAY_TIMEOUT, RELAY_URL
from core.errors import RelayError

logger = logging.getLogger(__name__)

SEND_EMAIL_PATH = "/api/send-email"


def render_email_html(message: str) -> str:
    """Branded HTML body around a plain-text message."""
    body = html.escape(message)
    return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <div style="background: linear-gradient(135deg, #8D6E63 0%, #5D4037 100%); padding: 30px; text-align: center;">
                <h1 style="color: white; margin: 0;">{APP_NAME}</h1>
            </div>
            <div style="padding: 30px; background: #f9f9f9;">
                <p style="color: #333; line-height: 1.6; white-space: pre-wrap;">{body}</p>
            </div>
            <div style="padding: 20px; text-align: center; background: #333; color: white; font-size: 12px;">
                <p>{APP_NAME}</p>
                <p>{BUSINESS_ADDRESS}</p>
                <p>{BUSINESS_PHONE} | {BUSINESS_EMAIL}</p>
            </div>
        </div>
        """


class EmailRelayClient:
    """POSTs {to, subject, message, replyTo} to the mail relay endpoint."""

    def __init__(self, base_url: str = RELAY_URL, timeout: float = RELAY_TIMEOUT, transport=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def send(self, to: str, subject: str, message: str, reply_to: str = None) -> str:
        """Returns the provider message id. Raises RelayError on any failure."""
        payload = {"to": to, "subject": subject, "message": message}
        if reply_to:
            payload["replyTo"] = reply_to

        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
                response = client.post(SEND_EMAIL_PATH, json=payload)
        except httpx.HTTPError as ex:
            logger.error("Mail relay unreachable: %s", ex)
            raise RelayError(f"Could not reach the mail service: {ex}") from ex

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            logger.error("Mail relay error %s: %s", response.status_code, error)
            raise RelayError(error or f"Failed to send email ({response.status_code})", response.status_code)

        logger.info("Email sent to %s", to)
        return data.get("id")
