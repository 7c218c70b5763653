"""Mail relay endpoint: POST /api/send-email, forwarded to the Resend API."""
import logging
import os
from typing import Optional

import httpx
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from core.config import BUSINESS_EMAIL, MAIL_FROM, RESEND_API_KEY, RESEND_API_URL
from core.email_service import SEND_EMAIL_PATH, render_email_html

logger = logging.getLogger(__name__)

app = FastAPI(title="Mail relay", docs_url=None, redoc_url=None)


class SendEmailRequest(BaseModel):
    # All optional so missing fields produce our 400 instead of a 422
    to: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    reply_to: Optional[str] = Field(default=None, alias="replyTo")


def get_resend_client():
    with httpx.Client(timeout=15.0) as client:
        yield client


@app.post(SEND_EMAIL_PATH)
def send_email(payload: SendEmailRequest, client: httpx.Client = Depends(get_resend_client)):
    if not payload.to or not payload.subject or not payload.message:
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    try:
        response = client.post(
            RESEND_API_URL,
            headers={
                "Authorization": f"Bearer {RESEND_API_KEY}",
                "Content-Type": "application/json",
            },
            json={
                "from": MAIL_FROM,
                "to": [payload.to],
                "subject": payload.subject,
                "html": render_email_html(payload.message),
                "reply_to": payload.reply_to or BUSINESS_EMAIL,
            },
        )
        data = response.json()
    except (httpx.HTTPError, ValueError) as ex:
        logger.error("Error sending email: %s", ex)
        return JSONResponse(status_code=500, content={"error": str(ex) or "Internal server error"})

    if not response.is_success:
        logger.error("Resend API error: %s", data)
        return JSONResponse(
            status_code=response.status_code,
            content={"error": data.get("message") or "Failed to send email"},
        )

    return {"success": True, "id": data.get("id")}


@app.api_route(SEND_EMAIL_PATH, methods=["GET", "PUT", "PATCH", "DELETE"])
def method_not_allowed():
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})


if __name__ == "__main__":
    import uvicorn
    from core.logger import setup_logging

    setup_logging()
    uvicorn.run(app, host=os.getenv("RELAY_HOST", "0.0.0.0"), port=int(os.getenv("RELAY_PORT", "8000")))
