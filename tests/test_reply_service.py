import httpx
import pytest

from core.email_service import EmailRelayClient
from core.errors import RelayError, ValidationError
from core.reply_service import ReplyService


@pytest.fixture
def message(repos):
    created = repos.contact.create({"name": "Kofi", "email": "kofi@example.com", "message": "Open on Sunday?"})
    return repos.contact.mark_read(created.id)


def test_reply_sent_then_recorded(repos, relay, message):
    service = ReplyService(repos.contact, relay=relay, business_email="hello@ernemako.com")
    updated = service.send_reply(message, "  No, we rest on Sundays.  ")
    assert relay.sent == [{
        "to": "kofi@example.com",
        "subject": service.subject_for(message),
        "message": "No, we rest on Sundays.",
        "reply_to": "hello@ernemako.com",
    }]
    assert updated.status == "replied"
    assert updated.reply_message == "No, we rest on Sundays."


def test_empty_reply_rejected_before_sending(repos, relay, message):
    service = ReplyService(repos.contact, relay=relay)
    with pytest.raises(ValidationError, match="Reply message cannot be empty"):
        service.send_reply(message, "   ")
    assert relay.sent == []


def test_relay_failure_leaves_message_unreplied(repos, message):
    relay = EmailRelayClient(
        base_url="http://relay.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "Resend is down"})),
    )
    service = ReplyService(repos.contact, relay=relay)
    with pytest.raises(RelayError, match="Resend is down"):
        service.send_reply(message, "Hello")
    stored = repos.contact.get(message.id)
    assert stored.status == "read"
    assert stored.reply_message is None
