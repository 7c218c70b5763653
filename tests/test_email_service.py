import json

import httpx
import pytest

from core.email_service import SEND_EMAIL_PATH, EmailRelayClient, render_email_html
from core.errors import RelayError


def relay_with(handler):
    return EmailRelayClient(base_url="http://relay.test", transport=httpx.MockTransport(handler))


def test_send_posts_payload_and_returns_id():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "id": "re_123"})

    message_id = relay_with(handler).send("ama@example.com", "Hello", "Thanks!", reply_to="hello@ernemako.com")
    assert message_id == "re_123"
    assert seen["path"] == SEND_EMAIL_PATH
    assert seen["body"] == {"to": "ama@example.com", "subject": "Hello", "message": "Thanks!",
                            "replyTo": "hello@ernemako.com"}


def test_reply_to_omitted_when_not_given():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"id": "x"})

    relay_with(handler).send("ama@example.com", "Hello", "Hi")
    assert "replyTo" not in bodies[0]


def test_error_body_is_surfaced():
    relay = relay_with(lambda request: httpx.Response(422, json={"error": "Invalid `to` field"}))
    with pytest.raises(RelayError) as info:
        relay.send("bad", "Hello", "Hi")
    assert str(info.value) == "Invalid `to` field"
    assert info.value.status_code == 422


def test_non_json_error_falls_back_to_status():
    relay = relay_with(lambda request: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(RelayError, match=r"Failed to send email \(502\)"):
        relay.send("ama@example.com", "Hello", "Hi")


def test_unreachable_relay():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RelayError, match="Could not reach the mail service"):
        relay_with(handler).send("ama@example.com", "Hello", "Hi")


def test_html_body_is_escaped():
    body = render_email_html("<b>hi</b>")
    assert "&lt;b&gt;hi&lt;/b&gt;" in body
    assert "<b>hi</b>" not in body
