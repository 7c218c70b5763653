import pytest

from core.errors import ValidationError


def submit(repos, **overrides):
    record = {"name": "Kofi", "email": "kofi@example.com", "message": "Do you cater weddings?"}
    record.update(overrides)
    return repos.contact.create(record)


def test_new_message_is_unread_without_reply(repos):
    message = submit(repos, status="replied", reply_message="sneaky")
    assert message.status == "unread"
    assert message.reply_message is None
    assert repos.contact.count_unread() == 1


def test_message_requires_valid_email(repos):
    with pytest.raises(ValidationError):
        submit(repos, email="kofi")


def test_message_body_required(repos):
    with pytest.raises(ValidationError, match="Message is required"):
        submit(repos, message="")


def test_mark_read(repos):
    message = submit(repos)
    assert repos.contact.mark_read(message.id).status == "read"
    assert repos.contact.count_unread() == 0


def test_mark_read_leaves_replied_alone(repos):
    message = submit(repos)
    repos.contact.update_status(message.id, "replied", "Yes we do!")
    assert repos.contact.mark_read(message.id).status == "replied"


def test_reply_stamps_time(repos):
    message = submit(repos)
    updated = repos.contact.update_status(message.id, "replied", "Yes we do!")
    assert updated.reply_message == "Yes we do!"
    assert updated.reply_sent_at is not None


def test_unknown_status(repos):
    message = submit(repos)
    with pytest.raises(ValidationError):
        repos.contact.update_status(message.id, "archived")
