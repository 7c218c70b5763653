
from core.errors import RepositoryError
from core.notification_service import AdminNotifications, AdminNotifier


class FlakyContacts:
    def __init__(self):
        self.unread = 2
        self.down = False

    def count_unread(self):
        if self.down:
            raise RepositoryError("offline")
        return self.unread


class Reservations:
    def count_pending(self):
        return 1


def test_total():
    assert AdminNotifications(unread_messages=2, pending_reservations=3).total == 5


def test_on_change_only_when_counts_move(repos):
    changes = []
    notifier = AdminNotifier(repos.contact, repos.reservations, on_change=changes.append)
    assert notifier.refresh() == AdminNotifications()
    assert changes == []

    repos.contact.create({"name": "Kofi", "email": "kofi@example.com", "message": "Hi"})
    notifier.refresh()
    notifier.refresh()
    assert changes == [AdminNotifications(unread_messages=1, pending_reservations=0)]


def test_failed_poll_keeps_last_counts():
    contacts = FlakyContacts()
    notifier = AdminNotifier(contacts, Reservations())
    first = notifier.refresh()
    contacts.down = True
    assert notifier.refresh() == first == AdminNotifications(2, 1)


def test_polls_through_periodic_task():
    contacts = FlakyContacts()
    seen = []
    notifier = AdminNotifier(contacts, Reservations(), on_change=seen.append, interval=30, clock=lambda: 0)
    notifier.task.arm(0)
    notifier.task.run_pending(0)
    contacts.unread = 5
    notifier.task.run_pending(15)
    notifier.task.run_pending(30)
    assert [n.unread_messages for n in seen] == [2, 5]
