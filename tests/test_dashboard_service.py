import pytest

from core.dashboard_service import get_stats
from core.errors import RepositoryError


def test_stats_count_each_table(repos):
    repos.menu.create({"name": "Kelewele", "price": "8", "category": "Appetizers"})
    repos.gallery.upload("room.jpg", b"x", "Room")
    repos.gallery.upload("patio.jpg", b"x", "Patio")
    message = repos.contact.create({"name": "Kofi", "email": "kofi@example.com", "message": "Hi"})
    repos.contact.create({"name": "Esi", "email": "esi@example.com", "message": "Hello"})
    repos.contact.mark_read(message.id)

    stats = get_stats(repos.menu, repos.gallery, repos.contact)
    assert (stats.menu_items_count, stats.gallery_images_count, stats.unread_messages) == (1, 2, 1)


def test_any_failure_fails_the_summary(repos):
    class Down:
        def count_unread(self):
            raise RepositoryError("offline")

    with pytest.raises(RepositoryError):
        get_stats(repos.menu, repos.gallery, Down())
