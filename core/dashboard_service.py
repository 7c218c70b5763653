# core/dashboard_service.py
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass
class DashboardStats:
    menu_items_count: int
    gallery_images_count: int
    unread_messages: int


def get_stats(menu_repo, gallery_repo, contact_repo) -> DashboardStats:
    """Three reads in parallel. Any failure fails the whole summary."""
    with ThreadPoolExecutor(max_workers=3, thread_name_prefix="stats") as pool:
        menu = pool.submit(menu_repo.count)
        gallery = pool.submit(gallery_repo.count)
        unread = pool.submit(contact_repo.count_unread)
        return DashboardStats(
            menu_items_count=menu.result(),
            gallery_images_count=gallery.result(),
            unread_messages=unread.result(),
        )
