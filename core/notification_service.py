# core/notification_service.py
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from core.config import NOTIFICATION_POLL_SECONDS
from core.errors import RepositoryError
from core.scheduler import PeriodicTask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminNotifications:
    unread_messages: int = 0
    pending_reservations: int = 0

    @property
    def total(self) -> int:
        return self.unread_messages + self.pending_reservations


class AdminNotifier:
    """
    Badge counter for the admin console. Re-reads the counts on every poll
    and calls on_change only when they differ from the last read.
    """

    def __init__(self, contact_repo, reservation_repo,
                 on_change: Optional[Callable[[AdminNotifications], None]] = None,
                 interval: float = NOTIFICATION_POLL_SECONDS, clock=None):
        self.contact_repo = contact_repo
        self.reservation_repo = reservation_repo
        self.on_change = on_change
        self.current = AdminNotifications()
        kwargs = {"clock": clock} if clock else {}
        self.task = PeriodicTask("admin-notifications", interval, self.refresh, **kwargs)

    def refresh(self) -> AdminNotifications:
        try:
            latest = AdminNotifications(
                unread_messages=self.contact_repo.count_unread(),
                pending_reservations=self.reservation_repo.count_pending(),
            )
        except RepositoryError as ex:
            # Keep the last known counts; next poll retries
            logger.warning("Notification poll failed: %s", ex)
            return self.current

        if latest != self.current:
            self.current = latest
            if self.on_change:
                self.on_change(latest)
        return latest

    def start(self):
        self.task.start()

    def stop(self):
        self.task.stop()
