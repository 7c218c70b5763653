from datetime import datetime
import logging
import threading

from core.config import SESSION_TIMEOUT

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory admin sessions: email -> last activity timestamp."""

    def __init__(self, timeout: int = SESSION_TIMEOUT, clock=datetime.utcnow):
        self.timeout = timeout
        self.clock = clock
        self._sessions = {}
        self._lock = threading.Lock()

    def start_session(self, email: str):
        """Start a new session for the admin"""
        with self._lock:
            self._sessions[email] = self.clock()
        logger.info("Session started for %s", email)

    def end_session(self, email: str):
        """End the session for the admin"""
        with self._lock:
            if self._sessions.pop(email, None) is not None:
                logger.info("Session ended for %s", email)

    def refresh_session(self, email: str) -> bool:
        """Refresh (update) the last activity timestamp"""
        with self._lock:
            if email not in self._sessions:
                logger.debug("Cannot refresh - no active session for %s", email)
                return False
            self._sessions[email] = self.clock()
            return True

    def is_session_active(self, email: str, return_remaining: bool = False):
        """
        Check if a session is still active.

        Args:
            email: Admin email
            return_remaining: If True, returns (active, remaining_seconds)

        Returns:
            bool or tuple: Session status, optionally with remaining time
        """
        with self._lock:
            if not email or email not in self._sessions:
                return (False, 0) if return_remaining else False

            elapsed = (self.clock() - self._sessions[email]).total_seconds()
            remaining = self.timeout - elapsed
            is_active = remaining > 0

        if not is_active:
            self.end_session(email)
        if return_remaining:
            return (is_active, max(0, remaining))
        return is_active
