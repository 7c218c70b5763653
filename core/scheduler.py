# core/scheduler.py
import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """
    Cancellable repeating callback.

    start()/stop() tie it to a view's lifetime. run_pending(now) fires the
    callback when it is due; the background thread just calls it on a
    loop, so tests can pass virtual timestamps instead of sleeping.
    """

    def __init__(self, name: str, interval: float, callback: Callable[[], None],
                 clock: Callable[[], float] = time.monotonic, run_immediately: bool = True):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.name = name
        self.interval = interval
        self.callback = callback
        self.clock = clock
        self.run_immediately = run_immediately
        self._next_due: Optional[float] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self.runs = 0

    @property
    def is_running(self) -> bool:
        return self._next_due is not None

    def start(self):
        """Arm the task and spawn its daemon thread."""
        self.arm()
        self._thread = threading.Thread(target=self._loop, name=f"task-{self.name}", daemon=True)
        self._thread.start()
        logger.info("Periodic task %s started (every %ss)", self.name, self.interval)

    def arm(self, now: float = None):
        """Schedule without a thread (virtual time)."""
        now = self.clock() if now is None else now
        self._stop.clear()
        self._next_due = now if self.run_immediately else now + self.interval

    def stop(self):
        self._stop.set()
        self._next_due = None
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout=1)
        self._thread = None
        logger.info("Periodic task %s stopped", self.name)

    def run_pending(self, now: float = None) -> bool:
        """Fire the callback if due. Returns True when it ran."""
        with self._lock:
            if self._next_due is None:
                return False
            now = self.clock() if now is None else now
            if now < self._next_due:
                return False
            # Skip missed ticks instead of replaying them
            while self._next_due <= now:
                self._next_due += self.interval
        try:
            self.callback()
        except Exception as ex:
            logger.error("Periodic task %s failed: %s", self.name, ex)
        self.runs += 1
        return True

    def _loop(self):
        while not self._stop.is_set():
            self.run_pending()
            due = self._next_due
            if due is None:
                break
            self._stop.wait(max(0.0, due - self.clock()))
