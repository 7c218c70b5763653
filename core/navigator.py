# core/navigator.py
import logging
from enum import Enum
from typing import Callable, List, Union

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    HOME = "HOME"
    MENU = "MENU"
    CART = "CART"
    PAYMENT = "PAYMENT"
    RESERVATION = "RESERVATION"
    WAITLIST = "WAITLIST"
    SIGN_IN = "SIGN_IN"
    REGISTER = "REGISTER"
    DASHBOARD = "DASHBOARD"
    HELP = "HELP"
    CONTACT = "CONTACT"
    ABOUT = "ABOUT"
    ADMIN_LOGIN = "ADMIN_LOGIN"
    ADMIN_DASHBOARD = "ADMIN_DASHBOARD"
    CONFIRMATION_RESERVATION = "CONFIRMATION_RESERVATION"
    CONFIRMATION_WAITLIST = "CONFIRMATION_WAITLIST"


ADMIN_SCREENS = frozenset({Screen.ADMIN_LOGIN, Screen.ADMIN_DASHBOARD})


class Navigator:
    """
    Single-slot screen router. There is no back stack: "back" buttons
    navigate to a fixed screen.

    Listeners are called as listener(screen) after every navigate(); the
    app shell uses this to re-render and scroll to the top.
    """

    def __init__(self, is_admin_authenticated: Callable[[], bool] = lambda: False, initial: Screen = Screen.HOME):
        self._current = initial
        self._is_admin_authenticated = is_admin_authenticated
        self._listeners: List[Callable[[Screen], None]] = []
        self.scroll_to_top_requested = False

    @property
    def current(self) -> Screen:
        return self._current

    @property
    def rendered_screen(self) -> Screen:
        """Screen actually shown. The admin dashboard falls back to the login screen without a session."""
        if self._current == Screen.ADMIN_DASHBOARD and not self._is_admin_authenticated():
            return Screen.ADMIN_LOGIN
        return self._current

    def navigate(self, screen: Union[Screen, str]) -> Screen:
        if not isinstance(screen, Screen):
            try:
                screen = Screen(str(screen).upper())
            except ValueError:
                raise ValueError(f"Unknown screen: {screen}")
        logger.debug("Navigate %s -> %s", self._current.value, screen.value)
        self._current = screen
        self.scroll_to_top_requested = True
        for listener in list(self._listeners):
            listener(screen)
        return self.rendered_screen

    def subscribe(self, listener: Callable[[Screen], None]) -> Callable[[], None]:
        """Register a listener; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def consume_scroll_request(self) -> bool:
        requested = self.scroll_to_top_requested
        self.scroll_to_top_requested = False
        return requested


def uses_storefront_layout(screen: Screen) -> bool:
    """Admin screens render full-page without the storefront header and footer."""
    return screen not in ADMIN_SCREENS
