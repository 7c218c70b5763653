import logging

from dotenv import load_dotenv
import flet as ft

# Load environment variables
load_dotenv()

# Import all models FIRST so every table is registered on Base
from models.menu_item import MenuItem
from models.gallery_image import GalleryImage
from models.reservation import Reservation
from models.contact_message import ContactMessage
from models.about_content import AboutContent
from models.setting import Setting
from models.admin import Admin
from models.audit_log import AuditLog

from core.app_state import AppState
from core.config import APP_NAME, HOURS_POLL_SECONDS, SESSION_CHECK_INTERVAL
from core.db import Base, engine
from core.logger import setup_logging
from core.navigator import Screen, uses_storefront_layout
from core.notification_service import AdminNotifier
from core.scheduler import PeriodicTask

# Import views
from ui.admin_utils import show_snack
from ui.admin_view import admin_view
from ui.auth_views import admin_login_view, register_view, sign_in_view
from ui.cart_view import cart_view
from ui.confirmation_view import reservation_confirmation_view, waitlist_confirmation_view
from ui.dashboard_view import dashboard_view
from ui.home_view import home_view
from ui.info_views import about_view, contact_view, help_view
from ui.layout import HoursBadge, build_layout
from ui.menu_view import menu_view
from ui.payment_view import payment_view
from ui.reservation_view import reservation_view
from ui.waitlist_view import waitlist_view

logger = logging.getLogger("main")

VIEWS = {
    Screen.HOME: home_view,
    Screen.MENU: menu_view,
    Screen.CART: cart_view,
    Screen.PAYMENT: payment_view,
    Screen.RESERVATION: reservation_view,
    Screen.WAITLIST: waitlist_view,
    Screen.SIGN_IN: sign_in_view,
    Screen.REGISTER: register_view,
    Screen.DASHBOARD: dashboard_view,
    Screen.HELP: help_view,
    Screen.CONTACT: contact_view,
    Screen.ABOUT: about_view,
    Screen.ADMIN_LOGIN: admin_login_view,
    Screen.CONFIRMATION_RESERVATION: reservation_confirmation_view,
    Screen.CONFIRMATION_WAITLIST: waitlist_confirmation_view,
}

# Views that re-render in place when the cart changes
CART_AWARE = {Screen.HOME, Screen.MENU, Screen.CART}


def main(page: ft.Page):
    page.padding = 0
    page.spacing = 0
    page.title = APP_NAME
    page.bgcolor = "#FDFBF7"
    page.vertical_alignment = ft.MainAxisAlignment.START

    state = AppState()
    state.set_toast_sink(lambda message, kind: show_snack(page, message, kind))
    hours_badge = HoursBadge()
    notifier = AdminNotifier(state.repos.contact, state.repos.reservations)

    def render(_=None):
        screen = state.navigator.rendered_screen
        page.clean()

        if screen == Screen.ADMIN_DASHBOARD:
            if not notifier.task.is_running:
                notifier.start()
            page.add(admin_view(page, state, notifier))
            page.update()
            return

        if notifier.task.is_running:
            notifier.stop()

        view = VIEWS[screen]
        if screen in CART_AWARE:
            content = view(page, state, on_cart_change=render)
        else:
            content = view(page, state)

        if uses_storefront_layout(screen):
            page.add(build_layout(page, state, content, hours_badge))
        else:
            page.add(content)

        # Rebuilt controls always start scrolled to the top
        state.navigator.consume_scroll_request()
        page.update()

    hours_task = PeriodicTask("business-hours", HOURS_POLL_SECONDS, hours_badge.refresh)
    session_task = PeriodicTask("admin-session", SESSION_CHECK_INTERVAL, state.expire_admin_session)

    def on_disconnect(e):
        for task in (hours_task, session_task, notifier.task):
            task.stop()

    page.on_disconnect = on_disconnect
    state.navigator.subscribe(render)
    hours_task.start()
    session_task.start()
    render()


if __name__ == "__main__":
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Starting %s", APP_NAME)
    ft.app(target=main)
