"""
Admin Panel - Main Orchestrator
Summary cards, notification badge and the management tabs
"""
import logging

import flet as ft

from core.dashboard_service import get_stats
from core.errors import AppError
from core.navigator import Screen
from ui.admin_content import build_content_tab
from ui.admin_gallery import build_gallery_tab
from ui.admin_menu import build_menu_tab
from ui.admin_messages import build_messages_tab
from ui.admin_reservations import build_reservations_tab
from ui.admin_users import build_admins_tab
from ui.constants import BREAKPOINT, DARK, PRIMARY

logger = logging.getLogger(__name__)


def _stat_card(icon, label, value_text):
    return ft.Container(
        content=ft.Row([
            ft.Icon(icon, color=PRIMARY, size=30),
            ft.Column([value_text, ft.Text(label, size=12, color="grey700")], spacing=0),
        ], spacing=12),
        padding=15,
        bgcolor="white",
        border_radius=12,
        width=220,
    )


def admin_view(page: ft.Page, state, notifier=None):
    """
    Main admin panel view - orchestrates all tabs. The navigator only routes
    here when the admin session is active.
    """
    page.title = "Admin Panel"
    is_desktop = (page.window.width or 0) > BREAKPOINT
    state.auth.touch()

    # ===================== SUMMARY =====================

    menu_count = ft.Text("-", size=22, weight="bold", color=DARK)
    gallery_count = ft.Text("-", size=22, weight="bold", color=DARK)
    unread_count = ft.Text("-", size=22, weight="bold", color=DARK)
    bell_count = ft.Text("", color="white", size=10, weight="bold")
    bell_badge = ft.Container(
        content=bell_count,
        bgcolor="#E9190A",
        border_radius=10,
        padding=ft.padding.symmetric(horizontal=6, vertical=3),
        right=4,
        top=4,
        visible=False,
    )

    def refresh_stats():
        try:
            stats = get_stats(state.repos.menu, state.repos.gallery, state.repos.contact)
        except AppError as ex:
            logger.error("Dashboard stats failed: %s", ex)
            state.toast("Could not load dashboard stats", "error")
            return
        menu_count.value = str(stats.menu_items_count)
        gallery_count.value = str(stats.gallery_images_count)
        unread_count.value = str(stats.unread_messages)

    def show_notifications(counts):
        bell_count.value = str(counts.total)
        bell_badge.visible = counts.total > 0
        bell_button.tooltip = (f"{counts.unread_messages} unread message(s), "
                               f"{counts.pending_reservations} pending reservation(s)")
        if bell_badge.page:
            page.update()

    def on_activity():
        state.auth.touch()
        refresh_stats()
        if notifier:
            notifier.refresh()
        page.update()

    bell_button = ft.IconButton(icon=ft.Icons.NOTIFICATIONS, icon_color="black", tooltip="Notifications",
                                on_click=lambda e: on_activity())

    if notifier:
        notifier.on_change = show_notifications
        show_notifications(notifier.refresh())
    refresh_stats()

    # ===================== BUILD TABS =====================

    tabs = ft.Tabs(
        selected_index=0,
        animation_duration=300,
        tabs=[
            build_menu_tab(page, state, is_desktop),
            build_gallery_tab(page, state, is_desktop),
            build_reservations_tab(page, state, is_desktop, on_change=on_activity),
            build_messages_tab(page, state, is_desktop, on_change=on_activity),
            build_content_tab(page, state, is_desktop),
            build_admins_tab(page, state, is_desktop),
        ],
        expand=True,
        label_color=PRIMARY,
        unselected_label_color="black",
        indicator_color=PRIMARY,
        indicator_border_radius=0,
        divider_color="grey300",
        scrollable=True,
    )

    # ===================== HEADER & LOGOUT =====================

    def logout_user(e):
        if notifier:
            notifier.stop()
        state.admin_sign_out()
        state.toast("Logged out successfully.")

    header = ft.Container(
        content=ft.Row([
            ft.Column([
                ft.Text("Admin Panel", size=20, weight="bold", color="black"),
                ft.Text(state.auth.current_email or "", size=12, color="grey700"),
            ], spacing=0),
            ft.Row([
                ft.Stack([bell_button, bell_badge], width=48, height=48),
                ft.IconButton(icon=ft.Icons.STOREFRONT, icon_color="black", tooltip="View website",
                              on_click=lambda e: state.navigate(Screen.HOME)),
                ft.IconButton(icon=ft.Icons.LOGOUT, icon_color="black", tooltip="Logout", on_click=logout_user),
            ], spacing=5),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        padding=ft.padding.only(top=15, left=15, right=15, bottom=8),
        bgcolor="white",
    )

    summary = ft.Container(
        content=ft.Row([
            _stat_card(ft.Icons.RESTAURANT_MENU, "Menu items", menu_count),
            _stat_card(ft.Icons.PHOTO_LIBRARY, "Gallery images", gallery_count),
            _stat_card(ft.Icons.MARK_EMAIL_UNREAD, "Unread messages", unread_count),
        ], wrap=True, spacing=10, run_spacing=10),
        padding=10,
    )

    return ft.Column([
        header,
        ft.Divider(height=1, color="grey300", thickness=1),
        summary,
        ft.Container(
            content=tabs,
            expand=True,
            gradient=ft.LinearGradient(
                begin=ft.alignment.top_center,
                end=ft.alignment.bottom_center,
                colors=["#FDFBF7", "#EFEBE9", "#D7CCC8"],
            ),
        ),
    ], expand=True, spacing=0)
