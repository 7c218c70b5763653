"""
Storefront shell: header with open/closed badge and cart badge, scrollable
content area, footer with contact details and hours.
"""
from datetime import datetime

import flet as ft

from core.business_hours import DEFAULT_SCHEDULE, is_open, status_message, summary_line
from core.config import APP_NAME, BUSINESS_ADDRESS, BUSINESS_EMAIL, BUSINESS_PHONE
from core.navigator import Screen
from ui.constants import BORDER, CREAM, DARK, PRIMARY

NAV_LINKS = [
    ("Home", Screen.HOME),
    ("Menu", Screen.MENU),
    ("Reserve", Screen.RESERVATION),
    ("Waitlist", Screen.WAITLIST),
    ("About", Screen.ABOUT),
    ("Contact", Screen.CONTACT),
]


class HoursBadge(ft.Container):
    """Green/red pill re-evaluated by the once-a-minute task."""

    def __init__(self, schedule=DEFAULT_SCHEDULE):
        self.schedule = schedule
        self.label = ft.Text("", size=11, color="white", weight="bold")
        super().__init__(content=self.label, padding=ft.padding.symmetric(horizontal=10, vertical=4), border_radius=12)
        self.refresh(update=False)

    def refresh(self, now: datetime = None, update: bool = True):
        now = now or datetime.now()
        open_now = is_open(now, self.schedule)
        self.label.value = "Open Now" if open_now else "Closed"
        self.bgcolor = "green" if open_now else "red"
        self.tooltip = status_message(now, self.schedule)
        if update and self.page:
            self.update()


def build_layout(page: ft.Page, state, content: ft.Control, hours_badge: HoursBadge):
    def go(screen):
        return lambda e: state.navigate(screen)

    cart_count = state.cart.item_count
    cart_button = ft.Stack([
        ft.IconButton(icon=ft.Icons.SHOPPING_CART, icon_color=DARK, tooltip="Cart", on_click=go(Screen.CART)),
        ft.Container(
            content=ft.Text(str(cart_count), color="white", size=10, weight="bold"),
            bgcolor="#E9190A",
            border_radius=10,
            padding=ft.padding.symmetric(horizontal=6, vertical=3),
            right=2,
            top=2,
            visible=cart_count > 0,
        ),
    ], width=48, height=48)

    account_label = "Account" if state.customer else "Sign In"
    account_target = Screen.DASHBOARD if state.customer else Screen.SIGN_IN

    header = ft.Container(
        content=ft.Row([
            ft.Row([
                ft.Container(
                    content=ft.Text("E", color="white", weight="bold", size=20),
                    bgcolor=PRIMARY, width=40, height=40, border_radius=8, alignment=ft.alignment.center,
                    on_click=go(Screen.HOME),
                ),
                ft.Text(APP_NAME.upper(), weight="bold", size=16, color=DARK),
                hours_badge,
            ], spacing=10),
            ft.Row(
                [ft.TextButton(label, on_click=go(target)) for label, target in NAV_LINKS]
                + [ft.TextButton(account_label, on_click=go(account_target)), cart_button],
                spacing=0,
                wrap=True,
            ),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True),
        bgcolor="white",
        padding=ft.padding.symmetric(horizontal=15, vertical=8),
        border=ft.border.only(bottom=ft.BorderSide(1, BORDER)),
    )

    footer = ft.Container(
        content=ft.Column([
            ft.Text(APP_NAME, size=18, weight="bold", color="white"),
            ft.Text(BUSINESS_ADDRESS, size=12, color=BORDER),
            ft.Text(f"{BUSINESS_PHONE} | {BUSINESS_EMAIL}", size=12, color=BORDER),
            ft.Text(f"Hours: {summary_line(hours_badge.schedule)}", size=12, color=BORDER),
            ft.Row([
                ft.TextButton("Help", on_click=go(Screen.HELP)),
                ft.TextButton("Admin", on_click=go(Screen.ADMIN_LOGIN)),
            ]),
        ], spacing=4),
        bgcolor=DARK,
        padding=20,
    )

    return ft.Column([
        header,
        ft.Column([
            ft.Container(content=content, padding=15, bgcolor=CREAM),
            footer,
        ], expand=True, scroll=ft.ScrollMode.AUTO, spacing=0),
    ], expand=True, spacing=0)
