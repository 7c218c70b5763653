import flet as ft

from core.navigator import Screen
from ui.constants import DARK, PRIMARY, TEXT


def _confirmation(state, title: str, lines, code_label: str):
    return ft.Container(
        content=ft.Column([
            ft.Icon(ft.Icons.CHECK_CIRCLE, size=80, color="green"),
            ft.Text(title, size=26, weight="bold", color=DARK),
            *[ft.Text(line, size=14, color=TEXT, text_align=ft.TextAlign.CENTER) for line in lines],
            ft.Container(
                content=ft.Column([
                    ft.Text(code_label, size=12, color=TEXT),
                    ft.Text(state.last_confirmation_code or "-", size=24, weight="bold", color=PRIMARY),
                ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=2),
                padding=15,
                bgcolor="white",
                border_radius=12,
            ),
            ft.ElevatedButton("Back to Home", on_click=lambda e: state.navigate(Screen.HOME),
                              style=ft.ButtonStyle(bgcolor=PRIMARY, color="white")),
        ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=12),
        padding=40,
        alignment=ft.alignment.center,
    )


def reservation_confirmation_view(page: ft.Page, state):
    return _confirmation(
        state,
        "Reservation Received!",
        ["Your table request has been sent.", "We'll contact you shortly to confirm."],
        "Reservation code",
    )


def waitlist_confirmation_view(page: ft.Page, state):
    position = len(state.waitlist)
    return _confirmation(
        state,
        "You're on the list!",
        [f"You are number {position} in line.", "We'll call you when your table is ready."],
        "Waitlist code",
    )
