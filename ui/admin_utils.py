"""
Shared helpers for storefront and admin views
"""
import flet as ft

from core.config import CURRENCY
from ui.constants import STATUS_COLORS


def close_dialog(page, dialog):
    """Close a dialog and update the page"""
    dialog.open = False
    page.update()


def open_dialog(page, dialog):
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_snack(page, message: str, kind: str = "success"):
    colors = {"success": ft.Colors.GREEN, "error": ft.Colors.RED, "info": ft.Colors.BLUE_GREY}
    snack = ft.SnackBar(ft.Text(message, color="white"), bgcolor=colors.get(kind, ft.Colors.GREEN))
    page.overlay.append(snack)
    snack.open = True
    page.update()


def money(amount) -> str:
    return f"{CURRENCY} {amount:.2f}"


def status_chip(status: str):
    return ft.Container(
        content=ft.Text(status.capitalize(), color="white", size=12),
        bgcolor=STATUS_COLORS.get(status, "grey"),
        padding=ft.padding.symmetric(horizontal=8, vertical=4),
        border_radius=5,
    )


def confirm_dialog(page, title: str, text: str, on_confirm, confirm_label: str = "Delete"):
    """Generic yes/no dialog; on_confirm runs after the dialog closes."""
    def confirmed(e):
        close_dialog(page, dialog)
        on_confirm()

    dialog = ft.AlertDialog(
        title=ft.Text(title),
        content=ft.Text(text),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
            ft.ElevatedButton(confirm_label, on_click=confirmed, style=ft.ButtonStyle(bgcolor="red", color="white")),
        ],
    )
    open_dialog(page, dialog)
    return dialog


def section_header(title: str, subtitle: str = None, on_back=None):
    row = []
    if on_back:
        row.append(ft.IconButton(icon=ft.Icons.ARROW_BACK, icon_color="black", on_click=on_back))
    row.append(ft.Text(title, size=24, weight="bold", color="#3E2723"))
    controls = [ft.Row(row, vertical_alignment=ft.CrossAxisAlignment.CENTER)]
    if subtitle:
        controls.append(ft.Text(subtitle, size=13, color="#5D4037"))
    return ft.Container(content=ft.Column(controls, spacing=4), padding=ft.padding.only(top=15, left=10, right=15, bottom=8))
