"""
Reservations Management Tab for Admin Panel
"""
import flet as ft

from core.errors import AppError
from core.logger import log_action
from core.reservation_service import ALLOWED_TRANSITIONS
from models.reservation import RESERVATION_STATUSES
from ui.admin_utils import status_chip
from ui.constants import DESKTOP_COLUMNS, GRID_RUN_SPACING, GRID_SPACING

ACTION_LABELS = {
    "confirmed": ("Confirm", "blue700"),
    "completed": ("Done", "green500"),
    "cancelled": ("Cancel", "red400"),
}


def build_reservations_tab(page: ft.Page, state, is_desktop: bool, on_change=None):
    """
    Build the Reservations management tab

    on_change is called after any status update so the console can refresh
    its pending-count badge.
    """
    repo = state.repos.reservations
    admin_email = state.auth.current_email
    status_filter = {"value": "all"}

    # ===================== CARD BUILDER =====================

    def build_reservation_card(reservation):
        buttons = [
            ft.ElevatedButton(
                label,
                on_click=lambda e, r=reservation, s=status: update_reservation_status(r, s),
                style=ft.ButtonStyle(padding=8, color=color, bgcolor="grey200"),
                height=35,
            )
            for status, (label, color) in ACTION_LABELS.items()
            if status in ALLOWED_TRANSITIONS.get(reservation.status, ())
        ]
        contact = reservation.phone + (f" · {reservation.email}" if reservation.email else "")
        details = [
            ft.Row([
                ft.Text(reservation.customer_name, weight="bold", size=14, color="black"),
                status_chip(reservation.status),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            ft.Text(f"{reservation.date} at {reservation.time} · {reservation.guests} guests", size=12, color="grey700"),
            ft.Text(contact, size=12, color="grey700"),
        ]
        if reservation.special_requests:
            details.append(ft.Text(f"Note: {reservation.special_requests}", size=11, italic=True, color="grey700",
                                   max_lines=2, overflow=ft.TextOverflow.ELLIPSIS))
        details.append(ft.Row([
            ft.Text(reservation.reference, size=11, color="grey600"),
            ft.Row(buttons, spacing=5),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN))

        return ft.Card(
            content=ft.Container(
                content=ft.Column(details, spacing=3),
                padding=10,
                bgcolor="white",
                border_radius=12,
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    reservations_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=500,
        child_aspect_ratio=2.6,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True,
    )
    reservations_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    container = reservations_grid if is_desktop else reservations_list

    def load_reservations():
        container.controls.clear()
        try:
            reservations = repo.get_all()
        except AppError as ex:
            state.toast(str(ex), "error")
            reservations = []
        if status_filter["value"] != "all":
            reservations = [r for r in reservations if r.status == status_filter["value"]]
        container.controls.extend(build_reservation_card(r) for r in reservations)
        page.update()

    # ===================== UPDATE STATUS =====================

    def update_reservation_status(reservation, status):
        try:
            repo.update_status(reservation.id, status)
        except AppError as ex:
            state.toast(str(ex), "error")
            return
        log_action(admin_email, f"Updated reservation {reservation.reference} to {status}")
        load_reservations()
        state.toast(f"{reservation.reference} → {status}")
        if on_change:
            on_change()

    def on_filter(e):
        status_filter["value"] = e.control.value
        load_reservations()

    load_reservations()

    return ft.Tab(
        text="Reservations",
        icon=ft.Icons.EVENT_SEAT,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Manage Reservations", size=20, weight="bold", color="black"),
                    ft.Dropdown(
                        value="all",
                        width=160,
                        options=[ft.dropdown.Option("all", "All")] + [
                            ft.dropdown.Option(s, s.capitalize()) for s in RESERVATION_STATUSES
                        ],
                        on_change=on_filter,
                    ),
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                padding=10,
            ),
            ft.Container(content=container, expand=True, padding=10),
        ], expand=True, spacing=0),
    )
