from datetime import date, datetime, timedelta

import flet as ft

from core.business_hours import DEFAULT_SCHEDULE, format_hour
from core.errors import AppError
from core.validators import MAX_PARTY_SIZE
from ui.admin_utils import status_chip
from ui.constants import BORDER, DARK, PRIMARY, TEXT


def time_slots(schedule=DEFAULT_SCHEDULE):
    """Half-hour booking slots; the last one starts an hour before close."""
    slots = []
    for hour in range(schedule.open_hour, schedule.close_hour - 1):
        slots.append(f"{hour:02d}:00")
        slots.append(f"{hour:02d}:30")
    slots.append(f"{schedule.close_hour - 1:02d}:00")
    return slots


def _slot_label(slot: str) -> str:
    hour, minute = slot.split(":")
    return format_hour(int(hour)).replace(":00", f":{minute}")


def reservation_view(page: ft.Page, state):
    name = ft.TextField(label="Full name", value=(state.customer or {}).get("name", ""))
    phone = ft.TextField(label="Phone", keyboard_type=ft.KeyboardType.PHONE)
    email = ft.TextField(label="Email (optional)", value=(state.customer or {}).get("email", ""))
    date_field = ft.TextField(label="Date (YYYY-MM-DD)", value=(date.today() + timedelta(days=1)).isoformat(),
                              expand=True)
    time_dropdown = ft.Dropdown(
        label="Time",
        options=[ft.dropdown.Option(key=slot, text=_slot_label(slot)) for slot in time_slots()],
        value="19:00" if "19:00" in time_slots() else None,
    )
    guests = ft.Dropdown(
        label="Guests",
        options=[ft.dropdown.Option(str(n)) for n in range(1, MAX_PARTY_SIZE + 1)],
        value="2",
    )
    requests = ft.TextField(label="Special requests", multiline=True, max_lines=3)

    def picked(e):
        if date_picker.value:
            date_field.value = date_picker.value.strftime("%Y-%m-%d")
            page.update()

    date_picker = ft.DatePicker(
        first_date=datetime.now(),
        last_date=datetime.now() + timedelta(days=90),
        on_change=picked,
    )

    def open_picker(e):
        if date_picker not in page.overlay:
            page.overlay.append(date_picker)
        date_picker.open = True
        page.update()

    submit_button = ft.ElevatedButton("Reserve Table", style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                                      width=300, height=45)

    def submit(e):
        data = {
            "customer_name": (name.value or "").strip(),
            "phone": (phone.value or "").strip(),
            "email": (email.value or "").strip() or None,
            "date": (date_field.value or "").strip(),
            "time": time_dropdown.value,
            "guests": guests.value,
            "special_requests": (requests.value or "").strip() or None,
        }
        try:
            datetime.strptime(data["date"], "%Y-%m-%d")
        except ValueError:
            state.toast("Date must be in YYYY-MM-DD format", "error")
            return
        submit_button.disabled = True
        page.update()
        try:
            state.submit_reservation(data)
        except AppError as ex:
            state.toast(str(ex), "error")
            submit_button.disabled = False
            page.update()

    submit_button.on_click = submit

    # ----- existing booking lookup -----
    lookup_phone = ft.TextField(label="Phone used for the booking", expand=True)
    lookup_results = ft.Column(spacing=6)

    def lookup(e):
        lookup_results.controls.clear()
        try:
            bookings = state.repos.reservations.find_by_phone(lookup_phone.value)
        except AppError as ex:
            state.toast(str(ex), "error")
            return
        if not bookings:
            lookup_results.controls.append(ft.Text("No reservations found for that number.", color=TEXT, italic=True))
        for booking in bookings:
            lookup_results.controls.append(
                ft.Container(
                    content=ft.Row([
                        ft.Column([
                            ft.Text(booking.reference, weight="bold", color=DARK),
                            ft.Text(f"{booking.date} at {booking.time} · {booking.guests} guests", size=12, color=TEXT),
                        ], spacing=2, expand=True),
                        status_chip(booking.status),
                    ]),
                    padding=10,
                    bgcolor="white",
                    border_radius=8,
                    border=ft.border.all(1, BORDER),
                )
            )
        page.update()

    return ft.Column([
        ft.Text("Reserve a Table", size=26, weight="bold", color=DARK),
        ft.Text("We'll confirm your booking by phone or email.", color=TEXT),
        ft.Container(
            content=ft.Column([
                name,
                phone,
                email,
                ft.Row([date_field, ft.IconButton(icon=ft.Icons.CALENDAR_MONTH, on_click=open_picker)]),
                ft.Row([time_dropdown, guests], wrap=True),
                requests,
                submit_button,
            ], spacing=10),
            padding=20,
            bgcolor="white",
            border_radius=12,
        ),
        ft.Container(height=10),
        ft.Text("Find an existing booking", size=20, weight="bold", color=DARK),
        ft.Row([lookup_phone, ft.ElevatedButton("Look up", on_click=lookup)]),
        lookup_results,
    ], spacing=10)
