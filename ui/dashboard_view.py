import flet as ft

from core.errors import AppError
from core.navigator import Screen
from ui.admin_utils import money, status_chip
from ui.constants import BORDER, DARK, PRIMARY, TEXT


def dashboard_view(page: ft.Page, state):
    """Customer account page: profile, current cart and bookings made with their email."""
    customer = state.customer
    if not customer:
        return ft.Column([
            ft.Text("Please sign in to see your account.", color=DARK),
            ft.ElevatedButton("Sign In", on_click=lambda e: state.navigate(Screen.SIGN_IN)),
        ])

    bookings_column = ft.Column(spacing=6)
    try:
        bookings = [r for r in state.repos.reservations.get_all() if (r.email or "").lower() == customer["email"].lower()]
    except AppError as ex:
        bookings = []
        state.toast(str(ex), "error")

    for booking in bookings:
        bookings_column.controls.append(
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
    if not bookings:
        bookings_column.controls.append(ft.Text("No reservations yet.", italic=True, color=TEXT))

    return ft.Column([
        ft.Row([
            ft.CircleAvatar(content=ft.Text(customer["name"][:1].upper()), bgcolor=PRIMARY, color="white", radius=28),
            ft.Column([
                ft.Text(customer["name"], size=22, weight="bold", color=DARK),
                ft.Text(customer["email"], color=TEXT),
            ], spacing=2),
        ], spacing=15),
        ft.Container(
            content=ft.Row([
                ft.Text(f"{state.cart.item_count} item(s) in your cart", color=DARK),
                ft.Text(money(state.cart.total), weight="bold", color=PRIMARY),
                ft.TextButton("View cart", on_click=lambda e: state.navigate(Screen.CART)),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            padding=15,
            bgcolor="white",
            border_radius=12,
        ),
        ft.Text("Your Reservations", size=20, weight="bold", color=DARK),
        bookings_column,
        ft.Row([
            ft.ElevatedButton("Book a Table", on_click=lambda e: state.navigate(Screen.RESERVATION)),
            ft.OutlinedButton("Sign Out", icon=ft.Icons.LOGOUT, on_click=lambda e: state.customer_sign_out()),
        ]),
    ], spacing=12)
