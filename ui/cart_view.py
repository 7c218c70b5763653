import flet as ft

from core.navigator import Screen
from ui.admin_utils import money
from ui.constants import BORDER, DARK, PRIMARY, TEXT


def cart_view(page: ft.Page, state, on_cart_change=None):
    cart = state.cart
    cart_column = ft.Column(spacing=10)

    def changed():
        if on_cart_change:
            on_cart_change()

    def update_quantity(index, delta):
        cart.update_quantity(index, delta)
        changed()

    def remove_item(index):
        cart.remove_from_cart(index)
        changed()

    if cart.is_empty:
        return ft.Container(
            content=ft.Column([
                ft.Icon(ft.Icons.SHOPPING_CART, size=80, color="grey"),
                ft.Text("Hungry?", size=28, weight="bold", color=DARK),
                ft.Text("You haven't added anything to your cart!", size=14, color=TEXT),
                ft.ElevatedButton(
                    "Browse Menu",
                    on_click=lambda e: state.navigate(Screen.MENU),
                    style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                ),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10),
            padding=40,
            alignment=ft.alignment.center,
        )

    for index, line in enumerate(cart):
        # --- BUTTONS LOGIC ---
        first_button = ft.IconButton(
            icon=ft.Icons.DELETE if line.quantity == 1 else ft.Icons.REMOVE,
            icon_color="red" if line.quantity == 1 else None,
            icon_size=16,
            tooltip="Remove" if line.quantity == 1 else "Decrease",
            on_click=lambda e, i=index: update_quantity(i, -1),
        )
        button_row = ft.Row([
            first_button,
            ft.Text(str(line.quantity), size=14, weight="bold"),
            ft.IconButton(icon=ft.Icons.ADD, icon_size=16, tooltip="Increase",
                          on_click=lambda e, i=index: update_quantity(i, 1)),
            ft.IconButton(icon=ft.Icons.CLOSE, icon_size=16, tooltip="Remove line",
                          on_click=lambda e, i=index: remove_item(i)),
        ], spacing=2)

        details = [
            ft.Text(line.name, weight="bold", size=14, color=DARK),
            ft.Text(f"{money(line.price)} each", size=11, color=TEXT),
        ]
        if line.instructions:
            details.append(ft.Text(f"Note: {line.instructions}", size=11, italic=True, color=TEXT))
        details.append(ft.Text(f"Subtotal: {money(line.line_total)}", size=12, weight="bold", color=PRIMARY))

        cart_column.controls.append(
            ft.Card(
                content=ft.Container(
                    padding=10,
                    content=ft.Row([
                        ft.Image(src=line.image_url, width=60, height=60, fit=ft.ImageFit.COVER, border_radius=8)
                        if line.image_url else ft.Container(width=60, height=60, bgcolor=BORDER, border_radius=8),
                        ft.Column(details, spacing=2, expand=True),
                        button_row,
                    ], spacing=8),
                )
            )
        )

    cart_column.controls.append(
        ft.Container(
            content=ft.Row([
                ft.Icon(ft.Icons.ADD, color=DARK, size=20),
                ft.Text("Add more items", size=14, weight="bold", color=DARK),
            ], spacing=6),
            on_click=lambda e: state.navigate(Screen.MENU),
            ink=True,
        )
    )

    def total_row(label, amount, bold=False):
        return ft.Row([
            ft.Text(label, size=16 if bold else 14, weight="bold" if bold else None, color=DARK),
            ft.Text(money(amount), size=18 if bold else 14, weight="bold" if bold else None, color=DARK),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    summary = ft.Container(
        content=ft.Column([
            total_row("Subtotal", cart.subtotal),
            total_row("Tax (10%)", cart.tax),
            ft.Divider(height=1, color=BORDER),
            total_row("Total", cart.total, bold=True),
            ft.ElevatedButton(
                "Proceed to Checkout",
                on_click=lambda e: state.navigate(Screen.PAYMENT),
                style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                width=350,
                height=45,
            ),
        ], spacing=10, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
        bgcolor="white",
        padding=16,
        border_radius=12,
        shadow=ft.BoxShadow(blur_radius=10, color="grey300"),
    )

    return ft.Column([
        ft.Text("Your Cart", size=24, weight="bold", color=DARK),
        cart_column,
        summary,
    ], spacing=10)
