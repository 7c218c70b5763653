import flet as ft

from core.navigator import Screen
from ui.admin_utils import money
from ui.constants import BORDER, DARK, PRIMARY, TEXT

PAYMENT_METHODS = [
    ("cash", "Cash on pickup"),
    ("momo", "Mobile Money"),
    ("card", "Card"),
]


def payment_view(page: ft.Page, state):
    cart = state.cart
    if cart.is_empty:
        return ft.Column([
            ft.Text("Nothing to pay for yet.", size=18, color=DARK),
            ft.TextButton("Back to menu", on_click=lambda e: state.navigate(Screen.MENU)),
        ])

    method = ft.RadioGroup(
        value="cash",
        content=ft.Column([
            ft.Radio(value=value, label=label) for value, label in PAYMENT_METHODS
        ]),
    )
    name_field = ft.TextField(label="Name for the order", value=(state.customer or {}).get("name", ""))
    phone_field = ft.TextField(label="Phone", keyboard_type=ft.KeyboardType.PHONE)

    # --- Order summary container ---
    order_summary_rows = [
        ft.Row([
            ft.Column([
                ft.Text(f"{row['quantity']}x {row['name']}", size=15, color=DARK),
                ft.Text(row["note"], size=11, color=TEXT) if row.get("note") else ft.Container(),
            ], spacing=0, expand=True),
            ft.Text(money(row["subtotal"]), size=15, color=DARK, weight="bold"),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)
        for row in cart.checkout_summary()
    ]

    pay_button = ft.ElevatedButton(
        f"Pay {money(cart.total)}",
        style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
        width=350,
        height=45,
    )

    def pay(e):
        if not (name_field.value or "").strip():
            name_field.error_text = "Name is required"
            page.update()
            return
        if not state.begin_submit("payment"):
            return
        pay_button.disabled = True
        page.update()
        try:
            state.complete_checkout()
        finally:
            state.end_submit("payment")

    pay_button.on_click = pay

    def card(title, icon, body):
        return ft.Container(
            content=ft.Column([
                ft.Row([ft.Icon(icon, size=20, color=TEXT), ft.Text(title, size=16, weight="bold", color=DARK)], spacing=8),
                *body,
            ], spacing=8),
            bgcolor="white",
            border_radius=12,
            padding=16,
            border=ft.border.all(1, BORDER),
        )

    return ft.Column([
        ft.Row([
            ft.IconButton(icon=ft.Icons.ARROW_BACK, icon_color=DARK, on_click=lambda e: state.navigate(Screen.CART)),
            ft.Text("Checkout", size=22, weight="bold", color=DARK),
        ]),
        card("Your details", ft.Icons.PERSON_OUTLINE, [name_field, phone_field]),
        card("Payment method", ft.Icons.PAYMENTS_OUTLINED, [method]),
        card("Order summary", ft.Icons.RECEIPT_LONG_OUTLINED, order_summary_rows + [
            ft.Divider(height=1, color=BORDER),
            ft.Row([ft.Text("Subtotal"), ft.Text(money(cart.subtotal))], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            ft.Row([ft.Text("Tax"), ft.Text(money(cart.tax))], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            ft.Row([
                ft.Text("Total", weight="bold"),
                ft.Text(money(cart.total), weight="bold", size=18),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        ]),
        ft.Container(content=pay_button, alignment=ft.alignment.center, padding=10),
    ], spacing=12)
