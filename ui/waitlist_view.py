import flet as ft

from core.errors import AppError
from core.validators import MAX_PARTY_SIZE
from ui.constants import DARK, PRIMARY, TEXT


def waitlist_view(page: ft.Page, state):
    name = ft.TextField(label="Name", value=(state.customer or {}).get("name", ""))
    phone = ft.TextField(label="Phone", keyboard_type=ft.KeyboardType.PHONE)
    party = ft.Dropdown(
        label="Party size",
        options=[ft.dropdown.Option(str(n)) for n in range(1, MAX_PARTY_SIZE + 1)],
        value="2",
    )
    join_button = ft.ElevatedButton("Join Waitlist", style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                                    width=300, height=45)

    def join(e):
        join_button.disabled = True
        page.update()
        try:
            state.join_waitlist({"name": name.value, "phone": phone.value, "party_size": party.value})
        except AppError as ex:
            state.toast(str(ex), "error")
            join_button.disabled = False
            page.update()

    join_button.on_click = join

    check_phone = ft.TextField(label="Your phone number", expand=True)
    position_text = ft.Text("", size=16, color=DARK)

    def check(e):
        position = state.waitlist_position(check_phone.value)
        if position is None:
            position_text.value = "You're not on the waitlist."
        else:
            position_text.value = f"You're number {position} in line."
        page.update()

    return ft.Column([
        ft.Text("Join the Waitlist", size=26, weight="bold", color=DARK),
        ft.Text(f"{len(state.waitlist)} parties currently waiting.", color=TEXT),
        ft.Container(
            content=ft.Column([name, phone, party, join_button], spacing=10),
            padding=20,
            bgcolor="white",
            border_radius=12,
        ),
        ft.Text("Check your place", size=20, weight="bold", color=DARK),
        ft.Row([check_phone, ft.ElevatedButton("Check", on_click=check)]),
        position_text,
    ], spacing=10)
