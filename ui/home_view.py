import flet as ft

from core.navigator import Screen
from ui.admin_utils import money
from ui.constants import BORDER, DARK, PRIMARY, TEXT


def _hero(state):
    banner = state.load(state.repos.hero_banner.get) or {}
    title = banner.get("title") or "Authentic Ghanaian Cuisine"
    subtitle = banner.get("subtitle") or "Soul-warming dishes, served fresh every day"

    text_block = ft.Column([
        ft.Text(title, size=32, weight="bold", color="white"),
        ft.Text(subtitle, size=15, color="white"),
        ft.Row([
            ft.ElevatedButton("View Menu", on_click=lambda e: state.navigate(Screen.MENU),
                              style=ft.ButtonStyle(bgcolor=PRIMARY, color="white")),
            ft.OutlinedButton("Book a Table", on_click=lambda e: state.navigate(Screen.RESERVATION),
                              style=ft.ButtonStyle(color="white")),
        ], spacing=10),
    ], spacing=12)

    layers = []
    if banner.get("image_url"):
        layers.append(ft.Image(src=banner["image_url"], fit=ft.ImageFit.COVER, expand=True, opacity=0.6))
    layers.append(ft.Container(content=text_block, padding=30, alignment=ft.alignment.center_left))

    return ft.Container(
        content=ft.Stack(layers, expand=True),
        height=320,
        bgcolor=DARK,
        border_radius=12,
        clip_behavior=ft.ClipBehavior.HARD_EDGE,
    )


def _featured_card(item, state, on_cart_change):
    def add(e):
        state.cart.add_to_cart(item)
        if on_cart_change:
            on_cart_change()

    return ft.Container(
        content=ft.Column([
            ft.Image(src=item.image_url, height=140, fit=ft.ImageFit.COVER, border_radius=8)
            if item.image_url else ft.Container(height=140, bgcolor=BORDER, border_radius=8),
            ft.Text(item.name, weight="bold", size=15, color=DARK),
            ft.Text(item.description or "", size=12, color=TEXT, max_lines=2, overflow=ft.TextOverflow.ELLIPSIS),
            ft.Row([
                ft.Text(money(item.price), weight="bold", color=PRIMARY),
                ft.IconButton(icon=ft.Icons.ADD_SHOPPING_CART, icon_color=PRIMARY, tooltip="Add to cart",
                              on_click=add),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        ], spacing=6),
        width=250,
        padding=10,
        bgcolor="white",
        border_radius=12,
        border=ft.border.all(1, BORDER),
    )


def _action_card(icon, title, text, screen, state):
    return ft.Container(
        content=ft.Column([
            ft.Icon(icon, size=36, color=PRIMARY),
            ft.Text(title, weight="bold", size=16, color=DARK),
            ft.Text(text, size=12, color=TEXT, text_align=ft.TextAlign.CENTER),
        ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=6),
        width=250,
        padding=20,
        bgcolor="white",
        border_radius=12,
        border=ft.border.all(1, BORDER),
        ink=True,
        on_click=lambda e: state.navigate(screen),
    )


def home_view(page: ft.Page, state, on_cart_change=None):
    featured = state.load(lambda: state.repos.menu.get_available(featured_only=True), [])

    featured_row = ft.Row(
        [_featured_card(item, state, on_cart_change) for item in featured],
        wrap=True, spacing=12, run_spacing=12,
    ) if featured else ft.Text("Our chef's picks are coming soon.", italic=True, color=TEXT)

    return ft.Column([
        _hero(state),
        ft.Container(height=10),
        ft.Text("Featured Dishes", size=22, weight="bold", color=DARK),
        featured_row,
        ft.Container(height=10),
        ft.Row([
            _action_card(ft.Icons.RESTAURANT_MENU, "Order Online", "Browse the full menu and check out in minutes.",
                         Screen.MENU, state),
            _action_card(ft.Icons.EVENT_SEAT, "Reserve a Table", "Pick a date and time, we'll hold your table.",
                         Screen.RESERVATION, state),
            _action_card(ft.Icons.HOURGLASS_TOP, "Join the Waitlist", "No booking? Get in line from your phone.",
                         Screen.WAITLIST, state),
        ], wrap=True, spacing=12, run_spacing=12),
    ], spacing=10)
