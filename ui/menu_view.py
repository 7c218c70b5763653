import flet as ft

from core.errors import ValidationError
from core.menu_service import CATEGORIES
from ui.admin_utils import close_dialog, money, open_dialog
from ui.constants import BORDER, DARK, PRIMARY, TEXT


def menu_view(page: ft.Page, state, on_cart_change=None):
    filters = {"category": "All", "search": ""}
    items_column = ft.Column(spacing=8)
    chips_row = ft.Row(wrap=True, spacing=6)

    def added():
        if on_cart_change:
            on_cart_change()

    def show_item_dialog(item):
        quantity = {"value": 1}
        qty_text = ft.Text("1", size=16, weight="bold")
        instructions = ft.TextField(label="Special instructions (optional)", multiline=True, max_lines=3)

        def change(delta):
            quantity["value"] = max(1, quantity["value"] + delta)
            qty_text.value = str(quantity["value"])
            page.update()

        def add(e):
            try:
                state.cart.add_to_cart(item, quantity["value"], instructions.value or None)
            except ValidationError as ex:
                state.toast(str(ex), "error")
                return
            close_dialog(page, dialog)
            added()

        badges = [
            ft.Container(content=ft.Text(b, size=10, color="white"), bgcolor=PRIMARY,
                         padding=ft.padding.symmetric(horizontal=6, vertical=2), border_radius=8)
            for b in item.badge_list
        ]
        dialog = ft.AlertDialog(
            title=ft.Text(item.name),
            content=ft.Column([
                ft.Image(src=item.image_url, height=180, fit=ft.ImageFit.COVER, border_radius=8)
                if item.image_url else ft.Container(),
                ft.Text(item.description or "", size=13, color=TEXT),
                ft.Row(badges, wrap=True, spacing=4),
                ft.Text(money(item.price), size=18, weight="bold", color=PRIMARY),
                ft.Row([
                    ft.IconButton(icon=ft.Icons.REMOVE, on_click=lambda e: change(-1)),
                    qty_text,
                    ft.IconButton(icon=ft.Icons.ADD, on_click=lambda e: change(1)),
                ], alignment=ft.MainAxisAlignment.CENTER),
                instructions,
            ], tight=True, spacing=8, width=360, scroll=ft.ScrollMode.AUTO),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Add to Cart", on_click=add, style=ft.ButtonStyle(bgcolor=PRIMARY, color="white")),
            ],
        )
        open_dialog(page, dialog)

    def quick_add(item):
        state.cart.add_to_cart(item)
        added()

    def item_card(item):
        return ft.Card(
            content=ft.Container(
                padding=10,
                content=ft.Row([
                    ft.Image(src=item.image_url, width=80, height=80, fit=ft.ImageFit.COVER, border_radius=8)
                    if item.image_url else ft.Container(width=80, height=80, bgcolor=BORDER, border_radius=8),
                    ft.Column([
                        ft.Text(item.name, weight="bold", size=14, color=DARK),
                        ft.Text(item.description or "", size=11, color=TEXT, max_lines=2,
                                overflow=ft.TextOverflow.ELLIPSIS),
                        ft.Text(money(item.price), color=PRIMARY, size=14, weight="bold"),
                    ], spacing=3, expand=True),
                    ft.IconButton(
                        icon=ft.Icons.ADD_CIRCLE,
                        icon_color=PRIMARY,
                        icon_size=28,
                        tooltip="Add to cart",
                        on_click=lambda e, it=item: quick_add(it),
                    ),
                ], spacing=8),
                bgcolor="white",
                border_radius=12,
                ink=True,
                on_click=lambda e, it=item: show_item_dialog(it),
            )
        )

    def load_items():
        items_column.controls.clear()
        items = state.load(
            lambda: state.repos.menu.get_available(category=filters["category"], search=filters["search"]), [])
        items_column.controls.extend(item_card(item) for item in items)
        if not items:
            items_column.controls.append(
                ft.Container(
                    content=ft.Text("No dishes match your selection.", size=14, color="grey", italic=True),
                    padding=20,
                    alignment=ft.alignment.center,
                )
            )

    def render_chips():
        chips_row.controls = [
            ft.Chip(
                label=ft.Text(name),
                selected=filters["category"] == name,
                selected_color=BORDER,
                on_select=lambda e, n=name: select_category(n),
            )
            for name in ["All"] + CATEGORIES
        ]

    def select_category(name):
        filters["category"] = name
        render_chips()
        load_items()
        page.update()

    def on_search(e):
        filters["search"] = e.control.value or ""
        load_items()
        page.update()

    render_chips()
    load_items()

    return ft.Column([
        ft.Text("Our Menu", size=26, weight="bold", color=DARK),
        ft.TextField(hint_text="Search dishes...", prefix_icon=ft.Icons.SEARCH, on_change=on_search,
                     bgcolor="white", border_radius=10),
        chips_row,
        items_column,
    ], spacing=10)
