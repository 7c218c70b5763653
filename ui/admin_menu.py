"""
Menu Items Management Tab for Admin Panel
"""
import os

import flet as ft

from core.errors import AppError
from core.logger import log_action
from core.menu_service import BADGES, CATEGORIES
from models.menu_item import MENU_STATUSES
from ui.admin_utils import close_dialog, confirm_dialog, money, open_dialog, status_chip
from ui.constants import DESKTOP_COLUMNS, GRID_RUN_SPACING, GRID_SPACING, PRIMARY

IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "webp"]


def read_picked_file(picked):
    """Returns (filename, bytes) for a FilePicker result file."""
    with open(picked.path, "rb") as fh:
        return os.path.basename(picked.path), fh.read()


def build_menu_tab(page: ft.Page, state, is_desktop: bool):
    """
    Build the Menu Items management tab

    Args:
        page: Flet page object
        state: AppState holding the repositories and the signed-in admin
        is_desktop: True for the 3-column grid, False for a single list

    Returns:
        ft.Tab: menu items tab with add/edit/delete
    """
    repo = state.repos.menu
    admin_email = state.auth.current_email

    # ===================== CARD BUILDER =====================

    def build_menu_card(item):
        return ft.Card(
            content=ft.Container(
                content=ft.Row([
                    ft.Container(
                        content=ft.Image(src=item.image_url, width=80, height=80, fit=ft.ImageFit.COVER, border_radius=8)
                        if item.image_url else ft.Container(
                            width=80, height=80, bgcolor="grey300", border_radius=8,
                            alignment=ft.alignment.center,
                            content=ft.Icon(ft.Icons.RESTAURANT, size=30, color="grey600"),
                        ),
                        border=ft.border.all(1, "grey300"),
                        border_radius=8,
                    ),
                    ft.Column([
                        ft.Row([
                            ft.Text(item.name, weight="bold", size=16, color="black", expand=True),
                            ft.Icon(ft.Icons.STAR, color="amber", size=16, visible=bool(item.featured)),
                            ft.PopupMenuButton(
                                icon=ft.Icons.MORE_VERT,
                                icon_color="black",
                                items=[
                                    ft.PopupMenuItem(text="Edit", icon=ft.Icons.EDIT,
                                                     on_click=lambda e, i=item: show_item_dialog(i)),
                                    ft.PopupMenuItem(text="Delete", icon=ft.Icons.DELETE,
                                                     on_click=lambda e, i=item: delete_menu_item(i)),
                                ],
                                icon_size=20,
                                padding=0,
                                bgcolor="white",
                                menu_position=ft.PopupMenuPosition.OVER,
                            ),
                        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, spacing=5),
                        ft.Text(f"Category: {item.category}", size=12, color="grey700"),
                        ft.Row([ft.Text(money(item.price), color="green", weight="bold"), status_chip(item.status)]),
                    ], spacing=5, expand=True),
                ], spacing=10, vertical_alignment=ft.CrossAxisAlignment.CENTER),
                padding=10,
                bgcolor="white",
                border_radius=12,
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    menu_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=500,
        child_aspect_ratio=3.5,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True,
    )
    menu_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    container = menu_grid if is_desktop else menu_list

    def load_menu_items():
        container.controls.clear()
        try:
            items = repo.get_all()
        except AppError as ex:
            state.toast(str(ex), "error")
            items = []
        container.controls.extend(build_menu_card(item) for item in items)
        page.update()

    # ===================== ADD / EDIT DIALOG =====================

    def show_item_dialog(item=None):
        editing = item is not None
        name_field = ft.TextField(label="Name", value=item.name if editing else "", width=300)
        description_field = ft.TextField(label="Description", value=(item.description or "") if editing else "",
                                         width=300, multiline=True)
        price_field = ft.TextField(label="Price", value=str(item.price) if editing else "", width=300,
                                   keyboard_type=ft.KeyboardType.NUMBER)
        category_dropdown = ft.Dropdown(label="Category", value=item.category if editing else None, width=300,
                                        options=[ft.dropdown.Option(cat) for cat in CATEGORIES])
        status_dropdown = ft.Dropdown(label="Status", value=item.status if editing else "active", width=300,
                                      options=[ft.dropdown.Option(s) for s in MENU_STATUSES])
        featured_switch = ft.Switch(label="Featured on home page", value=bool(item.featured) if editing else False)
        current_badges = set(item.badge_list) if editing else set()
        badge_boxes = [ft.Checkbox(label=b, value=b in current_badges) for b in BADGES]
        message = ft.Text("", color="red")

        image = {"url": item.image_url if editing else None, "path": item.image_path if editing else None}
        image_preview = ft.Container(
            content=ft.Image(src=image["url"], width=300, height=120, fit=ft.ImageFit.COVER, border_radius=8)
            if image["url"] else ft.Text("No image selected", size=12, color="grey"),
            width=300,
            height=120,
            bgcolor="grey200",
            border_radius=8,
            alignment=ft.alignment.center,
            border=ft.border.all(1, "grey300"),
        )

        def on_file_pick(e: ft.FilePickerResultEvent):
            if not e.files:
                return
            try:
                filename, data = read_picked_file(e.files[0])
                image["path"], image["url"] = repo.upload_image(filename, data)
            except (OSError, AppError) as ex:
                message.value = f"Upload failed: {ex}"
                page.update()
                return
            image_preview.content = ft.Image(src=image["url"], width=300, height=120, fit=ft.ImageFit.COVER,
                                             border_radius=8)
            page.update()

        file_picker = ft.FilePicker(on_result=on_file_pick)
        page.overlay.append(file_picker)
        page.update()

        def save(e):
            record = {
                "name": (name_field.value or "").strip(),
                "description": (description_field.value or "").strip(),
                "price": price_field.value,
                "category": category_dropdown.value,
                "status": status_dropdown.value,
                "featured": featured_switch.value,
                "badges": [box.label for box in badge_boxes if box.value],
                "image_url": image["url"],
                "image_path": image["path"],
            }
            try:
                if editing:
                    saved = repo.update(item.id, record)
                    log_action(admin_email, f"Updated menu item: {saved.name}")
                else:
                    saved = repo.create(record)
                    log_action(admin_email, f"Added menu item: {saved.name}")
            except AppError as ex:
                message.value = str(ex)
                page.update()
                return
            close_dialog(page, dialog)
            load_menu_items()
            state.toast(f"{saved.name} {'updated' if editing else 'added'}")

        title = f"Edit: {item.name}" if editing else "Add Menu Item"
        dialog = ft.AlertDialog(
            title=ft.Text(title, size=16, weight="bold", max_lines=1, overflow=ft.TextOverflow.ELLIPSIS),
            content=ft.Container(
                content=ft.Column([
                    name_field,
                    description_field,
                    price_field,
                    category_dropdown,
                    status_dropdown,
                    featured_switch,
                    ft.Text("Dietary badges", size=14, weight="bold"),
                    ft.Row(badge_boxes, wrap=True, width=300),
                    ft.Divider(),
                    ft.Text("Photo", size=14, weight="bold"),
                    image_preview,
                    ft.ElevatedButton(
                        "Upload Image",
                        icon=ft.Icons.UPLOAD_FILE,
                        on_click=lambda e: file_picker.pick_files(allowed_extensions=IMAGE_EXTENSIONS,
                                                                  allow_multiple=False),
                        width=300,
                        bgcolor=PRIMARY,
                        color="white",
                    ),
                    message,
                ], tight=True, scroll=ft.ScrollMode.AUTO, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
                width=320,
                height=560,
                alignment=ft.alignment.top_center,
            ),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Update" if editing else "Save", on_click=save),
            ],
        )
        open_dialog(page, dialog)

    # ===================== DELETE =====================

    def delete_menu_item(item):
        def do_delete():
            try:
                repo.delete(item.id)
            except AppError as ex:
                state.toast(str(ex), "error")
                return
            log_action(admin_email, f"Deleted menu item: {item.name}")
            load_menu_items()
            state.toast(f"{item.name} deleted", "info")

        confirm_dialog(page, "Confirm Delete", f"Are you sure you want to delete '{item.name}'?", do_delete)

    load_menu_items()

    return ft.Tab(
        text="Menu",
        icon=ft.Icons.RESTAURANT_MENU,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Manage Menu Items", size=20, weight="bold", color="black"),
                    ft.ElevatedButton("Add New Item", icon=ft.Icons.ADD, on_click=lambda e: show_item_dialog(),
                                      bgcolor=PRIMARY, color="white"),
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                padding=10,
            ),
            ft.Container(content=container, expand=True, padding=10),
        ], expand=True, spacing=0),
    )
