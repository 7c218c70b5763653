"""
Admin Accounts Tab for Admin Panel

Every admin can change their own password; only the super admin can add
or remove admin accounts.
"""
import flet as ft

from core.errors import AppError
from core.logger import log_action
from ui.admin_utils import close_dialog, confirm_dialog, open_dialog
from ui.constants import DESKTOP_COLUMNS, GRID_RUN_SPACING, GRID_SPACING, PRIMARY

ROLE_COLORS = {"super_admin": "purple", "admin": "blue"}


def build_admins_tab(page: ft.Page, state, is_desktop: bool):
    repo = state.repos.admins
    admin_email = state.auth.current_email
    can_manage = state.auth.can_manage_admins()

    # ===================== CARD BUILDER =====================

    def build_admin_card(admin):
        actions = []
        if can_manage and admin.role != "super_admin":
            actions.append(
                ft.IconButton(icon=ft.Icons.DELETE, icon_color="red", icon_size=18, tooltip="Remove admin",
                              on_click=lambda e, a=admin: delete_admin(a))
            )
        return ft.Card(
            content=ft.Container(
                content=ft.Column([
                    ft.Row([
                        ft.Text(admin.email, weight="bold", size=15, color="black", expand=True),
                        *actions,
                    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, spacing=5),
                    ft.Row([
                        ft.Container(
                            content=ft.Text(admin.role.replace("_", " ").upper(), color="white", size=10, weight="bold"),
                            bgcolor=ROLE_COLORS.get(admin.role, "grey"),
                            padding=5,
                            border_radius=5,
                        ),
                        ft.Text("(you)", size=11, color="grey700", visible=admin.email == admin_email),
                    ]),
                    ft.Text(f"Added {admin.created_at:%b %d, %Y}" if admin.created_at else "", size=11, color="grey600"),
                ], spacing=6),
                padding=10,
                bgcolor="white",
                border_radius=12,
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    admins_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=400,
        child_aspect_ratio=2.5,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True,
    )
    admins_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    container = admins_grid if is_desktop else admins_list

    def load_admins():
        container.controls.clear()
        try:
            admins = repo.get_all()
        except AppError as ex:
            state.toast(str(ex), "error")
            admins = []
        container.controls.extend(build_admin_card(a) for a in admins)
        page.update()

    # ===================== CREATE ADMIN DIALOG =====================

    def show_create_admin_dialog(e=None):
        email_field = ft.TextField(label="Email", width=300)
        password_field = ft.TextField(label="Temporary password", password=True, can_reveal_password=True, width=300)
        message = ft.Text("", color="red")

        def create(e):
            try:
                admin = repo.create_admin(email_field.value, password_field.value, admin_email)
            except AppError as ex:
                message.value = str(ex)
                page.update()
                return
            log_action(admin_email, f"Created admin: {admin.email}")
            close_dialog(page, dialog)
            load_admins()
            state.toast(f"{admin.email} can now sign in to the console")

        dialog = ft.AlertDialog(
            title=ft.Text("Add Admin", size=16, weight="bold"),
            content=ft.Column([email_field, password_field, message], tight=True, width=320),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Create", on_click=create),
            ],
        )
        open_dialog(page, dialog)

    def delete_admin(admin):
        def do_delete():
            try:
                repo.delete_admin(admin.user_id, admin_email)
            except AppError as ex:
                state.toast(str(ex), "error")
                return
            log_action(admin_email, f"Removed admin: {admin.email}")
            load_admins()
            state.toast(f"{admin.email} removed", "info")

        confirm_dialog(page, "Remove admin", f"Remove console access for {admin.email}?", do_delete, "Remove")

    # ===================== CHANGE PASSWORD =====================

    def show_change_password_dialog(e=None):
        new_password = ft.TextField(label="New password", password=True, can_reveal_password=True, width=300)
        confirm = ft.TextField(label="Confirm password", password=True, can_reveal_password=True, width=300)
        message = ft.Text("", color="red")

        def change(e):
            try:
                state.auth.change_password(new_password.value, confirm.value)
            except AppError as ex:
                message.value = str(ex)
                page.update()
                return
            log_action(admin_email, "Changed password")
            close_dialog(page, dialog)
            state.toast("Password updated")

        dialog = ft.AlertDialog(
            title=ft.Text("Change Password", size=16, weight="bold"),
            content=ft.Column([new_password, confirm, message], tight=True, width=320),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Update", on_click=change),
            ],
        )
        open_dialog(page, dialog)

    load_admins()

    header_buttons = [
        ft.OutlinedButton("Change Password", icon=ft.Icons.LOCK_RESET, on_click=show_change_password_dialog),
    ]
    if can_manage:
        header_buttons.append(
            ft.ElevatedButton("Add Admin", icon=ft.Icons.PERSON_ADD, on_click=show_create_admin_dialog,
                              bgcolor=PRIMARY, color="white")
        )

    return ft.Tab(
        text="Admins",
        icon=ft.Icons.PEOPLE,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Admin Accounts", size=20, weight="bold", color="black"),
                    ft.Row(header_buttons, spacing=8),
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True),
                padding=10,
            ),
            ft.Container(content=container, expand=True, padding=10),
        ], expand=True, spacing=0),
    )
