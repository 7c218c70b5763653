"""
Customer sign-in / register screens and the admin login screen.
"""
import logging

import flet as ft

from core.errors import AppError
from core.navigator import Screen
from ui.constants import BORDER, DARK, PRIMARY, TEXT

logger = logging.getLogger(__name__)

FORM_WIDTH = 350


def form_field(label, icon, password=False, hint=None):
    return ft.TextField(
        label=label,
        hint_text=hint,
        password=password,
        can_reveal_password=password,
        width=FORM_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor="white",
        border_color=BORDER,
        focused_border_color=PRIMARY,
        prefix_icon=icon,
        text_size=14,
    )


def primary_button(text, on_click):
    return ft.Container(
        content=ft.Text(text, size=18, weight="bold", color="white"),
        width=FORM_WIDTH,
        height=50,
        bgcolor=PRIMARY,
        border_radius=12,
        alignment=ft.alignment.center,
        on_click=on_click,
        ink=True,
    )


def _form_card(title, subtitle, controls):
    return ft.Container(
        content=ft.Column([
            ft.Text(title, size=22, weight="bold", color=DARK),
            ft.Text(subtitle, size=12, color=TEXT),
            ft.Container(height=15),
            *controls,
        ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10),
        width=420,
        padding=25,
        bgcolor="white",
        border_radius=16,
        alignment=ft.alignment.center,
    )


def sign_in_view(page: ft.Page, state):
    email = form_field("Email Address", ft.Icons.EMAIL_OUTLINED)
    password = form_field("Password", ft.Icons.LOCK_OUTLINE, password=True)
    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def handle_sign_in(e):
        try:
            customer = state.customer_sign_in(email.value, password.value)
        except AppError as ex:
            message.value = str(ex)
            page.update()
            return
        state.toast(f"Welcome, {customer['name']}!")

    return ft.Row([
        _form_card("Welcome back!", "Sign in to your account", [
            email,
            password,
            primary_button("Sign In", handle_sign_in),
            message,
            ft.Row([
                ft.Text("Don't have an account?", size=13, color=TEXT),
                ft.TextButton("Sign Up", on_click=lambda e: state.navigate(Screen.REGISTER)),
            ], alignment=ft.MainAxisAlignment.CENTER, spacing=5),
        ]),
    ], alignment=ft.MainAxisAlignment.CENTER)


def register_view(page: ft.Page, state):
    full_name = form_field("Full Name", ft.Icons.PERSON_OUTLINE)
    email = form_field("Email Address", ft.Icons.EMAIL_OUTLINED)
    password = form_field("Password", ft.Icons.LOCK_OUTLINE, password=True)
    confirm = form_field("Confirm Password", ft.Icons.LOCK_OUTLINE, password=True)
    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def handle_register(e):
        try:
            customer = state.customer_register(full_name.value, email.value, password.value, confirm.value)
        except AppError as ex:
            message.value = str(ex)
            page.update()
            return
        state.toast(f"Account created. Welcome, {customer['name']}!")

    return ft.Row([
        _form_card("Create an account", "Order faster and keep track of your bookings", [
            full_name,
            email,
            password,
            confirm,
            primary_button("Sign Up", handle_register),
            message,
            ft.Row([
                ft.Text("Already have an account?", size=13, color=TEXT),
                ft.TextButton("Sign In", on_click=lambda e: state.navigate(Screen.SIGN_IN)),
            ], alignment=ft.MainAxisAlignment.CENTER, spacing=5),
        ]),
    ], alignment=ft.MainAxisAlignment.CENTER)


def admin_login_view(page: ft.Page, state):
    email = form_field("Admin Email", ft.Icons.EMAIL_OUTLINED)
    password = form_field("Password", ft.Icons.LOCK_OUTLINE, password=True)
    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def handle_login(e):
        if not state.begin_submit("admin-login"):
            return
        try:
            user = state.admin_sign_in(email.value, password.value)
        except AppError as ex:
            logger.info("Admin login rejected for %s", email.value)
            message.value = str(ex)
            page.update()
            return
        finally:
            state.end_submit("admin-login")
        state.toast(f"Signed in as {user.email}")

    return ft.Container(
        content=ft.Column([
            ft.Icon(ft.Icons.ADMIN_PANEL_SETTINGS, size=60, color=PRIMARY),
            _form_card("Admin Login", "Restaurant staff only", [
                email,
                password,
                primary_button("Sign In", handle_login),
                message,
                ft.TextButton("Back to website", on_click=lambda e: state.navigate(Screen.HOME)),
            ]),
        ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=10),
        expand=True,
        bgcolor=DARK,
        alignment=ft.alignment.center,
    )
