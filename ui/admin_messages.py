"""
Contact Messages Tab for Admin Panel: read, reply by email, delete.
"""
import flet as ft

from core.errors import AppError
from core.logger import log_action
from ui.admin_utils import close_dialog, confirm_dialog, open_dialog, status_chip
from ui.constants import PRIMARY


def build_messages_tab(page: ft.Page, state, is_desktop: bool, on_change=None):
    repo = state.repos.contact
    admin_email = state.auth.current_email
    messages_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)

    def changed():
        load_messages()
        if on_change:
            on_change()

    def build_message_card(message):
        received = message.created_at.strftime("%b %d, %Y %I:%M %p") if message.created_at else ""
        return ft.Card(
            content=ft.Container(
                content=ft.Column([
                    ft.Row([
                        ft.Text(message.name, weight="bold", size=14, color="black", expand=True),
                        status_chip(message.status),
                    ]),
                    ft.Text(f"{message.email}{' · ' + message.phone if message.phone else ''}", size=12, color="grey700"),
                    ft.Text(message.message, size=13, max_lines=2 if is_desktop else 3,
                            overflow=ft.TextOverflow.ELLIPSIS),
                    ft.Row([
                        ft.Text(received, size=11, color="grey600"),
                        ft.Row([
                            ft.TextButton("Open", on_click=lambda e, m=message: open_message(m)),
                            ft.IconButton(icon=ft.Icons.DELETE, icon_color="red", icon_size=18, tooltip="Delete",
                                          on_click=lambda e, m=message: delete_message(m)),
                        ], spacing=0),
                    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                ], spacing=4),
                padding=10,
                bgcolor="white" if message.status != "unread" else "#FFF8E1",
                border_radius=12,
            )
        )

    def load_messages():
        messages_list.controls.clear()
        try:
            messages = repo.get_all()
        except AppError as ex:
            state.toast(str(ex), "error")
            messages = []
        messages_list.controls.extend(build_message_card(m) for m in messages)
        if not messages:
            messages_list.controls.append(ft.Text("No messages yet.", italic=True, color="grey"))
        page.update()

    # ===================== DETAIL / REPLY DIALOG =====================

    def open_message(message):
        try:
            message = repo.mark_read(message.id)
        except AppError as ex:
            state.toast(str(ex), "error")
            return

        reply_field = ft.TextField(label="Reply", multiline=True, min_lines=4, max_lines=8, width=420)
        error_text = ft.Text("", color="red", size=12)
        send_button = ft.ElevatedButton("Send Reply", icon=ft.Icons.SEND, bgcolor=PRIMARY, color="white")

        def send_reply(e):
            if not state.begin_submit("reply"):
                return
            send_button.disabled = True
            page.update()
            try:
                state.reply_service.send_reply(message, reply_field.value)
            except AppError as ex:
                error_text.value = str(ex)
                send_button.disabled = False
                page.update()
                return
            finally:
                state.end_submit("reply")
            log_action(admin_email, f"Replied to message from {message.email}")
            close_dialog(page, dialog)
            state.toast(f"Reply sent to {message.email}")
            changed()

        send_button.on_click = send_reply

        def close(e):
            close_dialog(page, dialog)
            changed()

        previous_reply = []
        if message.reply_message:
            sent = message.reply_sent_at.strftime("%b %d, %Y") if message.reply_sent_at else ""
            previous_reply = [
                ft.Divider(),
                ft.Text(f"Your reply {sent}".strip(), size=12, weight="bold"),
                ft.Text(message.reply_message, size=12, color="grey700"),
            ]

        dialog = ft.AlertDialog(
            title=ft.Text(f"Message from {message.name}"),
            content=ft.Column([
                ft.Text(message.email, size=12, color="grey700"),
                ft.Text(message.message, selectable=True),
                *previous_reply,
                ft.Divider(),
                reply_field,
                error_text,
            ], tight=True, scroll=ft.ScrollMode.AUTO, width=440),
            actions=[
                ft.TextButton("Close", on_click=close),
                send_button,
            ],
        )
        open_dialog(page, dialog)

    def delete_message(message):
        def do_delete():
            try:
                repo.delete(message.id)
            except AppError as ex:
                state.toast(str(ex), "error")
                return
            log_action(admin_email, f"Deleted message from {message.email}")
            state.toast("Message deleted", "info")
            changed()

        confirm_dialog(page, "Delete message", f"Delete the message from {message.name}?", do_delete)

    load_messages()

    return ft.Tab(
        text="Messages",
        icon=ft.Icons.MAIL,
        content=ft.Column([
            ft.Container(content=ft.Text("Contact Messages", size=20, weight="bold", color="black"), padding=10),
            ft.Container(content=messages_list, expand=True, padding=10),
        ], expand=True, spacing=0),
    )
