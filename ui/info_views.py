"""
Static-ish storefront pages: help/FAQ, contact form and about us.
"""
import flet as ft

from core.business_hours import DAY_NAMES, DEFAULT_SCHEDULE, describe_day, display_hours
from core.config import APP_NAME, BUSINESS_ADDRESS, BUSINESS_EMAIL, BUSINESS_PHONE
from core.errors import AppError
from core.navigator import Screen
from ui.constants import BORDER, DARK, PRIMARY, TEXT

FAQ = [
    ("How do I place an order?",
     "Browse the menu, add dishes to your cart and press Proceed to Checkout. Pay on pickup, by mobile money or card."),
    ("Can I add special instructions?",
     "Yes. Tap a dish to open it, then type your note (no onions, extra shito...) before adding it to the cart."),
    ("How do reservations work?",
     "Pick a date, time and party size. Your booking starts as pending and we confirm it by phone or email."),
    ("What is the waitlist?",
     "If you're already on your way, join the waitlist and check your place in line from your phone."),
    ("Do you cater events?",
     "We do. Send us a message from the contact page with your date and guest count."),
]


def help_view(page: ft.Page, state):
    tiles = [
        ft.ExpansionTile(
            title=ft.Text(question, weight="bold", color=DARK),
            controls=[ft.Container(content=ft.Text(answer, color=TEXT), padding=ft.padding.only(left=15, right=15, bottom=10))],
            bgcolor="white",
            collapsed_bgcolor="white",
        )
        for question, answer in FAQ
    ]
    return ft.Column([
        ft.Text("Help & FAQ", size=26, weight="bold", color=DARK),
        *tiles,
        ft.Row([
            ft.Text("Still stuck?", color=TEXT),
            ft.TextButton("Contact us", on_click=lambda e: state.navigate(Screen.CONTACT)),
        ]),
    ], spacing=8)


def _settings(state):
    return state.load(state.repos.settings.get) or {
        "phone": BUSINESS_PHONE,
        "email": BUSINESS_EMAIL,
        "address": BUSINESS_ADDRESS,
        "business_hours": display_hours(DEFAULT_SCHEDULE),
    }


def contact_view(page: ft.Page, state):
    settings = _settings(state)
    name = ft.TextField(label="Name")
    email = ft.TextField(label="Email")
    phone = ft.TextField(label="Phone (optional)")
    message = ft.TextField(label="Message", multiline=True, min_lines=4, max_lines=8)
    send_button = ft.ElevatedButton("Send Message", style=ft.ButtonStyle(bgcolor=PRIMARY, color="white"),
                                    width=300, height=45)

    def send(e):
        send_button.disabled = True
        page.update()
        try:
            saved = state.submit_contact({
                "name": (name.value or "").strip(),
                "email": email.value,
                "phone": (phone.value or "").strip() or None,
                "message": (message.value or "").strip(),
            })
        except AppError as ex:
            state.toast(str(ex), "error")
        else:
            if saved:
                for field in (name, email, phone, message):
                    field.value = ""
                state.toast("Thanks! We'll get back to you soon.")
        finally:
            send_button.disabled = False
            page.update()

    send_button.on_click = send

    hours = settings.get("business_hours") or {}
    info = ft.Container(
        content=ft.Column([
            ft.Text("Visit us", size=18, weight="bold", color=DARK),
            ft.Row([ft.Icon(ft.Icons.PLACE, color=PRIMARY), ft.Text(settings.get("address", ""), color=TEXT)]),
            ft.Row([ft.Icon(ft.Icons.PHONE, color=PRIMARY), ft.Text(settings.get("phone", ""), color=TEXT)]),
            ft.Row([ft.Icon(ft.Icons.EMAIL, color=PRIMARY), ft.Text(settings.get("email", ""), color=TEXT)]),
            ft.Divider(color=BORDER),
            ft.Text("Opening hours", weight="bold", color=DARK),
            *[ft.Row([ft.Text(day, width=110, color=TEXT), ft.Text(describe_day(hours.get(day.lower())), color=TEXT)])
              for day in DAY_NAMES],
        ], spacing=6),
        padding=20,
        bgcolor="white",
        border_radius=12,
        width=360,
    )

    form = ft.Container(
        content=ft.Column([
            ft.Text("Send us a message", size=18, weight="bold", color=DARK),
            name, email, phone, message, send_button,
        ], spacing=10),
        padding=20,
        bgcolor="white",
        border_radius=12,
        width=420,
    )

    return ft.Column([
        ft.Text("Contact Us", size=26, weight="bold", color=DARK),
        ft.Row([form, info], wrap=True, spacing=15, run_spacing=15, vertical_alignment=ft.CrossAxisAlignment.START),
    ], spacing=10)


def about_view(page: ft.Page, state):
    about = state.load(state.repos.about.get)
    gallery = state.load(state.repos.gallery.get_all, [])

    def stat(value, label):
        return ft.Container(
            content=ft.Column([
                ft.Text(f"{value}+", size=28, weight="bold", color=PRIMARY),
                ft.Text(label, color=TEXT),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=2),
            padding=15,
            bgcolor="white",
            border_radius=12,
            width=170,
        )

    story = about.content if about else f"Welcome to {APP_NAME}."
    photos = [url for url in ((about.image_1_url, about.image_2_url) if about else ()) if url]

    return ft.Column([
        ft.Text(f"About {APP_NAME}", size=26, weight="bold", color=DARK),
        ft.Text(story, size=15, color=TEXT),
        ft.Row([ft.Image(src=url, width=300, height=200, fit=ft.ImageFit.COVER, border_radius=12) for url in photos],
               wrap=True, spacing=10),
        ft.Row([
            stat(about.years_experience if about else 0, "Years of experience"),
            stat(about.menu_items_count if about else 0, "Dishes on the menu"),
        ], wrap=True, spacing=10),
        ft.Text("Gallery", size=22, weight="bold", color=DARK),
        ft.Row([
            ft.Column([
                ft.Image(src=image.image_url, width=220, height=160, fit=ft.ImageFit.COVER, border_radius=8),
                ft.Text(image.title, size=12, color=TEXT),
            ], spacing=4)
            for image in gallery
        ], wrap=True, spacing=10, run_spacing=10) if gallery else ft.Text("Photos coming soon.", italic=True, color=TEXT),
    ], spacing=12)
