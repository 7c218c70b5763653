"""
Site Content Tab for Admin Panel: about page, business settings, hero banner.
"""
import flet as ft

from core.business_hours import DAY_NAMES, format_hour
from core.errors import AppError
from core.logger import log_action
from core.storage import HERO_PREFIX
from ui.admin_menu import IMAGE_EXTENSIONS, read_picked_file
from ui.constants import PRIMARY


def _section(title, controls, on_save):
    return ft.Container(
        content=ft.Column([
            ft.Text(title, size=16, weight="bold", color="black"),
            *controls,
            ft.Row([ft.ElevatedButton("Save", icon=ft.Icons.SAVE, on_click=on_save, bgcolor=PRIMARY, color="white")],
                   alignment=ft.MainAxisAlignment.END),
        ], spacing=8),
        padding=15,
        bgcolor="white",
        border_radius=12,
        width=520,
    )


def build_content_tab(page: ft.Page, state, is_desktop: bool):
    repos = state.repos
    admin_email = state.auth.current_email

    def saved(what):
        log_action(admin_email, f"Updated {what}")
        state.toast(f"{what.capitalize()} saved")

    # ===================== ABOUT =====================

    about = state.load(repos.about.get)
    about_text = ft.TextField(label="Our story", multiline=True, min_lines=4, max_lines=10,
                              value=about.content if about else "")
    years = ft.TextField(label="Years of experience", value=str(about.years_experience if about else 0), width=200)
    dishes = ft.TextField(label="Menu items count", value=str(about.menu_items_count if about else 0), width=200)
    image_1 = ft.TextField(label="Photo 1 URL", value=(about.image_1_url or "") if about else "")
    image_2 = ft.TextField(label="Photo 2 URL", value=(about.image_2_url or "") if about else "")

    def save_about(e):
        try:
            repos.about.update({
                "content": (about_text.value or "").strip(),
                "years_experience": int(years.value or 0),
                "menu_items_count": int(dishes.value or 0),
                "image_1_url": (image_1.value or "").strip() or None,
                "image_2_url": (image_2.value or "").strip() or None,
            })
        except ValueError:
            state.toast("Counts must be whole numbers", "error")
            return
        except AppError as ex:
            state.toast(str(ex), "error")
            return
        saved("about page")

    # ===================== BUSINESS SETTINGS =====================

    settings = state.load(repos.settings.get) or {}
    phone = ft.TextField(label="Phone", value=settings.get("phone", ""))
    email = ft.TextField(label="Email", value=settings.get("email", ""))
    address = ft.TextField(label="Address", value=settings.get("address", ""))
    stored_hours = settings.get("business_hours") or {}
    hour_options = [ft.dropdown.Option(f"{h:02d}:00", format_hour(h)) for h in range(24)]
    hour_rows = {}
    for day in DAY_NAMES:
        value = stored_hours.get(day.lower(), "closed")
        is_closed = not value or value == "closed"
        hour_rows[day.lower()] = (
            ft.Checkbox(label="Closed", value=is_closed),
            ft.Dropdown(options=hour_options, value=None if is_closed else value["open"], width=130, dense=True),
            ft.Dropdown(options=hour_options, value=None if is_closed else value["close"], width=130, dense=True),
        )

    def collect_hours():
        hours = {}
        for key, (closed, opens, closes) in hour_rows.items():
            if closed.value or not (opens.value and closes.value):
                hours[key] = "closed"
            else:
                hours[key] = {"open": opens.value, "close": closes.value}
        return hours

    def save_settings(e):
        try:
            repos.settings.update({
                "phone": (phone.value or "").strip(),
                "email": (email.value or "").strip(),
                "address": (address.value or "").strip(),
                "business_hours": collect_hours(),
            })
        except AppError as ex:
            state.toast(str(ex), "error")
            return
        saved("business settings")

    # ===================== HERO BANNER =====================

    banner = state.load(repos.hero_banner.get) or {}
    hero_title = ft.TextField(label="Headline", value=banner.get("title", ""))
    hero_subtitle = ft.TextField(label="Subtitle", value=banner.get("subtitle", ""))
    hero_image = {"url": banner.get("image_url")}
    hero_preview = ft.Image(src=hero_image["url"], height=140, fit=ft.ImageFit.COVER, border_radius=8,
                            visible=bool(hero_image["url"]))

    def on_hero_pick(e: ft.FilePickerResultEvent):
        if not e.files:
            return
        try:
            filename, data = read_picked_file(e.files[0])
            _, hero_image["url"] = repos.storage.upload_image(HERO_PREFIX, filename, data)
        except (OSError, AppError) as ex:
            state.toast(f"Upload failed: {ex}", "error")
            return
        hero_preview.src = hero_image["url"]
        hero_preview.visible = True
        page.update()

    hero_picker = ft.FilePicker(on_result=on_hero_pick)
    page.overlay.append(hero_picker)

    def save_hero(e):
        try:
            repos.hero_banner.update({
                "title": (hero_title.value or "").strip(),
                "subtitle": (hero_subtitle.value or "").strip(),
                "image_url": hero_image["url"],
            })
        except AppError as ex:
            state.toast(str(ex), "error")
            return
        saved("hero banner")

    sections = [
        _section("Hero Banner", [
            hero_title,
            hero_subtitle,
            hero_preview,
            ft.OutlinedButton("Choose Image", icon=ft.Icons.IMAGE,
                              on_click=lambda e: hero_picker.pick_files(allowed_extensions=IMAGE_EXTENSIONS)),
        ], save_hero),
        _section("About Page", [about_text, ft.Row([years, dishes], wrap=True), image_1, image_2], save_about),
        _section("Business Details", [
            phone, email, address,
            ft.Text("Opening hours shown on the contact page", size=12, color="grey700"),
            *[ft.Row([ft.Text(key.capitalize(), width=100), *controls]) for key, controls in hour_rows.items()],
        ], save_settings),
    ]

    return ft.Tab(
        text="Content",
        icon=ft.Icons.EDIT_NOTE,
        content=ft.Column([
            ft.Container(content=ft.Text("Site Content", size=20, weight="bold", color="black"), padding=10),
            ft.Row(sections, wrap=True, spacing=15, run_spacing=15, vertical_alignment=ft.CrossAxisAlignment.START),
        ], expand=True, spacing=0, scroll=ft.ScrollMode.AUTO),
    )
