"""
Gallery Management Tab for Admin Panel
"""
import flet as ft

from core.errors import AppError
from core.logger import log_action
from ui.admin_menu import IMAGE_EXTENSIONS, read_picked_file
from ui.admin_utils import confirm_dialog
from ui.constants import DESKTOP_COLUMNS, GRID_RUN_SPACING, GRID_SPACING, PRIMARY


def build_gallery_tab(page: ft.Page, state, is_desktop: bool):
    repo = state.repos.gallery
    admin_email = state.auth.current_email

    gallery_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS if is_desktop else 2,
        max_extent=260,
        child_aspect_ratio=1.0,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True,
    )
    title_field = ft.TextField(label="Title for the next upload", width=280)
    uploading = ft.ProgressRing(width=20, height=20, visible=False)

    def build_image_card(image):
        return ft.Card(
            content=ft.Container(
                content=ft.Column([
                    ft.Image(src=image.image_url, height=150, fit=ft.ImageFit.COVER, border_radius=8),
                    ft.Row([
                        ft.Text(image.title, size=12, weight="bold", expand=True, max_lines=1,
                                overflow=ft.TextOverflow.ELLIPSIS),
                        ft.IconButton(icon=ft.Icons.DELETE, icon_color="red", icon_size=18, tooltip="Delete",
                                      on_click=lambda e, img=image: delete_image(img)),
                    ]),
                ], spacing=4),
                padding=8,
                bgcolor="white",
                border_radius=12,
            )
        )

    def load_gallery():
        gallery_grid.controls.clear()
        try:
            images = repo.get_all()
        except AppError as ex:
            state.toast(str(ex), "error")
            images = []
        gallery_grid.controls.extend(build_image_card(image) for image in images)
        page.update()

    def on_file_pick(e: ft.FilePickerResultEvent):
        if not e.files:
            return
        uploading.visible = True
        page.update()
        try:
            for picked in e.files:
                filename, data = read_picked_file(picked)
                image = repo.upload(filename, data, (title_field.value or "").strip())
                log_action(admin_email, f"Uploaded gallery image: {image.title}")
        except (OSError, AppError) as ex:
            state.toast(f"Upload failed: {ex}", "error")
        else:
            state.toast("Image uploaded")
            title_field.value = ""
        finally:
            uploading.visible = False
            load_gallery()

    file_picker = ft.FilePicker(on_result=on_file_pick)
    page.overlay.append(file_picker)

    def delete_image(image):
        def do_delete():
            try:
                repo.delete(image.id)
            except AppError as ex:
                state.toast(str(ex), "error")
                return
            log_action(admin_email, f"Deleted gallery image: {image.title}")
            load_gallery()
            state.toast("Image deleted", "info")

        confirm_dialog(page, "Delete image", f"Remove '{image.title}' from the gallery?", do_delete)

    load_gallery()

    return ft.Tab(
        text="Gallery",
        icon=ft.Icons.PHOTO_LIBRARY,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Manage Gallery", size=20, weight="bold", color="black"),
                    ft.Row([
                        title_field,
                        uploading,
                        ft.ElevatedButton(
                            "Upload",
                            icon=ft.Icons.UPLOAD_FILE,
                            on_click=lambda e: file_picker.pick_files(allowed_extensions=IMAGE_EXTENSIONS,
                                                                      allow_multiple=True),
                            bgcolor=PRIMARY,
                            color="white",
                        ),
                    ], wrap=True),
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, wrap=True),
                padding=10,
            ),
            ft.Container(content=gallery_grid, expand=True, padding=10),
        ], expand=True, spacing=0),
    )
