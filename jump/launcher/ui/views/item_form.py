"""Create/update form view for a single bookmark."""

from __future__ import annotations

import flet as ft

from jump.launcher.controllers import EditorMode, ItemEditorController
from jump.launcher.ui.theme import CYAN_PRIMARY
from jump.shared.domain.items import ICON_NAMES, icon_label

from .item_list import resolve_icon

ROUTE = "/edit"


def _icon_options(current: str) -> list:
    names = list(ICON_NAMES)
    if current not in names:
        # Keep unknown stored icons selectable so they survive an edit
        names.insert(0, current)
    return [
        ft.dropdown.Option(key=name, text=icon_label(name), leading_icon=resolve_icon(name))
        for name in names
    ]


def build_item_form_view(page: ft.Page, editor: ItemEditorController) -> ft.View:
    """Build the editor view; submitting hands the field values to ``editor``."""
    values = editor.initial_values
    creating = editor.mode is EditorMode.CREATE

    title_field = ft.TextField(
        label="Title",
        value=values["title"],
        hint_text="Enter item title",
        autofocus=True,
    )
    url_field = ft.TextField(
        label="URL",
        value=values["url"],
        hint_text="https://example.com",
    )
    icon_dropdown = ft.Dropdown(
        label="Icon",
        value=values["icon"],
        options=_icon_options(values["icon"]),
        enable_filter=True,
    )
    progress = ft.ProgressRing(width=16, height=16, stroke_width=2, color=CYAN_PRIMARY, visible=False)

    async def _submit() -> None:
        await editor.submit(
            {
                "title": title_field.value or "",
                "url": url_field.value or "",
                "icon": icon_dropdown.value,
            }
        )

    submit_button = ft.ElevatedButton(
        "Add" if creating else "Save",
        icon=ft.Icons.ADD if creating else ft.Icons.EDIT,
        on_click=lambda e: page.run_task(_submit),
    )

    def _on_loading(change: str) -> None:
        progress.visible = editor.is_loading
        try:
            page.update()
        except RuntimeError:
            pass

    editor.add_listener(_on_loading)

    return ft.View(
        route=ROUTE,
        appbar=ft.AppBar(title=ft.Text("Add Item" if creating else "Edit Item")),
        controls=[
            ft.Container(
                padding=20,
                content=ft.Column(
                    [
                        title_field,
                        url_field,
                        icon_dropdown,
                        ft.Row([submit_button, progress], spacing=12),
                    ],
                    spacing=16,
                ),
            )
        ],
    )
