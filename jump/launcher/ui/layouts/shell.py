from __future__ import annotations

import inspect
import logging
from typing import Any

import flet as ft

from jump.launcher.controllers import ItemEditorController, ItemListController
from jump.launcher.state import NavEntry, Store
from jump.launcher.ui.theme import BG_PAGE, CYAN_PRIMARY, get_toast_color
from jump.launcher.ui.views import build_item_form_view, build_item_list_view
from jump.shared.core import events

logger = logging.getLogger(__name__)


def apply_shell_theme(page: ft.Page, theme_mode: str = "dark") -> None:
    """Apply a dark baseline theme."""
    page.theme = ft.Theme(
        color_scheme_seed=CYAN_PRIMARY,
        visual_density=ft.VisualDensity.COMFORTABLE,
        use_material3=True,
    )
    page.theme_mode = ft.ThemeMode.LIGHT if theme_mode == "light" else ft.ThemeMode.DARK
    if theme_mode != "light":
        page.bgcolor = BG_PAGE
    page.padding = 0


def build_shell(page: ft.Page, store: Store, list_controller: ItemListController) -> ft.View:
    """Wire shell state to Flet's view stack, snack bars, link opener and keyboard."""
    apply_shell_theme(page, store.config.ui.theme_mode)
    page.title = store.config.ui.window_title

    root_view = build_item_list_view(page, list_controller, store.config.ui.window_title)
    page.views.clear()
    page.views.append(root_view)

    def _safe_update() -> None:
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    async def _launch(url: str) -> None:
        result = page.launch_url(url)
        if inspect.isawaitable(result):
            await result

    def _show_toast(payload: dict) -> None:
        page.show_dialog(
            ft.SnackBar(
                content=ft.Text(payload.get("title", "")),
                bgcolor=get_toast_color(payload.get("style", events.TOAST_SUCCESS)),
                duration=store.config.ui.toast_duration_ms,
            )
        )

    def _on_state_change(change: str, data: Any) -> None:
        if change == "nav-push" and isinstance(data, NavEntry):
            if data.view == events.VIEW_ITEM_EDITOR and isinstance(data.controller, ItemEditorController):
                page.views.append(build_item_form_view(page, data.controller))
                _safe_update()
            else:
                logger.warning(f"No view registered for '{data.view}'")
        elif change == "nav-pop":
            if len(page.views) > 1:
                page.views.pop()
                _safe_update()
        elif change == "toast":
            _show_toast(data)
        elif change == "url-open":
            page.run_task(_launch, data["url"])

    store.app.add_listener(_on_state_change)

    def _on_view_pop(e) -> None:
        page.run_task(store.app.pop_view)

    page.on_view_pop = _on_view_pop

    def _on_keyboard(e: ft.KeyboardEvent) -> None:
        if not (e.ctrl or e.meta):
            return
        # Shortcuts only act on the list view
        if store.app.current_view.view != events.VIEW_ITEM_LIST:
            return

        key = e.key.upper()
        selected = list_controller.selected_item
        if key == "N":
            page.run_task(list_controller.on_add)
        elif key == "E" and selected is not None:
            page.run_task(list_controller.on_edit, selected)
        elif key == "X" and e.ctrl and selected is not None:
            page.run_task(list_controller.on_delete, selected.id)

    page.on_keyboard_event = _on_keyboard

    _safe_update()
    return root_view
