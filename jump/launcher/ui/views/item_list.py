"""Bookmark list view."""

from __future__ import annotations

import logging

import flet as ft

from jump.launcher.controllers import ItemListController
from jump.launcher.ui.theme import (
    BG_SELECTED,
    CYAN_PRIMARY,
    RED_PRIMARY,
    TEXT_BRIGHT,
    TEXT_MEDIUM,
    TEXT_MUTED,
    get_icon_glyph,
)
from jump.shared.domain.items import Item

logger = logging.getLogger(__name__)

ROUTE = "/"


def resolve_icon(icon_name: str) -> ft.IconData:
    return getattr(ft.Icons, get_icon_glyph(icon_name), ft.Icons.LINK)


def build_item_list_view(page: ft.Page, controller: ItemListController, title: str = "Jump") -> ft.View:
    """Build the root view and keep it in sync with ``controller``."""

    list_view = ft.ListView(expand=True, spacing=2)
    progress = ft.ProgressBar(visible=controller.is_loading, color=CYAN_PRIMARY)

    empty_state = ft.Container(
        visible=controller.show_empty_state,
        expand=True,
        alignment=ft.Alignment(0, 0),
        content=ft.Column(
            [
                ft.Icon(ft.Icons.ADD_CIRCLE_OUTLINE, size=56, color=TEXT_MUTED),
                ft.Text(controller.EMPTY_TITLE, size=18, weight=ft.FontWeight.W_600, color=TEXT_BRIGHT),
                ft.Text(controller.EMPTY_DESCRIPTION, size=13, color=TEXT_MEDIUM),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=10,
        ),
    )

    def _item_tile(item: Item) -> ft.ListTile:
        return ft.ListTile(
            leading=ft.Icon(resolve_icon(item.icon), color=CYAN_PRIMARY),
            title=ft.Text(item.title, color=TEXT_BRIGHT),
            subtitle=ft.Text(item.url, size=12, color=TEXT_MUTED, no_wrap=True),
            bgcolor=BG_SELECTED if item.id == controller.selected_id else None,
            on_click=lambda e, item_id=item.id: controller.select(item_id),
            trailing=ft.Row(
                [
                    ft.IconButton(
                        ft.Icons.OPEN_IN_NEW,
                        tooltip="Open URL",
                        on_click=lambda e, item=item: page.run_task(controller.on_open, item),
                    ),
                    ft.IconButton(
                        ft.Icons.EDIT,
                        tooltip="Edit Item (Ctrl+E)",
                        on_click=lambda e, item=item: page.run_task(controller.on_edit, item),
                    ),
                    ft.IconButton(
                        ft.Icons.DELETE,
                        icon_color=RED_PRIMARY,
                        tooltip="Delete (Ctrl+X)",
                        on_click=lambda e, item_id=item.id: page.run_task(controller.on_delete, item_id),
                    ),
                ],
                tight=True,
                spacing=0,
            ),
        )

    def _render(change: str = "items") -> None:
        progress.visible = controller.is_loading
        empty_state.visible = controller.show_empty_state
        list_view.visible = bool(controller.items)
        list_view.controls = [_item_tile(item) for item in controller.items]
        try:
            page.update()
        except RuntimeError:
            # Session destroyed, ignore update
            pass

    controller.add_listener(_render)
    _render()

    return ft.View(
        route=ROUTE,
        appbar=ft.AppBar(title=ft.Text(title)),
        floating_action_button=ft.FloatingActionButton(
            icon=ft.Icons.ADD,
            tooltip="Add Item (Ctrl+N)",
            on_click=lambda e: page.run_task(controller.on_add),
        ),
        controls=[progress, empty_state, list_view],
    )
