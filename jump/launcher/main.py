"""Jump - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv

import flet as ft
from jump.launcher.controllers import ItemListController
from jump.launcher.state import Store
from jump.launcher.ui.layouts.shell import build_shell
from jump.shared.core.configuration import SystemConfig, ValidationLevel, get_config, resolve_db_path
from jump.shared.core.event_bus import EventBus
from jump.shared.core.service_registry import register_cleanup_handler
from jump.shared.domain.items import ItemStore
from jump.shared.infrastructure.persistence import DuckDBKeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path("~/.local/share/jump/logs").expanduser()


def configure_logging(log_dir: Path = DEFAULT_LOG_DIR) -> Path:
    """Configure the root logger.

    File handler: everything at LOG_LEVEL (default DEBUG) to jump.log.
    Console handler: only WARNING and ERROR.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / "jump.log"

    log_level_str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    file_log_level = getattr(logging, log_level_str, logging.DEBUG)
    if not isinstance(file_log_level, int):
        file_log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    for name in ("flet", "flet_controls", "flet_transport", "asyncio"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")
    return log_file_path


def create_item_store(config: SystemConfig) -> ItemStore:
    """Open the configured key/value backend and wrap it in an item store."""
    backend = DuckDBKeyValueStore(resolve_db_path(config.storage), config.storage.table_name).connect()
    register_cleanup_handler(backend.close)

    return ItemStore(backend, config.storage.items_key)


def make_app(config: SystemConfig, item_store: ItemStore):
    """Build the Flet session entry point around one item store."""

    async def main(page: ft.Page) -> None:
        logger.info("Initializing Jump session...")

        event_bus = EventBus()
        Store.reset()
        store = Store.initialize(event_bus, item_store, config)
        await store.app.initialize()

        list_controller = ItemListController(item_store, event_bus, config.editor.default_icon)
        build_shell(page, store, list_controller)
        await list_controller.start()

        logger.info("Jump session ready")

    return main


def run() -> None:
    env_path = Path.cwd() / ".env"
    load_dotenv(dotenv_path=env_path)
    configure_logging(Path(os.getenv("JUMP_LOG_DIR", str(DEFAULT_LOG_DIR))).expanduser())

    config = get_config(ValidationLevel.LENIENT)
    item_store = create_item_store(config)
    app = make_app(config, item_store)

    if config.ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {config.ui.flet_port}")
        ft.run(app, view=ft.AppView.WEB_BROWSER, port=config.ui.flet_port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(app, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
