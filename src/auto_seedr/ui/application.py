# auto_seedr/ui/application.py

from __future__ import annotations

import logging
import sys
from typing import Sequence

from PyQt6.QtWidgets import QApplication

from auto_seedr.auth import TokenProvider
from auto_seedr.client import SeedrClient
from auto_seedr.config import APP_NAME, APP_VERSION
from auto_seedr.icons import load_app_icon
from auto_seedr.log import configure_logging
from auto_seedr.storage import CredentialStore
from auto_seedr.ui.tray import TrayController
from auto_seedr.ui.workers import exit_process

logger = logging.getLogger(__name__)


def _build_app(argv: Sequence[str]) -> QApplication:
    app = QApplication(list(argv))
    # Tray-only app: nothing but the exit action ends the event loop.
    app.setQuitOnLastWindowClosed(False)

    app_icon = load_app_icon()
    if not app_icon.isNull():
        app.setWindowIcon(app_icon)

    app.setDesktopFileName("auto_seedr")
    return app


def _build_tray() -> TrayController:
    store = CredentialStore()
    tokens = TokenProvider(store)
    client = SeedrClient(tokens)
    return TrayController(client, tokens, store)


def main(argv: Sequence[str] | None = None) -> int:
    """Application entry point."""
    if argv is None:
        argv = sys.argv

    # Simple CLI flags before Qt starts
    if "--version" in argv or "-V" in argv:
        print(f"{APP_NAME} {APP_VERSION}")
        return 0

    configure_logging()

    if "--self-test" in argv:
        try:
            _app = _build_app(argv)
            tray = _build_tray()
            # Headless smoke test: render the menu once, no network calls.
            tray.rebuild_menu()
            tray.tray_icon.hide()
            return 0
        except Exception as e:
            print(f"auto-seedr self-test failed: {e}", file=sys.stderr)
            return 1

    # Normal GUI run
    app = _build_app(argv)
    tray = _build_tray()
    tray.initial_load()

    logger.info("%s %s started", APP_NAME, APP_VERSION)
    return exit_process(app.exec(), tray.runner)
