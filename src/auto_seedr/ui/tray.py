from __future__ import annotations

import logging
from functools import partial
from typing import Any

from PyQt6.QtCore import QTimer, QUrl
from PyQt6.QtGui import QClipboard, QCursor, QDesktopServices
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from auto_seedr.auth import TokenProvider
from auto_seedr.client import SeedrClient
from auto_seedr.config import APP_NAME, APP_VERSION, DEVICES_URL, NOTIFICATION_MSEC
from auto_seedr.icons import load_app_icon, load_tray_icon
from auto_seedr.menu import (
    EXIT_ID,
    MenuEntry,
    MenuSynchronizer,
    MenuTemplate,
    folder_entry_id,
    separator,
)
from auto_seedr.models import ApiResult, ArchiveLink, DeviceCode, Folder
from auto_seedr.storage import CredentialStore
from auto_seedr.ui.dialogs import show_device_code_dialog
from auto_seedr.ui.menu_builder import rebuild_menu
from auto_seedr.ui.workers import JobRunner

logger = logging.getLogger(__name__)


class TrayController:
    """System tray integration: menu template, actions and notifications."""

    def __init__(
        self,
        client: SeedrClient,
        tokens: TokenProvider,
        store: CredentialStore,
        *,
        runner: Any = None,
    ) -> None:
        self.client = client
        self.tokens = tokens
        self.store = store
        self.runner = runner if runner is not None else JobRunner()

        self.template = MenuTemplate(self._base_entries())
        self.sync = MenuSynchronizer(client, self.template, self)

        # Refresh coalescing: at most one list call in flight, plus one queued.
        self._refresh_running = False
        self._refresh_again = False

        # Tray icon and menu
        self.tray_icon = QSystemTrayIcon()
        self._setup_tray_icon()
        self._setup_menu()

        self.tray_icon.activated.connect(self.on_tray_activated)
        self.tray_icon.show()

    # ------------------------------------------------------------------ #
    # Initial load
    # ------------------------------------------------------------------ #

    def initial_load(self) -> None:
        """Schedule the first folder refresh once the event loop runs."""
        QTimer.singleShot(0, self.refresh)

    # ------------------------------------------------------------------ #
    # Tray icon and menu
    # ------------------------------------------------------------------ #

    def _base_entries(self) -> list[MenuEntry]:
        return [
            MenuEntry(f"{APP_NAME} v{APP_VERSION}", id="title", enabled=False),
            separator(),
            MenuEntry(
                "configure device token",
                id="configure",
                action=self.configure_device_token,
            ),
            MenuEntry(
                "add magnet from clipboard",
                id="add-magnet",
                action=self.add_magnet_from_clipboard,
            ),
            MenuEntry("refresh", id="refresh", action=self.refresh),
            MenuEntry("exit", id=EXIT_ID, action=self.quit_from_tray),
        ]

    def _setup_tray_icon(self) -> None:
        app_icon = load_app_icon()
        app = QApplication.instance()
        if app is not None and not app_icon.isNull():
            app.setWindowIcon(app_icon)

        self.tray_icon.setIcon(load_tray_icon())
        self.tray_icon.setToolTip(APP_NAME)

    def _setup_menu(self) -> None:
        self.menu = QMenu()
        # The native menu is rebuilt from the template every time it opens,
        # so changes made by earlier actions are always visible.
        self.menu.aboutToShow.connect(self.rebuild_menu)
        self.tray_icon.setContextMenu(self.menu)
        self.rebuild_menu()

    def rebuild_menu(self) -> None:
        rebuild_menu(self.menu, self.template.entries)

    def on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        # Left-click pops up the same menu as right-click.
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.menu.popup(QCursor.pos())

    # ------------------------------------------------------------------ #
    # User-visible notifications
    # ------------------------------------------------------------------ #

    def show_info_message(self, title: str, text: str, msec: int = NOTIFICATION_MSEC) -> None:
        """Show a transient informational tray notification."""
        self.tray_icon.showMessage(
            title,
            text,
            QSystemTrayIcon.MessageIcon.Information,
            msec,
        )

    def clipboard(self) -> QClipboard:
        return QApplication.clipboard()

    def open_url(self, url: str) -> None:
        QDesktopServices.openUrl(QUrl(url))

    # ------------------------------------------------------------------ #
    # Top-level actions
    # ------------------------------------------------------------------ #

    def configure_device_token(self) -> None:
        self.runner.submit(
            "device-code",
            self.tokens.request_device_code,
            on_done=self._on_device_code,
        )

    def _on_device_code(self, code: DeviceCode) -> None:
        self.store.set_device_code(code.device_code)
        self.clipboard().setText(code.user_code)
        self.open_url(DEVICES_URL)
        show_device_code_dialog(None, code.user_code)

    def add_magnet_from_clipboard(self) -> None:
        magnet = self.clipboard().text()
        self.runner.submit(
            "add-magnet",
            partial(self.client.add_magnet, magnet),
            on_done=self._on_magnet_added,
        )

    def _on_magnet_added(self, result: ApiResult[None]) -> None:
        # Shown regardless of result.ok; the API response is not checked.
        self.show_info_message("Added magnet", "The magnet link was sent to Seedr.")

    def refresh(self) -> None:
        if self._refresh_running:
            self._refresh_again = True
            return

        self._refresh_running = True
        self.runner.submit(
            "refresh",
            self.sync.fetch_entries,
            on_done=self._on_folders_fetched,
            on_error=self._on_refresh_failed,
        )

    def _on_folders_fetched(self, entries: list[MenuEntry]) -> None:
        self.sync.apply(entries)
        self._refresh_finished()

    def _on_refresh_failed(self, message: str) -> None:
        self._refresh_finished()

    def _refresh_finished(self) -> None:
        self._refresh_running = False
        if self._refresh_again:
            self._refresh_again = False
            self.refresh()

    def quit_from_tray(self) -> None:
        self.tray_icon.hide()
        self.runner.shutdown()
        QApplication.instance().quit()

    # ------------------------------------------------------------------ #
    # Folder actions (called from the per-folder submenus)
    # ------------------------------------------------------------------ #

    def download(self, folder: Folder) -> None:
        self.runner.submit(
            f"archive-{folder.id}",
            partial(self.client.create_archive, folder.id),
            on_done=self._open_archive,
        )

    def copy_url(self, folder: Folder) -> None:
        self.runner.submit(
            f"archive-{folder.id}",
            partial(self.client.create_archive, folder.id),
            on_done=self._copy_archive_url,
        )

    def delete(self, folder: Folder) -> None:
        self.runner.submit(
            f"delete-{folder.id}",
            partial(self.client.delete_folder, folder.id),
            on_done=partial(self._on_folder_deleted, folder),
        )

    @staticmethod
    def _archive_url(result: ApiResult[ArchiveLink | None]) -> str | None:
        link = result.value
        if not result.ok or link is None or not link.archive_url:
            logger.warning("No archive URL available (%s)", result.error or "empty")
            return None
        return link.archive_url

    def _open_archive(self, result: ApiResult[ArchiveLink | None]) -> None:
        url = self._archive_url(result)
        if url:
            self.open_url(url)

    def _copy_archive_url(self, result: ApiResult[ArchiveLink | None]) -> None:
        url = self._archive_url(result)
        if url:
            self.clipboard().setText(url)

    def _on_folder_deleted(self, folder: Folder, result: ApiResult[bool]) -> None:
        if not result.ok:
            return

        self.show_info_message("Folder Deleted", f"{folder.name} has been deleted")
        self.template.remove_entry(folder_entry_id(folder.id))
        if self._refresh_running:
            # A list fetched before the delete would bring the folder back.
            self._refresh_again = True
