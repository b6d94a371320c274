"""Persistence of the Seedr device credential."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QSettings

from auto_seedr.config import KEY_DEVICE_TOKEN, SETTINGS_APP, SETTINGS_ORG

logger = logging.getLogger(__name__)


class CredentialStore:
    """Read/write the device code kept in QSettings.

    The code is written only by the "configure device token" flow and is
    never cleared by the application.
    """

    def __init__(self, settings: QSettings | None = None) -> None:
        self.settings = settings or QSettings(SETTINGS_ORG, SETTINGS_APP)

    def device_code(self) -> str | None:
        value = self.settings.value(KEY_DEVICE_TOKEN, "", type=str)
        return value or None

    def set_device_code(self, code: str) -> None:
        self.settings.setValue(KEY_DEVICE_TOKEN, code)
        self.settings.sync()
        logger.info("Stored new device code")
