"""Configuration constants for auto-seedr."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    app_name: str = "auto-seedr"
    version: str = "1.0.0"
    api_base_url: str = "https://www.seedr.cc"
    resource_url: str = "https://www.seedr.cc/oauth_test/resource.php"
    devices_url: str = "https://www.seedr.cc/devices"
    client_id: str = "seedr_xbmc"
    settings_org: str = "auto_seedr"
    settings_app: str = "settings"
    key_device_token: str = "deviceToken"
    # None means requests waits indefinitely.
    request_timeout: float | None = None
    notification_msec: int = 3000
    log_level_env: str = "AUTO_SEEDR_LOG_LEVEL"

    @property
    def device_code_url(self) -> str:
        return f"{self.api_base_url}/api/device/code"

    @property
    def device_authorize_url(self) -> str:
        return f"{self.api_base_url}/api/device/authorize"

    @property
    def folder_url(self) -> str:
        return f"{self.api_base_url}/api/folder"


CONFIG = AppConfig()

APP_NAME = CONFIG.app_name
APP_VERSION = CONFIG.version
API_BASE_URL = CONFIG.api_base_url
RESOURCE_URL = CONFIG.resource_url
DEVICES_URL = CONFIG.devices_url
CLIENT_ID = CONFIG.client_id
SETTINGS_ORG = CONFIG.settings_org
SETTINGS_APP = CONFIG.settings_app
KEY_DEVICE_TOKEN = CONFIG.key_device_token
REQUEST_TIMEOUT = CONFIG.request_timeout
NOTIFICATION_MSEC = CONFIG.notification_msec
LOG_LEVEL_ENV = CONFIG.log_level_env
