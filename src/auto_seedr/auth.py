"""Device authorization against the Seedr API.

Two calls are involved:

- ``/api/device/code`` starts pairing and hands back a device code (kept
  locally) and a user code (typed by the user on the Seedr devices page).
- ``/api/device/authorize`` trades the stored device code for an access
  token. It is called once per remote operation; tokens are not cached.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from auto_seedr.config import CONFIG, AppConfig
from auto_seedr.errors import SeedrResponseError
from auto_seedr.models import DeviceCode
from auto_seedr.session import SESSION

logger = logging.getLogger(__name__)


class DeviceCodeSource(Protocol):
    def device_code(self) -> str | None: ...


def decode_json(resp: requests.Response) -> Any:
    """Return the JSON body of *resp* or raise SeedrResponseError."""
    try:
        return resp.json()
    except ValueError as exc:
        raise SeedrResponseError(resp.status_code, f"invalid JSON body: {exc}") from exc


class TokenProvider:
    """Exchange the persisted device code for a fresh access token."""

    def __init__(
        self,
        store: DeviceCodeSource,
        *,
        session: requests.Session | None = None,
        config: AppConfig = CONFIG,
    ) -> None:
        self.store = store
        self.session = session or SESSION
        self.config = config

    def request_device_code(self) -> DeviceCode:
        """Start device pairing and return the device/user code pair.

        Raises:
            requests.RequestException: if the HTTP request fails.
            SeedrResponseError: if the body is not JSON.
        """
        logger.debug("Requesting new device code")
        resp = self.session.get(
            self.config.device_code_url,
            params={"client_id": self.config.client_id},
            timeout=self.config.request_timeout,
        )
        return DeviceCode.from_dict(decode_json(resp))

    def get_token(self) -> str | None:
        """Return an access token for the stored device code.

        A missing device code is sent as an empty string; the API decides
        how to reject it. ``None`` is returned when the response carries no
        ``access_token`` (e.g. pairing not yet confirmed on the website).
        """
        device_code = self.store.device_code() or ""
        resp = self.session.get(
            self.config.device_authorize_url,
            params={"device_code": device_code, "client_id": self.config.client_id},
            timeout=self.config.request_timeout,
        )
        data = decode_json(resp)
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.warning("No access token returned (HTTP %s)", resp.status_code)
            return None
        return str(token)
