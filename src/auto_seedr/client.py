"""Seedr folder and torrent operations.

Every public method asks the TokenProvider for a fresh access token before
talking to the API. HTTP failures are reported through ApiResult; transport
errors (``requests.RequestException``) propagate to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from auto_seedr.auth import TokenProvider, decode_json
from auto_seedr.config import CONFIG, AppConfig
from auto_seedr.models import ApiResult, ArchiveLink, FetchedFile, Folder
from auto_seedr.session import SESSION

logger = logging.getLogger(__name__)


def _folder_ref(folder_id: int) -> str:
    return json.dumps([{"type": "folder", "id": folder_id}])


def _http_error(resp: requests.Response) -> str:
    return f"HTTP {resp.status_code}"


class SeedrClient:
    """Thin wrapper over the Seedr folder API and ``resource.php``."""

    def __init__(
        self,
        tokens: TokenProvider,
        *,
        session: requests.Session | None = None,
        config: AppConfig = CONFIG,
    ) -> None:
        self.tokens = tokens
        self.session = session or SESSION
        self.config = config

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _resource(self, func: str, **fields: Any) -> requests.Response:
        """POST a ``resource.php`` call with a freshly acquired token."""
        token = self.tokens.get_token()
        data = {"access_token": token or "", "func": func}
        data.update({k: str(v) for k, v in fields.items()})
        logger.debug("resource.php func=%s", func)
        return self.session.post(
            self.config.resource_url,
            data=data,
            timeout=self.config.request_timeout,
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def list_folders(self) -> ApiResult[list[Folder]]:
        """Return the root folders; ``value`` is empty on a non-success status."""
        token = self.tokens.get_token()
        resp = self.session.get(
            self.config.folder_url,
            params={"access_token": token or ""},
            timeout=self.config.request_timeout,
        )
        if not resp.ok:
            logger.warning("Listing folders failed: %s", _http_error(resp))
            return ApiResult([], resp.status_code, _http_error(resp))

        data = decode_json(resp)
        folders = [Folder.from_dict(item) for item in data.get("folders") or []]
        logger.debug("Listed %d folder(s)", len(folders))
        return ApiResult(folders, resp.status_code)

    def create_archive(self, folder_id: int) -> ApiResult[ArchiveLink | None]:
        """Ask Seedr to package *folder_id* as a downloadable archive.

        Each call creates a new archive; repeated calls are not deduplicated.
        """
        resp = self._resource("create_empty_archive", archive_arr=_folder_ref(folder_id))
        if not resp.ok:
            logger.warning("Archive for folder %s failed: %s", folder_id, _http_error(resp))
            return ApiResult(None, resp.status_code, _http_error(resp))
        return ApiResult(ArchiveLink.from_dict(decode_json(resp)), resp.status_code)

    def fetch_file(self, file_id: int) -> ApiResult[FetchedFile | None]:
        """Return a download URL for a single file.

        Not wired to any menu action.
        """
        resp = self._resource("fetch_file", folder_file_id=file_id)
        if not resp.ok:
            logger.warning("Fetching file %s failed: %s", file_id, _http_error(resp))
            return ApiResult(None, resp.status_code, _http_error(resp))
        return ApiResult(FetchedFile.from_dict(decode_json(resp)), resp.status_code)

    def delete_folder(self, folder_id: int) -> ApiResult[bool]:
        resp = self._resource("delete", delete_arr=_folder_ref(folder_id))
        if not resp.ok:
            logger.warning("Deleting folder %s failed: %s", folder_id, _http_error(resp))
            return ApiResult(False, resp.status_code, _http_error(resp))
        logger.info("Deleted folder %s", folder_id)
        return ApiResult(True, resp.status_code)

    def add_magnet(self, magnet: str) -> ApiResult[None]:
        """Queue *magnet* as a new torrent job.

        The response body is not inspected; only the status is recorded.
        """
        resp = self._resource("add_torrent", torrent_magnet=magnet)
        if not resp.ok:
            logger.warning("Adding magnet failed: %s", _http_error(resp))
            return ApiResult(None, resp.status_code, _http_error(resp))
        return ApiResult(None, resp.status_code)
