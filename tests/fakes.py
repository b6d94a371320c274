"""Network fakes shared by the API tests."""

from __future__ import annotations

from typing import Any

from auto_seedr.config import CONFIG

AUTHORIZE_URL = CONFIG.device_authorize_url


class FakeResponse:
    """Simple fake response for testing network helpers."""

    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records requests and answers from a per-URL response table.

    The device authorize endpoint answers with ``token`` unless overridden.
    """

    def __init__(self, responses: dict[str, FakeResponse] | None = None, token: str | None = "TOKEN") -> None:
        self.responses = dict(responses or {})
        self.token = token
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _answer(self, url: str) -> FakeResponse:
        if url in self.responses:
            return self.responses[url]
        if url == AUTHORIZE_URL:
            return FakeResponse({"access_token": self.token} if self.token else {"error": "pending"})
        raise AssertionError(f"unexpected request to {url}")

    def get(self, url: str, params: dict[str, Any] | None = None, timeout: Any = None) -> FakeResponse:
        self.calls.append(("GET", url, dict(params or {})))
        return self._answer(url)

    def post(self, url: str, data: dict[str, Any] | None = None, timeout: Any = None) -> FakeResponse:
        self.calls.append(("POST", url, dict(data or {})))
        return self._answer(url)

    def calls_to(self, url: str) -> list[tuple[str, str, dict[str, Any]]]:
        return [c for c in self.calls if c[1] == url]


class MemoryStore:
    """In-memory stand-in for CredentialStore."""

    def __init__(self, code: str | None = None) -> None:
        self.code = code

    def device_code(self) -> str | None:
        return self.code

    def set_device_code(self, code: str) -> None:
        self.code = code
