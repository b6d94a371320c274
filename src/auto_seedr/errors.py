"""Exceptions raised by the Seedr API layer."""

from __future__ import annotations


class SeedrError(Exception):
    """Base class for auto-seedr API errors."""


class SeedrResponseError(SeedrError):
    """Raised when a response body that must be JSON cannot be decoded."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Seedr API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
