"""Shared HTTP session for talking to Seedr."""

from __future__ import annotations

import requests

from auto_seedr.config import APP_NAME, APP_VERSION


def build_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": f"{APP_NAME}/{APP_VERSION}",
            "Accept": "application/json",
        }
    )
    return session


# Module-level session for connection reuse across API objects.
SESSION = build_session()
