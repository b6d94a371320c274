"""Tray application for managing Seedr folders and magnet links.

This module delegates to the UI package:

    auto_seedr.ui.application:main
"""

from __future__ import annotations

from auto_seedr.ui.application import main

if __name__ == "__main__":
    raise SystemExit(main())
