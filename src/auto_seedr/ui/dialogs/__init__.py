from __future__ import annotations

from .device_code import show_device_code_dialog

__all__ = [
    "show_device_code_dialog",
]
