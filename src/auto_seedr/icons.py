"""Icon and theme helpers for auto-seedr.

This module provides:
- Loading the tray icon from the system theme.
- Recoloring monochrome (symbolic) theme icons for the panel.
- A painted fallback so the tray never shows an empty icon.
- Detecting dark/light theme heuristically.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import QApplication

# Seedr brand green.
BRAND_COLOR = QColor(107, 179, 62)

SYMBOLIC_THEME_NAMES = ("auto_seedr-symbolic", "folder-download-symbolic")
APP_THEME_NAMES = ("auto_seedr", "folder-download")


# ---------------------------------------------------------------------------
# Resource loading
# ---------------------------------------------------------------------------


def _theme_icon(theme_names: Sequence[str]) -> QIcon:
    """Return the first non-null theme icon among *theme_names*."""
    for name in theme_names:
        icon = QIcon.fromTheme(name)
        if not icon.isNull():
            return icon
    return QIcon()


def painted_icon(size: int = 64) -> QIcon:
    """Draw a rounded badge with an "S" in the brand color."""
    pm = QPixmap(size, size)
    pm.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pm)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(BRAND_COLOR)
    radius = size // 5
    painter.drawRoundedRect(0, 0, size, size, radius, radius)

    font = QFont()
    font.setBold(True)
    font.setPixelSize(int(size * 0.7))
    painter.setFont(font)
    painter.setPen(QColor(255, 255, 255))
    painter.drawText(pm.rect(), Qt.AlignmentFlag.AlignCenter, "S")
    painter.end()

    icon = QIcon()
    icon.addPixmap(pm)
    return icon


# ---------------------------------------------------------------------------
# Public loaders
# ---------------------------------------------------------------------------


def load_app_icon() -> QIcon:
    """Load the application icon.

    Priority:
        1. Theme icons "auto_seedr", "folder-download"
        2. Painted badge
    """
    icon = _theme_icon(APP_THEME_NAMES)
    if not icon.isNull():
        return icon
    return painted_icon()


def load_tray_icon() -> QIcon:
    """Load the tray icon, recoloring symbolic theme icons for the panel."""
    symbolic = _theme_icon(SYMBOLIC_THEME_NAMES)
    if not symbolic.isNull():
        color = QColor(255, 255, 255) if is_dark_theme() else QColor(0, 0, 0)
        return recolor_icon(symbolic, color)
    return load_app_icon()


# ---------------------------------------------------------------------------
# Icon manipulation
# ---------------------------------------------------------------------------


def recolor_icon(base_icon: QIcon, color: QColor, size: int = 24) -> QIcon:
    """Recolor a monochrome icon to the given color, preserving alpha."""
    if base_icon.isNull():
        return base_icon

    pm = base_icon.pixmap(size, size)
    if pm.isNull():
        return base_icon

    out = QPixmap(pm.size())
    out.fill(Qt.GlobalColor.transparent)

    painter = QPainter(out)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.drawPixmap(0, 0, pm)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceIn)
    painter.fillRect(out.rect(), color)
    painter.end()

    icon = QIcon()
    icon.addPixmap(out)
    return icon


# ---------------------------------------------------------------------------
# Theme detection
# ---------------------------------------------------------------------------


def is_dark_theme() -> bool:
    """Heuristic: detect whether the system palette looks dark.

    Checks the luminance of the window background color.
    """
    app = QApplication.instance()
    if app is None:
        return False

    color = app.palette().window().color()
    r, g, b = color.red(), color.green(), color.blue()

    # Perceptual luminance
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255.0
    return luminance < 0.5
