"""Render MenuEntry descriptors into a native QMenu."""

from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMenu

from auto_seedr.menu import MenuEntry


def _connect(action: QAction, entry: MenuEntry) -> None:
    if entry.action is None:
        return
    callback = entry.action
    action.triggered.connect(lambda _checked=False: callback())


def populate_menu(menu: QMenu, entries: Iterable[MenuEntry]) -> None:
    """Append *entries* (recursively) to *menu*."""
    for entry in entries:
        if entry.separator:
            menu.addSeparator()
            continue

        if entry.submenu:
            sub = menu.addMenu(entry.label)
            sub.setEnabled(entry.enabled)
            if entry.id:
                sub.menuAction().setObjectName(entry.id)
            populate_menu(sub, entry.submenu)
            continue

        action = QAction(entry.label, menu)
        action.setEnabled(entry.enabled)
        if entry.id:
            action.setObjectName(entry.id)
        _connect(action, entry)
        menu.addAction(action)


def rebuild_menu(menu: QMenu, entries: Iterable[MenuEntry]) -> None:
    """Clear *menu* (dropping old submenus) and render *entries* again."""
    for sub in menu.findChildren(QMenu, options=Qt.FindChildOption.FindDirectChildrenOnly):
        sub.deleteLater()
    menu.clear()
    populate_menu(menu, entries)
