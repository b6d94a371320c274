from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

from auto_seedr.config import APP_NAME


def show_device_code_dialog(parent: QWidget | None, user_code: str) -> None:
    """Blocking info box telling the user which code to enter on Seedr."""
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Icon.Information)
    box.setWindowTitle(APP_NAME)
    box.setText("Please add the token below, it's already copied to your clipboard")
    box.setInformativeText(user_code)
    box.addButton("OK", QMessageBox.ButtonRole.AcceptRole)
    box.exec()
