from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pyrte.services.ui.ports.messages import IConfirmationPrompt, IMessageService

_OK = QMessageBox.StandardButton.Ok
_CANCEL = QMessageBox.StandardButton.Cancel


class QtMessageService(IMessageService, IConfirmationPrompt):
    """Message boxes parented to `parent` (set once the main window exists)."""

    def __init__(self, parent: Any | None = None) -> None:
        self.parent = parent

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    async def confirm(self, title: str, text: str) -> bool:
        # The modal box spins Qt's own loop; the awaiting coroutine resumes with the answer.
        answer = QMessageBox.question(self.parent, title, text, _OK | _CANCEL, _OK)
        return answer == _OK
