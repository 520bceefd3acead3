from __future__ import annotations

from .dialogs import FileFilter, IFileDialogService
from .messages import IConfirmationPrompt, IMessageService
from .surface import IRenderingSurface
from .view import ISessionView

__all__ = [
    "FileFilter",
    "IFileDialogService",
    "IMessageService",
    "IConfirmationPrompt",
    "IRenderingSurface",
    "ISessionView",
]
