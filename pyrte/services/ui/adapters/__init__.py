from __future__ import annotations

from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService
from .qt_rich_text_surface import QtRichTextSurface
from .qt_shortcuts import ShortcutKeyFilter

__all__ = [
    "QtFileDialogService",
    "QtMessageService",
    "QtRichTextSurface",
    "ShortcutKeyFilter",
]
