from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker, Qt
from PyQt6.QtGui import QTextListFormat
from PyQt6.QtWidgets import QTextEdit

from pyrte.domain.models import FormatCommand
from pyrte.services.ui.commands import CharStyle, SetAlignment, ToggleCharFormat, ToggleList
from pyrte.services.ui.ports.surface import IRenderingSurface
from pyrte.utils.constants import DEFAULT_PLACEHOLDER

_CHAR_STYLES = {
    FormatCommand.BOLD: CharStyle.BOLD,
    FormatCommand.ITALIC: CharStyle.ITALIC,
    FormatCommand.UNDERLINE: CharStyle.UNDERLINE,
    FormatCommand.STRIKE_THROUGH: CharStyle.STRIKE,
}

_ALIGNMENTS = {
    FormatCommand.JUSTIFY_LEFT: Qt.AlignmentFlag.AlignLeft,
    FormatCommand.JUSTIFY_CENTER: Qt.AlignmentFlag.AlignHCenter,
    FormatCommand.JUSTIFY_RIGHT: Qt.AlignmentFlag.AlignRight,
    FormatCommand.JUSTIFY_FULL: Qt.AlignmentFlag.AlignJustify,
}

_LISTS = {
    FormatCommand.UNORDERED_LIST: QTextListFormat.Style.ListDisc,
    FormatCommand.ORDERED_LIST: QTextListFormat.Style.ListDecimal,
}


class QtRichTextSurface(IRenderingSurface):
    """Narrow adapter over a rich-text QTextEdit; the session never sees the widget."""

    def __init__(self, edit: QTextEdit, *, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        self._e = edit
        self._placeholder = placeholder
        self._e.setAcceptRichText(True)

    def markup(self) -> str:
        doc = self._e.document()
        return "" if doc.isEmpty() else self._e.toHtml()

    def set_markup(self, markup: str) -> None:
        # Programmatic loads are not user edits.
        blocker = QSignalBlocker(self._e)
        try:
            if markup:
                self._e.setHtml(markup)
            else:
                self._e.clear()
        finally:
            blocker.unblock()

    def plain_text(self) -> str:
        return self._e.toPlainText()

    def exec_format(self, command: FormatCommand) -> None:
        if command in _CHAR_STYLES:
            ToggleCharFormat(self._e, _CHAR_STYLES[command]).execute()
        elif command in _ALIGNMENTS:
            SetAlignment(self._e, _ALIGNMENTS[command]).execute()
        elif command in _LISTS:
            ToggleList(self._e, _LISTS[command]).execute()
        else:  # pragma: no cover - enum is closed
            raise ValueError(command)

    def set_placeholder_visible(self, visible: bool) -> None:
        self._e.setPlaceholderText(self._placeholder if visible else "")
