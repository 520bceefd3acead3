from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PyQt6.QtGui import QFont, QTextCharFormat
from PyQt6.QtWidgets import QTextEdit


class CharStyle(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE = "strike"


@dataclass(frozen=True)
class ToggleCharFormat:
    """
    Command: toggle a character style on the selection, or on the typing
    format at the caret when nothing is selected.
    """

    edit: QTextEdit
    style: CharStyle

    def execute(self) -> None:
        current = self.edit.textCursor().charFormat()
        fmt = QTextCharFormat()
        if self.style is CharStyle.BOLD:
            bold = current.fontWeight() >= QFont.Weight.Bold.value
            fmt.setFontWeight(QFont.Weight.Normal.value if bold else QFont.Weight.Bold.value)
        elif self.style is CharStyle.ITALIC:
            fmt.setFontItalic(not current.fontItalic())
        elif self.style is CharStyle.UNDERLINE:
            fmt.setFontUnderline(not current.fontUnderline())
        else:
            fmt.setFontStrikeOut(not current.fontStrikeOut())
        self.edit.mergeCurrentCharFormat(fmt)
