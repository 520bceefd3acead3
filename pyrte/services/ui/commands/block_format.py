from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QTextBlockFormat, QTextListFormat
from PyQt6.QtWidgets import QTextEdit


@dataclass(frozen=True)
class SetAlignment:
    """Command: align every paragraph touched by the selection."""

    edit: QTextEdit
    alignment: Qt.AlignmentFlag

    def execute(self) -> None:
        self.edit.setAlignment(self.alignment)


@dataclass(frozen=True)
class ToggleList:
    """
    Command: turn the current paragraph(s) into a list of `style`, or take
    them out of the list if they already are one of that style.
    """

    edit: QTextEdit
    style: QTextListFormat.Style

    def execute(self) -> None:
        c = self.edit.textCursor()
        c.beginEditBlock()
        try:
            current = c.currentList()
            if current is not None and current.format().style() == self.style:
                doc = self.edit.document()
                start = doc.findBlock(c.selectionStart())
                end = doc.findBlock(max(c.selectionEnd(), c.selectionStart()))
                block = start
                while block.isValid():
                    lst = block.textList()
                    if lst is not None:
                        lst.remove(block)
                    reset = QTextBlockFormat(block.blockFormat())
                    reset.setIndent(0)
                    bc = self.edit.textCursor()
                    bc.setPosition(block.position())
                    bc.setBlockFormat(reset)
                    if block == end:
                        break
                    block = block.next()
            else:
                c.createList(self.style)
        finally:
            c.endEditBlock()
        self.edit.setTextCursor(c)
