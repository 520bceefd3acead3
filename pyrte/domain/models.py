from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pyrte.domain.errors import UnsupportedFormatCommand


@dataclass
class Document:
    """The single editing session: opaque markup plus the unsaved-changes flag."""

    content: str = ""
    dirty: bool = False

    @property
    def is_blank(self) -> bool:
        return self.content.strip() == ""


class PendingAction(Enum):
    """User intent waiting on a confirmation decision."""

    NEW = auto()
    OPEN = auto()
    SAVE = auto()
    QUIT = auto()


class ConfirmationState(Enum):
    IDLE = auto()
    PROMPTING = auto()
    EXECUTED = auto()
    ABORTED = auto()


class FormatCommand(Enum):
    """
    Closed set of formatting operations the toolbar may request.
    Values are the toolbar command names.
    """

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strikeThrough"
    JUSTIFY_LEFT = "justifyLeft"
    JUSTIFY_CENTER = "justifyCenter"
    JUSTIFY_RIGHT = "justifyRight"
    JUSTIFY_FULL = "justifyFull"
    UNORDERED_LIST = "insertUnorderedList"
    ORDERED_LIST = "insertOrderedList"

    @classmethod
    def parse(cls, name: str) -> FormatCommand:
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedFormatCommand(name) from None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    FormatCommand.BOLD: "B",
    FormatCommand.ITALIC: "i",
    FormatCommand.UNDERLINE: "U",
    FormatCommand.STRIKE_THROUGH: "S",
    FormatCommand.JUSTIFY_LEFT: "Left",
    FormatCommand.JUSTIFY_CENTER: "Center",
    FormatCommand.JUSTIFY_RIGHT: "Right",
    FormatCommand.JUSTIFY_FULL: "Justify",
    FormatCommand.UNORDERED_LIST: "• List",
    FormatCommand.ORDERED_LIST: "1. List",
}


def placeholder_visible(text: str) -> bool:
    """The 'Start typing…' hint shows only while the visible text is blank."""
    return text.strip() == ""
