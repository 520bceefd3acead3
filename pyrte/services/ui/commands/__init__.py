from __future__ import annotations

from .block_format import SetAlignment, ToggleList
from .char_format import CharStyle, ToggleCharFormat

__all__ = [
    "CharStyle",
    "ToggleCharFormat",
    "SetAlignment",
    "ToggleList",
]
