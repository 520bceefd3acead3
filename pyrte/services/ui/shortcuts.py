from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType

from pyrte.domain.models import PendingAction

SHORTCUTS = MappingProxyType(
    {
        "n": PendingAction.NEW,
        "o": PendingAction.OPEN,
        "s": PendingAction.SAVE,
        "q": PendingAction.QUIT,
    }
)


def is_mac(platform: str | None = None) -> bool:
    return (platform or sys.platform) == "darwin"


@dataclass(frozen=True)
class KeyChord:
    """
    A key press in physical terms: `ctrl` is the Control key and `meta` the
    Command (macOS) / Windows key.
    """

    key: str
    ctrl: bool = False
    meta: bool = False

    def command_held(self, *, mac: bool) -> bool:
        return self.meta if mac else self.ctrl


def resolve(chord: KeyChord, *, mac: bool | None = None) -> PendingAction | None:
    """Map a chord to its session action, or None when it is not a shortcut."""
    if mac is None:
        mac = is_mac()
    if not chord.command_held(mac=mac):
        return None
    return SHORTCUTS.get(chord.key.lower())


def shortcut_text(action: PendingAction, *, mac: bool | None = None) -> str:
    """Human-readable chord for tooltips, e.g. 'Ctrl+S' or '⌘S'."""
    if mac is None:
        mac = is_mac()
    letter = next(k for k, a in SHORTCUTS.items() if a is action).upper()
    return f"⌘{letter}" if mac else f"Ctrl+{letter}"
