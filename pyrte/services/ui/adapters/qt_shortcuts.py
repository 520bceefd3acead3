from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QKeyEvent

from pyrte.domain.models import PendingAction
from pyrte.services.ui.shortcuts import KeyChord, is_mac, resolve


def chord_from_event(event: QKeyEvent, *, mac: bool) -> KeyChord:
    """
    Qt reports the macOS Command key as ControlModifier and Control as
    MetaModifier; undo that so the chord names physical keys.
    """
    mods = event.modifiers()
    control = bool(mods & Qt.KeyboardModifier.ControlModifier)
    meta = bool(mods & Qt.KeyboardModifier.MetaModifier)
    key = event.text()
    if not key or not key.isprintable():
        code = event.key()
        key = chr(code) if Qt.Key.Key_A.value <= code <= Qt.Key.Key_Z.value else ""
    if mac:
        return KeyChord(key=key.lower(), ctrl=meta, meta=control)
    return KeyChord(key=key.lower(), ctrl=control, meta=meta)


class ShortcutKeyFilter(QObject):
    """
    Event filter that intercepts New/Open/Save/Quit chords before the
    editor sees them. Intercepted key presses are consumed.
    """

    def __init__(
        self,
        dispatch: Callable[[PendingAction], None],
        *,
        mac: bool | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._dispatch = dispatch
        self._mac = is_mac() if mac is None else mac

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802 (Qt API)
        if event.type() == QEvent.Type.ShortcutOverride or event.type() == QEvent.Type.KeyPress:
            action = resolve(chord_from_event(event, mac=self._mac), mac=self._mac)
            if action is not None:
                event.accept()
                if event.type() == QEvent.Type.KeyPress:
                    self._dispatch(action)
                return True
        return super().eventFilter(obj, event)
