from __future__ import annotations

import pytest
from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QKeyEvent

from pyrte.domain.models import PendingAction
from pyrte.services.ui.adapters.qt_shortcuts import ShortcutKeyFilter, chord_from_event
from pyrte.services.ui.shortcuts import KeyChord

CTRL = Qt.KeyboardModifier.ControlModifier
META = Qt.KeyboardModifier.MetaModifier


def key_event(letter: str, modifiers, kind=QEvent.Type.KeyPress) -> QKeyEvent:
    code = getattr(Qt.Key, f"Key_{letter.upper()}").value
    return QKeyEvent(kind, code, modifiers, chr(ord(letter.upper()) - 64))


@pytest.fixture()
def dispatched() -> list[PendingAction]:
    return []


def make_filter(qapp, dispatched, *, mac: bool) -> ShortcutKeyFilter:
    return ShortcutKeyFilter(dispatched.append, mac=mac)


# ------------------------------
# Modifier mapping
# ------------------------------


def test_chord_keeps_modifiers_off_mac(qapp):
    assert chord_from_event(key_event("s", CTRL), mac=False) == KeyChord("s", ctrl=True)
    assert chord_from_event(key_event("s", META), mac=False) == KeyChord("s", meta=True)


def test_chord_swaps_qt_mac_mapping(qapp):
    # On macOS Qt reports Command as ControlModifier and Control as MetaModifier.
    assert chord_from_event(key_event("s", CTRL), mac=True) == KeyChord("s", meta=True)
    assert chord_from_event(key_event("s", META), mac=True) == KeyChord("s", ctrl=True)


# ------------------------------
# Filter behavior
# ------------------------------


def test_command_s_saves_on_mac(qapp, dispatched):
    f = make_filter(qapp, dispatched, mac=True)
    target = QObject()

    assert f.eventFilter(target, key_event("s", CTRL)) is True
    assert dispatched == [PendingAction.SAVE]


def test_control_s_does_nothing_on_mac(qapp, dispatched):
    f = make_filter(qapp, dispatched, mac=True)
    target = QObject()

    assert f.eventFilter(target, key_event("s", META)) is False
    assert dispatched == []


def test_meta_s_does_nothing_off_mac(qapp, dispatched):
    f = make_filter(qapp, dispatched, mac=False)
    assert f.eventFilter(QObject(), key_event("s", META)) is False
    assert f.eventFilter(QObject(), key_event("s", CTRL)) is True
    assert dispatched == [PendingAction.SAVE]


def test_shortcut_override_is_claimed_without_dispatch(qapp, dispatched):
    f = make_filter(qapp, dispatched, mac=True)
    ev = key_event("q", CTRL, QEvent.Type.ShortcutOverride)

    assert f.eventFilter(QObject(), ev) is True
    assert ev.isAccepted()
    assert dispatched == []
