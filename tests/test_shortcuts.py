from __future__ import annotations

import pytest

from pyrte.domain.models import PendingAction
from pyrte.services.ui.shortcuts import KeyChord, is_mac, resolve, shortcut_text


@pytest.mark.parametrize(
    "key, action",
    [("n", PendingAction.NEW), ("o", PendingAction.OPEN), ("s", PendingAction.SAVE), ("q", PendingAction.QUIT)],
)
def test_table_on_both_platforms(key, action):
    assert resolve(KeyChord(key, ctrl=True), mac=False) is action
    assert resolve(KeyChord(key, meta=True), mac=True) is action


def test_save_needs_control_off_mac():
    assert resolve(KeyChord("s", ctrl=True), mac=False) is PendingAction.SAVE
    assert resolve(KeyChord("s", meta=True), mac=False) is None


def test_save_needs_command_on_mac():
    assert resolve(KeyChord("s", meta=True), mac=True) is PendingAction.SAVE
    assert resolve(KeyChord("s", ctrl=True), mac=True) is None


def test_no_modifier_never_fires():
    assert resolve(KeyChord("s"), mac=False) is None
    assert resolve(KeyChord("s"), mac=True) is None


def test_unmapped_key():
    assert resolve(KeyChord("x", ctrl=True), mac=False) is None
    assert resolve(KeyChord("", ctrl=True), mac=False) is None


def test_key_case_is_ignored():
    assert resolve(KeyChord("S", ctrl=True), mac=False) is PendingAction.SAVE


def test_is_mac():
    assert is_mac("darwin") is True
    assert is_mac("linux") is False
    assert is_mac("win32") is False


def test_shortcut_text():
    assert shortcut_text(PendingAction.SAVE, mac=False) == "Ctrl+S"
    assert shortcut_text(PendingAction.QUIT, mac=True) == "⌘Q"
