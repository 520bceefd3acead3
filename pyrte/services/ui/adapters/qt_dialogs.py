from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from pyrte.services.ui.ports.dialogs import FileFilter, IFileDialogService


def qt_filter(filters: Sequence[FileFilter]) -> str:
    """Qt's `;;`-separated filter string."""
    return ";;".join(str(f) for f in filters)


def _as_path(chosen: str) -> Path | None:
    return Path(chosen) if chosen else None


class QtFileDialogService(IFileDialogService):
    """QFileDialog pickers; an empty selection is reported as None."""

    def choose_open_path(
        self,
        parent: Any | None,
        *,
        title: str,
        start_dir: str | None,
        filters: Sequence[FileFilter],
    ) -> Path | None:
        chosen, _ = QFileDialog.getOpenFileName(parent, title, start_dir or "", qt_filter(filters))
        return _as_path(chosen)

    def choose_save_path(
        self,
        parent: Any | None,
        *,
        title: str,
        start_dir: str | None,
        filters: Sequence[FileFilter],
    ) -> Path | None:
        chosen, _ = QFileDialog.getSaveFileName(parent, title, start_dir or "", qt_filter(filters))
        return _as_path(chosen)
