from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class FileFilter:
    """One entry of a picker's type list, e.g. `Documents (*.html *.txt)`."""

    label: str
    patterns: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.label} ({' '.join(self.patterns)})"


ALL_FILES = FileFilter("All files", ("*",))


@runtime_checkable
class IFileDialogService(Protocol):
    """Native file pickers. The caller owns titles and filters; None means canceled."""

    def choose_open_path(
        self,
        parent: Any | None,
        *,
        title: str,
        start_dir: str | None,
        filters: Sequence[FileFilter],
    ) -> Path | None: ...

    def choose_save_path(
        self,
        parent: Any | None,
        *,
        title: str,
        start_dir: str | None,
        filters: Sequence[FileFilter],
    ) -> Path | None: ...
