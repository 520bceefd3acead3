from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ISessionView(Protocol):
    """Window chrome the session controller drives (implemented by the Qt MainWindow)."""

    def set_modified(self, modified: bool) -> None: ...
    def set_busy(self, busy: bool) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...
