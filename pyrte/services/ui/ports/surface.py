from __future__ import annotations

from typing import Protocol, runtime_checkable

from pyrte.domain.models import FormatCommand


@runtime_checkable
class IRenderingSurface(Protocol):
    """The editable document area. Content is opaque markup to the session."""

    def markup(self) -> str:
        """Current content; empty string for an empty document."""
        ...

    def set_markup(self, markup: str) -> None:
        """Replace content without reporting it as a user edit."""
        ...

    def plain_text(self) -> str: ...
    def exec_format(self, command: FormatCommand) -> None: ...
    def set_placeholder_visible(self, visible: bool) -> None: ...
