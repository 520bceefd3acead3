from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """Reports failures to the user. Decouples session logic from Qt widgets."""

    def error(self, parent: Any | None, title: str, text: str) -> None: ...


@runtime_checkable
class IConfirmationPrompt(Protocol):
    """Awaitable OK/Cancel decision; the caller stays suspended until the user answers."""

    async def confirm(self, title: str, text: str) -> bool: ...
