from __future__ import annotations

from pyrte.bridge.channels import Channel, ChannelRegistry
from pyrte.domain.errors import BridgeProtocolError


class FileBridge:
    """
    The only path from the session logic to the privileged host.

    Exposes exactly three awaitable operations. The object is slotted so
    nothing else can be hung off it, and it is handed to the session
    controller only, never to the rendering surface.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: ChannelRegistry) -> None:
        missing = [c.value for c in Channel if c not in registry.channels]
        if missing:
            raise BridgeProtocolError(f"Host does not serve: {', '.join(missing)}")
        self._registry = registry

    async def open_file(self) -> str | None:
        """Ask the host for a file; None means the picker was canceled."""
        result = await self._registry.invoke(Channel.OPEN_FILE)
        if result is not None and not isinstance(result, str):
            raise BridgeProtocolError(
                f"{Channel.OPEN_FILE.value} returned {type(result).__name__}, expected text"
            )
        return result

    async def save_file(self, content: str) -> None:
        """Ask the host to save `content`; saved and canceled look the same."""
        if not isinstance(content, str):
            raise BridgeProtocolError(
                f"{Channel.SAVE_FILE.value} expects text, got {type(content).__name__}"
            )
        await self._registry.invoke(Channel.SAVE_FILE, content)

    async def quit_app(self) -> None:
        await self._registry.invoke(Channel.QUIT_APP)
