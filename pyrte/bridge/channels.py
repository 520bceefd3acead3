from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from pyrte.domain.errors import BridgeProtocolError, UnknownChannelError

log = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Any]]


class Channel(str, Enum):
    """Wire names of the requests the UI may send to the host."""

    OPEN_FILE = "dialog:openFile"
    SAVE_FILE = "dialog:saveFile"
    QUIT_APP = "app:quit"


class ChannelRegistry:
    """
    Host-side table of request handlers, one per channel.
    Only members of `Channel` can be registered or invoked.
    """

    def __init__(self) -> None:
        self._handlers: dict[Channel, Handler] = {}

    def handle(self, channel: Channel, handler: Handler) -> None:
        if not isinstance(channel, Channel):
            raise BridgeProtocolError(f"Not a bridge channel: {channel!r}")
        if channel in self._handlers:
            raise BridgeProtocolError(f"Handler already registered for {channel.value}")
        self._handlers[channel] = handler

    @property
    def channels(self) -> frozenset[Channel]:
        return frozenset(self._handlers)

    async def invoke(self, channel: Channel, *args: Any) -> Any:
        handler = self._handlers.get(channel) if isinstance(channel, Channel) else None
        if handler is None:
            raise UnknownChannelError(channel)
        log.debug("invoke %s", channel.value)
        return await handler(*args)
