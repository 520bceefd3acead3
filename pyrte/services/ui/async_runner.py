from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRunner:
    """
    Runs session coroutines from Qt slots on a private asyncio loop.

    Native dialogs are modal and run their own Qt event loop, so each
    coroutine completes inside a single `run()` call. A `run()` issued while
    another is in progress (e.g. from a nested dialog loop) is refused.
    """

    def __init__(self) -> None:
        self._loop = asyncio.new_event_loop()

    def run(self, coro: Coroutine[Any, Any, T]) -> T | None:
        if self._loop.is_closed():
            coro.close()
            raise RuntimeError("AsyncRunner is closed")
        if self._loop.is_running():
            log.warning("Refusing nested request %s", getattr(coro, "__qualname__", coro))
            coro.close()
            return None
        return self._loop.run_until_complete(coro)

    def close(self) -> None:
        if not self._loop.is_closed():
            self._loop.close()
