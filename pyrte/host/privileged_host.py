from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pyrte.bridge.channels import Channel, ChannelRegistry
from pyrte.domain.errors import HostFailure
from pyrte.domain.interfaces import IFileService, ISettingsService
from pyrte.services.ui.ports.dialogs import ALL_FILES, FileFilter, IFileDialogService

log = logging.getLogger(__name__)

OPEN_FILTERS = (FileFilter("Documents", ("*.html", "*.htm", "*.txt")), ALL_FILES)
SAVE_FILTERS = (FileFilter("HTML", ("*.html", "*.htm")), ALL_FILES)


class PrivilegedHost:
    """
    Owns native dialogs, disk access and process termination.

    The UI side reaches these capabilities only through the channels bound
    by `register()`.
    """

    def __init__(
        self,
        *,
        dialogs: IFileDialogService,
        files: IFileService,
        terminate: Callable[[], None],
        settings: ISettingsService | None = None,
        parent: Any | None = None,
    ) -> None:
        self.dialogs = dialogs
        self.files = files
        self.settings = settings
        self.parent = parent
        self._terminate = terminate

    def register(self, registry: ChannelRegistry) -> ChannelRegistry:
        registry.handle(Channel.OPEN_FILE, self.request_open)
        registry.handle(Channel.SAVE_FILE, self.request_save)
        registry.handle(Channel.QUIT_APP, self.request_quit)
        return registry

    # ---------- capabilities ----------

    async def request_open(self) -> str | None:
        try:
            path = self.dialogs.choose_open_path(
                self.parent, title="Open File", start_dir=self._start_dir(), filters=OPEN_FILTERS
            )
            if path is None:
                log.debug("open canceled")
                return None
            text = self.files.read_text(path)
        except (OSError, UnicodeDecodeError, RuntimeError) as e:
            log.error("Open failed: %s", e)
            raise HostFailure("Open", str(e)) from e
        self._remember_dir(path)
        log.info("Opened %s (%d chars)", path, len(text))
        return text

    async def request_save(self, content: str) -> None:
        try:
            path = self.dialogs.choose_save_path(
                self.parent, title="Save File", start_dir=self._start_dir(), filters=SAVE_FILTERS
            )
            if path is None:
                log.debug("save canceled")
                return
            self.files.write_text_atomic(path, content)
        except (OSError, RuntimeError) as e:
            log.error("Save failed: %s", e)
            raise HostFailure("Save", str(e)) from e
        self._remember_dir(path)
        log.info("Saved %s", path)

    async def request_quit(self) -> None:
        log.info("Quit requested")
        self._terminate()

    # ---------- helpers ----------

    def _start_dir(self) -> str | None:
        return self.settings.get_last_dir() if self.settings else None

    def _remember_dir(self, path: Path) -> None:
        if self.settings:
            self.settings.set_last_dir(str(path.parent))
