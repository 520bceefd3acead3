from __future__ import annotations

import logging
from typing import Any

from pyrte.bridge.file_bridge import FileBridge
from pyrte.domain.errors import HostFailure, UnsupportedFormatCommand
from pyrte.domain.models import (
    ConfirmationState,
    Document,
    FormatCommand,
    PendingAction,
    placeholder_visible,
)
from pyrte.services.ui.ports.messages import IConfirmationPrompt, IMessageService
from pyrte.services.ui.ports.surface import IRenderingSurface
from pyrte.services.ui.ports.view import ISessionView
from pyrte.utils.constants import CONFIRM_NEW_TEXT, CONFIRM_QUIT_TEXT

log = logging.getLogger(__name__)


class SessionController:
    """
    Owns the session's Document and turns user intents into bridge calls.

    Destructive intents run through a small state machine:
        IDLE -> PROMPTING -> EXECUTED | ABORTED -> IDLE
    PROMPTING is entered only when the guard holds (dirty and non-blank for
    New, dirty for Quit); otherwise the action executes without a prompt.

    Only one intent runs at a time. While one is suspended on a prompt or a
    bridge call the controller is busy and further intents are ignored.

    Open replaces content without checking for unsaved work, and Save clears
    the dirty flag even when the save dialog was canceled. Both match the
    editor's long-standing behavior.
    """

    def __init__(
        self,
        *,
        document: Document,
        bridge: FileBridge,
        surface: IRenderingSurface,
        prompt: IConfirmationPrompt,
        messages: IMessageService,
        view: ISessionView | None = None,
        parent: Any | None = None,
    ) -> None:
        self.document = document
        self.bridge = bridge
        self.surface = surface
        self.prompt = prompt
        self.messages = messages
        self.view = view
        self.parent = parent

        self.state = ConfirmationState.IDLE
        self.pending: PendingAction | None = None
        self.last_outcome: ConfirmationState | None = None
        self.quitting = False
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def placeholder_visible(self) -> bool:
        return placeholder_visible(self.surface.plain_text())

    # ---------- intents ----------

    async def new(self) -> bool:
        if not self._begin(PendingAction.NEW):
            return False
        try:
            doc = self.document
            if doc.dirty and not doc.is_blank:
                if not await self._confirm(PendingAction.NEW, "New File", CONFIRM_NEW_TEXT):
                    return False
            self._load("")
            self._executed()
            return True
        finally:
            self._end()

    async def open(self) -> bool:
        if not self._begin(PendingAction.OPEN):
            return False
        try:
            try:
                text = await self.bridge.open_file()
            except HostFailure as e:
                self._report("Open Error", "Failed to open file", e)
                return False
            if text is None:
                return False
            self._load(text)
            self._executed()
            self._status("Opened")
            return True
        finally:
            self._end()

    async def save(self) -> bool:
        if not self._begin(PendingAction.SAVE):
            return False
        try:
            try:
                await self.bridge.save_file(self.document.content)
            except HostFailure as e:
                self._report("Save Error", "Failed to save file", e)
                return False
            self._set_dirty(False)
            self._executed()
            self._status("Saved")
            return True
        finally:
            self._end()

    async def quit(self) -> bool:
        if not self._begin(PendingAction.QUIT):
            return False
        try:
            if self.document.dirty:
                if not await self._confirm(PendingAction.QUIT, "Quit", CONFIRM_QUIT_TEXT):
                    return False
            self.quitting = True
            try:
                await self.bridge.quit_app()
            except HostFailure as e:
                self.quitting = False
                self._report("Quit Error", "Failed to quit", e)
                return False
            self._executed()
            return True
        finally:
            self._end()

    async def confirm_close(self) -> bool:
        """Window-close guard: same prompt as Quit, but the host is not asked to quit."""
        if self.quitting:
            return True
        if not self._begin(PendingAction.QUIT):
            return False
        try:
            if self.document.dirty:
                if not await self._confirm(PendingAction.QUIT, "Quit", CONFIRM_QUIT_TEXT):
                    return False
            self._executed()
            return True
        finally:
            self._end()

    # ---------- edits ----------

    def apply_format_command(self, command: FormatCommand | str) -> None:
        if isinstance(command, str) and not isinstance(command, FormatCommand):
            command = FormatCommand.parse(command)
        if not isinstance(command, FormatCommand):
            raise UnsupportedFormatCommand(repr(command))
        self.surface.exec_format(command)
        self.document.content = self.surface.markup()
        self._set_dirty(True)
        self._refresh_placeholder()

    def notify_content_changed(self) -> None:
        self.document.content = self.surface.markup()
        self._set_dirty(True)
        self._refresh_placeholder()

    # ---------- state machine ----------

    def _begin(self, action: PendingAction) -> bool:
        if self._busy:
            log.warning("Ignoring %s: another request is still pending", action.name)
            return False
        self._busy = True
        self.last_outcome = None
        if self.view is not None:
            self.view.set_busy(True)
        return True

    def _end(self) -> None:
        self.state = ConfirmationState.IDLE
        self.pending = None
        self._busy = False
        if self.view is not None:
            self.view.set_busy(False)

    async def _confirm(self, action: PendingAction, title: str, text: str) -> bool:
        self.state = ConfirmationState.PROMPTING
        self.pending = action
        accepted = await self.prompt.confirm(title, text)
        if not accepted:
            self.state = ConfirmationState.ABORTED
            self.last_outcome = ConfirmationState.ABORTED
            log.debug("%s declined", action.name)
        return accepted

    def _executed(self) -> None:
        self.state = ConfirmationState.EXECUTED
        self.last_outcome = ConfirmationState.EXECUTED

    # ---------- helpers ----------

    def _load(self, content: str) -> None:
        self.document.content = content
        self.surface.set_markup(content)
        self._set_dirty(False)
        self._refresh_placeholder()

    def _set_dirty(self, dirty: bool) -> None:
        self.document.dirty = dirty
        if self.view is not None:
            self.view.set_modified(dirty)

    def _refresh_placeholder(self) -> None:
        self.surface.set_placeholder_visible(self.placeholder_visible)

    def _report(self, title: str, lead: str, error: HostFailure) -> None:
        log.error("%s: %s", lead, error)
        self.messages.error(self.parent, title, f"{lead}:\n{error.reason}")

    def _status(self, text: str) -> None:
        if self.view is not None:
            self.view.show_status(text, 3000)
