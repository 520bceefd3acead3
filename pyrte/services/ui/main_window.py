from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QStatusBar, QTextEdit, QToolBar

from pyrte.domain.interfaces import ISettingsService
from pyrte.domain.models import FormatCommand, PendingAction
from pyrte.services.ui.adapters.qt_shortcuts import ShortcutKeyFilter
from pyrte.services.ui.async_runner import AsyncRunner
from pyrte.services.ui.presenters.session_controller import SessionController
from pyrte.services.ui.shortcuts import is_mac, shortcut_text
from pyrte.utils.constants import (
    APP_NAME,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    DIRTY_MARK,
    UNTITLED,
)

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Thin PyQt window; every user intent is forwarded to the SessionController.
    Implements ISessionView structurally.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
        size: tuple[int, int] = (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT),
        mac: bool | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self._app_title = app_title
        self._mac = is_mac() if mac is None else mac
        self._modified = False
        self.controller: SessionController | None = None
        self.runner: AsyncRunner | None = None

        self.resize(*size)

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(True)
        self.setCentralWidget(self.editor)

        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Chords are intercepted before the editor can act on them.
        self.shortcut_filter = ShortcutKeyFilter(self.dispatch, mac=self._mac, parent=self)
        self.editor.installEventFilter(self.shortcut_filter)
        self.installEventFilter(self.shortcut_filter)

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self._update_title()

    def attach_controller(self, controller: SessionController, runner: AsyncRunner) -> None:
        self.controller = controller
        self.runner = runner
        self.editor.textChanged.connect(controller.notify_content_changed)
        controller.surface.set_placeholder_visible(controller.placeholder_visible)
        self.set_modified(controller.document.dirty)

    # ---------- UI creation ----------
    def _build_actions(self):
        def file_action(text: str, action: PendingAction) -> QAction:
            act = QAction(text, self, triggered=lambda chk=False: self.dispatch(action))
            act.setToolTip(f"{text.rstrip('…')} ({shortcut_text(action, mac=self._mac)})")
            return act

        self.act_new = file_action("New", PendingAction.NEW)
        self.act_open = file_action("Open…", PendingAction.OPEN)
        self.act_save = file_action("Save…", PendingAction.SAVE)
        self.act_quit = file_action("Quit", PendingAction.QUIT)
        self.file_actions = (self.act_new, self.act_open, self.act_save, self.act_quit)

        self.format_actions: dict[FormatCommand, QAction] = {}
        for command in FormatCommand:
            act = QAction(
                command.label,
                self,
                triggered=lambda chk=False, c=command: self.apply_format(c),
            )
            act.setToolTip(command.value)
            self.format_actions[command] = act

    def _build_toolbar(self):
        tb = QToolBar("File", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save):
            tb.addAction(a)

        tbf = QToolBar("Formatting", self)
        tbf.setMovable(False)
        for command, a in self.format_actions.items():
            tbf.addAction(a)
            if command in (FormatCommand.STRIKE_THROUGH, FormatCommand.JUSTIFY_FULL):
                tbf.addSeparator()

        self.addToolBar(tb)
        self.addToolBar(tbf)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        formatm = m.addMenu("F&ormat")
        for a in self.format_actions.values():
            formatm.addAction(a)

    # ---------- Intents ----------
    def dispatch(self, action: PendingAction) -> None:
        if self.controller is None:
            return
        log.debug("dispatch %s", action.name)
        intents: dict[PendingAction, Callable[[], Coroutine[Any, Any, bool]]] = {
            PendingAction.NEW: self.controller.new,
            PendingAction.OPEN: self.controller.open,
            PendingAction.SAVE: self.controller.save,
            PendingAction.QUIT: self.controller.quit,
        }
        self._run(intents[action]())

    def apply_format(self, command: FormatCommand) -> None:
        if self.controller is None:
            return
        self.controller.apply_format_command(command)
        self.editor.setFocus()

    def _run(self, coro: Coroutine[Any, Any, bool]) -> bool:
        if self.runner is None:
            coro.close()
            return False
        return bool(self.runner.run(coro))

    # ---------- ISessionView ----------
    def set_modified(self, modified: bool) -> None:
        self._modified = modified
        self._update_title()

    def set_busy(self, busy: bool) -> None:
        for a in self.file_actions:
            a.setEnabled(not busy)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Helpers ----------
    def _update_title(self):
        star = DIRTY_MARK if self._modified else ""
        self.setWindowTitle(f"{UNTITLED}{star} — {self._app_title}")

    # ---------- Close ----------
    def closeEvent(self, event):
        if self.controller is not None and not self.controller.quitting:
            if not self._run(self.controller.confirm_close()):
                event.ignore()
                return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
