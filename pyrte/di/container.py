from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QSettings, QTimer
from PyQt6.QtWidgets import QApplication

from pyrte.bridge import ChannelRegistry, FileBridge
from pyrte.domain.interfaces import IFileService, ISettingsService
from pyrte.domain.models import Document
from pyrte.host import PrivilegedHost
from pyrte.services.config.app_config import AppConfig, build_app_config
from pyrte.services.file_service import FileService
from pyrte.services.settings_service import SettingsService
from pyrte.services.ui.adapters import QtFileDialogService, QtMessageService, QtRichTextSurface
from pyrte.services.ui.async_runner import AsyncRunner
from pyrte.services.ui.main_window import MainWindow
from pyrte.services.ui.presenters import SessionController
from pyrte.services.ui.ports.dialogs import IFileDialogService
from pyrte.utils.constants import APP_NAME, APP_ORG


def _deferred_quit() -> None:
    """Leave the event loop once the current request has unwound."""
    app = QApplication.instance()
    if app is not None:
        QTimer.singleShot(0, app.quit)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the host side (dialogs, files, channel registry)
      - Builds the UI side (window, surface, session controller) on top of the bridge
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: QtMessageService | None = None,
        terminate: Callable[[], None] | None = None,
    ) -> None:
        self.config = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages = messages or QtMessageService()
        self.terminate = terminate or _deferred_quit

        self.registry = ChannelRegistry()
        self.host = PrivilegedHost(
            dialogs=self.dialogs,
            files=self.file_service,
            settings=self.settings_service,
            terminate=self.terminate,
        )
        self.host.register(self.registry)
        self.runner = AsyncRunner()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- UI factories ----------

    def build_bridge(self) -> FileBridge:
        return FileBridge(self.registry)

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        """
        Create the Qt MainWindow and attach a SessionController that owns a
        fresh Document. Dialogs and message boxes are parented to the window.
        """
        window = MainWindow(
            settings=self.settings_service,
            app_title=app_title,
            size=self.config.window_size(),
        )
        self.host.parent = window
        self.messages.parent = window

        surface = QtRichTextSurface(window.editor, placeholder=self.config.placeholder())
        controller = SessionController(
            document=Document(),
            bridge=self.build_bridge(),
            surface=surface,
            prompt=self.messages,
            messages=self.messages,
            view=window,
            parent=window,
        )
        window.attach_controller(controller, self.runner)
        return window
