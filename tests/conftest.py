from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dataclasses import dataclass
from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pyrte.bridge import ChannelRegistry, FileBridge
from pyrte.bridge.channels import Channel
from pyrte.domain.errors import HostFailure
from pyrte.domain.models import Document, FormatCommand
from pyrte.services.file_service import FileService
from pyrte.services.settings_service import SettingsService
from pyrte.services.ui.presenters import SessionController


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


# --- Session fakes ---


class FakeSurface:
    """In-memory rendering surface. `type()` simulates a user edit."""

    def __init__(self) -> None:
        self.content = ""
        self.text = ""
        self.loads: list[str] = []
        self.formats: list[FormatCommand] = []
        self.placeholder_shown: bool | None = None

    def type(self, text: str) -> None:
        self.text += text
        self.content = f"<p>{self.text}</p>"

    def markup(self) -> str:
        return self.content

    def set_markup(self, markup: str) -> None:
        self.loads.append(markup)
        self.content = markup
        self.text = markup

    def plain_text(self) -> str:
        return self.text

    def exec_format(self, command: FormatCommand) -> None:
        self.formats.append(command)
        if self.text:
            self.content = f"<p data-fmt='{command.value}'>{self.text}</p>"

    def set_placeholder_visible(self, visible: bool) -> None:
        self.placeholder_shown = visible


class FakePrompt:
    """Answers confirmations from a script; records every question asked."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.asked: list[tuple[str, str]] = []
        self.on_prompt = None

    async def confirm(self, title: str, text: str) -> bool:
        self.asked.append((title, text))
        if self.on_prompt is not None:
            await self.on_prompt()
        return self.answer


class FakeMessages:
    def __init__(self) -> None:
        self.parent = None
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))


class FakeView:
    def __init__(self) -> None:
        self.modified: bool | None = None
        self.busy_history: list[bool] = []
        self.statuses: list[str] = []

    def set_modified(self, modified: bool) -> None:
        self.modified = modified

    def set_busy(self, busy: bool) -> None:
        self.busy_history.append(busy)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statuses.append(text)


class StubHost:
    """Stands in for PrivilegedHost behind a real channel registry."""

    def __init__(self) -> None:
        self.open_result: str | None = None
        self.open_error: HostFailure | None = None
        self.save_error: HostFailure | None = None
        self.save_canceled = False
        self.open_calls = 0
        self.saved: list[str] = []
        self.save_calls = 0
        self.quit_calls = 0

    async def request_open(self) -> str | None:
        self.open_calls += 1
        if self.open_error is not None:
            raise self.open_error
        return self.open_result

    async def request_save(self, content: str) -> None:
        self.save_calls += 1
        if self.save_error is not None:
            raise self.save_error
        if not self.save_canceled:
            self.saved.append(content)

    async def request_quit(self) -> None:
        self.quit_calls += 1

    def register(self, registry: ChannelRegistry) -> ChannelRegistry:
        registry.handle(Channel.OPEN_FILE, self.request_open)
        registry.handle(Channel.SAVE_FILE, self.request_save)
        registry.handle(Channel.QUIT_APP, self.request_quit)
        return registry


@dataclass
class Session:
    controller: SessionController
    document: Document
    host: StubHost
    surface: FakeSurface
    prompt: FakePrompt
    messages: FakeMessages
    view: FakeView


@pytest.fixture()
def session() -> Session:
    host = StubHost()
    registry = host.register(ChannelRegistry())
    document = Document()
    surface = FakeSurface()
    prompt = FakePrompt()
    messages = FakeMessages()
    view = FakeView()
    controller = SessionController(
        document=document,
        bridge=FileBridge(registry),
        surface=surface,
        prompt=prompt,
        messages=messages,
        view=view,
    )
    return Session(controller, document, host, surface, prompt, messages, view)
