from __future__ import annotations

import logging
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pyrte.domain.interfaces import IAppConfig
from pyrte.services.config.ini_config_service import IniConfigService
from pyrte.utils.constants import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller bundles expose sys._MEIPASS as bundle root
      - dev mode walks upward from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # pyrte/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


def _parse_level(raw: str | None, default: int) -> int:
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService with typed accessors for the editor's settings
    and resolves the application version.

    Precedence for version:
      1) <project_root>/version file (e.g. v1.0.5)
      2) [app] version from the INI file
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- typed settings ----

    def window_size(self) -> tuple[int, int]:
        w = self.ini.get_int("window", "width", DEFAULT_WINDOW_WIDTH) or DEFAULT_WINDOW_WIDTH
        h = self.ini.get_int("window", "height", DEFAULT_WINDOW_HEIGHT) or DEFAULT_WINDOW_HEIGHT
        return max(w, 200), max(h, 150)

    def placeholder(self) -> str:
        return self.ini.get("editor", "placeholder", DEFAULT_PLACEHOLDER) or DEFAULT_PLACEHOLDER

    @property
    def log_level(self) -> int:
        return _parse_level(self.ini.get("logging", "level"), logging.INFO)

    @property
    def file_log_level(self) -> int:
        return _parse_level(self.ini.get("logging", "file_level"), logging.DEBUG)

    @property
    def log_file(self) -> Path | None:
        raw = (self.ini.get("logging", "file", "") or "").strip()
        return Path(raw).expanduser() if raw else None

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
