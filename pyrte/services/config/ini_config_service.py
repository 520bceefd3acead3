# pyrte/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

try:
    from platformdirs import user_config_dir  # type: ignore
except Exception:
    user_config_dir = None

from pyrte.domain.interfaces import IConfigService

log = logging.getLogger(__name__)

# Applied underneath whatever file is loaded.
DEFAULTS: Dict[str, Dict[str, str]] = {
    "app": {"version": "0.0.0"},
    "window": {"width": "800", "height": "600"},
    "editor": {"placeholder": "Start typing here..."},
    "logging": {"level": "INFO", "file_level": "DEBUG", "file": ""},
}


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g. ~/.config/PyRichText/config.ini or %APPDATA%\PyRichText\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = "PyRichText"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        for path in self._candidates(explicit_path, project_root):
            try:
                if path.exists():
                    with path.open("r", encoding="utf-8") as fh:
                        self._parser.read_file(fh)
                    self._loaded_from = path
                    break
            except (OSError, configparser.Error) as e:
                # Unreadable files are skipped.
                log.warning("Ignoring unreadable config %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue

        for section, values in DEFAULTS.items():
            if section not in self._parser:
                self._parser[section] = {}
            for key, value in values.items():
                self._parser[section].setdefault(key, value)

    def _candidates(
        self, explicit_path: Optional[Path], project_root: Optional[Path]
    ) -> list[Path]:
        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)

        if user_config_dir:
            candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        else:
            home = Path(os.path.expanduser("~"))
            candidates.append(home / ".config" / self.DEFAULT_APP_DIR / self.DEFAULT_FILE)

        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)
        return candidates

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {sect: dict(self._parser[sect]) for sect in self._parser.sections()}

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
