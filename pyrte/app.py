from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pyrte.di.container import Container
from pyrte.logging_config import setup_logging
from pyrte.services.config.app_config import build_app_config
from pyrte.utils.constants import APP_NAME, APP_ORG


def _config_arg(argv: Sequence[str]) -> Path | None:
    """Optional `--config PATH` on the command line."""
    args = list(argv[1:])
    if "--config" in args:
        i = args.index("--config")
        if i + 1 < len(args):
            return Path(args[i + 1])
    return None


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, loads configuration and logging, composes the application
    via the DI container, and launches the main window.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    config = build_app_config(explicit_ini=_config_arg(argv))
    log = setup_logging(config)
    log.info("%s %s starting (config: %s)", APP_NAME, config.get_version(), config.loaded_from)

    container = Container.default(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    try:
        return app.exec()
    finally:
        container.runner.close()
        log.info("Exited")
