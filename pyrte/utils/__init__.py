"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CONFIRM_NEW_TEXT,
    CONFIRM_QUIT_TEXT,
    DEFAULT_PLACEHOLDER,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    DIRTY_MARK,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    TEXT_ENCODING,
    UNTITLED,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "TEXT_ENCODING",
    "DEFAULT_WINDOW_WIDTH",
    "DEFAULT_WINDOW_HEIGHT",
    "DEFAULT_PLACEHOLDER",
    "UNTITLED",
    "DIRTY_MARK",
    "CONFIRM_NEW_TEXT",
    "CONFIRM_QUIT_TEXT",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
]
