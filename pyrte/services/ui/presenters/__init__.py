from __future__ import annotations

from .session_controller import SessionController

__all__ = ["SessionController"]
