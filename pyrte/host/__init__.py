"""Privileged side: dialogs, disk I/O and process lifetime."""

from .privileged_host import PrivilegedHost

__all__ = ["PrivilegedHost"]
