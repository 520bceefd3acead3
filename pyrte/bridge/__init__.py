"""Request protocol between the session logic and the privileged host."""

from .channels import Channel, ChannelRegistry
from .file_bridge import FileBridge

__all__ = ["Channel", "ChannelRegistry", "FileBridge"]
