from __future__ import annotations


class PyrteError(Exception):
    """Base class for editor errors."""


class HostFailure(PyrteError):
    """
    The privileged host could not complete a request (file unreadable or
    unwritable, dialog unavailable). Carries the operation name for messages.
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class BridgeProtocolError(PyrteError, TypeError):
    """A bridge call or channel registration violated the channel contract."""


class UnknownChannelError(PyrteError, LookupError):
    """No host handler is registered for the requested channel."""

    def __init__(self, channel: object) -> None:
        self.channel = channel
        super().__init__(f"No handler registered for channel: {channel}")


class UnsupportedFormatCommand(PyrteError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported format command: {name!r}")
