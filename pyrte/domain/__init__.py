"""Domain layer: interfaces, errors and simple models (dataclasses/enums)."""

from .errors import (
    BridgeProtocolError,
    HostFailure,
    PyrteError,
    UnknownChannelError,
    UnsupportedFormatCommand,
)
from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .models import (
    ConfirmationState,
    Document,
    FormatCommand,
    PendingAction,
    placeholder_visible,
)

__all__ = [
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "Document",
    "PendingAction",
    "ConfirmationState",
    "FormatCommand",
    "placeholder_visible",
    "PyrteError",
    "HostFailure",
    "BridgeProtocolError",
    "UnknownChannelError",
    "UnsupportedFormatCommand",
]
