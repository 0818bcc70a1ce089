"""Domain layer - message models and error types with no I/O.

Contents:
    * :mod:`.recipient` - Recipient value type
    * :mod:`.attachment` - Attachment value type
    * :mod:`.v3` - Send API v3 message
    * :mod:`.v3_1` - Send API v3.1 message and envelope
    * :mod:`.payload` - Payload protocol accepted by the client
    * :mod:`.enums` - SendAPIVersion, StatusCode, OutputFormat
    * :mod:`.errors` - Exception hierarchy
"""

from __future__ import annotations

from . import v3, v3_1
from .attachment import Attachment
from .enums import OutputFormat, SendAPIVersion, StatusCode
from .errors import (
    ConfigurationError,
    DecodeError,
    MailjetError,
    ProviderError,
    TransportError,
)
from .payload import Payload
from .recipient import Recipient

__all__ = [
    # Models
    "Attachment",
    "Payload",
    "Recipient",
    "v3",
    "v3_1",
    # Enums
    "OutputFormat",
    "SendAPIVersion",
    "StatusCode",
    # Errors
    "ConfigurationError",
    "DecodeError",
    "MailjetError",
    "ProviderError",
    "TransportError",
]
