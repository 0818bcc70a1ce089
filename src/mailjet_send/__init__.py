"""Client for the Mailjet transactional email Send API.

Build a message, hand it to a :class:`Client` and await ``send``::

    client = Client(SendAPIVersion.V3, public_key, private_key)
    message = Message("sender@company.com", "Sender", "Subject")
    message.push_recipient(Recipient("passenger@mailjet.com"))
    response = await client.send(message)

Synchronous callers use :func:`send_message` with a :class:`MailjetConfig`.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.files import attachment_from_file, check_attachment_size, file_to_base64
from .adapters.mailjet import (
    ApiError,
    BatchResponse,
    Client,
    MailjetConfig,
    MessageResult,
    Response,
    Sent,
    SentTo,
    load_mailjet_config_from_dict,
    send_message,
)
from .composition import get_config
from .domain import v3, v3_1
from .domain.attachment import Attachment
from .domain.enums import SendAPIVersion, StatusCode
from .domain.errors import (
    ConfigurationError,
    DecodeError,
    MailjetError,
    ProviderError,
    TransportError,
)
from .domain.payload import Payload
from .domain.recipient import Recipient
from .domain.v3 import Message

__all__ = [
    # Models
    "Attachment",
    "Message",
    "Payload",
    "Recipient",
    "v3",
    "v3_1",
    # Client
    "Client",
    "MailjetConfig",
    "load_mailjet_config_from_dict",
    "send_message",
    # Responses
    "ApiError",
    "BatchResponse",
    "MessageResult",
    "Response",
    "Sent",
    "SentTo",
    # Enums
    "SendAPIVersion",
    "StatusCode",
    # Errors
    "ConfigurationError",
    "DecodeError",
    "MailjetError",
    "ProviderError",
    "TransportError",
    # Files
    "attachment_from_file",
    "check_attachment_size",
    "file_to_base64",
    # Configuration and metadata
    "get_config",
    "print_info",
]
