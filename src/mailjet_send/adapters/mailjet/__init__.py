"""Mailjet adapter - HTTP client, response schemas and configuration.

Structure:
    * :mod:`.config` - MailjetConfig model and loader
    * :mod:`.schemas` - Response, BatchResponse and ApiError schemas
    * :mod:`.client` - Async Client and response decoding
    * :mod:`.transport` - Synchronous send_message wrapper
"""

from __future__ import annotations

from .client import Client, decode_response
from .config import MailjetConfig, load_mailjet_config_from_dict
from .schemas import ApiError, BatchResponse, MessageResult, Response, Sent, SentTo
from .transport import send_message

__all__ = [
    "ApiError",
    "BatchResponse",
    "Client",
    "MailjetConfig",
    "MessageResult",
    "Response",
    "Sent",
    "SentTo",
    "decode_response",
    "load_mailjet_config_from_dict",
    "send_message",
]
