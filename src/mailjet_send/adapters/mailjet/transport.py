"""Synchronous send entry point for callers without an event loop.

Wraps one :meth:`Client.send` in ``asyncio.run``; the CLI and other
synchronous callers go through here.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from mailjet_send.domain.errors import ConfigurationError
from mailjet_send.domain.payload import Payload

from .client import Client
from .config import MailjetConfig
from .schemas import BatchResponse, Response

logger = logging.getLogger(__name__)


def send_message(
    *,
    config: MailjetConfig,
    payload: Payload,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Response | BatchResponse:
    """Send one payload using configured credentials.

    Args:
        config: Client configuration holding the key pair and API version.
        payload: Message model matching ``config.api_version``.
        transport: Custom httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        The decoded success response.

    Raises:
        ConfigurationError: Keys missing or payload/version mismatch.
        TransportError: No response received.
        ProviderError: Provider rejected the request.
        DecodeError: Response body did not match the expected schema.

    Side Effects:
        Performs one HTTPS request. Logs the attempt and the outcome at INFO.
    """
    if not config.has_credentials:
        raise ConfigurationError(
            "No Mailjet API keys configured (set mailjet.public_key/private_key or MJ_APIKEY_PUBLIC/MJ_APIKEY_PRIVATE)"
        )
    client = Client.from_config(config, transport=transport)
    logger.info("Sending message", extra={"api_version": client.api_version.value, "url": client.send_url})

    response = asyncio.run(client.send(payload))

    if isinstance(response, Response):
        logger.info("Message accepted", extra={"sent": [item.email for item in response.sent]})
    else:
        logger.info("Messages accepted", extra={"statuses": [item.status for item in response.messages]})
    return response


__all__ = ["send_message"]
