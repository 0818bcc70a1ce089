"""Domain-specific exceptions for typed error handling at boundaries.

Every failure of a send is raised to the immediate caller as one of the
:class:`MailjetError` subclasses below. Nothing here carries credentials.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .enums import StatusCode


class MailjetError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MailjetError):
    """Missing, invalid, or incomplete client configuration.

    Raised for empty API keys and for payloads built for a different API
    version than the client's.

    Example:
        >>> err = ConfigurationError("Missing private key for Mailjet API client")
        >>> str(err)
        'Missing private key for Mailjet API client'
    """


class TransportError(MailjetError):
    """No HTTP response was received (connection refused, TLS failure, timeout).

    The originating ``httpx`` exception is chained as ``__cause__``.

    Example:
        >>> err = TransportError("ConnectError", url="https://api.mailjet.com/v3/send")
        >>> err.url
        'https://api.mailjet.com/v3/send'
    """

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(f"Error communicating with Mailjet API servers at {url}: {message}")
        self.url = url


class ProviderError(MailjetError):
    """The provider rejected the request with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        message: Human readable message from the envelope, or None.
        identifier: ``ErrorIdentifier`` for provider support, or None.
        envelope: Full decoded error envelope as a plain mapping.
        raw: Undecoded response body.

    Example:
        >>> err = ProviderError(400, message="Invalid FromEmail", envelope={}, raw=b"{}")
        >>> err.status
        <StatusCode.BAD_REQUEST: 400>
        >>> str(err)
        'Mailjet API error 400: Invalid FromEmail'
    """

    def __init__(
        self,
        status_code: int,
        *,
        message: str | None = None,
        identifier: str | None = None,
        envelope: Mapping[str, Any] | None = None,
        raw: bytes = b"",
    ) -> None:
        detail = message or "request rejected"
        super().__init__(f"Mailjet API error {status_code}: {detail}")
        self.status_code = status_code
        self.message = message
        self.identifier = identifier
        self.envelope: dict[str, Any] = dict(envelope or {})
        self.raw = raw

    @property
    def status(self) -> StatusCode | None:
        """Documented :class:`StatusCode` for this error, if any."""
        return StatusCode.lookup(self.status_code)


class DecodeError(MailjetError):
    """The response body does not match the schema expected for its status class.

    Attributes:
        status_code: HTTP status of the response.
        raw: Undecoded response body for caller-side diagnosis.

    Example:
        >>> err = DecodeError(200, b"not json", reason="invalid JSON")
        >>> err.raw
        b'not json'
    """

    def __init__(self, status_code: int, raw: bytes, *, reason: str) -> None:
        super().__init__(f"Unable to decode Mailjet response (HTTP {status_code}): {reason}")
        self.status_code = status_code
        self.raw = raw


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "MailjetError",
    "ProviderError",
    "TransportError",
]
