"""Asynchronous Send API client.

The client holds the API version, the key pair and the endpoint, all
read-only after construction. Each :meth:`Client.send` opens its own
``httpx.AsyncClient``, performs exactly one POST and closes it again, so
one instance can be shared by any number of concurrent callers.

Outcomes of a send:

* 2xx with a decodable body - the version's success model is returned.
* non-2xx with a decodable envelope - :class:`ProviderError`.
* any status with an undecodable body - :class:`DecodeError`.
* no response at all - :class:`TransportError`.

Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

import httpx
import orjson
from pydantic import BaseModel, ValidationError

from mailjet_send.domain.enums import SendAPIVersion
from mailjet_send.domain.errors import ConfigurationError, DecodeError, ProviderError, TransportError
from mailjet_send.domain.payload import Payload
from mailjet_send.domain.v3 import Message as MessageV3

from .schemas import ApiError, BatchResponse, Response

if TYPE_CHECKING:
    from .config import MailjetConfig

logger = logging.getLogger(__name__)

_JSON_HEADERS: Final[dict[str, str]] = {"Content-Type": "application/json"}

#: Success model decoded for each API generation that has a payload model.
_SUCCESS_MODELS: Final[dict[SendAPIVersion, type[BaseModel]]] = {
    SendAPIVersion.V3: Response,
    SendAPIVersion.V3_1: BatchResponse,
}


def _load_json(status_code: int, raw: bytes) -> object:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise DecodeError(status_code, raw, reason=f"invalid JSON ({exc})") from exc


def decode_response(api_version: SendAPIVersion, status_code: int, raw: bytes) -> Response | BatchResponse:
    """Turn an HTTP status and body into a success model or a typed error.

    Args:
        api_version: Version whose success schema applies to 2xx bodies.
        status_code: HTTP status of the response.
        raw: Undecoded response body.

    Returns:
        :class:`Response` for v3, :class:`BatchResponse` for v3.1.

    Raises:
        ProviderError: Non-2xx status with a decodable error envelope.
        DecodeError: Body does not match the schema for its status class.
        ConfigurationError: No success schema exists for ``api_version``.

    Example:
        >>> decode_response(SendAPIVersion.V3, 200, b'{"Sent":[{"Email":"c@d.com","MessageID":1}]}').sent[0].email
        'c@d.com'
    """
    if 200 <= status_code < 300:
        model = _SUCCESS_MODELS.get(api_version)
        if model is None:
            raise ConfigurationError(f"No response model for Send API {api_version.value}")
        data = _load_json(status_code, raw)
        try:
            return model.model_validate(data)  # type: ignore[return-value]
        except ValidationError as exc:
            raise DecodeError(status_code, raw, reason=f"unexpected success body ({exc.error_count()} errors)") from exc

    data = _load_json(status_code, raw)
    try:
        envelope = ApiError.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(status_code, raw, reason="unexpected error body") from exc
    raise ProviderError(
        status_code,
        message=envelope.describe(),
        identifier=envelope.error_identifier,
        envelope=envelope.model_dump(by_alias=True, exclude_none=True),
        raw=raw,
    )


class Client:
    """Mailjet Send API client authenticated with an API key pair.

    Keys come from https://app.mailjet.com/account/api_keys. The public key
    is the Basic Auth user, the private key the password.

    Args:
        api_version: Send API generation; selects the endpoint.
        public_key: API key.
        private_key: API secret key.
        base_url: Override for the version's base URL (sandbox, proxy, tests).
        timeout: Seconds before httpx gives up; None imposes no timeout.
        transport: Custom httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Raises:
        ConfigurationError: Either key is empty.

    Example:
        >>> client = Client(SendAPIVersion.V3, "public_key", "private_key")
        >>> client.send_url
        'https://api.mailjet.com/v3/send'
        >>> "private_key" in repr(client)
        False
    """

    __slots__ = ("_api_version", "_public_key", "_private_key", "_base_url", "_timeout", "_transport")

    def __init__(
        self,
        api_version: SendAPIVersion,
        public_key: str,
        private_key: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not public_key:
            raise ConfigurationError("Missing public key for Mailjet API client")
        if not private_key:
            raise ConfigurationError("Missing private key for Mailjet API client")
        self._api_version = SendAPIVersion(api_version)
        self._public_key = public_key
        self._private_key = private_key
        self._base_url = (base_url or self._api_version.api_url).rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: MailjetConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> Client:
        """Build a client from validated configuration.

        Raises:
            ConfigurationError: The configuration carries no key pair.
        """
        return cls(
            config.api_version,
            config.public_key or "",
            config.private_key or "",
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def api_version(self) -> SendAPIVersion:
        return self._api_version

    @property
    def public_key(self) -> str:
        return self._public_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def send_url(self) -> str:
        return f"{self._base_url}{self._api_version.send_path}"

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def __repr__(self) -> str:
        return (
            f"Client(api_version={self._api_version.value!r}, "
            f"public_key={self._public_key!r}, base_url={self._base_url!r})"
        )

    async def send(self, payload: Payload) -> Response | BatchResponse:
        """Submit one payload to the send endpoint.

        Suspends only while awaiting the HTTP round trip.

        Args:
            payload: A message model for this client's API version.

        Returns:
            The decoded success response.

        Raises:
            ConfigurationError: Payload built for another API version, or no
                response model exists for this client's version (V4).
            TransportError: No response received.
            ProviderError: Provider rejected the request.
            DecodeError: Response body did not match the expected schema.
        """
        if payload.api_version is not self._api_version:
            raise ConfigurationError(
                f"Payload for Send API {payload.api_version.value} cannot be sent "
                f"with a {self._api_version.value} client"
            )
        if self._api_version not in _SUCCESS_MODELS:
            raise ConfigurationError(f"No response model for Send API {self._api_version.value}")
        if isinstance(payload, MessageV3) and payload.uses_mixed_addressing:
            logger.warning(
                "Message sets both Recipients and To/Cc/Bcc; both are sent as-is",
                extra={"from_email": payload.from_email},
            )

        body = payload.to_json()
        url = self.send_url
        logger.debug(
            "Sending payload to Mailjet",
            extra={"url": url, "api_version": self._api_version.value, "bytes": len(body)},
        )

        status_code = 0
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as http:
                async with http.stream(
                    "POST",
                    url,
                    content=body,
                    headers=_JSON_HEADERS,
                    auth=(self._public_key, self._private_key),
                ) as response:
                    status_code = response.status_code
                    raw = await response.aread()
        except httpx.DecodingError as exc:
            # Content-Encoding did not match the body
            raise DecodeError(status_code, b"", reason=f"undecodable body ({exc})") from exc
        except httpx.RequestError as exc:
            raise TransportError(type(exc).__name__, url=url) from exc

        logger.debug("Mailjet responded", extra={"url": url, "status_code": status_code})
        return decode_response(self._api_version, status_code, raw)


__all__ = ["Client", "decode_response"]
