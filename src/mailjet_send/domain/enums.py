"""Type-safe domain enums: Send API versions, provider status codes, output formats."""

from __future__ import annotations

from enum import Enum, IntEnum

_API_ROOT = "https://api.mailjet.com"


class SendAPIVersion(str, Enum):
    """Provider API generation selecting both the endpoint and the payload shape.

    Inherits from str so configuration files and CLI options can use the
    plain version label.

    Attributes:
        V3: Send API v3 (email). Fully supported.
        V3_1: Send API v3.1 (email) using the ``Messages`` envelope.
        V4: SMS API v4. Endpoint only; no payload model is provided.

    Example:
        >>> SendAPIVersion.V3.api_url
        'https://api.mailjet.com/v3'
        >>> SendAPIVersion("v3.1").send_url
        'https://api.mailjet.com/v3.1/send'
        >>> SendAPIVersion.V4.send_url
        'https://api.mailjet.com/v4/sms-send'
    """

    V3 = "v3"
    V3_1 = "v3.1"
    V4 = "v4"

    @property
    def api_url(self) -> str:
        """Base URL of this API generation."""
        return f"{_API_ROOT}/{self.value}"

    @property
    def send_path(self) -> str:
        """Path of the send endpoint relative to :attr:`api_url`."""
        if self is SendAPIVersion.V4:
            return "/sms-send"
        return "/send"

    @property
    def send_url(self) -> str:
        """Absolute URL of the send endpoint."""
        return f"{self.api_url}{self.send_path}"


class StatusCode(IntEnum):
    """HTTP statuses documented by the provider for its REST and Send APIs.

    Unknown statuses are not represented; use :meth:`lookup` to map an
    arbitrary integer without raising.

    Example:
        >>> StatusCode.lookup(429)
        <StatusCode.TOO_MANY_REQUESTS: 429>
        >>> StatusCode.lookup(418) is None
        True
        >>> StatusCode.CREATED.is_success
        True
    """

    #: All went well.
    OK = 200
    #: The POST request was successfully executed.
    CREATED = 201
    #: No content found or expected to return (successful DELETE).
    NO_CONTENT = 204
    #: The PUT request didn't affect any record.
    NOT_MODIFIED = 304
    #: One or more parameters are missing or misspelled.
    BAD_REQUEST = 400
    #: Incorrect API key pair, or the key is inactive.
    UNAUTHORIZED = 401
    #: Not authorized to access this resource.
    FORBIDDEN = 403
    #: The requested resource does not exist.
    NOT_FOUND = 404
    #: The method requested on the resource does not exist.
    METHOD_NOT_ALLOWED = 405
    #: Per-minute call quota reached.
    TOO_MANY_REQUESTS = 429
    #: Provider-side failure; the body carries an ``ErrorIdentifier`` for support.
    INTERNAL_SERVER_ERROR = 500

    @property
    def is_success(self) -> bool:
        return 200 <= self.value < 300

    @classmethod
    def lookup(cls, code: int) -> StatusCode | None:
        try:
            return cls(code)
        except ValueError:
            return None


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "SendAPIVersion",
    "StatusCode",
]
