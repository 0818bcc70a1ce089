"""Pydantic schemas for Send API responses.

Response bodies are validated once, at the HTTP boundary. Field aliases
mirror the provider's PascalCase keys; attributes use snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Sent(BaseModel):
    """One delivered recipient in a v3 send response."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(alias="Email")
    message_id: int = Field(alias="MessageID")
    message_uuid: str | None = Field(default=None, alias="MessageUUID")


class Response(BaseModel):
    """Successful v3 send response.

    Example:
        >>> response = Response.model_validate(
        ...     {"Sent": [{"Email": "passenger@mailjet.com", "MessageID": 111111111111111}]}
        ... )
        >>> response.sent[0].email
        'passenger@mailjet.com'
        >>> response.sent[0].message_uuid is None
        True
    """

    model_config = ConfigDict(frozen=True)

    sent: list[Sent] = Field(alias="Sent")


class SentTo(BaseModel):
    """One addressed recipient in a v3.1 message result."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(alias="Email")
    message_uuid: str = Field(alias="MessageUUID")
    message_id: int = Field(alias="MessageID")
    message_href: str | None = Field(default=None, alias="MessageHref")


class MessageResult(BaseModel):
    """Per-message outcome inside a v3.1 batch response."""

    model_config = ConfigDict(frozen=True)

    status: str = Field(alias="Status")
    custom_id: str | None = Field(default=None, alias="CustomID")
    to: list[SentTo] = Field(default_factory=list, alias="To")
    cc: list[SentTo] = Field(default_factory=list, alias="Cc")
    bcc: list[SentTo] = Field(default_factory=list, alias="Bcc")
    errors: list[dict[str, Any]] = Field(default_factory=list, alias="Errors")

    @property
    def is_success(self) -> bool:
        return self.status == "success"


class BatchResponse(BaseModel):
    """Successful v3.1 send response."""

    model_config = ConfigDict(frozen=True)

    messages: list[MessageResult] = Field(alias="Messages")


class ApiError(BaseModel):
    """Loosely typed provider error envelope.

    Every field is optional and unknown keys are kept, since the envelope
    differs between API generations.

    Example:
        >>> err = ApiError.model_validate({"ErrorMessage": "Unknown resource", "StatusCode": 404, "Extra": 1})
        >>> err.describe()
        'Unknown resource'
        >>> err.model_extra
        {'Extra': 1}
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    status_code: int | None = Field(default=None, alias="StatusCode")
    error_message: str | None = Field(default=None, alias="ErrorMessage")
    error_identifier: str | None = Field(default=None, alias="ErrorIdentifier")
    error_info: str | None = Field(default=None, alias="ErrorInfo")
    error_code: str | int | None = Field(default=None, alias="ErrorCode")

    def describe(self) -> str | None:
        """Best human readable message, looking into v3.1 per-message errors as a fallback."""
        if self.error_message:
            return self.error_message
        if self.error_info:
            return self.error_info
        for message in (self.model_extra or {}).get("Messages") or []:
            if not isinstance(message, dict):
                continue
            for error in message.get("Errors") or []:
                if isinstance(error, dict) and error.get("ErrorMessage"):
                    return str(error["ErrorMessage"])
        return None


__all__ = [
    "ApiError",
    "BatchResponse",
    "MessageResult",
    "Response",
    "Sent",
    "SentTo",
]
