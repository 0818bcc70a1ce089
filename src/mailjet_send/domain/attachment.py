"""Attachment value type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Attachment:
    """A named, typed, base64 encoded file payload.

    Whether the file is a regular or an inline attachment depends only on
    the collection it is placed in on the message. Inline attachments are
    referenced from HTML through ``cid:<filename>``; see :attr:`cid`.

    No encoding happens here: ``base64_content`` must already be base64.
    Size and content type are left for the provider to enforce.

    Example:
        >>> logo = Attachment("image/png", "logo.png", "iVBORw0KGgo=")
        >>> logo.cid
        'cid:logo.png'
        >>> logo.to_payload()["Content-type"]
        'image/png'
    """

    content_type: str
    filename: str
    base64_content: str

    @property
    def cid(self) -> str:
        """Reference usable as an ``<img src=...>`` value for inline attachments."""
        return f"cid:{self.filename}"

    def to_payload(self) -> dict[str, str]:
        return {
            "Content-type": self.content_type,
            "Filename": self.filename,
            "content": self.base64_content,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Attachment:
        return cls(
            content_type=str(payload["Content-type"]),
            filename=str(payload["Filename"]),
            base64_content=str(payload["content"]),
        )


__all__ = ["Attachment"]
