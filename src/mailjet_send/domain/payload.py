"""Structural contract for anything the client can submit to a send endpoint."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .enums import SendAPIVersion


@runtime_checkable
class Payload(Protocol):
    """A request body bound to one Send API version.

    Implementations return the provider's JSON object from ``to_payload`` and
    its UTF-8 encoding from ``to_json``.
    """

    @property
    def api_version(self) -> SendAPIVersion: ...

    def to_payload(self) -> dict[str, Any]: ...

    def to_json(self) -> bytes: ...


__all__ = ["Payload"]
