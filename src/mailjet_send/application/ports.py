"""Application ports: callable Protocols matching the adapter functions.

Adapters satisfy these structurally; nothing subclasses them. Adapter
types are imported under ``TYPE_CHECKING`` only, which keeps this layer
free of runtime adapter imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.payload import Payload

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.mailjet.config import MailjetConfig
    from ..adapters.mailjet.schemas import BatchResponse, Response


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadMailjetConfigFromDict(Protocol):
    """Build MailjetConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> MailjetConfig: ...


class SendMessage(Protocol):
    """Send one payload and return the decoded success response."""

    def __call__(self, *, config: MailjetConfig, payload: Payload) -> Response | BatchResponse: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadMailjetConfigFromDict",
    "SendMessage",
]
