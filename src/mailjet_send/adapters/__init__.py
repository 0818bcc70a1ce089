"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.mailjet` - HTTP client for the Send API (httpx, pydantic)
    * :mod:`.files` - Attachments read from disk
    * :mod:`.config` - Configuration loading and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
