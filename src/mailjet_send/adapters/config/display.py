"""Display configuration through lib_layered_config's Rich renderer.

Pending log output is flushed first so it does not interleave with the
rendered configuration. Masking is left to lib_layered_config: both
``mailjet.public_key`` and ``mailjet.private_key`` match its ``_key`` rule
and are shown as :data:`lib_layered_config.REDACTED_PLACEHOLDER`, with
provenance kept.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from mailjet_send.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render configuration as TOML-like text or JSON, API keys redacted.

    Args:
        config: Loaded layered configuration.
        output_format: HUMAN or JSON.
        section: Only display this section when given.
        console: Rich console override, mainly for tests.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: The requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
