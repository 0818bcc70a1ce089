"""``info`` command: package metadata plus the Send API endpoint in use."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from mailjet_send import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


def _endpoint_lines(ctx: click.Context) -> list[str]:
    try:
        config = get_cli_context(ctx).mailjet_config()
    except ValidationError as exc:
        logger.warning("Invalid [mailjet] section", extra={"error_count": exc.error_count()})
        return ["    mailjet       = invalid configuration"]
    send_url = f"{config.base_url.rstrip('/')}{config.api_version.send_path}" if config.base_url else None
    return [
        f"    api_version   = {config.api_version.value}",
        f"    send_url      = {send_url or config.api_version.send_url}",
        f"    credentials   = {'configured' if config.has_credentials else 'missing'}",
    ]


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print installation metadata and which endpoint ``send`` would use.

    API keys are never printed, only whether both are configured.
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo("")
        click.echo("Mailjet:")
        click.echo("")
        for line in _endpoint_lines(ctx):
            click.echo(line)


__all__ = ["cli_info"]
