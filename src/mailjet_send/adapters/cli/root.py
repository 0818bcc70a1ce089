"""The ``mailjet-send`` command group.

Global options are handled here once: configuration is read for the chosen
profile, logging is started from it and both are handed to the subcommands
through :class:`~.context.CLIContext`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from mailjet_send import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from mailjet_send.composition import AppServices

_EPILOG = "API keys: mailjet.public_key/private_key, or MJ_APIKEY_PUBLIC and MJ_APIKEY_PRIVATE."


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click types obj as Any


@click.group(
    help=__init__conf__.title,
    epilog=_EPILOG,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load (e.g. 'staging')")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Read configuration for ``--profile``, start logging, then run the subcommand or print help."""
    services = _services_from(ctx)
    config = services.get_config(profile=profile)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Deferred: the command modules import from this package
    from .commands import cli_config, cli_info, cli_send

    for command in (cli_info, cli_config, cli_send):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
