"""State shared between the root group and the ``info``/``config``/``send`` commands.

The root group stores a :class:`CLIContext` on ``ctx.obj``; commands read it
back with :func:`get_cli_context`. The traceback helpers mirror
``--traceback`` into lib_cli_exit_tools and put it back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from mailjet_send.adapters.mailjet.config import MailjetConfig
    from mailjet_send.composition import AppServices


class TracebackState(NamedTuple):
    """lib_cli_exit_tools traceback flags as captured before a run."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Configuration snapshot and services for one CLI invocation."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None

    def mailjet_config(self) -> MailjetConfig:
        """Parse the ``[mailjet]`` section with the injected loader.

        Raises:
            pydantic.ValidationError: The section holds invalid values.
        """
        return self.services.load_mailjet_config_from_dict(self.config.as_dict())


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved state.

    Example:
        >>> from mailjet_send.composition import build_testing
        >>> ctx = click.Context(click.Command("send"))
        >>> store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing(), profile="qa")
        >>> get_cli_context(ctx).profile
        'qa'
    """
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: A command ran without the root group.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (and coloured) tracebacks on or off for error output."""
    config = lib_cli_exit_tools.config
    config.traceback = config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState | tuple[bool, bool]) -> None:
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
