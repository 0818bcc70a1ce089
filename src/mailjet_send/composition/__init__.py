"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.mailjet.config import load_mailjet_config_from_dict
from ..adapters.mailjet.transport import send_message

if TYPE_CHECKING:
    from ..adapters.memory.mailjet import SendSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadMailjetConfigFromDict,
        SendMessage,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_mailjet_config_from_dict: LoadMailjetConfigFromDict = load_mailjet_config_from_dict
    _assert_send_message: SendMessage = send_message
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_mailjet_config_from_dict: LoadMailjetConfigFromDict
    send_message: SendMessage
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the lib_layered_config, lib_log_rich and httpx adapters."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_mailjet_config_from_dict=load_mailjet_config_from_dict,
        send_message=send_message,
        init_logging=init_logging,
    )


def build_testing(*, spy: SendSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: SendSpy to capture sends; a fresh one is created when None.
    """
    from ..adapters.memory import (
        SendSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_mailjet_config_from_dict_in_memory,
    )

    send_spy = spy if spy is not None else SendSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_mailjet_config_from_dict=load_mailjet_config_from_dict_in_memory,
        send_message=send_spy.send_message,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "display_config",
    "load_mailjet_config_from_dict",
    "send_message",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
