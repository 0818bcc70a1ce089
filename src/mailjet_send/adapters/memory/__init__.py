"""In-memory adapter implementations for testing.

No network, no filesystem, no logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.mailjet` - SendSpy and the in-memory config loader
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .mailjet import SendSpy, load_mailjet_config_from_dict_in_memory

if TYPE_CHECKING:
    from mailjet_send.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadMailjetConfigFromDict,
        SendMessage,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_mailjet_config: LoadMailjetConfigFromDict = load_mailjet_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_send_message: SendMessage = SendSpy().send_message

__all__ = [
    "SendSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_mailjet_config_from_dict_in_memory",
]
