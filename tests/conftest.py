"""Shared pytest fixtures for library, CLI and module-entry tests.

Simulated HTTP goes through ``httpx.MockTransport``; CLI tests swap the
send adapter for :class:`SendSpy` and inject configuration in memory.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from mailjet_send.adapters.memory.mailjet import SendSpy
    from mailjet_send.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(type(lib_cli_exit_tools.config)))

PUBLIC_KEY = "public_key_fixture"
PRIVATE_KEY = "private_key_fixture"


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only before: a monkeypatched get_config has no cache_clear afterwards.
    """
    from mailjet_send.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class RecordingTransport:
    """An ``httpx.MockTransport`` answering with a fixed response and keeping every request."""

    status_code: int = 200
    body: bytes = b'{"Sent":[{"Email":"c@d.com","MessageID":1,"MessageUUID":"u"}]}'
    error: Exception | None = None
    headers: dict[str, str] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        # Unread stream: the client decodes Content-Encoding, not the constructor
        return httpx.Response(self.status_code, headers=self.headers, stream=httpx.ByteStream(self.body))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests
        return self.requests[-1]


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Return a factory for :class:`RecordingTransport`.

    Example:
        def test_send(recording_transport) -> None:
            recorder = recording_transport(status_code=400, body=b'{"ErrorMessage": "nope"}')
            client = Client(SendAPIVersion.V3, "pub", "priv", transport=recorder.transport)
    """

    def _factory(**kwargs: Any) -> RecordingTransport:
        return RecordingTransport(**kwargs)

    return _factory


@dataclass
class MailjetCliContext:
    """Services factory plus the SendSpy it writes into."""

    factory: Callable[[], Any]
    spy: SendSpy


@pytest.fixture
def mailjet_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], MailjetCliContext]:
    """Create a CLI test context with an injected ``[mailjet]`` section and a SendSpy.

    Example:
        def test_send(cli_runner, mailjet_cli_context) -> None:
            ctx = mailjet_cli_context({"from_email": "pilot@company.com"})
            result = cli_runner.invoke(cli, ["send", "--recipient", "a@b.com"], obj=ctx.factory)
            assert ctx.spy.sent
    """
    from mailjet_send.adapters.memory import load_mailjet_config_from_dict_in_memory
    from mailjet_send.adapters.memory.mailjet import SendSpy as SendSpyImpl
    from mailjet_send.composition import AppServices, build_production

    def _create(mailjet_section: dict[str, Any]) -> MailjetCliContext:
        spy = SendSpyImpl()
        config = Config({"mailjet": mailjet_section}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_mailjet_config_from_dict=load_mailjet_config_from_dict_in_memory,
            send_message=spy.send_message,
            init_logging=prod.init_logging,
        )
        return MailjetCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Display, config parsing and logging stay production; ``get_config`` is in memory.
    """
    from mailjet_send.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_mailjet_config_from_dict=prod.load_mailjet_config_from_dict,
            send_message=prod.send_message,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _create
