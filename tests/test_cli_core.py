"""CLI core stories: traceback, main entry, help, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from mailjet_send import __init__conf__
from mailjet_send.adapters import cli as cli_mod
from mailjet_send.adapters.logging import init_logging
from mailjet_send.adapters.memory import SendSpy
from mailjet_send.composition import AppServices, build_production, build_testing

if TYPE_CHECKING:
    from conftest import MailjetCliContext

SEND_ARGS = ["send", "--from-email", "pilot@company.com", "--recipient", "a@b.com"]


def _services(spy: SendSpy | None = None) -> AppServices:
    """In-memory services on top of the real lib_log_rich runtime the commands bind to."""
    return replace(build_testing(spy=spy), init_logging=init_logging)


def _failing_services() -> AppServices:
    return _services(SendSpy(raise_exception=RuntimeError("I should fail")))


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=_services)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=_services)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_with_production_services_prints_info(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
) -> None:
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_without_arguments_shows_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_mod.main([], services_factory=build_testing)

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_send_with_testing_services_returns_zero(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    spy = SendSpy()

    exit_code = cli_mod.main(SEND_ARGS, services_factory=lambda: _services(spy))

    assert exit_code == 0
    assert len(spy.sent) == 1
    assert "a@b.com" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_returns_the_send_exit_code(
    managed_traceback_state: None,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("DEVELOPMENT_MODE", raising=False)

    exit_code = cli_mod.main(SEND_ARGS, services_factory=lambda: _services(SendSpy(should_fail=True)))

    assert exit_code == cli_mod.ExitCode.PROVIDER_ERROR


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    managed_traceback_state: None,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setenv("DEVELOPMENT_MODE", "1")

    exit_code = cli_mod.main(["--traceback", *SEND_ARGS], services_factory=_failing_services)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_without_traceback_flag_only_a_summary_is_printed(
    managed_traceback_state: None,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setenv("DEVELOPMENT_MODE", "1")

    exit_code = cli_mod.main(SEND_ARGS, services_factory=_failing_services)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err
    assert "Traceback (most recent call last)" not in plain_err


@pytest.mark.os_agnostic
def test_cli_without_arguments_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=build_testing)

    assert result.exit_code == 0
    assert "Usage:" in result.output
    for command in ("info", "config", "send"):
        assert command in result.output


@pytest.mark.os_agnostic
def test_cli_without_services_factory_is_a_bug(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=_services)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_version(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=build_testing)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=build_testing)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_info_shows_endpoint_without_revealing_keys(
    cli_runner: CliRunner,
    mailjet_cli_context: Callable[[dict[str, Any]], MailjetCliContext],
) -> None:
    ctx = mailjet_cli_context({"public_key": "pub", "private_key": "s3cret", "api_version": "v3.1"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "https://api.mailjet.com/v3.1/send" in result.output
    assert "credentials   = configured" in result.output
    assert "s3cret" not in result.output


@pytest.mark.os_agnostic
def test_info_reports_base_url_override_and_missing_keys(
    cli_runner: CliRunner,
    mailjet_cli_context: Callable[[dict[str, Any]], MailjetCliContext],
) -> None:
    ctx = mailjet_cli_context({"base_url": "http://localhost:9000/v3/"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "http://localhost:9000/v3/send" in result.output
    assert "credentials   = missing" in result.output


@pytest.mark.os_agnostic
def test_info_survives_an_invalid_mailjet_section(
    cli_runner: CliRunner,
    mailjet_cli_context: Callable[[dict[str, Any]], MailjetCliContext],
) -> None:
    ctx = mailjet_cli_context({"api_version": "v2"})

    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "invalid configuration" in result.output
