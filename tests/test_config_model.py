"""MailjetConfig validation and loading from configuration dictionaries."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mailjet_send.adapters.mailjet.config import (
    PRIVATE_API_KEY_ENV_VAR,
    PUBLIC_API_KEY_ENV_VAR,
    MailjetConfig,
    load_mailjet_config_from_dict,
)
from mailjet_send.domain.enums import SendAPIVersion


@pytest.mark.os_agnostic
def test_defaults_select_v3_without_keys_or_timeout() -> None:
    config = MailjetConfig()

    assert config.api_version is SendAPIVersion.V3
    assert config.timeout is None
    assert config.has_credentials is False


@pytest.mark.os_agnostic
def test_empty_strings_from_config_files_mean_not_configured() -> None:
    config = MailjetConfig.model_validate({"public_key": "", "private_key": "  ", "timeout": "", "base_url": ""})

    assert config.public_key is None
    assert config.private_key is None
    assert config.timeout is None
    assert config.base_url is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize("timeout", [0, -1.5])
def test_non_positive_timeout_is_rejected(timeout: float) -> None:
    with pytest.raises(ValidationError, match="timeout must be positive"):
        MailjetConfig(timeout=timeout)


@pytest.mark.os_agnostic
def test_unknown_api_version_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MailjetConfig.model_validate({"api_version": "v2"})


@pytest.mark.os_agnostic
def test_config_is_frozen() -> None:
    config = MailjetConfig()

    with pytest.raises(ValidationError):
        config.public_key = "changed"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_repr_and_str_redact_the_private_key() -> None:
    config = MailjetConfig(public_key="pub", private_key="s3cret")

    assert "s3cret" not in repr(config)
    assert "s3cret" not in str(config)
    assert "[REDACTED]" in repr(config)
    assert "pub" in repr(config)


@pytest.mark.os_agnostic
def test_loader_reads_the_mailjet_section() -> None:
    config = load_mailjet_config_from_dict(
        {"mailjet": {"public_key": "pub", "private_key": "priv", "api_version": "v3.1", "timeout": 10}},
        environ={},
    )

    assert config.has_credentials
    assert config.api_version is SendAPIVersion.V3_1
    assert config.timeout == 10.0


@pytest.mark.os_agnostic
def test_loader_falls_back_to_environment_keys() -> None:
    config = load_mailjet_config_from_dict(
        {"mailjet": {"public_key": ""}},
        environ={PUBLIC_API_KEY_ENV_VAR: "env-pub", PRIVATE_API_KEY_ENV_VAR: "env-priv"},
    )

    assert config.public_key == "env-pub"
    assert config.private_key == "env-priv"


@pytest.mark.os_agnostic
def test_loader_prefers_configured_keys_over_environment() -> None:
    config = load_mailjet_config_from_dict(
        {"mailjet": {"public_key": "file-pub", "private_key": "file-priv"}},
        environ={PUBLIC_API_KEY_ENV_VAR: "env-pub", PRIVATE_API_KEY_ENV_VAR: "env-priv"},
    )

    assert config.public_key == "file-pub"
    assert config.private_key == "file-priv"


@pytest.mark.os_agnostic
def test_loader_uses_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PUBLIC_API_KEY_ENV_VAR, "env-pub")
    monkeypatch.setenv(PRIVATE_API_KEY_ENV_VAR, "env-priv")

    assert load_mailjet_config_from_dict({}).has_credentials


@pytest.mark.os_agnostic
def test_loader_rejects_a_section_that_is_not_a_table() -> None:
    with pytest.raises(ValidationError):
        load_mailjet_config_from_dict({"mailjet": "invalid"}, environ={})
