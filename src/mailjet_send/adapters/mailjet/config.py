"""Mailjet client configuration model and loader.

Provides the MailjetConfig Pydantic model for validated, immutable client
settings and the loader that builds it from configuration dictionaries.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from mailjet_send.domain.enums import SendAPIVersion

#: Environment variables consulted when the configuration carries no keys.
PUBLIC_API_KEY_ENV_VAR: Final[str] = "MJ_APIKEY_PUBLIC"
PRIVATE_API_KEY_ENV_VAR: Final[str] = "MJ_APIKEY_PRIVATE"


class MailjetConfig(BaseModel):
    """Validated, immutable Mailjet client configuration.

    ``timeout`` of None means the library imposes no timeout at all.

    Example:
        >>> config = MailjetConfig(public_key="pub", private_key="secret", api_version="v3")
        >>> config.api_version
        <SendAPIVersion.V3: 'v3'>
        >>> "secret" in repr(config)
        False
    """

    model_config = ConfigDict(frozen=True)

    public_key: str | None = None
    private_key: str | None = None
    api_version: SendAPIVersion = SendAPIVersion.V3
    base_url: str | None = None
    timeout: float | None = None
    from_email: str | None = None
    from_name: str | None = None

    @field_validator("public_key", "private_key", "base_url", "from_email", "from_name", "timeout", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings from config files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> MailjetConfig:
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        return self

    @property
    def has_credentials(self) -> bool:
        return bool(self.public_key) and bool(self.private_key)

    def __repr__(self) -> str:
        """Return a representation with private_key redacted."""
        fields: list[str] = []
        for name, value in self:
            if name == "private_key" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"MailjetConfig({', '.join(fields)})"

    def __str__(self) -> str:
        return repr(self)


def load_mailjet_config_from_dict(
    config_dict: Mapping[str, Any],
    *,
    environ: Mapping[str, str] | None = None,
) -> MailjetConfig:
    """Load MailjetConfig from the ``[mailjet]`` section of a configuration dictionary.

    Keys missing from the section are taken from ``MJ_APIKEY_PUBLIC`` and
    ``MJ_APIKEY_PRIVATE`` when those are set.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated client configuration.

    Example:
        >>> config = load_mailjet_config_from_dict(
        ...     {"mailjet": {"public_key": "pub", "api_version": "v3.1"}},
        ...     environ={"MJ_APIKEY_PRIVATE": "priv"},
        ... )
        >>> config.api_version.value, config.has_credentials
        ('v3.1', True)
    """
    env = os.environ if environ is None else environ
    section: Any = config_dict.get("mailjet", {})

    # Non-dict section (e.g. "mailjet": "invalid") is left for Pydantic to reject
    if not isinstance(section, Mapping):
        return MailjetConfig.model_validate(section)

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    for key, env_var in (("public_key", PUBLIC_API_KEY_ENV_VAR), ("private_key", PRIVATE_API_KEY_ENV_VAR)):
        if not raw.get(key) and env.get(env_var):
            raw[key] = env[env_var]

    return MailjetConfig.model_validate(raw)


__all__ = [
    "PRIVATE_API_KEY_ENV_VAR",
    "PUBLIC_API_KEY_ENV_VAR",
    "MailjetConfig",
    "load_mailjet_config_from_dict",
]
