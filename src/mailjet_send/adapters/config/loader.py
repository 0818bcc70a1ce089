"""Read the layered configuration that holds the ``[mailjet]`` section.

Layers, lowest to highest: bundled ``defaultconfig.toml``, app, host, user,
``.env`` and process environment. Results are cached per profile and start
directory so every CLI command sees the same snapshot.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from mailjet_send import __init__conf__

_DEFAULT_CONFIG_NAME = "defaultconfig.toml"


class ConfigLoaderProtocol(Protocol):
    """``get_config`` signature, including the ``cache_clear`` used by tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ValueError: The name is empty, reserved, too long or contains path characters.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Path of the defaults shipped inside the wheel.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(_DEFAULT_CONFIG_NAME)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _load(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration for ``profile``.

    Args:
        profile: Adds ``profile/<name>/`` to every configuration path.
        start_dir: Where ``.env`` discovery starts; the working directory when None.

    Raises:
        ValueError: ``profile`` is not a safe name.

    Example:
        >>> get_config().get("mailjet.api_version")
        'v3'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_load.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _load)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
