"""Configuration adapter - layered loading and display via lib_layered_config.

Contents:
    * :mod:`.loader` - Cached configuration loading with profiles
    * :mod:`.display` - Human/JSON display, API keys redacted
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path

__all__ = [
    "display_config",
    "get_config",
    "get_default_config_path",
]
