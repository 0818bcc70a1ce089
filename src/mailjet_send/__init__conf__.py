"""Static package metadata surfaced to the CLI and configuration loader.

The version line is kept in sync with ``pyproject.toml`` on release.
"""

from __future__ import annotations

name = "mailjet_send"
title = "Async client for the Mailjet Send API"
version = "0.3.0"
homepage = "https://github.com/mailjet-send/mailjet-send"
author = "mailjet-send contributors"
author_email = "maintainers@mailjet-send.dev"
shell_command = "mailjet-send"

#: Identifiers used by lib_layered_config to derive platform config paths.
LAYEREDCONF_VENDOR = "mailjet-send"
LAYEREDCONF_APP = "mailjet-send"
LAYEREDCONF_SLUG = "mailjet-send"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mailjet_send:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
