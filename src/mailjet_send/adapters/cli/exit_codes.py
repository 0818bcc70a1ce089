"""Exit codes for CLI error paths, following sysexits.h and errno.

Signal codes (130, 141, 143) are listed for reference only; lib_cli_exit_tools
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by ``mailjet-send``.

    * 2: ENOENT, attachment missing
    * 22: EINVAL, bad option value
    * 65: EX_DATAERR, provider rejected the message
    * 69: EX_UNAVAILABLE, provider unreachable
    * 76: EX_PROTOCOL, response body not understood
    * 78: EX_CONFIG, missing keys or invalid configuration

    Example:
        >>> int(ExitCode.PROVIDER_ERROR)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    PROVIDER_ERROR = 65
    UNAVAILABLE = 69
    DECODE_ERROR = 76
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
