"""Send command package.

Contents:
    * :func:`.send_cmd.cli_send` - The ``send`` command
    * :mod:`._common` - Option callbacks, payload assembly and error mapping
"""

from __future__ import annotations

from .send_cmd import cli_send

__all__ = ["cli_send"]
