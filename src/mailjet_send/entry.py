"""Console script entry point with production wiring.

Lives at package level so that composition, not the CLI adapter, decides
which services are used.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run ``mailjet-send`` with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
