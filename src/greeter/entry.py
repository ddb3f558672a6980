"""Console script entry point with production wiring.

Lives at package level, outside ``adapters``, so the CLI adapter never
imports the composition root itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greeter`` console script with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
