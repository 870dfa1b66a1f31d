"""Console script entry point with production wiring.

Sits at package level (outside adapters) so it can wire the composition
root into the CLI without the adapters layer importing composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Console script entry point with production services wired.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
