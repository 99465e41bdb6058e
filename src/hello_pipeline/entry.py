"""Console script entry points with production wiring.

System Role:
    Sits at package level (outside adapters) to wire the composition root
    into the adapters layer without violating layer constraints.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Entry point of ``hello-pipeline``: the full command group.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


def greet() -> int:
    """Entry point of ``hello-world``: print the greeting, ignoring all arguments.

    Returns:
        Exit code from CLI execution; non-zero only on environment faults
        such as an unwritable stdout.
    """
    return cli_main(["hello"], services_factory=build_production)


__all__ = ["greet", "main"]
