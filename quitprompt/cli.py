"""Command-line front door for quitprompt.

Parses the (option-less) command line and launches the interactive session.
Terminal start-up failures are reported on stderr with a non-zero exit.
"""

from __future__ import annotations

import argparse
import logging

from .runtime import run_app
from .runtime.terminal import DriverInitError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="quitprompt",
        description=(
            "Show a status screen with toggleable help (?). "
            "Quitting (q, Esc, Ctrl+C) asks for confirmation; press y to exit."
        ),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the session; returns normally on confirmed exit."""
    build_parser().parse_args(argv)
    try:
        run_app()
    except DriverInitError as exc:
        logger.error("terminal initialization failed: %s", exc)
        raise SystemExit(f"quitprompt: {exc}") from exc


if __name__ == "__main__":
    main()
