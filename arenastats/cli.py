"""Command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from arenastats import analyser, parser


def _silence_logging() -> None:
    logger = logging.getLogger("arenastats")
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def main(argv: Sequence[str] | None = None) -> int:
    """Analyse the arena log named by the first argument."""
    _silence_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("expected 1 argument, but got none")
        return 1

    try:
        games = parser.parse_games(args[0])
    except (OSError, parser.ParseError) as err:
        print(err)
        return 1

    analyser.start(games)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())