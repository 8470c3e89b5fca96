"""Console front-end: ``fair-dice 1,2,3`` plays one game on stdin/stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from src.config import configure_logging, get_settings
from src.engine.base import SessionEvent
from src.engine.errors import IntegrityFault, ValidationError
from src.engine.session import GameSession
from src.ui.render import render_events

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAULT = 1
EXIT_USAGE = 2

PROMPT = "Your selection: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-dice",
        description="Provably fair non-transitive dice game against the computer.",
    )
    parser.add_argument(
        "dice",
        nargs="?",
        help="comma-separated dice values, at least three integers (e.g. 2,2,4,4,9,9)",
    )
    return parser


def play(
    session: GameSession,
    events: Sequence[SessionEvent],
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """
    Drive ``session`` until it finishes.

    End of input and Ctrl-C are treated like the exit command.
    """
    read = read or input
    write = write or print
    for line in render_events(events):
        write(line)

    while not session.is_finished:
        try:
            answer = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            answer = "x"
        for line in render_events(session.submit(answer)):
            write(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    try:
        session, events = GameSession.start(args.dice, settings=settings)
    except ValidationError as exc:
        print(f"Invalid input: {exc} Example: fair-dice 2,2,4,4,9,9", file=sys.stderr)
        return EXIT_USAGE

    try:
        play(session, events)
    except IntegrityFault as exc:
        logger.error("Fairness check failed: %s", exc)
        print(f"Protocol integrity fault: {exc}", file=sys.stderr)
        return EXIT_FAULT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
