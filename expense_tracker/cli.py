"""Console interface for the expense tracker."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from common.config import Settings
from common.services import Ledger
from common.tokenizer import split_line

from .commands import USAGE_TEXT, LedgerLike, run_command

logger = logging.getLogger(__name__)

BANNER = "Expense Tracker (in-memory). Type 'help' for commands, 'exit' to quit."
PROMPT = "> "
EXIT_WORDS = {"exit", "quit"}


def repl(ledger: LedgerLike, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Read commands line by line until exit, quit or end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        print(PROMPT, end="", file=out, flush=True)
        raw = stdin.readline()
        if not raw:
            break
        line = raw.strip()
        if not line:
            continue
        if line in EXIT_WORDS:
            break
        if line == "help":
            print(USAGE_TEXT, file=out)
            continue
        run_command(ledger, split_line(line), out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expense-tracker",
        description="In-memory expense tracker",
        epilog="Run without a command to enter interactive mode.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics on stderr (default: $EXPENSE_TRACKER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command and its flags")
    return parser


def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or settings.log_level)

    ledger = Ledger()
    if not args.command:
        print(BANNER)
        repl(ledger)
        return 0
    logger.debug("Running one-shot command %r", args.command)
    return run_command(ledger, args.command)


if __name__ == "__main__":
    raise SystemExit(main())
