"""Command parsing and dispatch shared by one-shot and interactive modes."""

from __future__ import annotations

import argparse
import calendar
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple, Union

from common.exceptions import UsageError, ValidationError
from common.models import Expense
from common.services import Ledger, SynchronizedLedger
from common.validators import (
    parse_amount,
    validate_description,
    validate_expense_id,
    validate_month,
)

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TABLE_PADDING = 2

ADD_USAGE = "Usage: add --description <text> --amount <number>"
SUMMARY_USAGE = "Usage: summary [--month 1..12]"
DELETE_USAGE = "Usage: delete --id <number>"

USAGE_TEXT = "\n".join(
    [
        "Usage: expense-tracker <command> [--flags]",
        "Commands:",
        "  add --description <text> --amount <number>",
        "  list",
        "  summary [--month 1..12]",
        "  delete --id <number>",
        "Tip: run without args to enter interactive mode.",
    ]
)

LedgerLike = Union[Ledger, SynchronizedLedger]


@dataclass(frozen=True)
class AddCommand:
    description: str
    amount: float


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class SummaryCommand:
    month: int = 0


@dataclass(frozen=True)
class DeleteCommand:
    expense_id: int


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class UnknownCommand:
    name: str


Command = Union[AddCommand, ListCommand, SummaryCommand, DeleteCommand, HelpCommand, UnknownCommand]


# Flag binding ---------------------------------------------------------------
@dataclass(frozen=True)
class FlagSpec:
    name: str
    convert: Callable[[Any], Any]
    required: bool = False
    default: Any = None


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser that reports syntax problems instead of exiting."""

    def __init__(self, command: str, usage_line: str) -> None:
        super().__init__(prog=command, add_help=False, allow_abbrev=False)
        self._usage_line = usage_line

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(self._usage_line, message)


def pair_flag_values(tokens: Sequence[str], names: Iterable[str]) -> List[str]:
    """Rewrite known flags as ``--name=value`` so values may start with a dash.

    ``-name`` and ``--name`` are equivalent, and a known flag always takes
    the next token as its value. Reading stops at ``--`` or at the first
    token that is not a flag; the tokens after that are dropped. Unknown
    flags are passed through untouched for the parser to reject.
    """
    known = set(names)
    paired: List[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--" or len(token) < 2 or not token.startswith("-"):
            break
        body = token[2:] if token.startswith("--") else token[1:]
        name, has_value, value = body.partition("=")
        if name not in known:
            paired.append(token)
        elif has_value:
            paired.append(f"--{name}={value}")
        elif index + 1 < len(tokens):
            paired.append(f"--{name}={tokens[index + 1]}")
            index += 1
        else:
            paired.append(f"--{name}")
        index += 1

    if index < len(tokens):
        logger.debug("Ignoring trailing tokens %r", list(tokens[index:]))
    return paired


def bind_flags(
    command: str, usage_line: str, specs: Sequence[FlagSpec], tokens: Sequence[str]
) -> Dict[str, Any]:
    """Parse ``--name value`` pairs for ``specs`` and convert each value.

    Raises UsageError for unknown flags, missing values, missing required
    flags and values rejected by a converter.
    """
    parser = _FlagParser(command, usage_line)
    for spec in specs:
        parser.add_argument(f"--{spec.name}", dest=spec.name, default=None)
    namespace = parser.parse_args(pair_flag_values(tokens, (spec.name for spec in specs)))

    values: Dict[str, Any] = {}
    for spec in specs:
        raw = getattr(namespace, spec.name)
        if raw is None:
            if spec.required:
                raise UsageError(usage_line, f"--{spec.name} is required")
            values[spec.name] = spec.default
            continue
        try:
            values[spec.name] = spec.convert(raw)
        except ValidationError as exc:
            raise UsageError(usage_line, str(exc)) from exc
    return values


ADD_FLAGS = (
    FlagSpec("description", validate_description, required=True),
    FlagSpec("amount", parse_amount, required=True),
)
SUMMARY_FLAGS = (FlagSpec("month", validate_month, default=0),)
DELETE_FLAGS = (FlagSpec("id", validate_expense_id, required=True),)


# Parsing --------------------------------------------------------------------
def parse_command(tokens: Sequence[str]) -> Command:
    """Turn a token list into a command, raising UsageError on bad flags."""
    if not tokens:
        return HelpCommand()

    name, rest = tokens[0], tokens[1:]
    if name == "add":
        values = bind_flags(name, ADD_USAGE, ADD_FLAGS, rest)
        return AddCommand(description=values["description"], amount=values["amount"])
    if name == "list":
        # Trailing tokens are ignored for list.
        return ListCommand()
    if name == "summary":
        values = bind_flags(name, SUMMARY_USAGE, SUMMARY_FLAGS, rest)
        return SummaryCommand(month=values["month"])
    if name == "delete":
        values = bind_flags(name, DELETE_USAGE, DELETE_FLAGS, rest)
        return DeleteCommand(expense_id=values["id"])
    if name == "help":
        return HelpCommand()
    return UnknownCommand(name=name)


# Rendering ------------------------------------------------------------------
def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_table(rows: Iterable[Sequence[str]], padding: int = TABLE_PADDING) -> str:
    """Align every column but the last to its widest cell plus ``padding``."""
    materialised: List[Sequence[str]] = [tuple(row) for row in rows]
    if not materialised:
        return ""
    aligned = max(len(row) for row in materialised) - 1
    widths = [0] * aligned
    for row in materialised:
        for index, cell in enumerate(row[:aligned]):
            widths[index] = max(widths[index], len(cell))

    lines = []
    for row in materialised:
        cells = [cell.ljust(widths[index] + padding) for index, cell in enumerate(row[:aligned])]
        cells.extend(row[aligned:])
        lines.append("".join(cells))
    return "\n".join(lines)


def format_expenses(expenses: Sequence[Expense]) -> str:
    if not expenses:
        return "No expenses yet"
    rows: List[Tuple[str, ...]] = [("ID", "Date", "Description", "Amount")]
    for expense in expenses:
        rows.append(
            (
                str(expense.id),
                expense.date.strftime(DATE_FORMAT),
                expense.description,
                format_money(expense.amount),
            )
        )
    return format_table(rows)


def format_summary(month: int, total: float) -> str:
    if month == 0:
        return f"Total expenses: {format_money(total)}"
    return f"Total expenses for {calendar.month_name[month]}: {format_money(total)}"


# Dispatch -------------------------------------------------------------------
def execute(command: Command, ledger: LedgerLike, out: Optional[TextIO] = None) -> int:
    """Run ``command`` against ``ledger`` and write its output to ``out``."""
    if out is None:
        out = sys.stdout
    if isinstance(command, AddCommand):
        expense_id = ledger.add(command.description, command.amount)
        print(f"Expense added successfully (ID: {expense_id})", file=out)
    elif isinstance(command, ListCommand):
        print(format_expenses(ledger.list()), file=out)
    elif isinstance(command, SummaryCommand):
        print(format_summary(command.month, ledger.summarize(command.month)), file=out)
    elif isinstance(command, DeleteCommand):
        if ledger.delete(command.expense_id):
            print("Expense deleted successfully", file=out)
        else:
            print("Expense not found", file=out)
    elif isinstance(command, HelpCommand):
        print(USAGE_TEXT, file=out)
    elif isinstance(command, UnknownCommand):
        print(f"Unknown command: {command.name}", file=out)
        print(USAGE_TEXT, file=out)
        return 1
    else:  # pragma: no cover - parse_command only builds the types above
        raise TypeError(f"Unsupported command: {command!r}")
    return 0


def run_command(ledger: LedgerLike, tokens: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Parse and execute one command; usage errors are reported, not raised."""
    if out is None:
        out = sys.stdout
    try:
        command = parse_command(tokens)
    except UsageError as exc:
        logger.debug("Rejected %r: %s", list(tokens), exc.reason or exc.usage)
        print(exc.usage, file=out)
        return 1
    return execute(command, ledger, out)
