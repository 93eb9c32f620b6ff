"""Core business logic package for the expense tracker."""

from .config import Settings
from .exceptions import RecordNotFoundError, UsageError, ValidationError
from .models import Expense
from .services import Ledger, SynchronizedLedger
from .tokenizer import split_line

__all__ = [
    "Expense",
    "Ledger",
    "SynchronizedLedger",
    "Settings",
    "split_line",
    "RecordNotFoundError",
    "UsageError",
    "ValidationError",
]
