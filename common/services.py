"""Framework-agnostic business services for the expense tracker."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional

from .models import Expense

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


class Ledger:
    """Holds expense records in memory and hands out their identifiers.

    Identifiers start at 1 and are never reused, even after a delete.
    Amounts are stored as given; callers validate before adding.
    """

    def __init__(self, clock: Clock = local_now) -> None:
        self._clock = clock
        self._expenses: List[Expense] = []
        self._next_id = 1

    # Public API -----------------------------------------------------------
    def add(self, description: str, amount: float) -> int:
        expense = Expense(
            id=self._next_id,
            date=self._clock(),
            description=description,
            amount=amount,
        )
        self._expenses.append(expense)
        self._next_id += 1
        logger.debug("Added expense %d (%.2f)", expense.id, expense.amount)
        return expense.id

    def list(self) -> List[Expense]:
        return list(self._expenses)

    def get(self, expense_id: int) -> Optional[Expense]:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def summarize(self, month: int = 0) -> float:
        """Total all expenses, or only those created in ``month`` (1-12)."""
        return sum(
            (expense.amount for expense in self._expenses if month == 0 or expense.month == month),
            0.0,
        )

    def delete(self, expense_id: int) -> bool:
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                del self._expenses[index]
                logger.debug("Deleted expense %d", expense_id)
                return True
        return False

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._expenses)


class SynchronizedLedger:
    """Serialises access to a ledger shared between request threads."""

    def __init__(self, ledger: Optional[Ledger] = None) -> None:
        self._ledger = ledger if ledger is not None else Ledger()
        self._lock = threading.Lock()

    def add(self, description: str, amount: float) -> int:
        with self._lock:
            return self._ledger.add(description, amount)

    def list(self) -> List[Expense]:
        with self._lock:
            return self._ledger.list()

    def get(self, expense_id: int) -> Optional[Expense]:
        with self._lock:
            return self._ledger.get(expense_id)

    def summarize(self, month: int = 0) -> float:
        with self._lock:
            return self._ledger.summarize(month)

    def delete(self, expense_id: int) -> bool:
        with self._lock:
            return self._ledger.delete(expense_id)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._ledger.next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._ledger)
