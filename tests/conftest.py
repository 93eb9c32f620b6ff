from datetime import datetime, timezone

import pytest

from api.app import create_app
from common.config import Settings
from common.services import Ledger, SynchronizedLedger


class FixedClock:
    """Returns the queued timestamps in order, repeating the last one."""

    def __init__(self, *moments: datetime) -> None:
        self._moments = list(moments)

    def __call__(self) -> datetime:
        if len(self._moments) > 1:
            return self._moments.pop(0)
        return self._moments[0]


@pytest.fixture
def march() -> datetime:
    return datetime(2024, 3, 15, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def ledger(march):
    return Ledger(clock=FixedClock(march))


@pytest.fixture
def shared_ledger(ledger):
    return SynchronizedLedger(ledger)


@pytest.fixture
def client(shared_ledger):
    app = create_app(shared_ledger, Settings())
    app.config.update(TESTING=True)
    return app.test_client()


@pytest.fixture
def fixed_clock():
    return FixedClock
