"""Shared fixtures for journal tests."""

from datetime import datetime
from itertools import count

import pytest
import pytz

from models.trade import Direction, Trade, TradeStatus, TradingSession
from utils.time_utils import to_epoch_ms

# 2024-01-15 14:00 UTC, inside the London and NY windows
BASE_TIME = to_epoch_ms(datetime(2024, 1, 15, 14, 0, tzinfo=pytz.utc))
HOUR_MS = 60 * 60 * 1000
MINUTE_MS = 60 * 1000


@pytest.fixture
def make_trade():
    """Factory for closed trades with sensible defaults."""
    ids = count(1)

    def _make(net_pnl=0.0, entry_date=BASE_TIME, exit_date="auto", **kwargs):
        if exit_date == "auto":
            exit_date = entry_date + HOUR_MS
        fields = dict(
            id=f"T{next(ids)}",
            symbol="EURUSD",
            direction=Direction.LONG,
            entry_date=entry_date,
            exit_date=exit_date,
            entry_price=1.1000,
            size=1.0,
            net_pnl=net_pnl,
            session=TradingSession.NY,
            status=TradeStatus.CLOSED,
        )
        fields.update(kwargs)
        return Trade(**fields)

    return _make
