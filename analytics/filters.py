"""Trade list filtering and sorting."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

import pytz

from models.trade import AssetClass, Direction, Trade
from utils.time_utils import to_epoch_ms

RESULT_ALL = "ALL"
RESULT_WIN = "WIN"
RESULT_LOSS = "LOSS"


@dataclass
class TradeFilter:
    """
    Journal table filter.

    Attributes:
        text: Case-insensitive match on symbol or strategy
        direction: Only this direction (None for both)
        result: WIN, LOSS or ALL; breakeven trades count as LOSS
        asset_class: Only this asset class (None for all)
        start_date: First entry day included (UTC)
        end_date: Last entry day included (UTC)
    """

    text: str = ""
    direction: Optional[Direction] = None
    result: str = RESULT_ALL
    asset_class: Optional[AssetClass] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        self.result = self.result.upper()
        if self.result not in (RESULT_ALL, RESULT_WIN, RESULT_LOSS):
            raise ValueError(f"Unknown result filter: {self.result}")

    @property
    def start_ms(self) -> Optional[int]:
        if self.start_date is None:
            return None
        return to_epoch_ms(datetime.combine(self.start_date, time.min, tzinfo=pytz.utc))

    @property
    def end_ms(self) -> Optional[int]:
        # Inclusive through the last millisecond of the day
        if self.end_date is None:
            return None
        next_day = datetime.combine(self.end_date + timedelta(days=1), time.min, tzinfo=pytz.utc)
        return to_epoch_ms(next_day) - 1

    def matches(self, trade: Trade) -> bool:
        """Check a trade against every active criterion."""
        needle = self.text.lower()
        if needle and needle not in trade.symbol.lower() and needle not in trade.strategy.lower():
            return False

        if self.direction is not None and trade.direction != self.direction:
            return False

        if self.result == RESULT_WIN and not trade.is_win:
            return False
        if self.result == RESULT_LOSS and trade.is_win:
            return False

        if self.asset_class is not None and trade.asset_class != self.asset_class:
            return False

        start = self.start_ms
        if start is not None and trade.entry_date < start:
            return False
        end = self.end_ms
        if end is not None and trade.entry_date > end:
            return False

        return True

    def apply(self, trades: Iterable[Trade]) -> list[Trade]:
        """Trades that match, in their original order."""
        return [t for t in trades if self.matches(t)]


def sort_trades(trades: Iterable[Trade], field: str, descending: bool = True) -> list[Trade]:
    """
    Sort trades by a Trade attribute.

    Trades where the attribute is None go last, in their original order.

    Raises:
        AttributeError: If ``field`` is not a Trade attribute.
    """
    trades = list(trades)
    if trades and not hasattr(trades[0], field):
        raise AttributeError(f"Trade has no field '{field}'")

    present = [t for t in trades if getattr(t, field) is not None]
    missing = [t for t in trades if getattr(t, field) is None]

    def key(trade: Trade):
        value = getattr(trade, field)
        # Enums sort by their wire value
        return getattr(value, "value", value)

    return sorted(present, key=key, reverse=descending) + missing
