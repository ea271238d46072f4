"""Equity curve generation."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from analytics.metrics import closed_trades, drawdown_percent
from models.trade import Trade
from utils.formatters import round_half_up
from utils.time_utils import MS_PER_DAY, date_label, now_ms

START_LABEL = "Start"


@dataclass(frozen=True)
class EquityPoint:
    """One point of the running-balance series."""

    date: str
    timestamp: int
    equity: float
    drawdown: float  # % below the peak so far

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.date,
            "timestamp": self.timestamp,
            "equity": self.equity,
            "drawdown": self.drawdown,
        }


def iter_equity_curve(
    trades: Iterable[Trade],
    starting_balance: float,
    now: Optional[int] = None,
) -> Iterator[EquityPoint]:
    """
    Yield the equity curve point by point.

    The first point is a synthetic start one day before the first trade's
    entry (or ``now`` when there are no closed trades). Each closed trade
    then adds a point at its exit time.

    Args:
        trades: Journal trades in any order.
        starting_balance: Balance before the first trade.
        now: Timestamp (ms) for the start point of an empty curve.
    """
    ordered = closed_trades(trades)

    if ordered:
        start_ts = ordered[0].entry_date - MS_PER_DAY
    else:
        start_ts = now if now is not None else now_ms()

    yield EquityPoint(date=START_LABEL, timestamp=start_ts, equity=starting_balance, drawdown=0.0)

    balance = starting_balance
    peak = starting_balance
    for trade in ordered:
        balance += trade.net_pnl
        if balance > peak:
            peak = balance

        yield EquityPoint(
            date=date_label(trade.exit_date),
            timestamp=trade.exit_date,
            equity=round_half_up(balance),
            drawdown=round_half_up(drawdown_percent(peak, balance)),
        )


def generate_equity_curve(
    trades: Iterable[Trade],
    starting_balance: float,
    now: Optional[int] = None,
) -> list[EquityPoint]:
    """
    Build the equity curve.

    Returns:
        One point per closed trade plus the start point, in exit order.
    """
    return list(iter_equity_curve(trades, starting_balance, now=now))
