"""Per-strategy and per-hour performance breakdowns."""

from dataclasses import dataclass
from typing import Iterable

from analytics.metrics import compute_metrics
from models.trade import Trade
from utils.time_utils import utc_hour

# Trades in the dashboard short-term win rate
RECENT_WINDOW = 20


@dataclass
class StrategyPerformance:
    """Aggregated results of one strategy tag."""

    name: str
    pnl: float = 0.0
    count: int = 0
    wins: int = 0

    @property
    def win_rate(self) -> float:
        """Calculate win rate."""
        if self.count == 0:
            return 0.0
        return (self.wins / self.count) * 100


@dataclass
class HourlyPerformance:
    """Aggregated results of trades entered in one UTC hour."""

    hour: int
    pnl: float = 0.0
    wins: int = 0
    total: int = 0

    @property
    def win_rate(self) -> float:
        """Calculate win rate."""
        if self.total == 0:
            return 0.0
        return (self.wins / self.total) * 100


def strategy_breakdown(trades: Iterable[Trade]) -> list[StrategyPerformance]:
    """
    Group trades by strategy tag.

    All supplied trades count, open or closed.

    Returns:
        One entry per strategy, most profitable first.
    """
    strategies: dict[str, StrategyPerformance] = {}
    for trade in trades:
        stats = strategies.setdefault(trade.strategy, StrategyPerformance(name=trade.strategy))
        stats.pnl += trade.net_pnl
        stats.count += 1
        if trade.is_win:
            stats.wins += 1

    return sorted(strategies.values(), key=lambda s: s.pnl, reverse=True)


def hourly_distribution(trades: Iterable[Trade]) -> list[HourlyPerformance]:
    """Bucket trades by UTC entry hour (always 24 buckets)."""
    hours = [HourlyPerformance(hour=h) for h in range(24)]
    for trade in trades:
        bucket = hours[utc_hour(trade.entry_date)]
        bucket.pnl += trade.net_pnl
        bucket.total += 1
        if trade.is_win:
            bucket.wins += 1
    return hours


def recent_trades(trades: Iterable[Trade], limit: int = 5) -> list[Trade]:
    """Newest trades by entry time."""
    return sorted(trades, key=lambda t: t.entry_date, reverse=True)[:limit]


def recent_win_rate(trades: Iterable[Trade], window: int = RECENT_WINDOW) -> float:
    """
    Win rate of the newest ``window`` trades by entry time.

    Open trades in the window take a slot but are not scored, as in
    ``compute_metrics``.
    """
    return compute_metrics(recent_trades(trades, limit=window), 0.0).win_rate
