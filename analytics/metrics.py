"""Performance metrics over a trade journal."""

from dataclasses import dataclass, asdict
from typing import Iterable

from models.trade import Trade
from utils.logger import get_logger

logger = get_logger(__name__)

# Reported when there are winners and no losers
PROFIT_FACTOR_CAP = 999.0


@dataclass(frozen=True)
class Metrics:
    """Summary statistics of the closed trades in a journal.

    ``largest_loss`` keeps its sign (most negative trade) while
    ``average_loss`` is a positive magnitude.
    """

    total_trades: int = 0
    win_rate: float = 0.0
    profit_factor: float = 0.0
    expectancy: float = 0.0
    average_win: float = 0.0
    average_loss: float = 0.0
    max_drawdown: float = 0.0
    max_drawdown_percent: float = 0.0
    net_profit: float = 0.0
    largest_win: float = 0.0
    largest_loss: float = 0.0
    current_streak: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


def closed_trades(trades: Iterable[Trade]) -> list[Trade]:
    """Closed trades with an exit date, oldest exit first.

    Equal exit times are ordered by entry time, then id, so the result does
    not depend on input order.
    """
    return sorted(
        (t for t in trades if t.is_closed),
        key=lambda t: (t.exit_date, t.entry_date, t.id),
    )


def drawdown_percent(peak: float, equity: float) -> float:
    """Decline from peak as a percentage of the peak (0 for a non-positive peak)."""
    if peak <= 0:
        return 0.0
    return (peak - equity) / peak * 100


def compute_metrics(trades: Iterable[Trade], starting_balance: float) -> Metrics:
    """
    Compute performance metrics.

    Only closed trades with an exit date count. Trades are walked in exit
    order to track running equity, so the drawdown figures are the worst
    seen along the way rather than at the end.

    Args:
        trades: Journal trades in any order.
        starting_balance: Account balance before the first trade.

    Returns:
        Metrics; all zero for an empty journal.
    """
    ordered = closed_trades(trades)

    wins = 0
    gross_profit = 0.0
    gross_loss = 0.0
    equity = starting_balance
    peak = starting_balance
    max_dd = 0.0
    max_dd_pct = 0.0
    largest_win = 0.0
    largest_loss = 0.0
    streak = 0

    for trade in ordered:
        pnl = trade.net_pnl
        equity += pnl

        if equity > peak:
            peak = equity
        dd = peak - equity
        dd_pct = drawdown_percent(peak, equity)
        if dd > max_dd:
            max_dd = dd
        if dd_pct > max_dd_pct:
            max_dd_pct = dd_pct

        if pnl > 0:
            wins += 1
            gross_profit += pnl
            if pnl > largest_win:
                largest_win = pnl
            streak = streak + 1 if streak >= 0 else 1
        else:
            # Breakeven trades count as losses
            gross_loss += abs(pnl)
            if pnl < largest_loss:
                largest_loss = pnl
            streak = streak - 1 if streak <= 0 else -1

    total = len(ordered)
    losses = total - wins

    if gross_loss > 0:
        profit_factor = gross_profit / gross_loss
    elif gross_profit > 0:
        profit_factor = PROFIT_FACTOR_CAP
    else:
        profit_factor = 0.0

    average_win = gross_profit / wins if wins else 0.0
    average_loss = gross_loss / losses if losses else 0.0

    if total:
        win_rate = wins / total * 100
        expectancy = (wins / total) * average_win - (losses / total) * average_loss
    else:
        win_rate = 0.0
        expectancy = 0.0

    logger.debug(f"Metrics computed over {total} closed trades")

    return Metrics(
        total_trades=total,
        win_rate=win_rate,
        profit_factor=profit_factor,
        expectancy=expectancy,
        average_win=average_win,
        average_loss=average_loss,
        max_drawdown=max_dd,
        max_drawdown_percent=max_dd_pct,
        net_profit=equity - starting_balance,
        largest_win=largest_win,
        largest_loss=largest_loss,
        current_streak=streak,
    )
