"""Journal analytics: metrics, equity curve and rule checks."""

from analytics.metrics import Metrics, compute_metrics
from analytics.equity_curve import EquityPoint, generate_equity_curve, iter_equity_curve
from analytics.violations import ViolationDetector, ViolationRules, detect_violations
from analytics.breakdown import hourly_distribution, recent_trades, recent_win_rate, strategy_breakdown
from analytics.filters import TradeFilter, sort_trades
from analytics.report import JournalReport

__all__ = [
    "Metrics",
    "compute_metrics",
    "EquityPoint",
    "generate_equity_curve",
    "iter_equity_curve",
    "ViolationDetector",
    "ViolationRules",
    "detect_violations",
    "hourly_distribution",
    "recent_trades",
    "recent_win_rate",
    "strategy_breakdown",
    "TradeFilter",
    "sort_trades",
    "JournalReport",
]
