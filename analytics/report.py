"""Console report for a trade journal."""

from typing import Optional

from analytics.breakdown import RECENT_WINDOW, recent_trades, recent_win_rate, strategy_breakdown
from analytics.equity_curve import generate_equity_curve
from analytics.metrics import PROFIT_FACTOR_CAP, Metrics, compute_metrics
from analytics.violations import ViolationDetector, ViolationRules
from models.profile import UserProfile
from models.trade import Trade
from utils.formatters import format_currency
from utils.logger import get_logger, log_violation
from utils.time_utils import date_label

logger = get_logger(__name__)


class JournalReport:
    """
    Summarize a journal on the console.

    Supports:
    - Performance summary
    - Strategy breakdown
    - Recent trades
    - Rule violations
    """

    def __init__(
        self,
        trades: list[Trade],
        profile: Optional[UserProfile] = None,
        rules: Optional[ViolationRules] = None,
    ):
        """Initialize report generator."""
        self.trades = list(trades)
        self.profile = profile or UserProfile()
        self.rules = rules or ViolationRules()
        self._metrics: Optional[Metrics] = None
        self._violations: Optional[dict[str, list[str]]] = None

    @property
    def metrics(self) -> Metrics:
        if self._metrics is None:
            self._metrics = compute_metrics(self.trades, self.profile.start_balance)
        return self._metrics

    @property
    def violations(self) -> dict[str, list[str]]:
        if self._violations is None:
            detector = ViolationDetector(self.trades, profile=self.profile, rules=self.rules)
            self._violations = detector.scan()
            logger.debug(f"Report flagged {len(self._violations)} of {len(self.trades)} trades")
        return self._violations

    def _money(self, value: float) -> str:
        return format_currency(value, self.profile.currency)

    def print_summary(self) -> None:
        """Print performance summary to console."""
        m = self.metrics
        curve = generate_equity_curve(self.trades, self.profile.start_balance)
        final_equity = curve[-1].equity
        start = self.profile.start_balance
        pf_str = f"{m.profit_factor:.2f}" if m.profit_factor != PROFIT_FACTOR_CAP else "INF"

        print("\n" + "=" * 70)
        print(f"{'JOURNAL PERFORMANCE - ' + self.profile.name.upper():^70}")
        print("=" * 70)

        print(f"\n{'PERFORMANCE METRICS':^70}")
        print("-" * 70)
        print(f"  Starting Balance:     {self._money(start):>20}")
        print(f"  Current Equity:       {self._money(final_equity):>20}")
        return_pct = (m.net_profit / start * 100) if start > 0 else 0
        print(f"  Net Profit/Loss:      {self._money(m.net_profit):>20} ({return_pct:+.1f}%)")

        print(f"\n{'TRADE STATISTICS':^70}")
        print("-" * 70)
        print(f"  Closed Trades:        {m.total_trades:>20}")
        print(f"  Win Rate:             {m.win_rate:>19.1f}%")
        recent_label = f"Win Rate (Last {RECENT_WINDOW}):"
        print(f"  {recent_label:<22}{recent_win_rate(self.trades):>19.1f}%")
        print(f"  Profit Factor:        {pf_str:>20}")
        print(f"  Expectancy:           {self._money(m.expectancy):>20}")
        print(f"  Average Win:          {self._money(m.average_win):>20}")
        print(f"  Average Loss:         {self._money(m.average_loss):>20}")
        print(f"  Largest Win:          {self._money(m.largest_win):>20}")
        print(f"  Largest Loss:         {self._money(m.largest_loss):>20}")
        print(f"  Current Streak:       {m.current_streak:>+20}")

        print(f"\n{'RISK METRICS':^70}")
        print("-" * 70)
        print(f"  Max Drawdown:         {self._money(m.max_drawdown):>20}")
        print(f"  Max Drawdown %:       {m.max_drawdown_percent:>19.1f}%")
        print(f"  Risk Limit / Trade:   {self._money(self.profile.max_risk_amount):>20}")
        print(f"  Flagged Trades:       {len(self.violations):>20}")

        print("\n" + "=" * 70)

    def print_strategies(self) -> None:
        """Print per-strategy results."""
        stats = strategy_breakdown(self.trades)
        if not stats:
            print("No trades to display.")
            return

        print(f"\n{'STRATEGY BREAKDOWN':^70}")
        print("-" * 70)
        print(f"{'Strategy':<28} | {'Trades':>7} | {'Win%':>6} | {'P&L':>18}")
        print("-" * 70)
        for s in stats:
            name = s.name or "(untagged)"
            print(f"{name:<28} | {s.count:>7} | {s.win_rate:>5.1f}% | {self._money(s.pnl):>18}")
        print("-" * 70)

    def print_trades(self, limit: int = 5) -> None:
        """Print the most recent trades with their violation count."""
        trades = recent_trades(self.trades, limit=limit)
        if not trades:
            print("No trades to display.")
            return

        print(f"\n{'RECENT TRADES (Last ' + str(limit) + ')':^90}")
        print("-" * 90)
        print(f"{'#':>3} | {'Date':^12} | {'Symbol':^10} | {'Side':^6} | {'Status':^7} | {'Net P&L':>14} | {'Flags':>5}")
        print("-" * 90)
        for i, trade in enumerate(trades, 1):
            flags = len(self.violations.get(trade.id, []))
            print(
                f"{i:>3} | {date_label(trade.entry_date):^12} | {trade.symbol:^10} | "
                f"{trade.direction.value:^6} | {trade.status.value:^7} | "
                f"{self._money(trade.net_pnl):>14} | {flags:>5}"
            )
        print("-" * 90)

    def print_violations(self) -> None:
        """Print every flagged trade and log it to the violations channel."""
        if not self.violations:
            print("\nNo rule violations found.")
            return

        by_id = {t.id: t for t in self.trades}
        print(f"\n{'RULE VIOLATIONS':^70}")
        print("-" * 70)
        for trade_id, messages in self.violations.items():
            trade = by_id[trade_id]
            print(f"  {date_label(trade.entry_date)} {trade.symbol} ({trade_id})")
            for message in messages:
                print(f"    - {message}")
                log_violation(trade_id, message)
        print("-" * 70)
