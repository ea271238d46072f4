"""
Risk rule checks for individual journal trades.

Each trade is checked against:
- Over-risking: planned risk above the per-trade limit
- Excess loss: realized loss well beyond the planned risk
- Session window: entry hour outside the tagged session
- Revenge trading: entry shortly after a losing trade closed
"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Iterable, Optional

from models.profile import UserProfile
from models.trade import Trade
from utils.formatters import format_amount
from utils.logger import get_logger
from utils.time_utils import MS_PER_MINUTE, SESSION_WINDOWS, utc_hour

logger = get_logger(__name__)


@dataclass(frozen=True)
class ViolationRules:
    """Thresholds for the rule checks."""

    fallback_max_risk: float = 2000.0  # used when no profile is supplied
    max_loss_multiplier: float = 1.5
    revenge_window_minutes: float = 30.0

    @property
    def revenge_window_ms(self) -> float:
        return self.revenge_window_minutes * MS_PER_MINUTE

    @classmethod
    def from_settings(cls, settings) -> "ViolationRules":
        """Build rules from ``RiskSettings``."""
        return cls(
            fallback_max_risk=settings.fallback_max_risk,
            max_loss_multiplier=settings.max_loss_multiplier,
            revenge_window_minutes=settings.revenge_window_minutes,
        )


class ViolationDetector:
    """
    Checks trades against the risk rules.

    The trade history is sorted by exit time once, so finding the trade
    that closed just before an entry is a binary search instead of a scan
    of the whole journal.
    """

    def __init__(
        self,
        all_trades: Iterable[Trade],
        profile: Optional[UserProfile] = None,
        rules: Optional[ViolationRules] = None,
    ):
        """
        Initialize detector.

        Args:
            all_trades: Full journal, used for the revenge trading check.
            profile: User risk configuration.
            rules: Rule thresholds.
        """
        self.trades = list(all_trades)
        self.profile = profile
        self.rules = rules or ViolationRules()

        # Stable sort keeps input order among equal exit times
        self._by_exit = sorted(
            (t for t in self.trades if t.exit_date is not None),
            key=lambda t: t.exit_date,
        )
        self._exit_dates = [t.exit_date for t in self._by_exit]

    @property
    def max_risk_amount(self) -> float:
        """Per-trade risk limit in account currency."""
        if self.profile is not None:
            return self.profile.max_risk_amount
        return self.rules.fallback_max_risk

    def check(self, trade: Trade) -> list[str]:
        """
        Run every rule against one trade.

        Returns:
            Violation messages in rule order, empty if the trade is clean.
        """
        violations: list[str] = []

        limit = self.max_risk_amount
        if trade.risk_amount > limit:
            violations.append(
                f"Risk (${format_amount(trade.risk_amount)}) exceeds max limit (${limit:.0f})"
            )

        if (
            trade.net_pnl < 0
            and trade.risk_amount > 0
            and abs(trade.net_pnl) > trade.risk_amount * self.rules.max_loss_multiplier
        ):
            violations.append("Loss exceeded planned risk significantly (Slippage/Discipline)")

        window = SESSION_WINDOWS.get(trade.session.value)
        if window is not None and not window.contains(utc_hour(trade.entry_date)):
            violations.append(f"Trade executed outside {window.name} session")

        previous = self.previous_trade(trade)
        if (
            previous is not None
            and previous.net_pnl < 0
            and trade.entry_date - previous.exit_date < self.rules.revenge_window_ms
        ):
            violations.append(
                f"Potential revenge trading (entry <{self.rules.revenge_window_minutes:g}m after loss)"
            )

        if violations:
            logger.debug(f"Trade {trade.id} {trade.symbol}: {len(violations)} violation(s)")
        return violations

    def previous_trade(self, trade: Trade) -> Optional[Trade]:
        """
        The trade that closed most recently at or before ``trade`` entered.

        The trade itself is skipped by id. Among trades closing at the same
        time the earliest in the journal wins.
        """
        pos = bisect_right(self._exit_dates, trade.entry_date)
        while pos > 0:
            exit_date = self._exit_dates[pos - 1]
            start = bisect_left(self._exit_dates, exit_date, 0, pos)
            for candidate in self._by_exit[start:pos]:
                if candidate.id != trade.id:
                    return candidate
            pos = start
        return None

    def scan(self) -> dict[str, list[str]]:
        """Violations for every trade in the journal that has any."""
        flagged = {}
        for trade in self.trades:
            violations = self.check(trade)
            if violations:
                flagged[trade.id] = violations
        logger.info(f"Scanned {len(self.trades)} trades | {len(flagged)} flagged")
        return flagged


def detect_violations(
    trade: Trade,
    all_trades: Iterable[Trade],
    profile: Optional[UserProfile] = None,
    rules: Optional[ViolationRules] = None,
) -> list[str]:
    """
    Check a single trade against the risk rules.

    Use ``ViolationDetector`` directly when checking many trades against
    the same journal.

    Args:
        trade: Trade to check.
        all_trades: Full journal (may include ``trade`` itself).
        profile: User risk configuration; without it the fallback limit applies.
        rules: Rule thresholds.

    Returns:
        Human-readable violation messages, possibly empty.
    """
    return ViolationDetector(all_trades, profile=profile, rules=rules).check(trade)
