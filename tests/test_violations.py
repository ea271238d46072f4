"""Tests for rule violation detection."""

from datetime import datetime

import pytest
import pytz

from analytics.violations import ViolationDetector, ViolationRules, detect_violations
from models.profile import UserProfile
from models.trade import TradingSession
from utils.time_utils import to_epoch_ms
from conftest import BASE_TIME, HOUR_MS, MINUTE_MS

REVENGE_MSG = "Potential revenge trading (entry <30m after loss)"
EXCESS_LOSS_MSG = "Loss exceeded planned risk significantly (Slippage/Discipline)"


def at_utc_hour(hour: int) -> int:
    """Epoch ms for 2024-01-15 at the given UTC hour."""
    return to_epoch_ms(datetime(2024, 1, 15, hour, 0, tzinfo=pytz.utc))


class TestRiskLimit:
    """Test cases for the over-risking rule."""

    @pytest.fixture
    def profile(self):
        """Profile with a 200 risk limit."""
        return UserProfile(start_balance=10000.0, max_risk_per_trade=2.0)

    def test_over_risk_flagged(self, make_trade, profile):
        """Test risk above the profile limit is flagged."""
        trade = make_trade(net_pnl=50.0, risk_amount=300.0)

        assert detect_violations(trade, [trade], profile) == [
            "Risk ($300) exceeds max limit ($200)"
        ]

    def test_within_limit_is_clean(self, make_trade, profile):
        """Test a compliant trade has no violations."""
        trade = make_trade(net_pnl=50.0, risk_amount=150.0)

        assert detect_violations(trade, [trade], profile) == []

    def test_fallback_limit_without_profile(self, make_trade):
        """Test the fallback limit applies when no profile is given."""
        risky = make_trade(risk_amount=2500.0)
        fine = make_trade(risk_amount=1500.0)

        assert detect_violations(risky, [risky]) == ["Risk ($2500) exceeds max limit ($2000)"]
        assert detect_violations(fine, [fine]) == []

    def test_custom_fallback_limit(self, make_trade):
        """Test the fallback limit can be configured."""
        trade = make_trade(risk_amount=2500.0)
        rules = ViolationRules(fallback_max_risk=3000.0)

        assert detect_violations(trade, [trade], rules=rules) == []

    def test_fractional_risk_in_message(self, make_trade, profile):
        """Test non-integer risk keeps its decimals in the message."""
        trade = make_trade(risk_amount=250.5)

        assert detect_violations(trade, [trade], profile) == [
            "Risk ($250.5) exceeds max limit ($200)"
        ]


class TestExcessLoss:
    """Test cases for the excess loss rule."""

    def test_loss_beyond_multiplier_flagged(self, make_trade):
        """Test a loss more than 1.5x the planned risk is flagged."""
        trade = make_trade(net_pnl=-151.0, risk_amount=100.0)

        assert detect_violations(trade, [trade]) == [EXCESS_LOSS_MSG]

    def test_loss_at_multiplier_not_flagged(self, make_trade):
        """Test a loss of exactly 1.5x the risk is allowed."""
        trade = make_trade(net_pnl=-150.0, risk_amount=100.0)

        assert detect_violations(trade, [trade]) == []

    def test_zero_risk_skips_check(self, make_trade):
        """Test trades without planned risk are not checked."""
        trade = make_trade(net_pnl=-5000.0, risk_amount=0.0)

        assert detect_violations(trade, [trade]) == []

    def test_winning_trade_not_checked(self, make_trade):
        """Test the rule only applies to losses."""
        trade = make_trade(net_pnl=900.0, risk_amount=100.0)

        assert detect_violations(trade, [trade]) == []


class TestSessionWindow:
    """Test cases for the session window rule."""

    @pytest.mark.parametrize(
        "session,hour,expected",
        [
            (TradingSession.LONDON, 3, ["Trade executed outside London session"]),
            (TradingSession.LONDON, 10, []),
            (TradingSession.LONDON, 17, ["Trade executed outside London session"]),
            (TradingSession.NY, 12, []),
            (TradingSession.NY, 22, ["Trade executed outside NY session"]),
            (TradingSession.ASIA, 23, []),
            (TradingSession.ASIA, 3, []),
            (TradingSession.ASIA, 10, ["Trade executed outside Asia session"]),
            (TradingSession.OVERLAP, 3, []),
        ],
    )
    def test_session_hours(self, make_trade, session, hour, expected):
        """Test entry hour against the tagged session window."""
        trade = make_trade(session=session, entry_date=at_utc_hour(hour))

        assert detect_violations(trade, [trade]) == expected


class TestRevengeTrading:
    """Test cases for the revenge trading rule."""

    @pytest.fixture
    def losing_trade(self, make_trade):
        """Loss that closed at BASE_TIME."""
        return make_trade(net_pnl=-100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME)

    def test_entry_soon_after_loss(self, make_trade, losing_trade):
        """Test an entry 10 minutes after a loss is flagged."""
        trade = make_trade(entry_date=BASE_TIME + 10 * MINUTE_MS)

        assert detect_violations(trade, [losing_trade, trade]) == [REVENGE_MSG]

    def test_entry_after_window(self, make_trade, losing_trade):
        """Test an entry 40 minutes after a loss is not flagged."""
        trade = make_trade(entry_date=BASE_TIME + 40 * MINUTE_MS)

        assert detect_violations(trade, [losing_trade, trade]) == []

    def test_entry_after_win(self, make_trade):
        """Test an entry right after a winning trade is not flagged."""
        winner = make_trade(net_pnl=100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME)
        trade = make_trade(entry_date=BASE_TIME + 5 * MINUTE_MS)

        assert detect_violations(trade, [winner, trade]) == []

    def test_only_latest_previous_trade_counts(self, make_trade, losing_trade):
        """Test a win closing after the loss clears the flag."""
        winner = make_trade(net_pnl=50.0, entry_date=BASE_TIME, exit_date=BASE_TIME + 5 * MINUTE_MS)
        trade = make_trade(entry_date=BASE_TIME + 10 * MINUTE_MS)

        assert detect_violations(trade, [losing_trade, winner, trade]) == []

    def test_trades_closing_later_ignored(self, make_trade):
        """Test trades that close after the entry are not 'previous'."""
        later_loss = make_trade(net_pnl=-100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME + MINUTE_MS)
        trade = make_trade(entry_date=BASE_TIME)

        assert detect_violations(trade, [later_loss, trade]) == []

    def test_trade_excluded_from_own_history(self, make_trade):
        """Test a trade is never its own previous trade."""
        trade = make_trade(net_pnl=-100.0, entry_date=BASE_TIME, exit_date=BASE_TIME)

        assert detect_violations(trade, [trade]) == []

    def test_no_previous_trade(self, make_trade):
        """Test the check is skipped with no history."""
        trade = make_trade()

        assert detect_violations(trade, []) == []

    def test_exit_ties_resolve_to_first_in_journal(self, make_trade):
        """Test equal exit times pick the earliest trade in the input."""
        winner = make_trade(net_pnl=100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME)
        loser = make_trade(net_pnl=-100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME)
        trade = make_trade(entry_date=BASE_TIME + 5 * MINUTE_MS)

        assert detect_violations(trade, [winner, loser, trade]) == []
        assert detect_violations(trade, [loser, winner, trade]) == [REVENGE_MSG]

    def test_custom_window(self, make_trade, losing_trade):
        """Test the revenge window can be configured."""
        trade = make_trade(entry_date=BASE_TIME + 40 * MINUTE_MS)
        rules = ViolationRules(revenge_window_minutes=60)

        assert detect_violations(trade, [losing_trade, trade], rules=rules) == [
            "Potential revenge trading (entry <60m after loss)"
        ]


class TestViolationDetector:
    """Test cases for the indexed detector."""

    @pytest.fixture
    def journal(self, make_trade):
        """Journal with one revenge trade and one over-risked trade."""
        first = make_trade(net_pnl=-100.0, entry_date=BASE_TIME - HOUR_MS, exit_date=BASE_TIME)
        revenge = make_trade(net_pnl=20.0, entry_date=BASE_TIME + 5 * MINUTE_MS)
        risky = make_trade(net_pnl=20.0, entry_date=BASE_TIME + 5 * HOUR_MS, risk_amount=5000.0)
        return [first, revenge, risky]

    def test_scan(self, journal):
        """Test scan maps flagged trade ids to their messages."""
        first, revenge, risky = journal
        flagged = ViolationDetector(journal).scan()

        assert flagged == {
            revenge.id: [REVENGE_MSG],
            risky.id: ["Risk ($5000) exceeds max limit ($2000)"],
        }

    def test_matches_single_trade_check(self, journal):
        """Test the detector agrees with detect_violations for every trade."""
        detector = ViolationDetector(journal)

        for trade in journal:
            assert detector.check(trade) == detect_violations(trade, journal)

    def test_profile_overrides_fallback(self, journal):
        """Test a profile limit replaces the fallback limit."""
        detector = ViolationDetector(journal, profile=UserProfile(start_balance=1_000_000.0))

        assert detector.max_risk_amount == pytest.approx(20000.0)
        assert journal[2].id not in detector.scan()

    def test_rules_from_settings(self):
        """Test rules are built from risk settings."""
        from config.settings import RiskSettings

        rules = ViolationRules.from_settings(
            RiskSettings(fallback_max_risk=500.0, max_loss_multiplier=2.0, revenge_window_minutes=15.0)
        )

        assert rules.fallback_max_risk == 500.0
        assert rules.max_loss_multiplier == 2.0
        assert rules.revenge_window_ms == 15 * MINUTE_MS

    def test_multiple_violations_in_order(self, make_trade, journal):
        """Test several rules can fire on one trade, in rule order."""
        trade = make_trade(
            net_pnl=-4000.0,
            risk_amount=2500.0,
            session=TradingSession.LONDON,
            entry_date=at_utc_hour(3),
        )

        assert detect_violations(trade, journal + [trade]) == [
            "Risk ($2500) exceeds max limit ($2000)",
            EXCESS_LOSS_MSG,
            "Trade executed outside London session",
        ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
