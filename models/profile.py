"""User profile and risk configuration."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class UserProfile:
    """
    Per-user settings read by the analytics.

    ``max_daily_loss`` is stored but no rule consumes it yet.
    """

    name: str = "Trader"
    account_type: str = "Standard Account"
    start_balance: float = 10000.0
    currency: str = "USD"
    max_risk_per_trade: float = 2.0  # % of start balance
    max_daily_loss: float = 5.0  # %
    monthly_goal: float = 10.0  # %
    custom_strategies: list[str] = field(default_factory=list)
    custom_setups: list[str] = field(default_factory=list)

    @property
    def max_risk_amount(self) -> float:
        """Largest allowed risk per trade in account currency."""
        return self.start_balance * self.max_risk_per_trade / 100

    def to_dict(self) -> dict:
        """Convert profile to the camelCase API shape."""
        return {
            "name": self.name,
            "accountType": self.account_type,
            "startBalance": self.start_balance,
            "currency": self.currency,
            "maxRiskPerTrade": self.max_risk_per_trade,
            "maxDailyLoss": self.max_daily_loss,
            "monthlyGoal": self.monthly_goal,
            "customStrategies": list(self.custom_strategies),
            "customSetups": list(self.custom_setups),
        }

    @classmethod
    def from_dict(cls, data: dict, defaults: Optional["UserProfile"] = None) -> "UserProfile":
        """
        Create profile from the camelCase API shape.

        Raises:
            ValueError: If data is not an object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be an object, got {type(data).__name__}")
        base = defaults or cls()
        return cls(
            name=data.get("name", base.name),
            account_type=data.get("accountType", base.account_type),
            start_balance=float(data.get("startBalance", base.start_balance)),
            currency=data.get("currency", base.currency),
            max_risk_per_trade=float(data.get("maxRiskPerTrade", base.max_risk_per_trade)),
            max_daily_loss=float(data.get("maxDailyLoss", base.max_daily_loss)),
            monthly_goal=float(data.get("monthlyGoal", base.monthly_goal)),
            custom_strategies=list(data.get("customStrategies", base.custom_strategies)),
            custom_setups=list(data.get("customSetups", base.custom_setups)),
        )

    @classmethod
    def from_settings(cls, settings) -> "UserProfile":
        """Build the default profile from ``ProfileSettings``."""
        return cls(
            name=settings.name,
            account_type=settings.account_type,
            start_balance=settings.start_balance,
            currency=settings.currency,
            max_risk_per_trade=settings.max_risk_per_trade,
            max_daily_loss=settings.max_daily_loss,
            monthly_goal=settings.monthly_goal,
        )
