"""Data models for the trade journal."""

from models.profile import UserProfile
from models.trade import (
    AssetClass,
    Direction,
    Trade,
    TradeStatus,
    TradingSession,
    estimate_pnl,
)

__all__ = [
    "AssetClass",
    "Direction",
    "Trade",
    "TradeStatus",
    "TradingSession",
    "UserProfile",
    "estimate_pnl",
]
