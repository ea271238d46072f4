"""Synthetic journal data for demos and tests."""

from datetime import datetime
from typing import Optional

import numpy as np

from models.trade import AssetClass, Direction, Trade, TradeStatus, TradingSession
from utils.logger import get_logger
from utils.time_utils import MS_PER_DAY, to_epoch_ms

logger = get_logger(__name__)

DEFAULT_STRATEGIES = ["Trend Following", "Mean Reversion", "Breakout", "Scalp"]
DEFAULT_SETUPS = ["Golden Cross", "Support Bounce", "Flag Break", "Supply Zone", "Liquidity Sweep"]

ASSET_SYMBOLS = {
    AssetClass.FOREX: ["EURUSD", "GBPUSD", "USDJPY", "USDCAD", "AUDUSD", "NZDUSD", "USDCHF"],
    AssetClass.CRYPTO: ["BTCUSD", "ETHUSD", "SOLUSD", "XRPUSD", "DOGE", "ADAUSD", "MATIC"],
    AssetClass.INDICES: ["ES_F", "NQ_F", "YM_F", "DAX", "UK100", "NIKKEI", "RTY_F"],
    AssetClass.STOCKS: ["AAPL", "NVDA", "TSLA", "MSFT", "AMD", "META", "GOOGL", "AMZN"],
    AssetClass.COMMODITIES: ["XAUUSD", "XAGUSD", "CL_F", "NG_F", "HG_F", "ZC_F"],
}

SAMPLE_SESSIONS = [TradingSession.LONDON, TradingSession.NY, TradingSession.ASIA]

MS_PER_HOUR = MS_PER_DAY // 24


def generate_sample_trades(
    count: int,
    start: datetime,
    seed: Optional[int] = 42,
    risk: float = 500.0,
    commission: float = 5.0,
) -> list[Trade]:
    """
    Generate a closed-trade journal.

    Trades are spaced 4-24 hours apart and held 1 hour to 3 days. About
    55% win between 1.5R and 3.5R; losers lose 0.5R to 1R.

    Args:
        count: Number of trades.
        start: Time before the first trade.
        seed: Random seed, None for a fresh journal each call.
        risk: Planned risk per trade.
        commission: Commission per trade.

    Returns:
        Trades in entry order.
    """
    rng = np.random.default_rng(seed)
    asset_classes = list(AssetClass)

    trades = []
    current = to_epoch_ms(start)

    for i in range(count):
        is_win = rng.random() > 0.45
        r_multiple = rng.uniform(1.5, 3.5) if is_win else rng.uniform(-1.0, -0.5)

        gross = risk * r_multiple
        net = gross - commission

        duration = int(rng.uniform(MS_PER_HOUR, 3 * MS_PER_DAY))
        current += int(rng.uniform(4 * MS_PER_HOUR, 24 * MS_PER_HOUR))

        asset_class = asset_classes[rng.integers(len(asset_classes))]
        symbols = ASSET_SYMBOLS[asset_class]

        trades.append(
            Trade(
                id=f"TRD-{1000 + i}",
                account_id="ACC-001",
                symbol=symbols[rng.integers(len(symbols))],
                asset_class=asset_class,
                direction=Direction.LONG if rng.random() > 0.5 else Direction.SHORT,
                entry_date=current,
                exit_date=current + duration,
                entry_price=round(float(rng.uniform(100, 2000)), 2),
                exit_price=round(float(rng.uniform(100, 2000)), 2),
                size=1.0,
                gross_pnl=round(float(gross), 2),
                commission=commission,
                net_pnl=round(float(net), 2),
                risk_amount=risk,
                risk_multiple=round(float(r_multiple), 2),
                strategy=DEFAULT_STRATEGIES[rng.integers(len(DEFAULT_STRATEGIES))],
                setup=DEFAULT_SETUPS[rng.integers(len(DEFAULT_SETUPS))],
                timeframe="H1",
                session=SAMPLE_SESSIONS[rng.integers(len(SAMPLE_SESSIONS))],
                confidence=int(rng.integers(3, 6)),
                notes="Good follow through." if is_win else "Choppy market, got stopped out.",
                status=TradeStatus.CLOSED,
            )
        )

    logger.info(f"Generated {count} sample trades")
    return trades
