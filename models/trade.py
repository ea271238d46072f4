"""Journal trade data model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import uuid

from utils.time_utils import from_epoch_ms


class Direction(Enum):
    """Trade direction."""

    LONG = "LONG"
    SHORT = "SHORT"


class TradeStatus(Enum):
    """Trade lifecycle status."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    PENDING = "PENDING"


class AssetClass(Enum):
    """Instrument asset class."""

    FOREX = "FOREX"
    CRYPTO = "CRYPTO"
    INDICES = "INDICES"
    COMMODITIES = "COMMODITIES"
    STOCKS = "STOCKS"


class TradingSession(Enum):
    """Market session a trade was tagged with."""

    ASIA = "ASIA"
    LONDON = "LONDON"
    NY = "NY"
    OVERLAP = "OVERLAP"


# Forex sizes below this are read as standard lots
FOREX_LOT_THRESHOLD = 1000
FOREX_LOT_UNITS = 100000


@dataclass
class Trade:
    """
    Represents a journaled trade.

    Timestamps are epoch milliseconds. ``exit_date`` is None while the
    trade is open. ``net_pnl`` is taken as entered; the gross - commission
    - swap convention is not enforced here.

    Attributes:
        symbol: Instrument symbol
        direction: Long or Short
        entry_date: Entry timestamp (ms)
        entry_price: Entry price
        size: Position size
        exit_date: Exit timestamp (ms), None while open
        exit_price: Exit price
        gross_pnl: P&L before costs
        commission: Commission paid
        swap: Swap charges
        net_pnl: P&L after costs
        initial_stop_loss: Stop loss at entry
        take_profit: Planned target
        risk_amount: Planned risk in account currency
        risk_multiple: Realized R-multiple
        strategy: Strategy tag
        setup: Setup tag
        timeframe: Chart timeframe
        session: Session tag
        confidence: Confidence rating 1-5
        mistakes: Mistake tags
        notes: Free text
        images: Chart screenshot URLs
        status: Open/Closed/Pending
    """

    symbol: str
    direction: Direction
    entry_date: int
    entry_price: float
    size: float
    exit_date: Optional[int] = None
    exit_price: Optional[float] = None
    asset_class: AssetClass = AssetClass.FOREX
    gross_pnl: float = 0.0
    commission: float = 0.0
    swap: float = 0.0
    net_pnl: float = 0.0
    initial_stop_loss: float = 0.0
    take_profit: Optional[float] = None
    risk_amount: float = 0.0
    risk_multiple: float = 0.0
    strategy: str = ""
    setup: str = ""
    timeframe: str = ""
    session: TradingSession = TradingSession.NY
    confidence: int = 3
    mistakes: list[str] = field(default_factory=list)
    notes: str = ""
    images: list[str] = field(default_factory=list)
    status: TradeStatus = TradeStatus.CLOSED
    account_id: str = "default"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_win(self) -> bool:
        """Check if trade was a win."""
        return self.net_pnl > 0

    @property
    def is_loss(self) -> bool:
        """Check if trade lost money."""
        return self.net_pnl < 0

    @property
    def is_closed(self) -> bool:
        """Closed with a recorded exit, i.e. counted by the analytics."""
        return self.status == TradeStatus.CLOSED and self.exit_date is not None

    @property
    def entry_datetime(self) -> datetime:
        """Entry time as a UTC datetime."""
        return from_epoch_ms(self.entry_date)

    @property
    def exit_datetime(self) -> Optional[datetime]:
        """Exit time as a UTC datetime."""
        if self.exit_date is None:
            return None
        return from_epoch_ms(self.exit_date)

    @property
    def duration_minutes(self) -> Optional[float]:
        """Holding time in minutes."""
        if self.exit_date is None:
            return None
        return (self.exit_date - self.entry_date) / 60000

    @property
    def calculated_r_multiple(self) -> Optional[float]:
        """R-multiple from net P&L and planned risk."""
        if not self.risk_amount:
            return None
        return round(self.net_pnl / self.risk_amount, 2)

    def to_dict(self) -> dict:
        """Convert trade to the camelCase API shape."""
        return {
            "id": self.id,
            "accountId": self.account_id,
            "symbol": self.symbol,
            "assetClass": self.asset_class.value,
            "direction": self.direction.value,
            "entryDate": self.entry_date,
            "exitDate": self.exit_date,
            "entryPrice": self.entry_price,
            "exitPrice": self.exit_price,
            "size": self.size,
            "grossPnL": self.gross_pnl,
            "commission": self.commission,
            "swap": self.swap,
            "netPnL": self.net_pnl,
            "initialStopLoss": self.initial_stop_loss,
            "takeProfit": self.take_profit,
            "riskAmount": self.risk_amount,
            "riskMultiple": self.risk_multiple,
            "strategy": self.strategy,
            "setup": self.setup,
            "timeframe": self.timeframe,
            "session": self.session.value,
            "confidence": self.confidence,
            "mistake": list(self.mistakes),
            "notes": self.notes,
            "images": list(self.images),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Trade":
        """
        Create Trade from the camelCase API shape.

        Raises:
            ValueError: If data is not an object, a required field is missing
                or an enum value is unknown.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Trade must be an object, got {type(data).__name__}")

        missing = [
            key for key in ("symbol", "direction", "entryDate", "entryPrice", "size")
            if data.get(key) is None
        ]
        if missing:
            raise ValueError(f"Trade is missing required fields: {', '.join(missing)}")

        exit_date = data.get("exitDate")
        exit_price = data.get("exitPrice")
        take_profit = data.get("takeProfit")
        trade_id = data.get("id") or data.get("_id") or str(uuid.uuid4())

        return cls(
            id=str(trade_id),
            account_id=data.get("accountId") or "default",
            symbol=str(data["symbol"]).strip().upper(),
            asset_class=AssetClass(data.get("assetClass", "FOREX")),
            direction=Direction(data["direction"]),
            entry_date=int(data["entryDate"]),
            exit_date=int(exit_date) if exit_date is not None else None,
            entry_price=float(data["entryPrice"]),
            exit_price=float(exit_price) if exit_price is not None else None,
            size=float(data["size"]),
            gross_pnl=float(data.get("grossPnL", 0)),
            commission=float(data.get("commission", 0)),
            swap=float(data.get("swap", 0)),
            net_pnl=float(data.get("netPnL", 0)),
            initial_stop_loss=float(data.get("initialStopLoss", 0)),
            take_profit=float(take_profit) if take_profit is not None else None,
            risk_amount=float(data.get("riskAmount", 0)),
            risk_multiple=float(data.get("riskMultiple", 0)),
            strategy=data.get("strategy") or "",
            setup=data.get("setup") or "",
            timeframe=data.get("timeframe") or "",
            session=TradingSession(data.get("session", "NY")),
            confidence=int(data.get("confidence", 3)),
            mistakes=list(data.get("mistake") or []),
            notes=data.get("notes") or "",
            images=list(data.get("images") or []),
            status=TradeStatus(data.get("status", "CLOSED")),
        )


def estimate_pnl(
    direction: Direction,
    entry_price: float,
    exit_price: float,
    size: float,
    asset_class: AssetClass = AssetClass.FOREX,
    commission: float = 0.0,
    swap: float = 0.0,
) -> tuple[float, float]:
    """
    Estimate gross and net P&L from prices.

    Forex sizes below 1000 are read as standard lots of 100k units.
    Commission and swap are positive costs.

    Returns:
        Tuple of (gross, net), net rounded to 2 decimals.
    """
    if direction == Direction.LONG:
        gross = (exit_price - entry_price) * size
    else:
        gross = (entry_price - exit_price) * size

    if asset_class == AssetClass.FOREX and size < FOREX_LOT_THRESHOLD:
        gross *= FOREX_LOT_UNITS

    net = gross - commission - swap
    return gross, round(net, 2)
