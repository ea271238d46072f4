"""Epoch timestamp and trading session utilities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import pytz

MS_PER_MINUTE = 60 * 1000
MS_PER_DAY = 24 * 60 * MS_PER_MINUTE


@dataclass(frozen=True)
class SessionWindow:
    """Approximate UTC hour window of a trading session.

    ``start`` is inclusive and ``end`` exclusive. A window whose start is
    after its end wraps past midnight.
    """

    name: str
    start: int
    end: int

    def contains(self, hour: int) -> bool:
        """Check if a UTC hour falls inside the window."""
        if self.start > self.end:
            return hour >= self.start or hour < self.end
        return self.start <= hour < self.end


# OVERLAP has no window and is never checked
SESSION_WINDOWS = {
    "LONDON": SessionWindow(name="London", start=7, end=17),
    "NY": SessionWindow(name="NY", start=12, end=22),
    "ASIA": SessionWindow(name="Asia", start=22, end=9),
}


def from_epoch_ms(timestamp: float) -> datetime:
    """Convert epoch milliseconds to a UTC-aware datetime."""
    return datetime.fromtimestamp(timestamp / 1000.0, tz=pytz.utc)


def to_epoch_ms(dt: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return int(round(dt.timestamp() * 1000))


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return to_epoch_ms(datetime.now(pytz.utc))


def utc_hour(timestamp: float) -> int:
    """UTC hour of day (0-23) for an epoch-millisecond timestamp."""
    return from_epoch_ms(timestamp).hour


def date_label(timestamp: Optional[float]) -> str:
    """Short M/D/YYYY label for a timestamp, in UTC."""
    dt = from_epoch_ms(timestamp or 0)
    return f"{dt.month}/{dt.day}/{dt.year}"
