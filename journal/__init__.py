"""Trade record storage and sample journals."""

from journal.store import (
    DuplicateTradeError,
    JournalStoreError,
    TradeNotFoundError,
    TradeStore,
)
from journal.sample_data import generate_sample_trades

__all__ = [
    "DuplicateTradeError",
    "JournalStoreError",
    "TradeNotFoundError",
    "TradeStore",
    "generate_sample_trades",
]
