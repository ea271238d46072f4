"""In-memory trade record store for one account."""

import json
from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional, Union

from models.trade import Trade
from utils.logger import get_logger

logger = get_logger(__name__)


class JournalStoreError(Exception):
    """Base error for trade store operations."""


class TradeNotFoundError(JournalStoreError):
    """No trade with the given id."""


class DuplicateTradeError(JournalStoreError):
    """A trade with the same id is already stored."""


class TradeStore:
    """
    Trades owned by one account, keyed by id.

    Mirrors the journal API: list, create, update, delete and delete-all.
    Listing is ordered by entry time.
    """

    def __init__(self, account_id: str = "default", trades: Optional[list[Trade]] = None):
        """
        Initialize store.

        Args:
            account_id: Owning account; added trades are stamped with it.
            trades: Initial trades.
        """
        self.account_id = account_id
        self._trades: dict[str, Trade] = {}
        for trade in trades or []:
            self.add(trade)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self.list())

    def __contains__(self, trade_id: str) -> bool:
        return trade_id in self._trades

    def list(self) -> list[Trade]:
        """All trades, oldest entry first."""
        return sorted(self._trades.values(), key=lambda t: t.entry_date)

    def get(self, trade_id: str) -> Trade:
        """
        Get a trade by id.

        Raises:
            TradeNotFoundError: If the id is unknown.
        """
        try:
            return self._trades[trade_id]
        except KeyError:
            raise TradeNotFoundError(f"Trade not found: {trade_id}") from None

    def add(self, trade: Trade) -> Trade:
        """
        Store a new trade.

        Raises:
            DuplicateTradeError: If the id is already stored.
        """
        if trade.id in self._trades:
            raise DuplicateTradeError(f"Trade already exists: {trade.id}")
        trade.account_id = self.account_id
        self._trades[trade.id] = trade
        logger.debug(f"Trade added | {trade.id} {trade.symbol} {trade.direction.value}")
        return trade

    def update(self, trade_id: str, **changes) -> Trade:
        """
        Replace fields of a stored trade.

        Args:
            trade_id: Trade to update.
            **changes: Trade attributes to change; ``id`` cannot be changed.

        Returns:
            The updated trade.
        """
        current = self.get(trade_id)
        changes.pop("id", None)
        updated = replace(current, **changes)
        self._trades[trade_id] = updated
        logger.debug(f"Trade updated | {trade_id} | {', '.join(sorted(changes))}")
        return updated

    def remove(self, trade_id: str) -> Trade:
        """Delete one trade and return it."""
        trade = self.get(trade_id)
        del self._trades[trade_id]
        logger.debug(f"Trade removed | {trade_id}")
        return trade

    def clear(self) -> int:
        """Delete all trades; returns how many were removed."""
        count = len(self._trades)
        self._trades.clear()
        logger.info(f"Cleared {count} trades from account {self.account_id}")
        return count

    def load_json(self, path: Union[str, Path]) -> int:
        """
        Load trades from a JSON file.

        Accepts a plain list of trades or the ``{"data": [...]}`` envelope
        returned by the trades endpoint. The load is all-or-nothing: on
        error the store is left unchanged.

        Returns:
            Number of trades loaded.

        Raises:
            ValueError: If the file is not a list or envelope, or a trade is malformed.
            DuplicateTradeError: If an id is already stored or repeats in the file.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

        if isinstance(payload, dict):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise ValueError(f"{path} does not contain a list of trades")

        parsed = []
        seen = set()
        for index, item in enumerate(payload):
            try:
                trade = Trade.from_dict(item)
            except (TypeError, ValueError) as e:
                raise ValueError(f"{path}: trade #{index} is invalid: {e}") from e
            if trade.id in self._trades or trade.id in seen:
                raise DuplicateTradeError(f"{path}: trade #{index} duplicates id {trade.id}")
            seen.add(trade.id)
            parsed.append(trade)

        # Nothing is stored unless the whole file parsed
        for trade in parsed:
            self.add(trade)

        logger.info(f"Loaded {len(parsed)} trades from {path}")
        return len(parsed)
