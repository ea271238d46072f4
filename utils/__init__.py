"""Utility modules for the trade journal."""

from utils.logger import get_logger, log_violation, setup_logging
from utils.formatters import format_currency, format_number, round_half_up
from utils.time_utils import (
    SESSION_WINDOWS,
    SessionWindow,
    date_label,
    from_epoch_ms,
    to_epoch_ms,
    utc_hour,
)

__all__ = [
    "get_logger",
    "log_violation",
    "setup_logging",
    "format_currency",
    "format_number",
    "round_half_up",
    "SESSION_WINDOWS",
    "SessionWindow",
    "date_label",
    "from_epoch_ms",
    "to_epoch_ms",
    "utc_hour",
]
