"""Logging configuration using loguru."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Remove default handler
logger.remove()

# Flag to track if logging is set up
_logging_configured = False


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_path: str = "logs/",
    rotation: str = "10 MB",
    retention: str = "30 days",
) -> None:
    """
    Configure logging for the journal.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_to_file: Whether to log to files.
        log_path: Directory for log files.
        rotation: When to rotate log files.
        retention: How long to keep log files.
    """
    global _logging_configured

    if _logging_configured:
        return

    # Console handler with colors
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        level=level,
        colorize=True,
    )

    if log_to_file:
        log_dir = Path(log_path)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "journal_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

        logger.add(
            log_dir / "errors_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
            level="ERROR",
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

        # Rule violations get their own file so they can be reviewed per day
        logger.add(
            log_dir / "violations_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[trade_id]} | {message}",
            level="INFO",
            rotation=rotation,
            retention=retention,
            filter=lambda record: "violation" in record["extra"],
            compression="zip",
        )

    _logging_configured = True
    logger.debug("Logging configured")


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Logger instance.
    """
    if name:
        return logger.bind(name=name)
    return logger


def log_violation(trade_id: str, message: str) -> None:
    """
    Log a rule violation to the violations log.

    Args:
        trade_id: Id of the offending trade.
        message: Violation text.
    """
    logger.bind(violation=True, trade_id=trade_id).warning(message)
