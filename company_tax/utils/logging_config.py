"""
Logging Configuration

All company_tax modules log through one stdout handler attached to the
``company_tax`` package logger. Module loggers carry no handlers of their
own and hand records up to it, so each record is written exactly once.

- Structured one-line records: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE
- Level from LOG_LEVEL (default INFO)
- Timing of table builds and DataFrame shape logging

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import logging
import os
import sys
import time
from datetime import datetime
from typing import Optional

PACKAGE_LOGGER = "company_tax"


class StructuredFormatter(logging.Formatter):
    """[TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE, plus any traceback."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        line = (
            f"[{stamp}] [{record.levelname:8s}] "
            f"[{record.module}:{record.funcName}:{record.lineno}] {record.getMessage()}"
        )
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def resolve_level(level: Optional[str] = None) -> int:
    """Numeric level for a name such as "debug"; LOG_LEVEL when None, INFO if unknown."""
    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')
    return getattr(logging, level.upper(), logging.INFO)


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return the logger for a company_tax module.

    The first call attaches the stdout handler to the package logger and sets
    the package level from LOG_LEVEL. An explicit level applies to the
    returned logger only.

    Args:
        name: Module name (usually __name__), under company_tax
        level: Optional level name for this logger

    Returns:
        Logger whose records reach the package handler
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        package_logger.addHandler(handler)
        package_logger.setLevel(resolve_level())
        package_logger.propagate = False

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(resolve_level(level))
    return logger


class PerformanceLogger:
    """
    Times a block of work.

    Logs the duration at DEBUG, or as a SLOW warning above threshold_ms.
    A block that raises is logged as aborted and the exception propagates.
    """

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 1000):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.duration_ms: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.perf_counter() - self._started) * 1000

        if exc_type is not None:
            self.logger.debug(
                f"{self.operation} aborted after {self.duration_ms:.1f}ms: {exc_type.__name__}"
            )
        elif self.duration_ms > self.threshold_ms:
            self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms")
        else:
            self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms")
        return False


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 1000) -> PerformanceLogger:
    """
    Usage:
        with get_perf_logger(logger, "tax_schedule", threshold_ms=500):
            ...
    """
    return PerformanceLogger(logger, operation, threshold_ms)


def log_dataframe_info(logger: logging.Logger, df, name: str = "DataFrame"):
    """Log the shape of a comparison table; a missing table logs a warning."""
    if df is None:
        logger.warning(f"{name} is None")
    elif df.empty:
        logger.debug(f"{name}: no rows")
    else:
        logger.debug(f"{name}: {len(df)} rows x {len(df.columns)} columns")
