"""
Structured logging for admitview.

Provides centralized logging with console and file outputs, plus counters
for record retrieval and normalization activity.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import load_settings


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for retrieval and normalization.
    """

    def __init__(
        self,
        name: str = "admitview",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        self.metrics = {
            "fetches_attempted": 0,
            "fetches_successful": 0,
            "fetches_failed": 0,
            "errors_by_type": {},
            "normalizations_by_method": {},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"admitview_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str, ensure_ascii=False)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_fetch_attempt(self):
        self.metrics["fetches_attempted"] += 1

    def record_fetch_success(self):
        self.metrics["fetches_successful"] += 1

    def record_fetch_failure(self, error_type: str):
        self.metrics["fetches_failed"] += 1
        errors = self.metrics["errors_by_type"]
        errors[error_type] = errors.get(error_type, 0) + 1

    def record_normalization(self, method: Optional[str]):
        """Count a normalized record under its method label ("unknown" if none)."""
        key = method or "unknown"
        by_method = self.metrics["normalizations_by_method"]
        by_method[key] = by_method.get(key, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics with the fetch success rate filled in."""
        metrics_copy = dict(self.metrics)
        attempts = metrics_copy["fetches_attempted"]
        metrics_copy["fetch_success_rate"] = (
            round(metrics_copy["fetches_successful"] / attempts, 3) if attempts else 0
        )
        return metrics_copy

    def log_metrics_summary(self):
        metrics = self.get_metrics()

        self.info("=== Session Metrics ===")
        self.info(
            f"Fetches: {metrics['fetches_successful']}/{metrics['fetches_attempted']} "
            f"({metrics['fetch_success_rate'] * 100:.1f}% success)"
        )

        if metrics["normalizations_by_method"]:
            self.info("Normalized by method:")
            for method, count in metrics["normalizations_by_method"].items():
                self.info(f"  {method}: {count}")

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "admitview",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level and log directory default to the configured settings; file logging
    is only enabled when a log directory is configured.
    """
    global _global_logger

    if _global_logger is None:
        settings = load_settings()
        if "log_dir" not in kwargs and "enable_file" not in kwargs:
            kwargs["enable_file"] = bool(settings.log_dir)
            if settings.log_dir:
                kwargs["log_dir"] = Path(settings.log_dir)
        _global_logger = StructuredLogger(name=name, level=level or settings.log_level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
