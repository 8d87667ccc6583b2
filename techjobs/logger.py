"""
Structured logging system for TechJobs.

Provides centralized logging with console and optional file output,
plus counters for data loads and searches served.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks load and search metrics for the job data store.
    """

    def __init__(
        self,
        name: str = "techjobs",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: Optional[bool] = None,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: $TECHJOBS_LOG_DIR)
            enable_file: Write logs to file (default: only when a log
                directory is known)
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.enable_console = enable_console

        self.metrics = {
            "loads_attempted": 0,
            "loads_failed": 0,
            "records_loaded": 0,
            "searches": 0,
            "searches_by_type": {},
            "errors_by_type": {},
        }

        self.configure(level=level, log_dir=log_dir, enable_file=enable_file)

    def configure(
        self,
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: Optional[bool] = None,
    ):
        """
        (Re)build the handlers. Metrics are kept.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: $TECHJOBS_LOG_DIR)
            enable_file: Write logs to file (default: only when a log
                directory is known)
        """
        self.logger.setLevel(getattr(logging, level.upper()))
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove existing handlers

        if log_dir is None and os.getenv("TECHJOBS_LOG_DIR"):
            log_dir = Path(os.environ["TECHJOBS_LOG_DIR"])
        if enable_file is None:
            enable_file = log_dir is not None

        # Console handler
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"techjobs_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
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
        """Internal logging method with context."""
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_load_attempt(self):
        """Increment data load counter."""
        self.metrics["loads_attempted"] += 1

    def record_load_success(self, records: int):
        """Record number of job records loaded."""
        self.metrics["records_loaded"] += records

    def record_load_failure(self, error_type: str):
        """Record a failed data load."""
        self.metrics["loads_failed"] += 1

        if error_type not in self.metrics["errors_by_type"]:
            self.metrics["errors_by_type"][error_type] = 0
        self.metrics["errors_by_type"][error_type] += 1

    def record_search(self, search_type: str, results: int):
        """Record a search and how many jobs it returned."""
        self.metrics["searches"] += 1
        if search_type not in self.metrics["searches_by_type"]:
            self.metrics["searches_by_type"][search_type] = {
                "count": 0,
                "results": 0,
            }
        self.metrics["searches_by_type"][search_type]["count"] += 1
        self.metrics["searches_by_type"][search_type]["results"] += results

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = self.metrics.copy()
        for search_type, stats in metrics_copy["searches_by_type"].items():
            if stats["count"] > 0:
                stats["avg_results"] = round(stats["results"] / stats["count"], 3)

        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== TechJobs Session Metrics ===")
        self.info(
            f"Loads: {metrics['loads_attempted']} attempted, "
            f"{metrics['loads_failed']} failed, {metrics['records_loaded']} records"
        )
        self.info(f"Searches: {metrics['searches']}")

        if metrics["searches_by_type"]:
            self.info("Searches by type:")
            for search_type, stats in metrics["searches_by_type"].items():
                self.info(
                    f"  {search_type}: {stats['count']} "
                    f"(avg {stats.get('avg_results', 0):.1f} results)"
                )

        if metrics["errors_by_type"]:
            self.info("Error Types:")
            for error_type, count in metrics["errors_by_type"].items():
                self.info(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "techjobs",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
