"""
Logging setup and timing helpers.

All engine modules log through ``logging.getLogger(__name__)``, so every
logger hangs off the ``dragonfly`` namespace configured here.
"""

import copy
import logging
import os
import sys
import time
from datetime import datetime
from typing import Dict, Optional

ROOT_LOGGER_NAME = "dragonfly"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def _level(name: str, default: int) -> int:
    return LOG_LEVELS.get(name.upper(), default)


class LogFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colors."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Args:
            colored: Whether to color level names (never on Windows consoles)
            *args: Passed on to logging.Formatter
            **kwargs: Passed on to logging.Formatter
        """
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname)
        if not self.colored or color is None:
            return super().format(record)

        # Other handlers share the record
        record = copy.copy(record)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(LogFormatter(colored=True, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Configure the engine's logger.

    A logger that already has handlers is returned untouched, so calling this
    more than once is harmless.

    Args:
        log_file: Path to a log file (None for console output only)
        console_level: Level name for console output
        file_level: Level name for the log file
        component: Configure ``dragonfly.<component>`` instead of ``dragonfly``

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console = _level(console_level, logging.INFO)
    logger.addHandler(_console_handler(console))
    logger.setLevel(console)

    if log_file:
        verbose = _level(file_level, logging.DEBUG)
        logger.addHandler(_file_handler(log_file, verbose))
        # The logger must let through what the more verbose handler wants
        logger.setLevel(min(console, verbose))

    return logger


def get_default_log_file() -> str:
    """
    Returns:
        str: ~/.dragonfly/logs/dragonfly_YYYY-MM-DD.log
    """
    log_dir = os.path.join(os.path.expanduser("~"), ".dragonfly", "logs")
    return os.path.join(log_dir, f"dragonfly_{datetime.now():%Y-%m-%d}.log")


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """Log ``exception`` at ERROR level together with its traceback."""
    logger.error(f"{message}: {exception}",
                 exc_info=(type(exception), exception, exception.__traceback__))


class PerformanceLogger:
    """
    Named stopwatches that log how long an operation took.

    Example:
        perf = PerformanceLogger(logger, "page")
        perf.start("parse")
        ...
        seconds = perf.end("parse", level="INFO")
    """

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop a stopwatch and log its duration.

        Args:
            name: Operation name passed to :meth:`start`
            level: Level name to log at

        Returns:
            float: Duration in seconds (0.0 if the stopwatch was never started)
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.logger.log(_level(level, logging.DEBUG), f"{self.component} {name} took {duration:.4f} seconds")
        return duration

    def clear(self) -> None:
        self.start_times.clear()
