"""
Utility modules for the engine.
"""

from dragonfly.utils.config import Config
from dragonfly.utils.logging import setup_logging, get_default_log_file, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'get_default_log_file',
    'log_exception',
    'PerformanceLogger',
]
