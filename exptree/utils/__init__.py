# exptree/utils/__init__.py

from .logging_config import setup_logging, get_logger, get_performance_logger, PerformanceTimer

__all__ = [
    'setup_logging',
    'get_logger',
    'get_performance_logger',
    'PerformanceTimer'
]
