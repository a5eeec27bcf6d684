# exptree/utils/logging_config.py

import logging
import logging.config
import os
import time
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "exptree"
PERFORMANCE_LOGGER = "exptree.performance"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_performance: bool = False
) -> None:
    """
    Set up logging configuration for the expression tree toolkit.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        enable_console: Whether to enable console logging
        enable_performance: Whether to enable detailed performance logging
    """

    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'simple': {
                'format': '%(levelname)s - %(name)s - %(message)s'
            },
            'performance': {
                'format': '%(asctime)s - PERF - %(name)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {},
        'loggers': {
            ROOT_LOGGER: {
                'level': log_level,
                'handlers': [],
                'propagate': False
            },
            PERFORMANCE_LOGGER: {
                'level': 'DEBUG' if enable_performance else 'INFO',
                'handlers': [],
                'propagate': False
            }
        }
    }

    # Diagnostics go to stderr; stdout belongs to the interactive dialogue.
    if enable_console:
        config['handlers']['console'] = {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('console')

    if log_file:
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'DEBUG',
            'formatter': 'detailed',
            'filename': log_file,
            'maxBytes': 10485760,  # 10MB
            'backupCount': 5,
            'encoding': 'utf8'
        }
        config['loggers'][ROOT_LOGGER]['handlers'].append('file')

    if enable_performance:
        perf_file = log_file.replace('.log', '_performance.log') if log_file else 'performance.log'
        config['handlers']['performance'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': 'DEBUG',
            'formatter': 'performance',
            'filename': perf_file,
            'maxBytes': 10485760,  # 10MB
            'backupCount': 3,
            'encoding': 'utf8'
        }
        config['loggers'][PERFORMANCE_LOGGER]['handlers'].append('performance')

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance under the ``exptree`` namespace
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def get_performance_logger() -> logging.Logger:
    """Get the logger instance for performance metrics."""
    return logging.getLogger(PERFORMANCE_LOGGER)


class PerformanceTimer:
    """Context manager for timing operations and logging performance metrics."""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None):
        self.operation_name = operation_name
        self.logger = logger or get_performance_logger()
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug("Starting %s", self.operation_name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info("%s completed in %.4fs", self.operation_name, self.duration)
        else:
            self.logger.warning("%s failed after %.4fs: %s", self.operation_name, self.duration, exc_val)


def init_default_logging():
    """Initialize default logging configuration if not already set up."""
    if not logging.getLogger(ROOT_LOGGER).handlers:
        log_level = os.getenv('EXPTREE_LOG_LEVEL', 'WARNING').upper()
        enable_perf = os.getenv('EXPTREE_ENABLE_PERFORMANCE_LOGGING', 'false').lower() == 'true'

        setup_logging(
            log_level=log_level,
            enable_console=True,
            enable_performance=enable_perf
        )


# Auto-initialize on import
init_default_logging()
