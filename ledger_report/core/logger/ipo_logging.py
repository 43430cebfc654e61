# Path: ledger_report/core/logger/ipo_logging.py
"""
IPO-Aware Logging for ledger_report

Input-Process-Output separated logging for the report engine.

Layers:
- INPUT layer (format string parsing, expression compiling)
- PROCESS layer (value evaluation, account and entry traversal)
- OUTPUT layer (element rendering, report drivers)

Console output goes to stderr: stdout carries the reports themselves.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...config_loader import ConfigLoader


LOG_LAYERS: tuple[str, ...] = ('input', 'process', 'output')


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for ledger_report.

    When log_dir is given, creates:
    - input_activity.log, process_activity.log, output_activity.log
    - full_activity.log (all layers combined)

    Args:
        log_dir: Directory for log files, or None for no files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also log to stderr

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/ledger_report'),
            log_level='DEBUG',
        )
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LOG_LAYERS:
            handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(
            logging.Formatter('[%(levelname)s] %(name)s - %(message)s')
        )
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'format_parser')

    Returns:
        Logger under the 'input.' prefix
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'evaluator', 'walk')

    Returns:
        Logger under the 'process.' prefix
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'renderer', 'format_equity')

    Returns:
        Logger under the 'output.' prefix
    """
    return logging.getLogger(f'output.{name}')


def configure_logging(config: Optional[ConfigLoader] = None) -> None:
    """
    Set up IPO logging from ConfigLoader settings.

    Uses log_dir, log_level and log_console. The debug flag forces the
    DEBUG level.

    Args:
        config: ConfigLoader instance (creates one if not provided)

    Example:
        configure_logging()
        ReportGenerator().balance(master, sys.stdout)
    """
    config = config or ConfigLoader()
    log_level = 'DEBUG' if config.get('debug', False) else config.get('log_level', 'INFO')

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True),
    )
    get_process_logger('setup').info(
        f"Logging configured for {config.get('environment')} environment"
    )


__all__ = [
    'setup_ipo_logging',
    'configure_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
