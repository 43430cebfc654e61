# Path: ledger_report/core/logger/__init__.py
"""
ledger_report Logger Package

IPO-aware logging for the report engine.

Provides separate log streams for:
- INPUT layer (format and expression compiling)
- PROCESS layer (evaluation, traversal)
- OUTPUT layer (rendering, report drivers)
"""

from .ipo_logging import (
    setup_ipo_logging,
    configure_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'configure_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
