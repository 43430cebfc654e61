# Path: ledger_report/core/__init__.py
"""
ledger_report Core Package

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging, configure_logging

__all__ = [
    'setup_ipo_logging',
    'configure_logging',
]
