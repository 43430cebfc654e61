# Path: ledger_report/config_loader.py
"""
Configuration Loader for ledger_report

Loads configuration from a .env file and the environment.
Singleton pattern ensures every report in a run sees the same
date format, value/total expressions and default format strings.

All settings use the LEDGER_REPORT_ prefix. Nothing is required:
every key has a default so the engine runs without a .env file.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_VALUE_EXPR,
    DEFAULT_TOTAL_EXPR,
    DEFAULT_LINE_WIDTH,
    DEFAULT_BALANCE_FORMAT,
    DEFAULT_REGISTER_FORMAT,
    DEFAULT_REGISTER_NEXT_FORMAT,
    DEFAULT_PRINT_FORMAT,
    DEFAULT_PRINT_NEXT_FORMAT,
    DEFAULT_EQUITY_FORMAT,
    DEFAULT_EQUITY_NEXT_FORMAT,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX: str = 'LEDGER_REPORT_'

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Escapes decoded in format strings coming from the environment
FORMAT_ESCAPES: dict[str, str] = {
    '\\n': '\n',
    '\\t': '\t',
}


class ConfigLoader:
    """
    Singleton configuration loader for ledger_report.

    Loads configuration from environment variables with type
    conversion and defaults.

    Example:
        config = ConfigLoader()
        date_format = config.get('date_format')    # '%Y/%m/%d'
        width = config.get('line_width')           # int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        at the project root (next to the ledger_report package).
        """
        if ConfigLoader._initialized:
            return

        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # RENDERING
            # ================================================================
            'date_format': self._get_env('DATE_FORMAT', DEFAULT_DATE_FORMAT),
            'value_expr': self._get_env('VALUE_EXPR', DEFAULT_VALUE_EXPR),
            'total_expr': self._get_env('TOTAL_EXPR', DEFAULT_TOTAL_EXPR),
            'line_width': self._get_int('LINE_WIDTH', DEFAULT_LINE_WIDTH),
            'display_predicate': self._get_env('DISPLAY_PREDICATE', ''),

            # ================================================================
            # DEFAULT REPORT FORMATS
            # ================================================================
            'balance_format': self._get_format(
                'BALANCE_FORMAT', DEFAULT_BALANCE_FORMAT
            ),
            'register_format': self._get_format(
                'REGISTER_FORMAT', DEFAULT_REGISTER_FORMAT
            ),
            'register_next_format': self._get_format(
                'REGISTER_NEXT_FORMAT', DEFAULT_REGISTER_NEXT_FORMAT
            ),
            'print_format': self._get_format(
                'PRINT_FORMAT', DEFAULT_PRINT_FORMAT
            ),
            'print_next_format': self._get_format(
                'PRINT_NEXT_FORMAT', DEFAULT_PRINT_NEXT_FORMAT
            ),
            'equity_format': self._get_format(
                'EQUITY_FORMAT', DEFAULT_EQUITY_FORMAT
            ),
            'equity_next_format': self._get_format(
                'EQUITY_NEXT_FORMAT', DEFAULT_EQUITY_NEXT_FORMAT
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', True),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Variable name without the LEDGER_REPORT_ prefix

        Returns:
            Path object, or None when unset
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None:
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_format(self, key: str, default: str) -> str:
        """Get a format string, decoding \\n and \\t escapes."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        for escape, char in FORMAT_ESCAPES.items():
            value = value.replace(escape, char)
        return value

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing the rendering settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"date_format={self._config.get('date_format')!r})"
        )


__all__ = ['ConfigLoader']
