"""Utility modules for rs2ts.

Provides:
- logger: get_logger for library modules, configure_cli_logging for the CLI
"""

from rs2ts.utils.logger import configure_cli_logging, get_logger

__all__ = ["configure_cli_logging", "get_logger"]
