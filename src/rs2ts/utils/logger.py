"""Logging helpers for rs2ts.

Library modules only ever call ``get_logger``; handlers are installed by
the command line entry point through ``configure_cli_logging``.

Example:
    >>> from rs2ts.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexemized %d bytes", 42)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "rs2ts"

CLI_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``rs2ts`` namespace.

    Module names outside the package, including ``__main__`` when run with
    ``python -m rs2ts``, are prefixed with ``rs2ts.``.

    Example:
        >>> get_logger("mymodule").name
        'rs2ts.mymodule'
        >>> get_logger("rs2ts.lexer.core").name
        'rs2ts.lexer.core'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_cli_logging(verbose: bool = False) -> logging.Logger:
    """Install a stderr handler for command line use.

    WARNING and above are shown by default, which covers placeholder
    configs in ``transpile``. ``verbose`` lowers the ``rs2ts`` logger to
    DEBUG so lexeme counts and strategy choices are shown too. Does
    nothing to the handlers if the root logger already has some.

    Returns:
        The ``rs2ts`` package logger.
    """
    logging.basicConfig(level=logging.WARNING, format=CLI_LOG_FORMAT)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return package_logger
