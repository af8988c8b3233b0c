"""Transpile entry point: validate config, lexemize, dispatch to a strategy."""

from __future__ import annotations

from rs2ts.config import Strategy, TranspileConfig, get_transpile_config
from rs2ts.lexer import lexemize
from rs2ts.protocols import TranspileStrategy
from rs2ts.transpile.gungho import GunghoStrategy
from rs2ts.transpile.result import TranspileResult
from rs2ts.utils.logger import get_logger

logger = get_logger(__name__)

STRATEGIES: dict[Strategy, TranspileStrategy] = {
    Strategy.GUNGHO: GunghoStrategy(),
}


def transpile(source: str, config: TranspileConfig | None = None) -> TranspileResult:
    """Transpile Rust code to TypeScript.

    Only 2018-edition Rust to TypeScript 4 with the Gungho strategy is
    implemented. ``RsEdition.RS2015``, ``Strategy.CAUTIOUS`` and
    ``TsMajor.TS3`` are placeholders: asking for one produces a result whose
    only content is a CONFIG_NOT_IMPLEMENTED error.

    Args:
        source: The original Rust code
        config: Versions and strategy to use (active context config if None)

    Returns:
        TranspileResult with TypeScript lines, or errors.

    Raises:
        TranspileError: If ``config.strict`` is set and an error was found.

    Example:
        >>> transpile("const ROUGHLY_PI: f32 = 3.14;").main_lines[0]
        'const ROUGHLY_PI: Number = 3.14;'
        >>> from rs2ts.config import RsEdition
        >>> transpile("x", TranspileConfig(rs_edition=RsEdition.RS2015)).errors[0].message
        'RsEdition.RS2015 is not implemented yet'
    """
    if config is None:
        config = get_transpile_config()

    placeholders = config.placeholders()
    if placeholders:
        value = placeholders[0]
        message = f"{type(value).__name__}.{value.name} is not implemented yet"
        logger.warning("Cannot transpile with config (%s): %s", config, message)
        result = TranspileResult().add_config_not_implemented_error(message)
    else:
        strategy = STRATEGIES[config.strategy]
        logger.debug("Transpiling %d characters with %s strategy", len(source), strategy.name)
        result = strategy.transpile(lexemize(source).lexemes)

    if config.strict and result.errors:
        raise result.errors[0]
    return result
