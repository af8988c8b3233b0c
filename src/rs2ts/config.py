"""ContextVar-based transpile configuration for rs2ts.

Provides context-local configuration using Python's ContextVars (PEP 567).
``transpile()`` reads the active config when none is passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from rs2ts.config import TranspileConfig, transpile_config_context, TsMajor

    with transpile_config_context(TranspileConfig(ts_major=TsMajor.TS4)):
        result = transpile(source)

    # Builder-style overrides
    config = dataclasses.replace(TranspileConfig(), strategy=Strategy.CAUTIOUS)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any

from rs2ts.errors import ConfigError


class RsEdition(Enum):
    """The edition of Rust that the input code is written in."""

    LATEST = "latest"  # The most recent edition supported (2018)
    RS2015 = "2015"  # Placeholder, not supported
    RS2018 = "2018"


class TsMajor(Enum):
    """The major version of TypeScript to output."""

    LATEST = "latest"  # The most recent major version supported (4)
    TS3 = "3"  # Placeholder, not supported
    TS4 = "4"


class Strategy(Enum):
    """Which strategy to use when transpiling Rust into TypeScript.

    - CAUTIOUS: favours safety over readability. Verbose output that does
      not pollute global scope. Placeholder, not supported.
    - GUNGHO: favours readability over safety. May add methods to native
      prototypes; output looks like the input and keeps line numbers.

    """

    CAUTIOUS = "cautious"
    GUNGHO = "gungho"


# Values that are declared but not implemented yet, in the order they are checked
PLACEHOLDERS: tuple[Enum, ...] = (RsEdition.RS2015, Strategy.CAUTIOUS, TsMajor.TS3)

_RS_EDITION_LABELS = {
    RsEdition.LATEST: "Latest Rust edition (2018)",
    RsEdition.RS2015: "Rust edition 2015",
    RsEdition.RS2018: "Rust edition 2018",
}

_TS_MAJOR_LABELS = {
    TsMajor.LATEST: "Latest TypeScript (4)",
    TsMajor.TS3: "TypeScript 3",
    TsMajor.TS4: "TypeScript 4",
}


@dataclass(frozen=True, slots=True)
class TranspileConfig:
    """Immutable transpile configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        rs_edition: Rust edition of the input code
        ts_major: TypeScript major version to output
        strategy: Transpilation strategy
        strict: Raise the first TranspileError instead of collecting errors

    """

    rs_edition: RsEdition = RsEdition.LATEST
    ts_major: TsMajor = TsMajor.LATEST
    strategy: Strategy = Strategy.GUNGHO
    strict: bool = False

    def __str__(self) -> str:
        """Summarise the configuration in a human-readable CSV format.

        Example:
            >>> str(TranspileConfig())
            'Latest Rust edition (2018), Latest TypeScript (4), Gungho'
        """
        return ", ".join(
            (
                _RS_EDITION_LABELS[self.rs_edition],
                _TS_MAJOR_LABELS[self.ts_major],
                self.strategy.name.capitalize(),
            )
        )

    def placeholders(self) -> list[Enum]:
        """Return the configured values that are not implemented yet."""
        configured = (self.rs_edition, self.strategy, self.ts_major)
        return [value for value in PLACEHOLDERS if value in configured]

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TranspileConfig":
        """Create TranspileConfig from a mapping.

        Unknown keys are silently ignored. Enum fields accept a member, a
        member name (``"RS2018"``, case-insensitive) or a member value
        (``"2018"``). ``strict`` accepts a bool, 0 or 1, or one of the strings
        true, false, yes, no, on and off in any case.

        Args:
            config_dict: Mapping whose keys match TranspileConfig attribute names.

        Returns:
            New TranspileConfig instance with values from the mapping.

        Raises:
            ConfigError: If an enum field names no member or ``strict`` is
                not a recognizable boolean.

        Example:
            >>> config = TranspileConfig.from_dict({"ts_major": "ts4", "other": 1})
            >>> config.ts_major
            <TsMajor.TS4: '4'>

        """
        enum_fields: dict[str, type[Enum]] = {
            "rs_edition": RsEdition,
            "ts_major": TsMajor,
            "strategy": Strategy,
        }
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in valid_fields:
                continue
            enum_type = enum_fields.get(key)
            if enum_type is not None:
                filtered[key] = _coerce_enum(key, enum_type, value)
            else:
                filtered[key] = _coerce_bool(key, value)
        return cls(**filtered)


_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def _coerce_bool(field_name: str, value: Any) -> bool:
    # Config files and environment variables hand booleans over as text
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ConfigError(field_name, value, ["true", "false"])


def _coerce_enum(field_name: str, enum_type: type[Enum], value: Any) -> Enum:
    if isinstance(value, enum_type):
        return value
    text = str(value)
    for member in enum_type:
        if text.upper() == member.name or text.lower() == member.value:
            return member
    raise ConfigError(field_name, value, [member.name for member in enum_type])


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TranspileConfig = TranspileConfig()

_transpile_config: ContextVar[TranspileConfig] = ContextVar(
    "transpile_config",
    default=_DEFAULT_CONFIG,
)


def get_transpile_config() -> TranspileConfig:
    """Get the active transpile configuration for this context."""
    return _transpile_config.get()


def set_transpile_config(config: TranspileConfig) -> None:
    """Set transpile configuration for current context.

    Args:
        config: TranspileConfig instance to use for this context.

    """
    _transpile_config.set(config)


def reset_transpile_config() -> None:
    """Reset to the default configuration."""
    _transpile_config.set(_DEFAULT_CONFIG)


@contextmanager
def transpile_config_context(config: TranspileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Args:
        config: TranspileConfig to use within the context.

    """
    previous = _transpile_config.get()
    _transpile_config.set(config)
    try:
        yield
    finally:
        _transpile_config.set(previous)


__all__ = [
    "PLACEHOLDERS",
    "RsEdition",
    "Strategy",
    "TranspileConfig",
    "TsMajor",
    "get_transpile_config",
    "reset_transpile_config",
    "set_transpile_config",
    "transpile_config_context",
]
