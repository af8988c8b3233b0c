"""Exception classes for rs2ts.

The lexemizer never raises: malformed input becomes Unrecognized lexemes.
These exceptions belong to the transpile stage and its configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rs2ts.transpile.result import TranspileErrorKind


class Rs2tsError(Exception):
    """Base exception for all rs2ts errors.

    Subclass this for specific error categories.
    """

    pass


class TranspileError(Rs2tsError):
    """Error found while transpiling.

    Usually collected on ``TranspileResult.errors``; raised only when the
    active config has ``strict=True``.
    """

    def __init__(
        self,
        kind: TranspileErrorKind,
        message: str,
        line_number: int = 0,
        column: int = 0,
    ) -> None:
        """Initialize transpile error.

        Args:
            kind: Broad category of the error
            message: A short explanation, to help a developer debug it
            line_number: Line of the Rust code that caused the error, or 0
            column: Column within that line, or 0
        """
        self.kind = kind
        self.message = message
        self.line_number = line_number
        self.column = column

        location = f"{line_number}:{column} " if line_number or column else ""
        super().__init__(f"{location}{message}")


class ConfigError(Rs2tsError):
    """Invalid configuration value.

    Raised by ``TranspileConfig.from_dict`` for names that match no enum member
    and for ``strict`` values that are not booleans.
    """

    def __init__(self, field_name: str, value: object, choices: list[str]) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid value {value!r} for '{field_name}'; expected one of: {', '.join(choices)}"
        )
