"""TranspileResult: the output of transpiling Rust to TypeScript.

The main program logic is returned in ``main_lines``. To run it, TypeScript
also needs the surrounding sections:

- ``main_section_begins`` / ``main_section_ends`` wrap ``main_lines``
- ``polyfill_section_begins`` / ``polyfill_section_ends`` wrap ``polyfill_lines``
- ``type_lines`` declare any enums, interfaces and other types

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from rs2ts.errors import TranspileError
from rs2ts.stringbuilder import StringBuilder


class TranspileErrorKind(Enum):
    """Categories of transpilation errors."""

    CONFIG_NOT_IMPLEMENTED = auto()  # The requested config is a placeholder
    UNKNOWN_ERROR = auto()  # Fallback, when no other kind fits


@dataclass(slots=True)
class TranspileResult:
    """TypeScript output and any errors found while producing it.

    Attributes:
        errors: Errors found while transpiling; empty on success
        main_lines: Lines of TypeScript, each keeping its line ending
        main_section_begins: Added before ``main_lines``, typically ``;r$t$();``
        main_section_ends: Added after ``main_lines``
        polyfill_lines: e.g. ``String.prototype.len=function(){return this.length}``
        polyfill_section_begins: Typically ``;function r$t$(){``
        polyfill_section_ends: Typically ``};``
        type_lines: e.g. ``interface String { len(): Number }``

    """

    errors: list[TranspileError] = field(default_factory=list)
    main_lines: list[str] = field(default_factory=list)
    main_section_begins: str = ""
    main_section_ends: str = ""
    polyfill_lines: list[str] = field(default_factory=list)
    polyfill_section_begins: str = ""
    polyfill_section_ends: str = ""
    type_lines: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no errors were recorded."""
        return not self.errors

    def add_error(self, error: TranspileError) -> TranspileResult:
        """Append an error.

        Returns:
            self for method chaining
        """
        self.errors.append(error)
        return self

    def add_config_not_implemented_error(
        self, message: str, line_number: int = 0, column: int = 0
    ) -> TranspileResult:
        """Append a CONFIG_NOT_IMPLEMENTED error."""
        return self.add_error(
            TranspileError(
                TranspileErrorKind.CONFIG_NOT_IMPLEMENTED,
                message,
                line_number=line_number,
                column=column,
            )
        )

    def add_main_line(self, line: str) -> TranspileResult:
        """Append a line of TypeScript to ``main_lines``."""
        self.main_lines.append(line)
        return self

    def __str__(self) -> str:
        """Concatenate the result into standalone TypeScript.

        Order: main section, types, polyfill section.
        """
        sb = StringBuilder()
        sb.append(self.main_section_begins)
        sb.extend(self.main_lines)
        sb.append(self.main_section_ends)
        sb.extend(self.type_lines)
        sb.append(self.polyfill_section_begins)
        sb.extend(self.polyfill_lines)
        sb.append(self.polyfill_section_ends)
        return sb.build()
