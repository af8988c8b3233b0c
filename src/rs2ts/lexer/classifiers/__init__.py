"""Per-kind lexeme classifiers for the rs2ts lexemizer.

Each classifier is a pure function ``(raw, pos) -> pos`` that returns the
offset just after a maximal lexeme of its kind starting at ``pos``, or
``pos`` itself when nothing of that kind starts there. Classifiers never
raise, whatever the offset.
"""

from rs2ts.lexer.classifiers.character import identify_character
from rs2ts.lexer.classifiers.comment import identify_comment
from rs2ts.lexer.classifiers.identifier import identify_identifier
from rs2ts.lexer.classifiers.number import identify_number
from rs2ts.lexer.classifiers.punctuation import identify_punctuation
from rs2ts.lexer.classifiers.string import identify_string
from rs2ts.lexer.classifiers.whitespace import identify_whitespace

__all__ = [
    "identify_character",
    "identify_comment",
    "identify_identifier",
    "identify_number",
    "identify_punctuation",
    "identify_string",
    "identify_whitespace",
]
