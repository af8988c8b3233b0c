"""Transpile stage: turns lexemes into TypeScript.

Available Strategies:
- GunghoStrategy: readable output that mirrors the input line for line

Thread Safety:
Strategies are stateless and results are created fresh for each call.

"""

from rs2ts.transpile.core import STRATEGIES, transpile
from rs2ts.transpile.gungho import GunghoStrategy
from rs2ts.transpile.result import TranspileErrorKind, TranspileResult

__all__ = [
    "STRATEGIES",
    "GunghoStrategy",
    "TranspileErrorKind",
    "TranspileResult",
    "transpile",
]
