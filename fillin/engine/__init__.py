"""
Interpretation engine module.

Provides delimiter scanning, span resolution and the scan/resolve loop.
"""

from .scanner import real_index, unquote
from .resolver import SpanResolver
from .interpreter import InterpretationEngine, OutputMode


__all__ = [
    "real_index",
    "unquote",
    "SpanResolver",
    "InterpretationEngine",
    "OutputMode",
]
