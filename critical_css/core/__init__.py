"""Core functionality for critical path CSS extraction."""

from .preformatter import preformat
from .classifier import Verdict, classify
from .rewriter import StylesheetBuffer
from .walker import FilterStats, RuleWalker, filter_css
from .finalizer import finalize
from .modes import NestingMode

__all__ = [
    'preformat',
    'Verdict',
    'classify',
    'StylesheetBuffer',
    'FilterStats',
    'RuleWalker',
    'filter_css',
    'finalize',
    'NestingMode'
]
