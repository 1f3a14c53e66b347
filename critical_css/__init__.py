"""Critical CSS: keep only the stylesheet rules that style above the fold content."""

from .core import filter_css, finalize, preformat
from .runner import CriticalCSSJob, generate
from .utils.config import VERSION

__version__ = VERSION

__all__ = [
    'filter_css',
    'finalize',
    'preformat',
    'CriticalCSSJob',
    'generate',
    '__version__'
]
