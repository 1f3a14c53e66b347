"""Stylesheet preformatting ahead of brace scanning."""

import re
import logging
import warnings

from ..utils.error import MalformedInputWarning

logger = logging.getLogger(__name__)

COMMENT_PATTERN = re.compile(r'/\*[\s\S]*?\*/')
CONTENT_BRACE_PATTERN = re.compile(r'''content\s*:\s*['"][^'"]*}[^'"]*['"]''')

# '\' + six digit hex code of '}', a following hex digit can't extend the escape
ESCAPED_CLOSE_BRACE = '\\' + format(ord('}'), '06x')

def preformat(css: str) -> str:
    """Prepare raw CSS so it can be split on braces safely.

    Removes comments, including multi-line ones, and escapes any close
    curly bracket found inside a ``content: ""`` declaration value.

    Args:
        css: Raw stylesheet text

    Returns:
        Preformatted stylesheet text
    """
    css = COMMENT_PATTERN.sub('', css)

    if '/*' in css:
        message = "Unterminated comment in stylesheet, passing it through as is"
        logger.warning(message)
        warnings.warn(message, MalformedInputWarning, stacklevel=2)

    # Replacing while iterating would shift the offsets of later matches,
    # so collect first and apply from the end of the text backwards.
    matches = [
        (m.start(), m.end(), m.group(0).replace('}', ESCAPED_CLOSE_BRACE))
        for m in CONTENT_BRACE_PATTERN.finditer(css)
    ]
    for start, end, replacement in reversed(matches):
        css = css[:start] + replacement + css[end:]

    return css

__all__ = ['preformat', 'ESCAPED_CLOSE_BRACE']
