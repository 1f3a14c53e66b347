"""Final cleanup of filtered stylesheets."""

import re

EMPTY_RULE_PATTERN = re.compile(r'[^{}]*\{\s*\}')

def finalize(css: str) -> str:
    """Remove all empty rules and leading/trailing whitespace.

    Removal repeats until nothing changes, so an at-rule wrapper left
    empty by removing its last inner rule goes as well.

    Args:
        css: Filtered stylesheet text

    Returns:
        Final stylesheet text
    """
    previous = None
    while previous != css:
        previous = css
        css = EMPTY_RULE_PATTERN.sub('', css)
    return css.strip()

__all__ = ['finalize']
