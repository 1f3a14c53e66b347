"""Selector classification against a live render environment."""

import re
import logging
from dataclasses import dataclass

from ..managers.base import RenderEnvironment
from ..utils.error import InvalidSelectorError
from .modes import NestingMode

logger = logging.getLogger(__name__)

# Pseudo selectors that depend on an element; the element itself is tested instead
STATEFUL_PSEUDO_PATTERN = re.compile(r'(:hover|:?:before|:?:after)')
ANY_PSEUDO_PATTERN = re.compile(r'::?[a-zA-Z0-9\-_]*')
# e.g. button::-moz-focus-inner, input[type=number]::-webkit-inner-spin-button
VENDOR_PSEUDO_PATTERN = re.compile(r':?:-[a-z-]*')

@dataclass(frozen=True)
class Verdict:
    """Outcome of classifying one selector."""
    kept: bool
    pure: bool = False
    invalid: bool = False

def is_pure_pseudo(selector: str) -> bool:
    """Check whether a selector has no element part left to match.

    Args:
        selector: Selector with stateful pseudos already removed

    Returns:
        True for selectors like ``::-moz-placeholder``
    """
    return not ANY_PSEUDO_PATTERN.sub('', selector).strip()

async def classify(selector: str, mode: NestingMode, viewport_height: float,
                   render: RenderEnvironment) -> Verdict:
    """Decide whether a selector matches anything above the fold.

    Args:
        selector: Raw selector text, surrounding whitespace included
        mode: Nesting mode of the enclosing block
        viewport_height: Height of the first viewport in pixels
        render: Render environment answering selector match queries

    Returns:
        Verdict for the selector

    Raises:
        RenderUnavailableError: If the render environment cannot be queried
    """
    if mode is NestingMode.KEYFRAMES_FORCE_REMOVE:
        return Verdict(kept=False)

    working = selector
    if ':' in working:
        working = STATEFUL_PSEUDO_PATTERN.sub('', working)
        # Can't be matched on the page but may still style above the fold content
        if is_pure_pseudo(working):
            return Verdict(kept=True, pure=True)
        working = VENDOR_PSEUDO_PATTERN.sub('', working)

    try:
        elements = await render.query_matches(working)
    except InvalidSelectorError as e:
        logger.debug(f"Dropping selector {selector.strip()!r}: {e}")
        return Verdict(kept=False, invalid=True)

    for element in elements:
        # Force clear:none so elements clearing earlier content are measured
        # where they would sit without their own styles.
        await element.set_clear_style('none')
        try:
            top = await element.get_top_offset()
        finally:
            await element.set_clear_style('')
        if top < viewport_height:
            return Verdict(kept=True)

    return Verdict(kept=False)

__all__ = ['Verdict', 'classify', 'is_pure_pseudo']
