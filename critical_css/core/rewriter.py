"""In-place rewriting of the stylesheet under filtering."""

import logging
import warnings

from ..utils.error import MalformedInputWarning

logger = logging.getLogger(__name__)

class StylesheetBuffer:
    """Mutable stylesheet text plus a forward-only cursor.

    Every lookup searches from ``cursor``; offsets captured before a
    deletion are never reused, since deleting text shifts everything after it.
    """

    def __init__(self, text: str):
        """Initialize buffer.

        Args:
            text: Preformatted stylesheet text
        """
        self.text = text
        self.cursor = 0

    def __str__(self) -> str:
        return self.text

    def _warn(self, message: str) -> None:
        logger.warning(message)
        warnings.warn(message, MalformedInputWarning, stacklevel=3)

    def _find_selector(self, selector: str) -> int:
        pos = self.text.find(selector, self.cursor)
        if pos == -1:
            self._warn(f"Selector {selector.strip()!r} not found after offset {self.cursor}")
        return pos

    def keep_selector(self, selector: str) -> None:
        """Leave a selector in place and move the cursor past it.

        Args:
            selector: Raw selector text
        """
        pos = self._find_selector(selector)
        if pos != -1:
            self.cursor = pos + len(selector)

    def drop_selector(self, selector: str, selectors_kept: int) -> bool:
        """Remove a selector, or its whole rule when no sibling survived.

        Args:
            selector: Raw selector text
            selectors_kept: Number of selectors of the same rule kept so far

        Returns:
            True if the whole rule was removed
        """
        sel_pos = self._find_selector(selector)
        if sel_pos == -1:
            return False

        next_comma = self.text.find(',', sel_pos)
        next_open = self.text.find('{', sel_pos)
        if next_open == -1:
            self._warn(f"No rule body follows selector {selector.strip()!r}, leaving it in place")
            self.cursor = sel_pos + len(selector)
            return False

        if selectors_kept > 0:
            # rule survives, cut the comma before the selector so a new last
            # selector is never left followed by a comma
            prev_comma = self.text.rfind(',', self.cursor, sel_pos)
            start = sel_pos if prev_comma == -1 else prev_comma
            end = sel_pos + len(selector.rstrip())
            self.text = self.text[:start] + self.text[end:]
            self.cursor = start
            return False

        if next_comma != -1 and next_comma < next_open:
            # more selectors follow in the list, cut up to and including the comma
            self.text = self.text[:sel_pos] + self.text[next_comma + 1:]
            self.cursor = sel_pos
            return False

        end_rule = self.text.find('}', next_open)
        end = len(self.text) if end_rule == -1 else end_rule + 1
        self.text = self.text[:sel_pos] + self.text[end:]
        self.cursor = sel_pos
        return True

    def skip_statement(self, statement: str) -> None:
        """Leave an at-rule statement such as ``@import`` in place and step past it."""
        self.keep_selector(statement)

    def enter_block(self) -> None:
        """Move the cursor just past the next opening brace."""
        pos = self.text.find('{', self.cursor)
        self.cursor = len(self.text) if pos == -1 else pos + 1

    def close_rule(self) -> None:
        """Move the cursor just past the next closing brace."""
        pos = self.text.find('}', self.cursor)
        self.cursor = len(self.text) if pos == -1 else pos + 1

    skip_block = close_rule

__all__ = ['StylesheetBuffer']
