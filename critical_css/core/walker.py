"""Rule walking: drives selector classification and rewriting over a stylesheet."""

import re
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from ..managers.base import RenderEnvironment
from .classifier import Verdict, classify
from .finalizer import finalize
from .modes import NestingMode
from .rewriter import StylesheetBuffer

logger = logging.getLogger(__name__)

SEGMENT_PATTERN = re.compile(r'[{}]')
KEYFRAMES_PATTERN = re.compile(r'@([a-z\-])*keyframe')
# @charset, @import and @namespace end with a semicolon, not a block
AT_STATEMENT_PATTERN = re.compile(r'''\s*@(?:[^;{}'"]|"[^"]*"|'[^']*')*;''')

@dataclass
class FilterStats:
    """Counters collected during one filtering pass."""
    selectors_tested: int = 0
    selectors_kept: int = 0
    selectors_dropped: int = 0
    pure_pseudo: int = 0
    invalid: int = 0
    rules_removed: int = 0
    font_faces_kept: int = 0

    def record(self, verdict: Verdict) -> None:
        self.selectors_tested += 1
        if verdict.kept:
            self.selectors_kept += 1
        else:
            self.selectors_dropped += 1
        if verdict.pure:
            self.pure_pseudo += 1
        if verdict.invalid:
            self.invalid += 1

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

class RuleWalker:
    """Walk a preformatted stylesheet rule by rule, keeping above the fold selectors."""

    def __init__(self, render: RenderEnvironment, viewport_height: float):
        """Initialize rule walker.

        Args:
            render: Render environment answering selector match queries
            viewport_height: Height of the first viewport in pixels
        """
        self.render = render
        self.viewport_height = viewport_height
        self.mode = NestingMode.NORMAL
        self.stats = FilterStats()

    def _enter(self, mode: NestingMode) -> None:
        if mode is not self.mode:
            logger.debug(f"Nesting mode {self.mode.value} -> {mode.value}")
        self.mode = mode

    def _next_rule_index(self, segments: List[str], i: int,
                         buffer: StylesheetBuffer) -> Optional[int]:
        """Step over at-rule preludes and block ends to the next selector list.

        Returns:
            Index of the next selector list, or None at end of input
        """
        while i < len(segments):
            token = segments[i]
            if '@font-face' in token:
                # kept verbatim, its body holds no selectors to test
                logger.debug(f"Keeping {NestingMode.FONT_FACE.value} block")
                buffer.skip_block()
                self.stats.font_faces_kept += 1
                i += 2
            elif '@media' in token:
                # the query line itself is not a selector
                self._enter(NestingMode.MEDIA)
                buffer.enter_block()
                i += 1
            elif KEYFRAMES_PATTERN.search(token):
                # keyframes don't belong in critical path css, drop every child rule
                self._enter(NestingMode.KEYFRAMES_FORCE_REMOVE)
                buffer.enter_block()
                i += 1
            elif not token.strip():
                if i + 1 >= len(segments):
                    return None
                # end of a nested block, f.e. end of a media query
                self._enter(NestingMode.NORMAL)
                i += 1
            else:
                return i
        return None

    async def _process_rule(self, selector_list: str, buffer: StylesheetBuffer) -> None:
        statement = AT_STATEMENT_PATTERN.match(selector_list)
        while statement:
            logger.debug(f"Keeping at-rule statement {statement.group(0).strip()!r}")
            buffer.skip_statement(statement.group(0))
            selector_list = selector_list[statement.end():]
            statement = AT_STATEMENT_PATTERN.match(selector_list)
        if not selector_list.strip():
            return

        selectors_kept = 0
        for selector in selector_list.split(','):
            if not selector.strip():
                logger.warning(f"Empty selector in list {selector_list.strip()!r}")
                continue

            verdict = await classify(selector, self.mode, self.viewport_height, self.render)
            self.stats.record(verdict)

            if verdict.kept:
                selectors_kept += 1
                buffer.keep_selector(selector)
            elif buffer.drop_selector(selector, selectors_kept):
                self.stats.rules_removed += 1

        # when nothing was kept the rule is already cut and the cursor sits at the cut
        if selectors_kept > 0:
            buffer.close_rule()

    async def walk(self, css: str) -> str:
        """Filter a preformatted stylesheet.

        Args:
            css: Preformatted stylesheet text

        Returns:
            Filtered stylesheet text, not yet finalized

        Raises:
            RenderUnavailableError: If the render environment cannot be queried
        """
        buffer = StylesheetBuffer(css)
        # split once, the buffer is mutated but never re-split
        segments = SEGMENT_PATTERN.split(css)

        i = self._next_rule_index(segments, 0, buffer)
        while i is not None:
            await self._process_rule(segments[i], buffer)
            i = self._next_rule_index(segments, i + 2, buffer)

        logger.debug(f"Filtering done: {self.stats.as_dict()}")
        return buffer.text

async def filter_css(css: str, render: RenderEnvironment,
                     viewport_height: Optional[float] = None) -> str:
    """Extract the critical path CSS of a preformatted stylesheet.

    Args:
        css: Preformatted stylesheet text
        render: Render environment with the target page loaded
        viewport_height: Fold position, defaults to the render viewport height

    Returns:
        Critical path CSS
    """
    if viewport_height is None:
        viewport_height = render.viewport_height
    walker = RuleWalker(render, viewport_height)
    return finalize(await walker.walk(css))

__all__ = ['FilterStats', 'RuleWalker', 'filter_css', 'KEYFRAMES_PATTERN']
