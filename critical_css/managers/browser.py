"""Headless browser render environment for Critical CSS."""

import time
import asyncio
from typing import Any, Dict, List, Optional
from playwright.async_api import async_playwright, Error as PlaywrightError
from .base import ClearStyle, RenderManager
from ..utils.config import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, PAGE_LOAD_TIMEOUT, RENDER_WAIT_TIME, USER_AGENT
)
from ..utils.error import InvalidSelectorError, RenderUnavailableError

# querySelectorAll throws a SyntaxError DOMException on selectors it can't parse
QUERY_SCRIPT = """(selector) => {
    try {
        return Array.from(document.querySelectorAll(selector));
    } catch (e) {
        return null;
    }
}"""

TOP_OFFSET_SCRIPT = "el => el.getBoundingClientRect().top"
CLEAR_STYLE_SCRIPT = "(el, value) => { el.style.clear = value; }"

class BrowserElement:
    """Element handle living in the browser page."""

    def __init__(self, handle):
        self.handle = handle

    async def get_top_offset(self) -> float:
        return await self.handle.evaluate(TOP_OFFSET_SCRIPT)

    async def set_clear_style(self, value: ClearStyle) -> None:
        await self.handle.evaluate(CLEAR_STYLE_SCRIPT, value)

class BrowserRenderManager(RenderManager):
    """Render pages in headless Chromium and answer selector queries on them."""

    def __init__(self, width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT,
                 render_wait: float = RENDER_WAIT_TIME,
                 timeout: float = PAGE_LOAD_TIMEOUT,
                 user_agent: str = USER_AGENT):
        """Initialize browser render manager.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels
            render_wait: Settle delay after page load in seconds
            timeout: Page load timeout in seconds
            user_agent: User agent sent with page requests

        Raises:
            ValueError: If any parameter is invalid
        """
        super().__init__()
        if width <= 0 or height <= 0:
            raise ValueError("Viewport dimensions must be positive")
        if render_wait < 0:
            raise ValueError("Render wait cannot be negative")
        if timeout <= 0:
            raise ValueError("Timeout must be positive")

        self.width = width
        self.height = height
        self.render_wait = render_wait
        self.timeout = timeout
        self.user_agent = user_agent

        self._playwright = None
        self._browser = None
        self._page = None
        self._viewport_height: Optional[float] = None

        self.stats = {
            'pages_opened': 0,
            'queries': 0,
            'invalid_selectors': 0,
            'start_time': time.time()
        }

    @property
    def viewport_height(self) -> float:
        if self._viewport_height is None:
            return self.height
        return self._viewport_height

    async def start(self) -> None:
        """Launch the headless browser."""
        if self._browser is not None:
            return
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            await self.handle_error(e, "Unable to launch browser")

    async def open(self, url: str) -> None:
        """Load a page at the configured viewport size and let it settle.

        Args:
            url: Page to load

        Raises:
            RenderUnavailableError: If the page can't be loaded
        """
        await self.start()
        await self._close_page()

        try:
            self._page = await self._browser.new_page(
                viewport={'width': self.width, 'height': self.height},
                user_agent=self.user_agent
            )
            # page script errors must not end up in the output
            self._page.on('pageerror', lambda error: self.log_debug(f"Page error ignored: {error}"))
            response = await self._page.goto(url, timeout=self.timeout * 1000)
        except PlaywrightError as e:
            await self.handle_error(e, f"Unable to access {url}")

        if response is not None and not response.ok:
            await self.handle_error(
                RenderUnavailableError(f"HTTP {response.status}"), f"Unable to access {url}"
            )

        self.stats['pages_opened'] += 1
        # give pages that build their content dynamically some time to render
        await asyncio.sleep(self.render_wait)
        self._viewport_height = await self._page.evaluate("() => window.innerHeight")
        self.log_info(f"Loaded {url} (viewport {self.width}x{self._viewport_height})")

    async def query_matches(self, selector: str) -> List[BrowserElement]:
        """Return elements matching a selector in document order.

        Raises:
            InvalidSelectorError: If the page can't parse the selector
            RenderUnavailableError: If the page can't be queried
        """
        if self._page is None:
            raise RenderUnavailableError("No page loaded")

        self.stats['queries'] += 1
        try:
            result = await self._page.evaluate_handle(QUERY_SCRIPT, selector)
            try:
                if await result.evaluate("value => value === null"):
                    self.stats['invalid_selectors'] += 1
                    raise InvalidSelectorError(f"Invalid selector: {selector.strip()}")
                properties = await result.get_properties()
            finally:
                await result.dispose()
        except PlaywrightError as e:
            await self.handle_error(e, "Render environment unavailable")

        indexed = sorted(
            (int(key), handle) for key, handle in properties.items() if key.isdigit()
        )
        return [
            BrowserElement(handle.as_element())
            for _, handle in indexed
            if handle.as_element() is not None
        ]

    def get_stats(self) -> Dict[str, Any]:
        """Get render usage statistics."""
        stats = dict(self.stats)
        stats['elapsed_time'] = time.time() - stats['start_time']
        return stats

    async def _close_page(self) -> None:
        if self._page is not None:
            page, self._page = self._page, None
            self._viewport_height = None
            try:
                await page.close()
            except PlaywrightError as e:
                self.log_warning(f"Failed to close page: {e}")

    async def cleanup(self) -> None:
        """Close page and browser."""
        await self._close_page()
        try:
            if self._browser is not None:
                await self._browser.close()
            if self._playwright is not None:
                await self._playwright.stop()
        except PlaywrightError as e:
            self.log_warning(f"Failed to shut down browser: {e}")
        finally:
            self._browser = None
            self._playwright = None

    async def __aenter__(self):
        """Context manager entry."""
        await self.start()
        return self

# Exported class
__all__ = ['BrowserRenderManager', 'BrowserElement']
