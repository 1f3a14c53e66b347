"""Pytest configuration for Critical CSS tests."""

import pytest
import logging
from typing import Dict, List, Optional, Set

from ..managers.base import RenderManager
from ..utils.error import InvalidSelectorError, RenderUnavailableError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

class FakeElement:
    """Element with a fixed top offset that records clear style overrides."""

    def __init__(self, top: float):
        self.top = top
        self.clear_calls: List[str] = []
        self.measured = False

    async def get_top_offset(self) -> float:
        self.measured = True
        return self.top

    async def set_clear_style(self, value: str) -> None:
        self.clear_calls.append(value)

class FakeRenderEnvironment:
    """Render environment answering queries from a selector -> top offsets table."""

    def __init__(self, layout: Optional[Dict[str, List[float]]] = None,
                 invalid: Optional[Set[str]] = None,
                 viewport_height: float = 900,
                 unavailable: bool = False):
        self.layout = layout or {}
        self.invalid = invalid or set()
        self.viewport_height = viewport_height
        self.unavailable = unavailable
        self.queries: List[str] = []
        self.elements: Dict[str, List[FakeElement]] = {
            selector: [FakeElement(top) for top in tops]
            for selector, tops in self.layout.items()
        }

    async def query_matches(self, selector: str) -> List[FakeElement]:
        if self.unavailable:
            raise RenderUnavailableError("Page is gone")
        selector = selector.strip()
        self.queries.append(selector)
        if selector in self.invalid:
            raise InvalidSelectorError(f"Invalid selector: {selector}")
        return self.elements.get(selector, [])

class FakeRenderManager(RenderManager):
    """Render manager serving one fake page layout per url."""

    instances: List['FakeRenderManager'] = []

    def __init__(self, pages: Dict[str, Dict[str, List[float]]], failing: Set[str],
                 width: int = 1300, height: int = 900, render_wait: float = 0.1):
        super().__init__()
        self.pages = pages
        self.failing = failing
        self.width = width
        self.height = height
        self.render_wait = render_wait
        self.opened: List[str] = []
        self.cleaned_up = False
        self._environment: Optional[FakeRenderEnvironment] = None
        FakeRenderManager.instances.append(self)

    @property
    def viewport_height(self) -> float:
        return self.height

    async def open(self, url: str) -> None:
        self.opened.append(url)
        if url in self.failing:
            raise RenderUnavailableError(f"Unable to access {url}")
        self._environment = FakeRenderEnvironment(self.pages.get(url, {}), viewport_height=self.height)

    async def query_matches(self, selector: str) -> List[FakeElement]:
        return await self._environment.query_matches(selector)

    def get_stats(self):
        return {'pages_opened': len(self.opened)}

    async def cleanup(self) -> None:
        self.cleaned_up = True

@pytest.fixture
def render_factory():
    """Return a factory building fake render managers for the given pages."""
    FakeRenderManager.instances = []

    def build(pages=None, failing=None):
        def factory(**kwargs):
            return FakeRenderManager(pages or {}, failing or set(), **kwargs)
        return factory

    return build

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    /* Base */
    body {
        color: #333;
        font-family: Arial, sans-serif;
        margin: 0;
    }

    .header, .footer {
        background-color: #f5f5f5;
        padding: 10px;
    }

    .header h1:hover {
        color: #000;
    }

    .content::before {
        content: "}";
    }

    input::-moz-placeholder {
        color: #999;
    }

    ::-moz-selection {
        background: yellow;
    }

    @font-face {
        font-family: "Custom";
        src: url("custom.woff2") format("woff2");
    }

    @media (max-width: 768px) {
        .content {
            flex-direction: column;
        }

        .sidebar {
            width: 100%;
        }
    }

    @keyframes fade {
        from { opacity: 0; }
        to { opacity: 1; }
    }

    .below-fold {
        display: block;
    }
    """

@pytest.fixture(scope='session')
def sample_layout():
    """Return selector -> element top offsets for the sample page."""
    return {
        'body': [0],
        '.header': [0],
        '.footer': [2400],
        '.header h1': [20],
        '.content': [150],
        'input': [300],
        '.sidebar': [1200],
        '.below-fold': [1500, 3000],
        'from': [0],
        'to': [0],
    }
