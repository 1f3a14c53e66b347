"""Resource managers for Critical CSS."""

from .base import ElementHandle, RenderEnvironment, RenderManager
from .browser import BrowserRenderManager
from .memory import MemoryManager

# Exported classes
__all__ = [
    'ElementHandle',
    'RenderEnvironment',
    'RenderManager',
    'BrowserRenderManager',
    'MemoryManager'
]
