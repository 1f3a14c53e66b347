"""Base render manager class for Critical CSS."""

import logging
from typing import Any, Dict, List, Optional
from abc import ABC, abstractmethod
from typing_extensions import Literal, Protocol
from ..utils.error import CriticalCSSError, RenderUnavailableError

ClearStyle = Literal['none', '']

class ElementHandle(Protocol):
    """Element matched by a selector query."""

    async def get_top_offset(self) -> float:
        """Top coordinate of the element relative to the viewport."""
        ...

    async def set_clear_style(self, value: ClearStyle) -> None:
        """Override the inline ``clear`` style, '' restores the stylesheet value."""
        ...

class RenderEnvironment(Protocol):
    """Capability the filtering pass needs from a page renderer."""

    viewport_height: float

    async def query_matches(self, selector: str) -> List[ElementHandle]:
        """Return elements matching selector, raising InvalidSelectorError."""
        ...

class RenderManager(ABC):
    """Base class for render environments that own a loaded page."""

    def __init__(self):
        """Initialize base manager."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def viewport_height(self) -> float:
        """Height of the first viewport in pixels."""
        pass

    @abstractmethod
    async def open(self, url: str) -> None:
        """Load a page and let it settle."""
        pass

    @abstractmethod
    async def query_matches(self, selector: str) -> List[ElementHandle]:
        """Return elements matching a selector in document order."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get render usage statistics."""
        pass

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(message)

    async def handle_error(self, error: Exception, message: str,
                           error_class: type = RenderUnavailableError) -> None:
        """Log an error, release resources and raise it as a project error.

        Args:
            error: Exception to handle
            message: Error message
            error_class: CriticalCSSError subclass to raise

        Raises:
            CriticalCSSError: Always
        """
        self.log_error(message, error)
        await self.cleanup()
        if not issubclass(error_class, CriticalCSSError):
            error_class = CriticalCSSError
        raise error_class(f"{message}: {error}") from error

    async def cleanup(self) -> None:
        """Clean up resources."""
        pass

    async def __aenter__(self):
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.cleanup()

# Exported classes
__all__ = ['ClearStyle', 'ElementHandle', 'RenderEnvironment', 'RenderManager']
