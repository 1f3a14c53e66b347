"""Error utility for Critical CSS."""

class CriticalCSSError(Exception):
    """Base exception for Critical CSS."""
    pass

class InvalidSelectorError(CriticalCSSError):
    """Raised when the render environment cannot evaluate a selector."""
    pass

class RenderUnavailableError(CriticalCSSError):
    """Raised when the render environment cannot be queried at all."""
    pass

class FileOperationError(CriticalCSSError):
    """Raised when file operations fail."""
    pass

class ResourceLimitError(CriticalCSSError):
    """Raised when resource limits are exceeded."""
    pass

class ConfigurationError(CriticalCSSError):
    """Raised when configuration is invalid."""
    pass

class MalformedInputWarning(UserWarning):
    """Issued when a stylesheet can only be processed best-effort."""
    pass

# Exported exceptions
__all__ = [
    'CriticalCSSError',
    'InvalidSelectorError',
    'RenderUnavailableError',
    'FileOperationError',
    'ResourceLimitError',
    'ConfigurationError',
    'MalformedInputWarning',
]
