"""Nesting modes of the rule walker."""

from enum import Enum

class NestingMode(Enum):
    """Context of the block the walker is currently inside."""
    NORMAL = 'normal'
    FONT_FACE = 'font-face'
    MEDIA = 'media'
    KEYFRAMES_FORCE_REMOVE = 'keyframes'

__all__ = ['NestingMode']
