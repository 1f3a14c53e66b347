"""Logging utility for Critical CSS."""

import logging
import os
from typing import Optional
from .config import LOG_FILE, LOG_LEVEL

def setup_logging(log_level: Optional[int] = None, log_file: Optional[str] = LOG_FILE) -> None:
    """Set up logging configuration.

    Log records go to stderr; stdout is reserved for generated CSS.

    Args:
        log_level: Logging level, defaults to LOG_LEVEL from config
        log_file: Optional path of an additional log file
    """
    if log_level is None:
        log_level = getattr(logging, LOG_LEVEL)

    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True
    )

# Exported functions
__all__ = ['setup_logging']
