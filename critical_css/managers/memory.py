"""Memory management for Critical CSS."""

import gc
import time
import psutil
import logging
from typing import Dict, Any, Optional
from ..utils.error import ResourceLimitError

logger = logging.getLogger(__name__)

class MemoryManager:
    """Guard process memory between filtering passes."""

    def __init__(self, memory_limit: Optional[int] = None):
        """Initialize memory manager.

        Args:
            memory_limit: Maximum resident memory in bytes, None for no limit
        """
        if memory_limit is not None and memory_limit <= 0:
            memory_limit = None  # Treat negative or zero limits as no limit
        self.memory_limit = memory_limit
        self.process = psutil.Process()
        self.stats = {
            'peak_memory': 0,
            'current_memory': 0,
            'check_count': 0,
            'cleanup_count': 0,
            'start_time': time.time()
        }

    def get_memory_usage(self) -> int:
        """Get current memory usage in bytes.

        Returns:
            Resident set size of this process, 0 if it can't be read
        """
        try:
            current_memory = self.process.memory_info().rss
        except psutil.Error as e:
            logger.error(f"Error getting memory usage: {e}")
            return 0

        self.stats['current_memory'] = current_memory
        if current_memory > self.stats['peak_memory']:
            self.stats['peak_memory'] = current_memory
        return current_memory

    def check_available_memory(self) -> bool:
        """Check if memory usage is below the limit (if set)."""
        if self.memory_limit is None:
            return True
        return self.get_memory_usage() < self.memory_limit

    def ensure_available(self) -> None:
        """Make sure another pass may start, collecting garbage once if needed.

        Raises:
            ResourceLimitError: If memory stays above the limit
        """
        self.stats['check_count'] += 1
        if self.check_available_memory():
            return

        collected = gc.collect()
        self.stats['cleanup_count'] += 1
        logger.info(f"Garbage collection: {collected} objects collected")
        if not self.check_available_memory():
            raise ResourceLimitError(
                f"Memory usage {self.stats['current_memory']} exceeds limit {self.memory_limit}"
            )

    def get_stats(self) -> Dict[str, Any]:
        """Get memory statistics.

        Returns:
            Dictionary with memory statistics
        """
        return {
            'current_memory': self.get_memory_usage(),
            'peak_memory': self.stats['peak_memory'],
            'memory_limit': self.memory_limit,
            'check_count': self.stats['check_count'],
            'cleanup_count': self.stats['cleanup_count'],
            'elapsed_time': time.time() - self.stats['start_time']
        }

# Exported class
__all__ = ['MemoryManager']
