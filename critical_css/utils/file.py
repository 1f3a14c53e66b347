"""File utility for Critical CSS."""

import os
import aiofiles
from .config import MAX_CSS_SIZE
from .error import FileOperationError

def ensure_directory(path: str) -> bool:
    """Ensure directory exists.
    
    Args:
        path: Directory path
        
    Returns:
        True if directory exists or was created
        
    Raises:
        FileOperationError: If directory creation fails
    """
    try:
        if path and not os.path.exists(path):
            os.makedirs(path)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")

async def safe_write_file(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Safely write content to a file.
    
    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding
        
    Returns:
        True if successful
        
    Raises:
        FileOperationError: If file write fails
    """
    ensure_directory(os.path.dirname(file_path))
    try:
        async with aiofiles.open(file_path, 'w', encoding=encoding) as f:
            await f.write(content)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

async def safe_read_file(file_path: str, encoding: str = 'utf-8',
                         max_size: int = MAX_CSS_SIZE) -> str:
    """Safely read content from a file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        max_size: Largest accepted file size in bytes
        
    Returns:
        File content
        
    Raises:
        FileOperationError: If file read fails or the file is too large
    """
    try:
        size = os.path.getsize(file_path)
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")
    if size > max_size:
        raise FileOperationError(
            f"File too large (max {max_size / 1024 / 1024}MB): {file_path}"
        )

    try:
        async with aiofiles.open(file_path, 'r', encoding=encoding) as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

# Exported functions
__all__ = ['ensure_directory', 'safe_write_file', 'safe_read_file']
