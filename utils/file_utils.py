"""
File Utilities Module
Directory traversal and text read/write helpers used by the prefixer.
"""

import os
import locale
import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple

logger = logging.getLogger(__name__)

# Files rewritten by default
DEFAULT_EXTENSIONS = ('.ts', '.tsx')

def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def iter_files_by_extension(path: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Iterator[Path]:
    """
    Lazily walk a directory tree depth-first and yield matching files.

    Args:
        path: Base directory path
        extensions: File name suffixes to yield (e.g., ['.ts', '.tsx'])

    Yields:
        Path objects for matching files, in sorted name order within each directory

    Raises:
        OSError: If a directory can't be listed
    """
    base_path = normalize_path(path)

    # Convert extensions to lowercase for case-insensitive matching
    extensions = tuple(ext.lower() for ext in extensions)

    pending = [base_path]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        subdirs = []
        for entry in entries:
            if entry.is_dir():
                subdirs.append(Path(entry.path))
            elif entry.is_file() and entry.name.lower().endswith(extensions):
                yield Path(entry.path)

        # Reversed so the first subdirectory is popped first
        pending.extend(reversed(subdirs))

def read_file_content(file_path: Path) -> Tuple[str, str]:
    """
    Read file content, keeping its line endings.

    Args:
        file_path: Path to the file to read

    Returns:
        Tuple of (contents, encoding used to decode them)

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read(), 'utf-8'
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        encoding = locale.getpreferredencoding(False)
        logger.debug(f"{file_path} is not UTF-8, reading as {encoding}")
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            return f.read(), encoding

def write_file_content(file_path: Path, content: str, encoding: str = 'utf-8') -> None:
    """Overwrite a file with content, without translating line endings."""
    with open(file_path, 'w', encoding=encoding, newline='') as f:
        f.write(content)
