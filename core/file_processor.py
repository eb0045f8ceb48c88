"""
File Processor Module
Applies the class prefixer to source files and writes back the ones that change.
"""

import sys
import difflib
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from utils.file_utils import (
    DEFAULT_EXTENSIONS,
    iter_files_by_extension,
    read_file_content,
    write_file_content,
)
from .class_prefixer import ClassPrefixer

logger = logging.getLogger(__name__)


def show_diff(file_path: Path, original: str, updated: str) -> None:
    """Print a unified diff of a pending rewrite to stdout."""
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=str(file_path),
        tofile=str(file_path),
    )
    sys.stdout.writelines(diff)


def process_file(file_path: Path, prefixer: ClassPrefixer, new_prefix: str,
                 old_prefix: Optional[str] = None, dry_run: bool = False) -> bool:
    """Rewrite the classes of a single file. Returns True if its content changed."""
    content, encoding = read_file_content(file_path)
    updated_content = prefixer.update_classes(content, new_prefix, old_prefix)

    if content == updated_content:
        logger.debug(f"No changes in: {file_path}")
        return False

    if dry_run:
        show_diff(file_path, content, updated_content)
        logger.info(f"Prefix would be updated in: {file_path}")
    else:
        write_file_content(file_path, updated_content, encoding)
        logger.info(f"Prefix updated in: {file_path}")
    return True


def process_files(root: str | Path, new_prefix: str, old_prefix: Optional[str] = None,
                  extensions: Iterable[str] = DEFAULT_EXTENSIONS, dry_run: bool = False,
                  prefixer: Optional[ClassPrefixer] = None) -> List[Path]:
    """
    Rewrite every matching file under root, one at a time.

    Any I/O error aborts the whole run.

    Returns:
        The files whose content changed, in traversal order
    """
    prefixer = prefixer or ClassPrefixer()
    updated_files = []
    for file_path in iter_files_by_extension(root, extensions):
        logger.debug(f"Processing file: {file_path}")
        if process_file(file_path, prefixer, new_prefix, old_prefix, dry_run):
            updated_files.append(file_path)
    return updated_files
