"""
Directory listing for duplicate detection
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from .errors import ScanError

logger = logging.getLogger(__name__)


def _collect(directory: Path, recursive: bool, files: List[Path]) -> None:
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                path = Path(entry.path)
                try:
                    if recursive and entry.is_dir():
                        _collect(path, True, files)
                    elif entry.is_file():
                        files.append(path)
                except OSError as e:
                    raise ScanError(path, "inspect", e.strerror or str(e)) from e
    except OSError as e:
        raise ScanError(directory, "read directory", e.strerror or str(e)) from e


def list_files(directory: Union[str, Path], recursive: bool = False) -> List[Path]:
    """
    List regular files in a directory

    Args:
        directory: Directory to list
        recursive: Whether to descend into subdirectories

    Returns:
        File paths sorted by path

    Raises:
        ScanError: if the directory or one of its entries cannot be read
    """
    files: List[Path] = []
    _collect(Path(directory), recursive, files)
    files.sort()
    logger.debug("Found %d files in %s", len(files), directory)
    return files
