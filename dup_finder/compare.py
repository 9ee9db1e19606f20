"""
Byte for byte file comparison
"""

import os
from pathlib import Path
from typing import BinaryIO, Union

from .errors import CompareError

# Number of bytes read from each file at once
CHUNK_SIZE = 1024 * 1024


def _size(path: Union[str, Path]) -> int:
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise CompareError(path, "stat", e.strerror or str(e)) from e


def _read(f: BinaryIO, path: Union[str, Path], chunk_size: int) -> bytes:
    try:
        return f.read(chunk_size)
    except OSError as e:
        raise CompareError(path, "read", e.strerror or str(e)) from e


def _open(path: Union[str, Path]) -> BinaryIO:
    try:
        return open(path, 'rb')
    except OSError as e:
        raise CompareError(path, "open", e.strerror or str(e)) from e


def files_equal(
        path1: Union[str, Path],
        path2: Union[str, Path],
        chunk_size: int = CHUNK_SIZE
) -> bool:
    """
    Check whether two files have exactly the same content

    Files of different sizes are reported unequal without being opened.
    Otherwise both files are read in chunks of the same size and the
    comparison stops at the first chunk that differs.

    Args:
        path1: First file
        path2: Second file
        chunk_size: Number of bytes read from each file at once

    Returns:
        True if both files hold the same bytes

    Raises:
        CompareError: if either file cannot be inspected, opened or read
    """
    if _size(path1) != _size(path2):
        return False

    with _open(path1) as f1, _open(path2) as f2:
        while True:
            chunk1 = _read(f1, path1, chunk_size)
            chunk2 = _read(f2, path2, chunk_size)

            if len(chunk1) != len(chunk2):
                return False

            if not chunk1:
                return True

            if chunk1 != chunk2:
                return False
