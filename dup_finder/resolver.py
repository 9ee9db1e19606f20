"""
Mapping of duplicate files to the file they were first matched with
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .compare import files_equal

logger = logging.getLogger(__name__)


def resolve_duplicates(
        pairs: Iterable[Tuple[Path, Path]],
        total: Optional[int] = None,
        progress_callback: Optional[Callable[[int, Optional[int]], None]] = None,
        compare: Callable[[Path, Path], bool] = files_equal
) -> Dict[Path, Path]:
    """
    Compare pairs of files and record duplicates

    Pairs are handled in the given order. A pair is skipped when either file
    is already recorded as a duplicate, so every duplicate is matched once
    and files identical to each other end up pointing at the first one seen.
    When the two files of a pair are equal the second one becomes a
    duplicate of the first.

    Args:
        pairs: Pairs of files in comparison order
        total: Number of pairs, passed through to the progress callback
        progress_callback: Called with (processed, total) after every pair
        compare: Function telling whether two files are identical

    Returns:
        Dictionary mapping each duplicate to its original
    """
    duplicates: Dict[Path, Path] = {}
    processed = 0

    for file1, file2 in pairs:
        if file1 not in duplicates and file2 not in duplicates:
            if compare(file1, file2):
                duplicates[file2] = file1
                logger.debug("%s is a duplicate of %s", file2, file1)

        processed += 1
        if progress_callback:
            progress_callback(processed, total)

    return duplicates


def sorted_duplicates(duplicates: Dict[Path, Path]) -> List[Tuple[Path, Path]]:
    """(duplicate, original) tuples ordered by duplicate path"""
    return sorted(duplicates.items())
