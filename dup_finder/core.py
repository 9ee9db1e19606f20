"""
Core functionality for finding duplicate files
"""

import logging
from pathlib import Path
from typing import Dict, Sequence, Tuple, Union

from .errors import RemoveError
from .pairs import count_pairs, make_pairs
from .resolver import resolve_duplicates, sorted_duplicates
from .scanner import list_files

logger = logging.getLogger(__name__)


def validate_directories(directories: Sequence[Union[str, Path]], cross: bool = False) -> None:
    """
    Check the directory arguments before anything is scanned

    Raises:
        ValueError: if no directory is given, or cross is requested with less than two
    """
    if not directories:
        raise ValueError("At least one directory is required")

    if cross and len(directories) < 2:
        raise ValueError("At least two directories are required for cross comparison")


def find_duplicates(
        directories: Sequence[Union[str, Path]],
        cross: bool = False,
        recursive: bool = False,
        progress_callback=None
) -> Dict[Path, Path]:
    """
    Find duplicate files in one or more directories

    Args:
        directories: Directories to search, in order of precedence
        cross: Only compare files across directories
        recursive: Whether to search subdirectories
        progress_callback: Called with (processed, total) after every compared pair

    Returns:
        Dictionary with duplicate files as keys and the files they match as values,
        empty when there are no duplicates
    """
    validate_directories(directories, cross)

    file_lists = [list_files(directory, recursive) for directory in directories]
    total = count_pairs(file_lists, cross)

    duplicates = resolve_duplicates(
        make_pairs(file_lists, cross),
        total=total,
        progress_callback=progress_callback
    )
    logger.debug("Found %d duplicates after %d comparisons", len(duplicates), total)
    return duplicates


def analyze_duplicates(duplicates: Dict[Path, Path]) -> Tuple[int, int]:
    """
    Analyze duplicates to get statistics

    Args:
        duplicates: Dictionary of duplicate files

    Returns:
        Tuple of (total_duplicates, total_reclaimable_space)
    """
    total_space = sum(duplicate.stat().st_size for duplicate in duplicates)
    return len(duplicates), total_space


def delete_duplicates(duplicates: Dict[Path, Path]) -> Tuple[int, int]:
    """
    Delete duplicate files, originals are never touched

    Args:
        duplicates: Dictionary of duplicate files

    Returns:
        Tuple of (deleted_count, freed_space)

    Raises:
        RemoveError: on the first file that cannot be removed
    """
    deleted_count = 0
    freed_space = 0

    for duplicate, _ in sorted_duplicates(duplicates):
        try:
            file_size = duplicate.stat().st_size
            duplicate.unlink()
        except OSError as e:
            raise RemoveError(duplicate, "remove", e.strerror or str(e)) from e

        deleted_count += 1
        freed_space += file_size
        logger.debug("Removed %s", duplicate)

    return deleted_count, freed_space
