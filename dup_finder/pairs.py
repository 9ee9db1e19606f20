"""
Pairs of files that have to be compared with each other
"""

import logging
import sys
from itertools import combinations, product
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from .errors import PairCountError

logger = logging.getLogger(__name__)

Pair = Tuple[Path, Path]


def make_pairs(file_lists: Sequence[List[Path]], cross: bool = False) -> Iterator[Pair]:
    """
    Generate the pairs of files to compare

    Without ``cross`` every pair of files inside each directory is produced
    first, followed by every file of one directory against every file of each
    later directory. With ``cross`` only the pairs across directories are
    produced.

    Args:
        file_lists: Sorted file lists, one per input directory, in input order
        cross: Only compare files across directories

    Yields:
        Tuples of two distinct paths
    """
    if not cross:
        for files in file_lists:
            yield from combinations(files, 2)

    for files1, files2 in combinations(file_lists, 2):
        yield from product(files1, files2)


def count_pairs(file_lists: Sequence[List[Path]], cross: bool = False) -> int:
    """
    Number of pairs make_pairs() will generate for the same arguments

    Raises:
        PairCountError: if the total is too large to be tracked
    """
    sizes = [len(files) for files in file_lists]
    total = 0

    if not cross:
        total += sum(n * (n - 1) // 2 for n in sizes)

    for n1, n2 in combinations(sizes, 2):
        total += n1 * n2

    if total > sys.maxsize:
        raise PairCountError(
            None, "count pairs", f"{total} exceeds the supported maximum of {sys.maxsize}"
        )

    logger.debug("%d pairs to compare across %d directories", total, len(sizes))
    return total
