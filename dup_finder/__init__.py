"""
dup - find duplicate files across directories by comparing them byte for byte
"""

__version__ = "1.0.0"
__author__ = "Ilya Boyarnikov"
__description__ = "A tool to find and remove duplicate files across directories"

from .compare import CHUNK_SIZE, files_equal
from .core import (
    analyze_duplicates,
    delete_duplicates,
    find_duplicates,
    validate_directories,
)
from .errors import (
    CompareError,
    DupError,
    PairCountError,
    RemoveError,
    ScanError,
)
from .pairs import count_pairs, make_pairs
from .report import format_size, get_duplicates_report
from .resolver import resolve_duplicates, sorted_duplicates
from .scanner import list_files
