"""
Text report of duplicate files
"""

import os
from pathlib import Path
from typing import Dict, List

from .core import analyze_duplicates
from .resolver import sorted_duplicates


def format_size(size_bytes: int) -> str:
    """
    Convert bytes to human-readable format

    Args:
        size_bytes: Size in bytes

    Returns:
        Human readable size string
    """
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} TB"


def _display(path: Path) -> str:
    """Printable form of a path, undecodable bytes replaced"""
    return os.fsencode(path).decode("utf-8", "replace")


def _format_rows(rows: List[List[str]]) -> List[str]:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append("  ".join(cells).rstrip())
    return lines


def get_duplicates_report(
        duplicates: Dict[Path, Path],
        show_size: bool = False
) -> str:
    """
    Generate a table of duplicate files and the files they duplicate

    Args:
        duplicates: Dictionary of duplicate files
        show_size: Whether to include file sizes

    Returns:
        Formatted report string
    """
    if not duplicates:
        return "No duplicate files found!\n"

    total, total_space = analyze_duplicates(duplicates)

    header = ["File", "Duplicate of"]
    if show_size:
        header.append("Size")

    rows = [header]
    for duplicate, original in sorted_duplicates(duplicates):
        row = [_display(duplicate), _display(original)]
        if show_size:
            row.append(format_size(duplicate.stat().st_size))
        rows.append(row)

    table = _format_rows(rows)
    report_lines = [f"Found {total} duplicate files:", "", table[0], "-" * len(table[0])]
    report_lines.extend(table[1:])

    if show_size:
        report_lines.append(f"\nTotal reclaimable space: {format_size(total_space)}")

    return "\n".join(report_lines)
