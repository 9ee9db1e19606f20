#!/usr/bin/env python3
"""
CLI interface for duplicate file finder
"""

import logging
import os
import sys
import argparse

from tqdm import tqdm

from . import __version__
from .core import (
    find_duplicates,
    delete_duplicates,
    analyze_duplicates,
    validate_directories,
)
from .report import get_duplicates_report, format_size


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="dup",
        description="Find duplicate files in one or more directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Files are compared byte for byte. When two files match, the one found later
is reported as a duplicate of the one found first.

Examples:
  dup /path/to/directory
  dup -r /path/to/directory
  dup -x /path/to/originals /path/to/backup
  dup /path/to/directory --show-size
  dup /path/to/directory --dry-run
  dup /path/to/directory --delete
        """
    )

    parser.add_argument(
        "directories",
        nargs="+",
        metavar="DIR",
        help="Directories to scan for duplicates"
    )
    parser.add_argument(
        "-x", "--cross",
        action="store_true",
        help="Only compare files across directories"
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Search subdirectories"
    )
    parser.add_argument(
        "--show-size",
        action="store_true",
        help="Show file sizes"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting"
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete duplicate files without asking"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every step to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments"""
    validate_directories(args.directories, args.cross)

    for directory in args.directories:
        if not os.path.isdir(directory):
            raise ValueError(f"'{directory}' is not a valid directory")

    if args.delete and args.dry_run:
        raise ValueError("Cannot use both --delete and --dry-run")


def confirm(prompt: str) -> bool:
    """Ask a yes/no question, anything but yes means no"""
    try:
        answer = input(prompt)
    except EOFError:
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def main(argv=None) -> None:
    """Main CLI entry point"""
    args = parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

    # Display scan information
    if not args.quiet:
        print(f"Scanning directories: {', '.join(args.directories)}", file=sys.stderr)
        print(f"Recursive: {args.recursive}, Cross: {args.cross}", file=sys.stderr)

    try:
        with tqdm(desc="Checking files", unit=" pairs", disable=args.quiet, file=sys.stderr) as bar:
            def progress_callback(processed: int, total: int) -> None:
                if bar.total != total:
                    bar.reset(total=total)
                bar.update(1)

            duplicates = find_duplicates(
                args.directories,
                cross=args.cross,
                recursive=args.recursive,
                progress_callback=progress_callback
            )

        # Display results
        report = get_duplicates_report(duplicates, show_size=args.show_size)
        print(report)

        if not duplicates:
            return

        # Handle deletion
        if args.dry_run:
            total, total_space = analyze_duplicates(duplicates)
            print(f"\nDry run: Would delete {total} duplicate files")
            print(f"Would free approximately {format_size(total_space)}")
            return

        if not args.delete and not confirm(f"\nRemove {len(duplicates)} duplicates? [y/N] "):
            print("Not removing.")
            return

        if not args.quiet:
            print("\nRemoving duplicate files...", file=sys.stderr)

        deleted_count, freed_space = delete_duplicates(duplicates)

        if not args.quiet:
            print(f"Deleted {deleted_count} files, freed {format_size(freed_space)}", file=sys.stderr)

    except KeyboardInterrupt:
        if not args.quiet:
            print("\n\nOperation cancelled by user", file=sys.stderr)
        sys.exit(130)

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
