#!/usr/bin/env python3
"""
SizeScan - Directory Size Grouping and Duplicate Finder

Interactive flow:
- ask for a file extension to filter on (empty for all files)
- ask for the size sort direction
- walk and hash the tree, print every size group
- ask whether to check for duplicates, then print duplicate groups

Prompt answers can also be given as options for scripted runs.
"""

import argparse
import logging
import sys
from typing import Callable, Iterable, Optional

from .. import __version__
from ..core.config import ScanConfig, ScanStats, format_size, parse_size
from ..core.detector import find_duplicates
from ..core.errors import FileReadError, TraversalError
from ..core.filters import ExtensionFilter
from ..core.grouper import group_by_size, sort_groups
from ..core.hasher import ALGORITHMS, HashComputer
from ..core.walker import FileWalker
from .report import print_duplicate_groups, print_size_groups

# ---------------------------
# Logging Configuration
# ---------------------------
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger("sizescan.cli")
package_logger = logging.getLogger("sizescan")

USAGE_MESSAGE = "Directory is not specified"
TRAVERSAL_MESSAGE = "error walking directory"
WRONG_OPTION = "Wrong option"

# ---------------------------
# Interactive Prompts
# ---------------------------

def _wrong_option() -> None:
    print()
    print(WRONG_OPTION)
    print()


def prompt_extension(read: Callable[[], str] = input) -> str:
    """Ask for a file extension; only the first token of the line counts"""
    print("Enter file format:")
    tokens = read().split()
    return tokens[0] if tokens else ""


def prompt_sort_order(read: Callable[[], str] = input) -> bool:
    """Ask for the size sort direction; returns True for ascending"""
    print("Size sorting options:")
    print("1. Descending")
    print("2. Ascending")
    while True:
        print("Enter a sorting option:")
        answer = read().strip()
        if answer == "1":
            return False
        if answer == "2":
            return True
        _wrong_option()


def prompt_check_duplicates(read: Callable[[], str] = input) -> bool:
    """Ask whether to run the duplicate check; accepts only 'yes' or 'no'"""
    print()
    while True:
        print("Check for duplicates")
        tokens = read().split()
        answer = tokens[0] if tokens else ""
        if answer == "no":
            return False
        if answer == "yes":
            return True
        _wrong_option()

# ---------------------------
# CLI Interface
# ---------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizescan",
        description="SizeScan - group files by size and find duplicates",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("paths", nargs="*", metavar="DIRECTORY", help="Directory to scan")

    # Prompt answers
    parser.add_argument("--format", dest="extension", help="File extension to include, without the dot")
    parser.add_argument("--sort", choices=["desc", "asc"], help="Size sort order")
    dup = parser.add_mutually_exclusive_group()
    dup.add_argument("--duplicates", dest="check_duplicates", action="store_const", const=True,
                     help="Check for duplicates without asking")
    dup.add_argument("--no-duplicates", dest="check_duplicates", action="store_const", const=False,
                     help="Skip the duplicate check without asking")

    # Hashing
    parser.add_argument("--algorithm", choices=list(ALGORITHMS), default="md5", help="Hash algorithm")
    parser.add_argument("--chunk-size", type=parse_size, default="1MB", help="Hash chunk size")
    parser.add_argument("--legacy-matching", action="store_true",
                        help="Anchor-based numbering that reports every same-sized file")

    # Options
    parser.add_argument("--follow-symlinks", action="store_true", help="Descend into symlinked directories")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet mode")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(config: ScanConfig, read: Callable[[], str] = input) -> int:
    """Drive one scan; returns the process exit status"""
    extension = config.extension if config.extension is not None else prompt_extension(read)
    ascending = config.ascending if config.ascending is not None else prompt_sort_order(read)

    stats = ScanStats()
    hasher = HashComputer(config.hash_algorithm, config.chunk_size)
    walker = FileWalker(ExtensionFilter(extension), hasher, config.follow_symlinks, stats)

    logger.info(f"Scanning: {config.root} | Algorithm: {config.hash_algorithm}")
    try:
        records = walker.walk(config.root)
    except TraversalError as e:
        logger.debug(str(e))
        print(TRAVERSAL_MESSAGE)
        return 0

    logger.info(
        f"Scan complete: {stats.files_hashed:,} files hashed, "
        f"{stats.files_filtered:,} filtered, {format_size(stats.bytes_read)} read "
        f"in {stats.get_duration():.1f}s"
    )

    groups = sort_groups(group_by_size(records), ascending)
    print_size_groups(groups)

    check = config.check_duplicates
    if check is None:
        check = prompt_check_duplicates(read)
    if check:
        print_duplicate_groups(find_duplicates(groups, config.matching))
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if len(args.paths) != 1:
        print(USAGE_MESSAGE)
        return 0

    config = ScanConfig(
        root=args.paths[0],
        extension=args.extension,
        ascending=None if args.sort is None else args.sort == "asc",
        check_duplicates=args.check_duplicates,
        hash_algorithm=args.algorithm,
        chunk_size=args.chunk_size,
        matching="legacy" if args.legacy_matching else "exact",
        follow_symlinks=args.follow_symlinks,
        quiet=args.quiet,
        verbose=args.verbose,
    )

    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    # Set logging level
    if config.quiet:
        package_logger.setLevel(logging.WARNING)
    elif config.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        return run(config)
    except FileReadError as e:
        logger.error(f"Fatal: cannot read {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nScan interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
