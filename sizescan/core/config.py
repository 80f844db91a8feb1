#!/usr/bin/env python3
"""
Scanner configuration and run statistics.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from .hasher import ALGORITHMS, DEFAULT_CHUNK_SIZE, XXHASH_AVAILABLE

logger = logging.getLogger(__name__)

MATCHING_STRATEGIES = ("exact", "legacy")


@dataclass
class ScanConfig:
    """Scanner configuration with interactive defaults"""
    root: str = "."

    # Prompt answers; None means ask on stdin
    extension: Optional[str] = None
    ascending: Optional[bool] = None
    check_duplicates: Optional[bool] = None

    # Hashing
    hash_algorithm: str = "md5"
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Duplicate matching
    matching: str = "exact"

    # Advanced
    follow_symlinks: bool = False
    quiet: bool = False
    verbose: bool = False

    def validate(self) -> None:
        """Validate configuration"""
        if self.chunk_size < 1024:
            raise ValueError("Chunk size must be >= 1KB")
        if self.hash_algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown hash algorithm: {self.hash_algorithm}")
        if self.matching not in MATCHING_STRATEGIES:
            raise ValueError(f"Unknown matching strategy: {self.matching}")
        if self.quiet and self.verbose:
            raise ValueError("--quiet and --verbose are mutually exclusive")
        if self.hash_algorithm == "xxhash" and not XXHASH_AVAILABLE:
            logger.warning("xxhash not available, falling back to md5")
            self.hash_algorithm = "md5"


@dataclass
class ScanStats:
    """Counters collected while walking the tree"""
    files_discovered: int = 0
    files_filtered: int = 0
    files_skipped: int = 0
    files_hashed: int = 0
    dirs_skipped: int = 0
    bytes_read: int = 0

    start_time: float = field(default_factory=time.time)
    exclusions: Dict[str, int] = field(default_factory=dict)

    def exclude(self, reason: str) -> None:
        self.exclusions[reason] = self.exclusions.get(reason, 0) + 1

    def get_duration(self) -> float:
        """Get elapsed time"""
        return time.time() - self.start_time


def parse_size(size_str: str) -> int:
    """Parse human-readable size"""
    size_str = size_str.strip().upper()

    # Longer suffixes first so 'B' doesn't swallow 'MB'
    multipliers = [
        ('TB', 1024**4),
        ('GB', 1024**3),
        ('MB', 1024**2),
        ('KB', 1024),
        ('B', 1),
    ]

    for suffix, multiplier in multipliers:
        if size_str.endswith(suffix):
            number = size_str[:-len(suffix)].strip()
            return int(float(number) * multiplier)

    return int(size_str)


def format_size(bytes_val: float) -> str:
    """Format bytes as human readable"""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_val < 1024.0:
            return f"{bytes_val:.1f} {unit}"
        bytes_val /= 1024.0
    return f"{bytes_val:.1f} PB"
