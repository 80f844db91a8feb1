#!/usr/bin/env python3
"""
Data model shared by the walker, grouper and duplicate detector.

All records are frozen: they are created once during a pass and only read
afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class FileRecord:
    """A regular file seen during traversal"""
    name: str
    path: str
    size: int
    extension: str
    content_hash: str


@dataclass(frozen=True)
class SizeGroup:
    """All scanned files sharing one byte size"""
    size: int
    files: Tuple[FileRecord, ...] = ()

    @property
    def count(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class DuplicateEntry:
    """A file reported as a duplicate, with its running sequence number"""
    file: FileRecord
    number: int


@dataclass(frozen=True)
class DuplicateGroup:
    """Files of one size group that share a content hash"""
    size: int
    hash_val: Optional[str]
    entries: Tuple[DuplicateEntry, ...] = field(default_factory=tuple)
