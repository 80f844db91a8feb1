#!/usr/bin/env python3
"""
Size Grouper - partition FileRecords by exact byte size

Groups are opened in first-occurrence order of each nonzero size and then
filled with every record of that size, so a size seen once still yields a
one-file group. Zero-byte files are never grouped.
"""

import logging
from typing import Dict, Iterable, List

from .models import FileRecord, SizeGroup

logger = logging.getLogger(__name__)


def group_by_size(records: Iterable[FileRecord]) -> List[SizeGroup]:
    """Group records by size, in order of first occurrence"""
    buckets: Dict[int, List[FileRecord]] = {}
    for record in records:
        if record.size == 0:
            continue
        buckets.setdefault(record.size, []).append(record)

    groups = [SizeGroup(size=size, files=tuple(files)) for size, files in buckets.items()]
    logger.debug(f"Grouped files into {len(groups)} size groups")
    return groups


def sort_groups(groups: Iterable[SizeGroup], ascending: bool) -> List[SizeGroup]:
    """Stable sort of groups by size; equal sizes keep their relative order"""
    return sorted(groups, key=lambda group: group.size, reverse=not ascending)
