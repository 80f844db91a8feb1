#!/usr/bin/env python3
"""
Duplicate Detector - find files sharing a content hash inside size groups

Sequence numbers run across the whole detection pass. The counter is passed
into each per-group step and the updated value handed back, so nothing is
shared between calls.

Matching strategies:
- exact: files are bucketed by hash; every bucket of two or more files is a
  duplicate group. Same-sized files with different content never match.
- legacy: anchor-based pairing kept for compatibility. Every member after the first
  is numbered as a duplicate, and the first member is numbered last when
  its hash equals any later member's. At most one group per size group.

In both strategies the first file of a set is numbered after the others.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from .errors import InsufficientMembersError
from .models import DuplicateEntry, DuplicateGroup, FileRecord, SizeGroup

logger = logging.getLogger(__name__)


def _number_set(anchor: FileRecord, others: List[FileRecord], last_count: int) -> Tuple[List[DuplicateEntry], int]:
    entries = []
    for record in others:
        last_count += 1
        entries.append(DuplicateEntry(file=record, number=last_count))
    last_count += 1
    entries.append(DuplicateEntry(file=anchor, number=last_count))
    return entries, last_count


def exact_groups(group: SizeGroup, last_count: int) -> Tuple[List[DuplicateGroup], int]:
    """Split a size group into one duplicate group per repeated hash"""
    by_hash: Dict[str, List[FileRecord]] = {}
    for record in group.files:
        by_hash.setdefault(record.content_hash, []).append(record)

    result = []
    for hash_val, members in by_hash.items():
        if len(members) < 2:
            continue
        anchor, others = members[0], members[1:]
        entries, last_count = _number_set(anchor, others, last_count)
        result.append(DuplicateGroup(size=group.size, hash_val=hash_val, entries=tuple(entries)))
    return result, last_count


def legacy_groups(group: SizeGroup, last_count: int) -> Tuple[List[DuplicateGroup], int]:
    """Anchor-based pairing: every later member is numbered, the anchor only if matched"""
    anchor = group.files[0]
    observed = [anchor.content_hash]
    entries = []
    hash_val = None

    for record in group.files[1:]:
        observed.append(record.content_hash)
        # Always true: the record's own hash was just appended
        if record.content_hash in observed:
            last_count += 1
            entries.append(DuplicateEntry(file=record, number=last_count))
            if hash_val is None:
                hash_val = record.content_hash

    if anchor.content_hash in observed[1:]:
        last_count += 1
        entries.append(DuplicateEntry(file=anchor, number=last_count))

    return [DuplicateGroup(size=group.size, hash_val=hash_val, entries=tuple(entries))], last_count


STRATEGIES = {
    "exact": exact_groups,
    "legacy": legacy_groups,
}


def duplicate_groups_for(group: SizeGroup, last_count: int,
                         strategy: str = "exact") -> Tuple[List[DuplicateGroup], int]:
    """Build the duplicate groups of one size group.

    Returns the groups and the updated sequence counter. Raises
    InsufficientMembersError, leaving the counter untouched, when the size
    group holds fewer than two files.
    """
    if group.count < 2:
        raise InsufficientMembersError(
            f"need at least two files of {group.size} bytes to check for duplicates"
        )
    try:
        build = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown matching strategy: {strategy}") from None
    return build(group, last_count)


def find_duplicates(groups: Iterable[SizeGroup], strategy: str = "exact") -> List[DuplicateGroup]:
    """Run the detection pass over all size groups, in order"""
    duplicate_count = 0
    duplicate_groups: List[DuplicateGroup] = []
    for group in groups:
        try:
            found, duplicate_count = duplicate_groups_for(group, duplicate_count, strategy)
        except InsufficientMembersError as e:
            logger.debug(f"Skipping size group: {e}")
            continue
        duplicate_groups.extend(found)

    logger.info(f"Duplicate check complete: {duplicate_count} files in {len(duplicate_groups)} groups")
    return duplicate_groups
