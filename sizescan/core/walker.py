#!/usr/bin/env python3
"""
File Walker - recursive directory traversal with extension filtering

Every accepted regular file is hashed eagerly, so the walker returns fully
populated FileRecords. The walk is depth-first with the entries of each
directory visited in lexicographic order.

Failure policy:
- missing or unreadable root: TraversalError, nothing returned
- unreadable sub-directory: logged and skipped
- unreadable file: FileReadError, the whole walk is abandoned
"""

import logging
import os
import stat
from typing import List, Optional

from .config import ScanStats
from .errors import FileReadError, TraversalError
from .filters import ExtensionFilter, file_extension
from .hasher import HashComputer
from .models import FileRecord

logger = logging.getLogger(__name__)


class FileWalker:
    """Collect FileRecords for every matching file below a root"""

    def __init__(self, ext_filter: ExtensionFilter, hasher: Optional[HashComputer] = None,
                 follow_symlinks: bool = False, stats: Optional[ScanStats] = None):
        self.filter = ext_filter
        self.hasher = hasher or HashComputer()
        self.follow_symlinks = follow_symlinks
        self.stats = stats or ScanStats()

    def walk(self, root: str) -> List[FileRecord]:
        """Traverse root and return records in traversal order"""
        if not os.path.exists(root):
            raise TraversalError(f"Path does not exist: {root}")

        records: List[FileRecord] = []

        # A plain file as root is its own one-entry tree
        if not os.path.isdir(root):
            self._visit(root, records)
            return records

        self._walk_dir(root, root, records)
        return records

    def _walk_dir(self, root: str, dirpath: str, records: List[FileRecord]) -> None:
        try:
            with os.scandir(dirpath) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            if dirpath == root:
                raise TraversalError(f"Cannot read directory {root}: {e.strerror}") from e
            logger.warning(f"Skipping unreadable directory {dirpath}: {e.strerror}")
            self.stats.dirs_skipped += 1
            return

        # Files and sub-directories interleave by name, depth-first
        for entry in entries:
            path = os.path.join(dirpath, entry.name)
            if entry.is_dir(follow_symlinks=False):
                self._walk_dir(root, path, records)
            elif entry.is_symlink() and entry.is_dir():
                if self.follow_symlinks:
                    self._walk_dir(root, path, records)
            else:
                self._visit(path, records)

    def _visit(self, path: str, records: List[FileRecord]) -> None:
        self.stats.files_discovered += 1

        if not self.filter.matches(path):
            self.stats.files_filtered += 1
            self.stats.exclude(f"extension:{file_extension(path) or '<none>'}")
            return

        try:
            st = os.stat(path)
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file {path}")
            self.stats.files_skipped += 1
            self.stats.exclude("not_regular")
            return

        before = self.hasher.bytes_read
        content_hash = self.hasher.compute_full_hash(path)
        self.stats.bytes_read += self.hasher.bytes_read - before
        self.stats.files_hashed += 1

        name = os.path.basename(path)
        records.append(FileRecord(
            name=name,
            path=path,
            size=st.st_size,
            extension=file_extension(name),
            content_hash=content_hash,
        ))


def get_files(root: str, ext_filter: ExtensionFilter,
              hasher: Optional[HashComputer] = None) -> List[FileRecord]:
    """Walk root with default settings and return the collected records"""
    return FileWalker(ext_filter, hasher).walk(root)
