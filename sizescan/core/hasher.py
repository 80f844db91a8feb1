#!/usr/bin/env python3
"""
Content hashing for scanned files.

Files are streamed in fixed-size chunks so memory use stays flat regardless
of file size. Any failure to open or read a file is fatal for the scan and
surfaces as FileReadError.
"""

import hashlib
import logging
from pathlib import Path
from typing import Union

from .errors import FileReadError

# Optional imports
try:
    import xxhash
    XXHASH_AVAILABLE = True
except ImportError:
    XXHASH_AVAILABLE = False

logger = logging.getLogger(__name__)

ALGORITHMS = ("md5", "sha1", "sha256", "xxhash")
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MB


class HashComputer:
    """Compute hex digests of whole files"""

    def __init__(self, algorithm: str = "md5", chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm
        self.chunk_size = chunk_size
        self.bytes_read = 0

    def _get_hasher(self):
        """Get hasher for algorithm"""
        if self.algorithm == "md5":
            return hashlib.md5()
        elif self.algorithm == "sha1":
            return hashlib.sha1()
        elif self.algorithm == "sha256":
            return hashlib.sha256()
        elif self.algorithm == "xxhash" and XXHASH_AVAILABLE:
            return xxhash.xxh64()
        else:
            return hashlib.md5()

    def compute_full_hash(self, path: Union[str, Path]) -> str:
        """Stream a file through the hasher and return its lowercase hex digest"""
        hasher = self._get_hasher()
        try:
            with open(path, "rb") as f:
                while chunk := f.read(self.chunk_size):
                    hasher.update(chunk)
                    self.bytes_read += len(chunk)
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e

        return hasher.hexdigest()
