"""Exceptions raised by the scanning pipeline."""

from pathlib import Path
from typing import Union


class SizeScanError(Exception):
    """Base class for all SizeScan errors"""


class TraversalError(SizeScanError):
    """The scan root does not exist or cannot be walked"""


class FileReadError(SizeScanError):
    """A file could not be opened or read while hashing"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class InsufficientMembersError(SizeScanError):
    """A size group has fewer than two files to compare"""
