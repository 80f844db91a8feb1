"""
SizeScan - Directory Size Grouping and Duplicate Finder

Scans a directory tree, groups files by exact byte size and, on request,
reports files within each size group that share a content hash.
"""

__version__ = "1.0.0"
__author__ = "SizeScan Team"
__email__ = "info@sizescan.dev"
__license__ = "MIT"

from .core import config, detector, filters, grouper, hasher, models, walker

__all__ = [
    "config",
    "detector",
    "filters",
    "grouper",
    "hasher",
    "models",
    "walker",
]
