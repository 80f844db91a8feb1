"""
SizeScan Core Modules

Traversal, hashing, size grouping and duplicate detection.
"""

from . import config
from . import detector
from . import errors
from . import filters
from . import grouper
from . import hasher
from . import models
from . import walker

__all__ = [
    "config",
    "detector",
    "errors",
    "filters",
    "grouper",
    "hasher",
    "models",
    "walker",
]
