#!/usr/bin/env python3
"""
Extension filter for the file walker.

The user's token is stored with a leading dot so that an empty token becomes
the bare "." sentinel, which disables filtering.
"""

import os
from pathlib import Path
from typing import Union

NO_FILTER = "."


def file_extension(path: Union[str, Path]) -> str:
    """Everything from the last dot of the final path element, or ''.

    Dotfiles keep their whole name: '.gitignore' has extension '.gitignore'.
    """
    name = os.path.basename(os.fspath(path))
    i = name.rfind(".")
    return name[i:] if i >= 0 else ""


class ExtensionFilter:
    """Accept only paths whose extension equals the requested one"""

    def __init__(self, token: str = ""):
        self.value = "." + token

    def should_filter(self) -> bool:
        return self.value != NO_FILTER

    def matches(self, path: Union[str, Path]) -> bool:
        """Check if a path passes the filter (case-sensitive)"""
        if not self.should_filter():
            return True
        return file_extension(path) == self.value

    def __repr__(self) -> str:
        return f"ExtensionFilter({self.value!r})"
