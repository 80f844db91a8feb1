"""Text rendering of size groups and duplicate groups."""

import sys
from typing import Iterable, Optional, TextIO

from ..core.models import DuplicateGroup, SizeGroup


def render_size_group(group: SizeGroup) -> str:
    lines = ["", f"{group.size} bytes"]
    lines.extend(record.path for record in group.files)
    return "\n".join(lines)


def render_duplicate_group(group: DuplicateGroup) -> str:
    lines = ["", f"{group.size} bytes", f"Hash: {group.hash_val}"]
    lines.extend(f"{entry.number}. {entry.file.path}" for entry in group.entries)
    # Trailing newline leaves a blank line after each group
    return "\n".join(lines) + "\n"


def print_size_groups(groups: Iterable[SizeGroup], out: Optional[TextIO] = None) -> None:
    for group in groups:
        print(render_size_group(group), file=out or sys.stdout)


def print_duplicate_groups(groups: Iterable[DuplicateGroup], out: Optional[TextIO] = None) -> None:
    for group in groups:
        print(render_duplicate_group(group), file=out or sys.stdout)
