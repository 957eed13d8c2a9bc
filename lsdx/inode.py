"""Inode numbers."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class INode:
    """The inode number of an entry, ``None`` where the platform has none."""

    index: int | None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> INode:
        """Take the inode number from a stat result."""
        if os.name == "nt":
            return cls(None)
        return cls(st.st_ino)

    def render(self) -> tuple[str, str]:
        """The inode text and its inode colour (``"valid"`` or ``"invalid"``)."""
        if self.index is None:
            return "-", "invalid"
        return str(self.index), "valid"