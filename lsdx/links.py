"""Hard link counts."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Links:
    """The hard link count of an entry, ``None`` where the platform has none."""

    nlink: int | None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Links:
        """Take the link count from a stat result."""
        if os.name == "nt":
            return cls(None)
        return cls(st.st_nlink)

    def render(self) -> tuple[str, str]:
        """The link count text and its links colour (``"valid"`` or ``"invalid"``)."""
        if self.nlink is None:
            return "-", "invalid"
        return str(self.nlink), "valid"