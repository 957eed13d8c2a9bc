"""Symbolic link targets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ARROW = "\u21d2"


@dataclass(frozen=True)
class SymLink:
    """The target of a symlink and whether it exists; ``target`` is ``None`` for non-links."""

    target: str | None = None
    valid: bool = False

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> SymLink:
        """Read the link at ``path``; relative targets are resolved from its directory."""
        try:
            target = os.readlink(path)
        except (OSError, ValueError):
            return cls()
        resolved = Path(path).parent / target
        return cls(target=target, valid=resolved.exists())

    def render(self, arrow: str = DEFAULT_ARROW) -> list[tuple[str, str | None]]:
        """The `` => target`` segments; the target is painted ``"default"`` or
        ``"missing_target"`` from the symlink theme, the arrow is unstyled."""
        if self.target is None:
            return []
        element = "default" if self.valid else "missing_target"
        return [(f" {arrow} ", None), (self.target, element)]