"""The trailing type indicator of a name, as in ``ls -F``."""

from __future__ import annotations

from dataclasses import dataclass

from .filetype import FileKind, FileType

_BY_KIND = {
    FileKind.DIRECTORY: "/",
    FileKind.PIPE: "|",
    FileKind.SOCKET: "=",
    FileKind.SYMLINK: "@",
}


@dataclass(frozen=True)
class Indicator:
    """The indicator character of an entry, possibly empty."""

    symbol: str

    @classmethod
    def from_file_type(cls, file_type: FileType) -> Indicator:
        """The indicator for a file type."""
        if file_type.kind is FileKind.FILE:
            return cls("*" if file_type.exec else "")
        return cls(_BY_KIND.get(file_type.kind, ""))

    def render(self, display_indicators: bool) -> str:
        """The unstyled indicator text, empty when indicators are off."""
        return self.symbol if display_indicators else ""