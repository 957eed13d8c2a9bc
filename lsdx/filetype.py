"""The kind of a directory entry, as shown in the type column."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum

from .permissions import Permissions


class FileKind(Enum):
    """What sort of filesystem object an entry is."""

    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    PIPE = "pipe"
    SOCKET = "socket"
    SPECIAL = "special"


_MARKERS = {
    FileKind.DIRECTORY: ("d", "dir.no_uid"),
    FileKind.PIPE: ("|", "pipe"),
    FileKind.SYMLINK: ("l", "symlink.default"),
    FileKind.BLOCK_DEVICE: ("b", "block_device"),
    FileKind.CHAR_DEVICE: ("c", "char_device"),
    FileKind.SOCKET: ("s", "socket"),
    FileKind.SPECIAL: ("?", "special"),
}


@dataclass(frozen=True)
class FileType:
    """The kind of an entry with the flags that matter for display.

    ``uid`` is the setuid bit of files and directories, ``exec`` whether a
    file is executable and ``is_dir`` whether a symlink points at a directory.
    """

    kind: FileKind
    uid: bool = False
    exec: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(
        cls,
        st: os.stat_result,
        target_st: os.stat_result | None,
        permissions: Permissions | None,
    ) -> FileType:
        """Classify an entry from its ``lstat`` result.

        ``target_st`` is the stat of a symlink's target, ``None`` when the link
        is broken or the entry is not a link.
        """
        mode = st.st_mode
        setuid = permissions.setuid if permissions is not None else False
        if stat.S_ISREG(mode):
            executable = permissions.is_executable() if permissions is not None else False
            return cls(FileKind.FILE, uid=setuid, exec=executable)
        if stat.S_ISDIR(mode):
            return cls(FileKind.DIRECTORY, uid=setuid)
        if stat.S_ISFIFO(mode):
            return cls(FileKind.PIPE)
        if stat.S_ISLNK(mode):
            points_to_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
            return cls(FileKind.SYMLINK, is_dir=points_to_dir)
        if stat.S_ISCHR(mode):
            return cls(FileKind.CHAR_DEVICE)
        if stat.S_ISBLK(mode):
            return cls(FileKind.BLOCK_DEVICE)
        if stat.S_ISSOCK(mode):
            return cls(FileKind.SOCKET)
        return cls(FileKind.SPECIAL)

    def is_dirlike(self) -> bool:
        """Whether the entry is a directory or a symlink to one."""
        if self.kind is FileKind.DIRECTORY:
            return True
        return self.kind is FileKind.SYMLINK and self.is_dir

    def render(self) -> tuple[str, str]:
        """The one-character type marker and the dotted path of its colour in the file type theme."""
        if self.kind is FileKind.FILE:
            return ".", "file.exec_no_uid" if self.exec else "file.no_exec_no_uid"
        return _MARKERS[self.kind]