"""Unix permission bits and their rwx or octal rendering."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum

Segment = tuple[str, str]


class PermissionFlag(Enum):
    """How the permission column is shown."""

    RWX = "rwx"
    OCTAL = "octal"


def _octal_digit(r: bool, w: bool, x: bool) -> str:
    return str(int(r) * 4 + int(w) * 2 + int(x))


@dataclass(frozen=True)
class Permissions:
    """The twelve permission bits of a file.

    ``render`` returns ``(text, element)`` segments, where ``element`` names
    the permission colour of the theme to paint the text with.
    """

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> Permissions:
        """Read the bits out of an ``st_mode`` value."""

        def has(bit: int) -> bool:
            return mode & bit == bit

        return cls(
            user_read=has(stat.S_IRUSR),
            user_write=has(stat.S_IWUSR),
            user_execute=has(stat.S_IXUSR),
            group_read=has(stat.S_IRGRP),
            group_write=has(stat.S_IWGRP),
            group_execute=has(stat.S_IXGRP),
            other_read=has(stat.S_IROTH),
            other_write=has(stat.S_IWOTH),
            other_execute=has(stat.S_IXOTH),
            sticky=has(stat.S_ISVTX),
            setgid=has(stat.S_ISGID),
            setuid=has(stat.S_ISUID),
        )

    @staticmethod
    def _bit(enabled: bool, char: str, element: str) -> Segment:
        return (char, element) if enabled else ("-", "no_access")

    @staticmethod
    def _exec(execute: bool, special: bool, lower: str, upper: str) -> Segment:
        if special:
            return (lower if execute else upper), "exec_sticky"
        return ("x", "exec") if execute else ("-", "no_access")

    def render(self, flag: PermissionFlag = PermissionFlag.RWX) -> list[Segment]:
        """The permission column as coloured segments."""
        if flag is PermissionFlag.OCTAL:
            digits = "".join(
                (
                    _octal_digit(self.setuid, self.setgid, self.sticky),
                    _octal_digit(self.user_read, self.user_write, self.user_execute),
                    _octal_digit(self.group_read, self.group_write, self.group_execute),
                    _octal_digit(self.other_read, self.other_write, self.other_execute),
                )
            )
            return [(digits, "octal")]
        return [
            self._bit(self.user_read, "r", "read"),
            self._bit(self.user_write, "w", "write"),
            self._exec(self.user_execute, self.setuid, "s", "S"),
            self._bit(self.group_read, "r", "read"),
            self._bit(self.group_write, "w", "write"),
            self._exec(self.group_execute, self.setgid, "s", "S"),
            self._bit(self.other_read, "r", "read"),
            self._bit(self.other_write, "w", "write"),
            self._exec(self.other_execute, self.sticky, "t", "T"),
        ]

    def is_executable(self) -> bool:
        """Whether anyone may execute the file."""
        return self.user_execute or self.group_execute or self.other_execute