"""File owner and group names."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _user_name(uid: int) -> str:
    try:
        import pwd
    except ImportError:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        import grp
    except ImportError:
        return str(gid)
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


@dataclass(frozen=True)
class Owner:
    """The owning user and group of an entry, by name or by number when unknown."""

    user: str
    group: str

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Owner:
        """Look up the owner and group names of a stat result."""
        return cls(_user_name(st.st_uid), _group_name(st.st_gid))

    def render_user(self) -> tuple[str, str]:
        """The user name and the theme colour it is painted with."""
        return self.user, "user"

    def render_group(self) -> tuple[str, str]:
        """The group name and the theme colour it is painted with."""
        return self.group, "group"