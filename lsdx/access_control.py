"""Access control indicators: POSIX ACLs and SELinux/SMACK security contexts."""

from __future__ import annotations

import os
from dataclasses import dataclass

_ACL_ATTR = "system.posix_acl_access"
_SELINUX_ATTR = "security.selinux"
_SMACK_ATTR = "security.SMACK64"


def _read_xattr(path: str | os.PathLike[str], name: str) -> bytes:
    getxattr = getattr(os, "getxattr", None)
    if getxattr is None:
        return b""
    try:
        return bytes(getxattr(path, name))
    except OSError:
        return b""


@dataclass(frozen=True)
class AccessControl:
    """ACL presence and security contexts of a file.

    Render methods return ``(text, element)`` where ``element`` names the
    permission colour of the theme to paint the text with: ``"acl"`` or
    ``"context"``.
    """

    has_acl: bool
    selinux_context: str
    smack_context: str

    @classmethod
    def for_path(cls, path: str | os.PathLike[str]) -> AccessControl:
        """Read the access control attributes of ``path``; absent ones count as empty."""
        return cls.from_data(
            bool(_read_xattr(path, _ACL_ATTR)),
            _read_xattr(path, _SELINUX_ATTR),
            _read_xattr(path, _SMACK_ATTR),
        )

    @classmethod
    def from_data(
        cls, has_acl: bool, selinux_context: bytes, smack_context: bytes
    ) -> AccessControl:
        """Build from raw attribute values, decoding them leniently as UTF-8."""
        return cls(
            has_acl=has_acl,
            selinux_context=bytes(selinux_context).decode("utf-8", errors="replace"),
            smack_context=bytes(smack_context).decode("utf-8", errors="replace"),
        )

    def render_method(self) -> tuple[str, str]:
        """The one-character marker after the permission bits."""
        if self.has_acl:
            return "+", "acl"
        if self.selinux_context or self.smack_context:
            return ".", "context"
        return "", "acl"

    def render_context(self) -> tuple[str, str]:
        """The security context text, ``?`` when there is none."""
        context = "+".join(c for c in (self.selinux_context, self.smack_context) if c)
        return context or "?", "context"