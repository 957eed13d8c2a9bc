"""File metadata columns and YAML colour themes for an ls-style lister."""

__version__ = "0.1.0"

__all__ = [
    "access_control",
    "colortheme",
    "filetype",
    "indicator",
    "inode",
    "links",
    "owner",
    "permissions",
    "size",
    "symlink",
    "themefile",
]