"""Colour theme model and parsing of colour values from theme data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

NAMED_COLORS = frozenset(
    {
        "black",
        "dark_grey",
        "red",
        "dark_red",
        "green",
        "dark_green",
        "yellow",
        "dark_yellow",
        "blue",
        "dark_blue",
        "magenta",
        "dark_magenta",
        "cyan",
        "dark_cyan",
        "white",
        "grey",
    }
)

_EXPECTING = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)

_SKIP = {"skip": True}


def _is_u8(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named colour, an ANSI 256-palette index or an RGB triple."""

    name: str | None = None
    ansi: int | None = None
    rgb: tuple[int, int, int] | None = None

    def __post_init__(self) -> None:
        given = sum(part is not None for part in (self.name, self.ansi, self.rgb))
        if given != 1:
            raise ValueError("a colour needs exactly one of name, ansi or rgb")
        if self.name is not None and self.name not in NAMED_COLORS:
            raise ValueError(f"unknown colour name {self.name!r}")
        if self.ansi is not None and not _is_u8(self.ansi):
            raise ValueError(f"ANSI colour index out of range: {self.ansi!r}")
        if self.rgb is not None:
            if len(self.rgb) != 3 or not all(_is_u8(c) for c in self.rgb):
                raise ValueError(f"invalid RGB colour: {self.rgb!r}")
            object.__setattr__(self, "rgb", tuple(self.rgb))


def parse_color(value: Any) -> Color:
    """Turn a theme value (colour name, palette index or RGB list) into a Color."""
    if isinstance(value, bool):
        raise ValueError(f"invalid type: boolean `{value}`, expected {_EXPECTING}")
    if isinstance(value, str):
        name = value.lower()
        if name not in NAMED_COLORS:
            raise ValueError(f"invalid value: string {value!r}, expected {_EXPECTING}")
        return Color(name=name)
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"invalid value: integer `{value}`, expected {_EXPECTING}")
        return Color(ansi=value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ValueError(
                f"invalid length {len(value)}, expected a list of size 3(RGB)"
            )
        if not all(_is_u8(c) for c in value):
            raise ValueError(f"invalid RGB component in {list(value)!r}, expected u8")
        return Color(rgb=tuple(value))
    raise ValueError(f"invalid type: {type(value).__name__}, expected {_EXPECTING}")


@dataclass
class Permission:
    """Colours of the permission column."""

    read: Color = Color(name="dark_green")
    write: Color = Color(name="dark_yellow")
    exec: Color = Color(name="dark_red")
    exec_sticky: Color = Color(ansi=5)
    no_access: Color = Color(ansi=245)
    octal: Color = Color(ansi=6)
    acl: Color = Color(name="dark_cyan")
    context: Color = Color(name="cyan")


@dataclass
class FileColors:
    """Colours of regular files by executable and setuid bits."""

    exec_uid: Color = Color(ansi=40)
    uid_no_exec: Color = Color(ansi=184)
    exec_no_uid: Color = Color(ansi=40)
    no_exec_no_uid: Color = Color(ansi=184)


@dataclass
class DirColors:
    """Colours of directories."""

    uid: Color = Color(ansi=33)
    no_uid: Color = Color(ansi=33)


@dataclass
class SymlinkColors:
    """Colours of symbolic links."""

    default: Color = Color(ansi=44)
    broken: Color = Color(ansi=124)
    missing_target: Color = Color(ansi=124)


@dataclass
class FileTypeColors:
    """Colours of the file type markers and names."""

    file: FileColors = field(default_factory=FileColors)
    dir: DirColors = field(default_factory=DirColors)
    pipe: Color = Color(ansi=44)
    symlink: SymlinkColors = field(default_factory=SymlinkColors)
    block_device: Color = Color(ansi=44)
    char_device: Color = Color(ansi=172)
    socket: Color = Color(ansi=44)
    special: Color = Color(ansi=44)


@dataclass
class DateColors:
    """Colours of dates by age."""

    hour_old: Color = Color(ansi=40)
    day_old: Color = Color(ansi=42)
    older: Color = Color(ansi=36)


@dataclass
class SizeColors:
    """Colours of sizes by magnitude."""

    none: Color = Color(ansi=245)
    small: Color = Color(ansi=229)
    medium: Color = Color(ansi=216)
    large: Color = Color(ansi=172)


@dataclass
class INodeColors:
    """Colours of the inode column."""

    valid: Color = Color(ansi=13)
    invalid: Color = Color(ansi=245)


@dataclass
class LinksColors:
    """Colours of the hard link count column."""

    valid: Color = Color(ansi=13)
    invalid: Color = Color(ansi=245)


def _section_from_mapping(section_type: type, data: Any, where: str) -> Any:
    instance = section_type()
    if not isinstance(data, Mapping):
        place = where or "theme"
        raise ValueError(f"{place}: expected a mapping, got {type(data).__name__}")
    known = {
        f.name.replace("_", "-"): f for f in fields(section_type) if not f.metadata.get("skip")
    }
    changes: dict[str, Any] = {}
    for key, value in data.items():
        spec = known.get(key) if isinstance(key, str) else None
        path = f"{where}.{key}" if where else str(key)
        if spec is None:
            expected = ", ".join(f"`{k}`" for k in known)
            raise ValueError(f"unknown field `{path}`, expected one of {expected}")
        current = getattr(instance, spec.name)
        if isinstance(current, Color):
            try:
                changes[spec.name] = parse_color(value)
            except ValueError as exc:
                raise ValueError(f"{path}: {exc}") from None
        else:
            changes[spec.name] = _section_from_mapping(type(current), value, path)
    return replace(instance, **changes)


@dataclass
class ColorTheme:
    """The whole colour configuration."""

    user: Color = Color(ansi=230)
    group: Color = Color(ansi=187)
    permission: Permission = field(default_factory=Permission)
    date: DateColors = field(default_factory=DateColors)
    size: SizeColors = field(default_factory=SizeColors)
    inode: INodeColors = field(default_factory=INodeColors)
    tree_edge: Color = Color(ansi=245)
    links: LinksColors = field(default_factory=LinksColors)
    file_type: FileTypeColors = field(default_factory=FileTypeColors, metadata=_SKIP)

    @classmethod
    def default_dark(cls) -> ColorTheme:
        """The default theme for dark terminals."""
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ColorTheme:
        """Build a theme from kebab-case keyed data; missing keys keep their defaults."""
        if data is None:
            return cls.default_dark()
        return _section_from_mapping(cls, data, "")