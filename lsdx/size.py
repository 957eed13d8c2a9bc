"""File sizes and their human readable rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

KB = 1024
MB = 1024**2
GB = 1024**3
TB = 1024**4

Segment = tuple[str, "str | None"]


class SizeFlag(Enum):
    """How sizes are shown."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


class Unit(Enum):
    """The unit a size is shown in, with its number of bytes."""

    BYTE = 1
    KILO = KB
    MEGA = MB
    GIGA = GB
    TERA = TB


_LONG_UNITS = {Unit.BYTE: "B", Unit.KILO: "KB", Unit.MEGA: "MB", Unit.GIGA: "GB", Unit.TERA: "TB"}
_SHORT_UNITS = {Unit.BYTE: "B", Unit.KILO: "K", Unit.MEGA: "M", Unit.GIGA: "G", Unit.TERA: "T"}


def _format_number(number: float) -> str:
    return f"{number:.1f}" if number < 10.0 else f"{number:.0f}"


@dataclass(frozen=True)
class Size:
    """A size in bytes.

    ``render`` returns ``(text, element)`` segments, where ``element`` names
    the size colour of the theme (``"small"``, ``"medium"`` or ``"large"``)
    or is ``None`` for unstyled text.
    """

    bytes: int

    def unit(self, flag: SizeFlag = SizeFlag.DEFAULT) -> Unit:
        """The unit the size is shown in."""
        if flag is SizeFlag.BYTES or self.bytes < KB:
            return Unit.BYTE
        if self.bytes < MB:
            return Unit.KILO
        if self.bytes < GB:
            return Unit.MEGA
        if self.bytes < TB:
            return Unit.GIGA
        return Unit.TERA

    def _element(self, flag: SizeFlag) -> str:
        unit = self.unit(flag)
        if unit in (Unit.BYTE, Unit.KILO):
            return "small"
        if unit is Unit.MEGA:
            return "medium"
        return "large"

    def value_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The number part: whole bytes, or one decimal below ten units."""
        unit = self.unit(flag)
        if unit is Unit.BYTE:
            return str(self.bytes)
        scaled = (self.bytes / unit.value) * 10.0
        return _format_number(math.floor(scaled + 0.5) / 10.0)

    def unit_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The unit suffix for ``flag``."""
        if flag is SizeFlag.BYTES:
            return ""
        table = _SHORT_UNITS if flag is SizeFlag.SHORT else _LONG_UNITS
        return table[self.unit(flag)]

    def render(
        self, flag: SizeFlag = SizeFlag.DEFAULT, val_alignment: int | None = None
    ) -> list[Segment]:
        """The size column, right aligning the value to ``val_alignment`` characters."""
        value = self.value_string(flag)
        element = self._element(flag)
        padding = ""
        if val_alignment is not None:
            if val_alignment < len(value):
                raise ValueError(
                    f"alignment {val_alignment} is narrower than value {value!r}"
                )
            padding = " " * (val_alignment - len(value))
        segments: list[Segment] = [(padding, None), (value, element)]
        if flag is not SizeFlag.SHORT:
            segments.append((" ", None))
        segments.append((self.unit_string(flag), element))
        return segments