"""Reading colour themes from YAML text and theme files."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from .colortheme import ColorTheme


class ThemeError(Exception):
    """Base class of theme loading errors."""


class ThemeNotFoundError(ThemeError):
    """The theme file could not be read."""


class ThemeFormatError(ThemeError):
    """The theme file is not a valid theme."""


class ThemePathError(ThemeError):
    """The theme file path cannot be resolved."""


_NOT_FOUND = "Theme file not existed"
_INVALID_FORMAT = "Theme file format invalid"
_INVALID_PATH = "Theme file path invalid"


def parse_theme_yaml(yaml_text: str) -> ColorTheme:
    """Parse a colour theme from YAML; blank text gives the default theme."""
    if not yaml_text.strip():
        return ColorTheme.default_dark()
    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as exc:
        raise ThemeFormatError(_INVALID_FORMAT) from exc
    try:
        return ColorTheme.from_mapping(data)
    except ValueError as exc:
        raise ThemeFormatError(_INVALID_FORMAT) from exc


def _expand_home(file: str) -> str:
    if file == "~" or file.startswith("~/"):
        expanded = os.path.expanduser(file)
        if expanded.startswith("~"):
            raise ThemePathError(f"{_INVALID_PATH} {file}")
        return expanded
    return file


def load_theme(file: str, config_dir: str | os.PathLike[str] | None) -> ColorTheme:
    """Load a colour theme file.

    Absolute paths are used as given; relative ones are taken from
    ``config_dir``. The ``.yaml`` extension is tried first, then ``.yml``.
    """
    path = Path(_expand_home(file))
    if not path.is_absolute():
        if config_dir is None:
            raise ThemePathError(f"{_INVALID_PATH} config home not existed")
        path = Path(config_dir) / path

    error: ThemeError = ThemeError("Unknown Theme error")
    for ext in ("yaml", "yml"):
        try:
            candidate = path.with_suffix("." + ext)
        except ValueError as exc:
            raise ThemePathError(f"{_INVALID_PATH} {file}") from exc
        try:
            raw = candidate.read_bytes()
        except OSError as exc:
            error = ThemeNotFoundError(_NOT_FOUND)
            error.__cause__ = exc
            continue
        try:
            return parse_theme_yaml(raw.decode("utf-8", errors="replace"))
        except ThemeFormatError as exc:
            error = exc
    raise error