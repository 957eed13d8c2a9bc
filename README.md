# lsdx

Building blocks for a colourful `ls`-style directory lister. The package reads
the metadata of one path and turns each column (permissions, size, type marker,
indicator, inode, link count, owner, symlink target, access control) into text
tagged with the name of the theme colour it should be painted with. Colour
themes are loaded from YAML.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Columns

Each renderer returns plain text together with an element name. The element
names the field of the matching section of `ColorTheme` that colours the text;
`None` means unstyled.

- `lsdx.permissions.Permissions.from_mode(st_mode)` reads the twelve permission
  bits. `render(PermissionFlag.RWX)` gives nine `(text, element)` segments such
  as `("r", "read")`, `("S", "exec_sticky")` or `("-", "no_access")`;
  `render(PermissionFlag.OCTAL)` gives one segment such as `("0655", "octal")`.
  `is_executable()` is true if any execute bit is set.
- `lsdx.size.Size(bytes)` picks a `Unit` with `unit(flag)`. `value_string()`
  shows one decimal below ten units (`4.0`) and none above (`42`);
  `unit_string()` gives `KB`, `K` or nothing depending on the `SizeFlag`.
  `render(flag, val_alignment)` returns segments, right aligning the value and
  raising `ValueError` if the alignment is narrower than the value. Elements are
  `"small"`, `"medium"` or `"large"`.
- `lsdx.filetype.FileType.from_stat(st, target_st, permissions)` classifies an
  `lstat` result into a `FileKind`. `render()` returns the marker and a dotted
  path into `ColorTheme.file_type`, e.g. `(".", "file.no_exec_no_uid")` or
  `("d", "dir.no_uid")`. `is_dirlike()` is true for directories and links to
  directories.
- `lsdx.indicator.Indicator.from_file_type()` gives `/`, `*`, `|`, `=`, `@` or
  nothing; `render(display_indicators)` returns it, or `""` when off.
- `lsdx.inode.INode.from_stat()` and `lsdx.links.Links.from_stat()` render the
  number with `"valid"`, or `-` with `"invalid"` where the platform has none.
- `lsdx.owner.Owner.from_stat()` looks up user and group names, falling back to
  the numeric ids; `render_user()` and `render_group()` tag them `"user"` and
  `"group"`.
- `lsdx.symlink.SymLink.from_path()` reads a link target and checks that it
  exists, resolving relative targets from the link's directory.
  `render(arrow="⇒")` gives `[(" ⇒ ", None), (target, "default")]`, or
  `"missing_target"` for a dangling link, and `[]` for non-links.
- `lsdx.access_control.AccessControl.for_path()` reads the POSIX ACL, SELinux
  and SMACK extended attributes where the platform supports them.
  `render_method()` gives `+`, `.` or nothing; `render_context()` joins the
  contexts with `+`, or gives `?`.

## Example

```python
import os
from operator import attrgetter

from lsdx.colortheme import ColorTheme
from lsdx.filetype import FileType
from lsdx.permissions import Permissions, PermissionFlag
from lsdx.size import Size, SizeFlag

theme = ColorTheme.default_dark()
st = os.lstat("README.md")

perms = Permissions.from_mode(st.st_mode)
print("".join(text for text, _ in perms.render(PermissionFlag.RWX)))
print(perms.render(PermissionFlag.OCTAL)[0][0])

print("".join(text for text, _ in Size(st.st_size).render(SizeFlag.SHORT, None)))

marker, colour_path = FileType.from_stat(st, None, perms).render()
print(marker, attrgetter(colour_path)(theme.file_type))
```

## Colour themes

`lsdx.colortheme.ColorTheme` holds the default dark palette, also returned by
`ColorTheme.default_dark()`. `ColorTheme.from_mapping(data)` overlays a partial
mapping with kebab-case keys on the defaults and raises `ValueError` for an
unknown key or a bad colour. The file type colours are not read from theme
data. `parse_color()` accepts colour names such as `dark_green`, 256-colour
indices (`0`–`255`) and `[r, g, b]` triples, and returns a `Color`.

A theme file only needs the keys it changes:

```yaml
user: 130
permission:
  read: dark_green
  exec-sticky: 5
date:
  hour-old: [0, 255, 0]
```

`lsdx.themefile.parse_theme_yaml(text)` parses such text; blank text gives the
default theme. `lsdx.themefile.load_theme(file, config_dir)` expands a leading
`~`, resolves a relative name against `config_dir`, and reads the file with the
`.yaml` extension, then `.yml` if that fails. Problems raise
`ThemeNotFoundError`, `ThemeFormatError` or `ThemePathError`, all subclasses of
`ThemeError`.

```python
from lsdx.themefile import load_theme

theme = load_theme("colors", config_dir="/path/to/config")
```

## What the package does not do

There is no command-line program. The package does not render dates or file
names, does not build a combined record for a path, does not walk directories
and does not sort entries; it supplies the per-column pieces and the themes for
a lister built on top of it.