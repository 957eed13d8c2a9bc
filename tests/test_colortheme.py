import pytest

from lsdx.colortheme import (
    Color,
    ColorTheme,
    DateColors,
    Permission,
    SymlinkColors,
    parse_color,
)

DEFAULT_DATA = {
    "user": 230,
    "group": 187,
    "permission": {
        "read": "dark_green",
        "write": "dark_yellow",
        "exec": "dark_red",
        "exec-sticky": 5,
        "no-access": 245,
    },
    "date": {"hour-old": 40, "day-old": 42, "older": 36},
    "size": {"none": 245, "small": 229, "medium": 216, "large": 172},
    "inode": {"valid": 13, "invalid": 245},
    "links": {"valid": 13, "invalid": 245},
    "tree-edge": 245,
}


def test_default_data_equals_default_dark():
    assert ColorTheme.from_mapping(DEFAULT_DATA) == ColorTheme.default_dark()


def test_default_dark_equals_plain_construction():
    assert ColorTheme.default_dark() == ColorTheme()


def test_none_returns_default():
    assert ColorTheme.from_mapping(None) == ColorTheme.default_dark()


def test_first_level_change():
    theme = ColorTheme.from_mapping({"user": 130})
    expected = ColorTheme.default_dark()
    expected.user = Color(ansi=130)
    assert theme == expected


def test_second_level_change():
    theme = ColorTheme.from_mapping({"permission": {"read": 130}})
    expected = ColorTheme.default_dark()
    expected.permission.read = Color(ansi=130)
    assert theme == expected


def test_default_permission_colors():
    perm = Permission()
    assert perm.acl == Color(name="dark_cyan")
    assert perm.context == Color(name="cyan")
    assert perm.exec_sticky == Color(ansi=5)


def test_default_file_type_colors():
    theme = ColorTheme.default_dark()
    assert theme.file_type.dir.no_uid == Color(ansi=33)
    assert theme.file_type.file.no_exec_no_uid == Color(ansi=184)
    assert theme.file_type.symlink == SymlinkColors()
    assert theme.file_type.char_device == Color(ansi=172)


def test_default_date_colors():
    assert DateColors() == DateColors(
        hour_old=Color(ansi=40), day_old=Color(ansi=42), older=Color(ansi=36)
    )


def test_parse_color_name_is_case_insensitive():
    assert parse_color("Dark_Cyan") == Color(name="dark_cyan")


def test_parse_color_index():
    assert parse_color(255) == Color(ansi=255)


def test_parse_color_rgb():
    assert parse_color([1, 2, 3]) == Color(rgb=(1, 2, 3))


@pytest.mark.parametrize(
    "value", [256, -1, "purple", [1, 2], [1, 2, 3, 4], [1, 2, 300], True, 1.5, None]
)
def test_parse_color_rejects(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_unknown_field_rejected():
    with pytest.raises(ValueError, match="colour-of-nothing"):
        ColorTheme.from_mapping({"colour-of-nothing": 1})


def test_skipped_file_type_rejected():
    with pytest.raises(ValueError):
        ColorTheme.from_mapping({"file-type": {}})


def test_snake_case_key_rejected():
    with pytest.raises(ValueError):
        ColorTheme.from_mapping({"tree_edge": 1})


def test_nested_unknown_field_rejected():
    with pytest.raises(ValueError, match="permission.bogus"):
        ColorTheme.from_mapping({"permission": {"bogus": 1}})


def test_section_must_be_mapping():
    with pytest.raises(ValueError):
        ColorTheme.from_mapping({"permission": 3})


def test_bad_color_value_names_location():
    with pytest.raises(ValueError, match="date.older"):
        ColorTheme.from_mapping({"date": {"older": 999}})


def test_color_requires_exactly_one_part():
    with pytest.raises(ValueError):
        Color(name="red", ansi=1)