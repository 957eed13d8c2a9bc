import os

from lsdx.colortheme import Color, SymlinkColors
from lsdx.symlink import SymLink


def _text(segments):
    return "".join(text for text, _ in segments)


def test_symlink_render_default_valid_target_nocolor():
    link = SymLink(target="/target", valid=True)
    assert _text(link.render()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_nocolor():
    link = SymLink(target="/target", valid=False)
    assert _text(link.render()) == " ⇒ /target"


def test_symlink_render_default_invalid_target_withcolor():
    link = SymLink(target="/target", valid=False)
    segments = link.render()
    assert segments[0] == (" ⇒ ", None)
    text, element = segments[1]
    assert text == "/target"
    assert getattr(SymlinkColors(), element) == Color(ansi=124)


def test_valid_target_colour():
    _, element = SymLink(target="/target", valid=True).render()[1]
    assert getattr(SymlinkColors(), element) == Color(ansi=44)


def test_custom_arrow():
    assert _text(SymLink(target="t", valid=True).render("->")) == " -> t"


def test_not_a_link_renders_nothing(tmp_path):
    path = tmp_path / "plain"
    path.touch()
    link = SymLink.from_path(path)
    assert link == SymLink(target=None, valid=False)
    assert link.render() == []


def test_relative_link_resolved_from_parent(tmp_path):
    (tmp_path / "real.txt").touch()
    os.symlink("real.txt", tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link == SymLink(target="real.txt", valid=True)


def test_absolute_link(tmp_path):
    target = tmp_path / "real.txt"
    target.touch()
    os.symlink(target, tmp_path / "link")
    assert SymLink.from_path(tmp_path / "link") == SymLink(target=str(target), valid=True)


def test_broken_link(tmp_path):
    os.symlink("missing", tmp_path / "link")
    link = SymLink.from_path(tmp_path / "link")
    assert link.target == "missing"
    assert link.valid is False