import os

from lsdx.colortheme import Color, LinksColors
from lsdx.links import Links


def test_hardlinks_no_zero(tmp_path):
    path = tmp_path / "file.tmp"
    path.touch()
    links = Links.from_stat(os.stat(path))
    assert links.nlink == 1


def test_hardlink_counted(tmp_path):
    path = tmp_path / "file.tmp"
    path.touch()
    os.link(path, tmp_path / "other.tmp")
    assert Links.from_stat(os.stat(path)).render()[0] == "2"


def test_render_valid():
    text, element = Links(3).render()
    assert text == "3"
    assert getattr(LinksColors(), element) == Color(ansi=13)


def test_render_invalid():
    text, element = Links(None).render()
    assert text == "-"
    assert getattr(LinksColors(), element) == Color(ansi=245)