from lsdx.filetype import FileKind, FileType
from lsdx.indicator import Indicator


def test_directory_indicator():
    indicator = Indicator.from_file_type(FileType(FileKind.DIRECTORY))
    assert indicator.render(True) == "/"


def test_executable_file_indicator():
    indicator = Indicator.from_file_type(FileType(FileKind.FILE, exec=True))
    assert indicator.render(True) == "*"


def test_socket_indicator():
    indicator = Indicator.from_file_type(FileType(FileKind.SOCKET))
    assert indicator.render(True) == "="


def test_pipe_indicator():
    indicator = Indicator.from_file_type(FileType(FileKind.PIPE))
    assert indicator.render(True) == "|"


def test_symlink_indicator():
    assert Indicator.from_file_type(FileType(FileKind.SYMLINK, is_dir=False)).render(True) == "@"
    assert Indicator.from_file_type(FileType(FileKind.SYMLINK, is_dir=True)).render(True) == "@"


def test_not_represented_indicator():
    indicator = Indicator.from_file_type(FileType(FileKind.FILE, exec=False))
    assert indicator.render(True) == ""


def test_indicators_disabled():
    indicator = Indicator.from_file_type(FileType(FileKind.DIRECTORY))
    assert indicator.render(False) == ""