import pytest

from autopointing.pathutil import base_directory, comp_path, to_absolute_path


def test_base_directory_finds_last_separator():
    path = "C:\\hoge\\fuga.txt"
    index = base_directory(path)
    assert index == path.rindex("\\")


def test_base_directory_forward_slashes():
    path = "/usr/local/bin"
    index = base_directory(path)
    assert index == path.rindex("/")


def test_base_directory_empty_is_none():
    assert base_directory("") is None


def test_base_directory_without_separator_returns_last():
    assert base_directory("abc") is None
    assert base_directory("abc", 2) == 2


def test_base_directory_stops_at_drive_colon():
    assert base_directory("C:\\x", 2) == 2


def test_base_directory_strip_trailing_moves_up():
    path = "C:\\a\\b\\"
    last = len(path) - 1
    stripped = base_directory(path, last, True)
    kept = base_directory(path, last, False)
    assert kept == last
    assert stripped == path.rindex("\\", 0, last)


def test_to_absolute_simple_name():
    current = "C:\\dir"
    assert to_absolute_path(current, "file.xml") == current + "\\" + "file.xml"


def test_to_absolute_trailing_separator_in_current():
    assert to_absolute_path("C:\\dir\\", "file.xml") == to_absolute_path("C:\\dir", "file.xml")


def test_to_absolute_dot_prefix_removed():
    current = "C:\\dir"
    assert to_absolute_path(current, ".\\f.txt") == current + "\\" + "f.txt"


def test_to_absolute_parent():
    assert to_absolute_path("C:\\dir\\sub", "..\\file.xml") == "C:\\dir\\file.xml"


def test_to_absolute_parent_forward_slash_consistent():
    assert to_absolute_path("/home/u", "../f") == to_absolute_path("/home", "f")


def test_to_absolute_parent_stops_at_drive():
    assert to_absolute_path("C:\\a", "..\\..\\f") == to_absolute_path("C:\\a", "..\\f")


def test_to_absolute_already_absolute_returned():
    assert to_absolute_path("C:\\dir", "D:\\other\\x.txt") == "D:\\other\\x.txt"


def test_to_absolute_root_on_drive():
    assert to_absolute_path("C:\\dir\\sub", "\\x") == "C:\\x"


def test_to_absolute_root_on_host():
    assert to_absolute_path("http://host/a/b", "/x") == "http://host/x"


def test_to_absolute_root_on_bare_host():
    assert to_absolute_path("http://host", "/x") == "http://host" + "/x"


def test_to_absolute_root_without_separator_raises():
    with pytest.raises(ValueError):
        to_absolute_path("nowhere", "/x")


def test_comp_path_source_example():
    assert comp_path("c:\\Program\\bin\\hoge.exe", "c:\\Program\\*") is True


def test_comp_path_ignores_case_and_separator_kind():
    assert comp_path("C:/PROGRAM/x", "c:\\program\\x") is True


def test_comp_path_question_mark():
    assert comp_path("abc", "a?c") is True
    assert comp_path("ac", "a?c") is False


def test_comp_path_star_in_middle():
    assert comp_path("abbbc", "a*c") is True
    assert comp_path("abbbd", "a*c") is False


def test_comp_path_lengths_must_agree():
    assert comp_path("abc", "ab") is False
    assert comp_path("ab", "abc") is False


def test_comp_path_star_matches_anything():
    assert comp_path("", "*") is True
    assert comp_path("whatever", "**") is True


def test_comp_path_none_is_false():
    assert comp_path(None, "x") is False
    assert comp_path("x", None) is False