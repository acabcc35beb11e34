import pytest

from cubgrid.maps import default_map, split


def test_split_basic():
    assert split("111 101 111", " ") == ["111", "101", "111"]


def test_split_skips_repeated_and_edge_separators():
    assert split("  ab  cd ", " ") == ["ab", "cd"]


def test_split_only_separators_gives_empty_list():
    assert split("xxxx", "x") == []


def test_split_empty_string():
    assert split("", " ") == []


def test_split_without_separator_returns_whole():
    assert split("10001", " ") == ["10001"]


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_join_round_trip():
    words = ["1111", "1001", "1111"]
    assert split(" ".join(words), " ") == words


def test_default_map_shape():
    rows = default_map()
    assert len(rows) == 8
    assert all(len(row) == 16 for row in rows)


def test_default_map_content():
    rows = default_map()
    assert rows[0] == "1111111111111111"
    assert rows[1] == "1000110110111101"
    assert rows[-1] == "1111111111111111"
    assert set("".join(rows)) == {"0", "1"}


def test_default_map_is_fresh_each_call():
    first = default_map()
    first.append("junk")
    assert len(default_map()) == 8