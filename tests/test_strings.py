import pytest

from minishell.strings import (
    split,
    strdup,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def _upper_if_even(index, char):
    return char.upper() if index % 2 == 0 else char


# strdup


def test_strdup_copies_text():
    original = "Hello, world!"
    assert strdup(original) == original


def test_strdup_none_gives_empty():
    assert strdup(None) == ""


def test_strdup_stops_at_nul():
    assert strdup("abc\0def") == "abc"


# substr


def test_substr_source_example():
    assert substr("Hello, World", 3, 5) == "lo, W"


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped_to_end():
    text = "Hello"
    assert substr(text, 2, 100) == text[2:]


def test_substr_result_length_bounded():
    text = "minishell"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            result = substr(text, start, length)
            assert len(result) <= length
            assert text.find(result, start) in (start, -1) or result == ""


def test_substr_none_gives_none():
    assert substr(None, 0, 3) is None


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


# strjoin


def test_strjoin_source_example():
    assert strjoin("Hello, World", "Hello") == "Hello, WorldHello"


def test_strjoin_prefix_and_suffix_preserved():
    a, b = "left", "right"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_none_argument():
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


def test_strjoin_with_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


# strtrim


def test_strtrim_source_example():
    assert strtrim(" Hello, World ", " ") == "Hello, World"


def test_strtrim_multiple_chars():
    assert strtrim("xxyabcyx", "xy") == "abc"


def test_strtrim_everything_trimmed():
    assert strtrim("    ", " ") == ""


def test_strtrim_empty_set_keeps_text():
    text = "  padded  "
    assert strtrim(text, "") == text


def test_strtrim_inner_chars_kept():
    assert strtrim(" a b ", " ") == "a b"


def test_strtrim_none_arguments():
    assert strtrim(None, " ") is None
    assert strtrim("abc", None) is None


# split


def test_split_source_example():
    assert split("what hello world", " ") == ["what", "hello", "world"]


def test_split_drops_empty_pieces():
    assert split("  a   b  ", " ") == ["a", "b"]


def test_split_env_entry():
    assert split("PATH=/bin:/usr/bin", "=") == ["PATH", "/bin:/usr/bin"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_empty_text():
    assert split("", " ") == []


def test_split_nul_separator_keeps_whole():
    assert split("abc", "\0") == ["abc"]


def test_split_pieces_contain_no_separator():
    text = "a:bb::ccc:"
    pieces = split(text, ":")
    assert all(":" not in piece and piece for piece in pieces)
    assert "".join(pieces) == text.replace(":", "")


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


# strmapi


def test_strmapi_source_example():
    assert strmapi("hello", _upper_if_even) == "HeLlO"


def test_strmapi_identity():
    text = "unchanged"
    assert strmapi(text, lambda index, char: char) == text


def test_strmapi_none_gives_none():
    assert strmapi(None, _upper_if_even) is None


def test_strmapi_rejects_bad_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda index, char: char * 2)


# striteri


def test_striteri_source_example():
    chars = list("hello")
    striteri(chars, _upper_if_even)
    assert "".join(chars) == "HeLlO"


def test_striteri_none_result_keeps_char():
    chars = list("abc")
    seen = []
    striteri(chars, lambda index, char: seen.append((index, char)))
    assert chars == list("abc")
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_striteri_stops_at_nul():
    chars = ["a", "\0", "b"]
    striteri(chars, lambda index, char: char.upper())
    assert chars == ["A", "\0", "b"]


def test_striteri_empty_or_missing_does_nothing():
    calls = []
    empty = []
    striteri(empty, lambda index, char: calls.append(index))
    striteri(None, lambda index, char: calls.append(index))
    chars = list("ab")
    striteri(chars, None)
    assert calls == []
    assert empty == []
    assert chars == ["a", "b"]