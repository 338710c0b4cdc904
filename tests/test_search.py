import pytest

from minishell.search import (
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_counts_characters():
    assert strlen("") == 0
    assert strlen("OpenAI") == len("OpenAI")


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == 2


def test_strchr_first_occurrence():
    text = "Hello, World!"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_nul_gives_length():
    text = "Hello, World!"
    assert strchr(text, "\0") == len(text)


def test_strchr_missing_is_none():
    assert strchr("Hello", "z") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("Hello", "ll")


def test_strrchr_last_occurrence():
    text = "Hello, World!"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "z") is None


def test_strncmp_difference():
    assert strncmp("what", "whau", 4) == ord("t") - ord("u")
    assert strncmp("whau", "what", 4) == ord("u") - ord("t")


def test_strncmp_within_limit_is_zero():
    assert strncmp("what", "whau", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_shorter_string():
    assert strncmp("abc", "abcd", 4) == -ord("d")
    assert strncmp("abcd", "abc", 4) == ord("d")


def test_strnstr_finds_needle():
    haystack = "Hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_needle_must_fit_in_length():
    assert strnstr("Hello world", "world", len("Hello world") - 1) is None


def test_strnstr_empty_needle_is_start():
    assert strnstr("Hello", "", 0) == 0


def test_strlcpy_truncates():
    src = "Hello, World!"
    copied, length = strlcpy(src, 10)
    assert copied == src[:9]
    assert length == len(src)


def test_strlcpy_size_zero_and_large():
    assert strlcpy("abc", 0) == ("", len("abc"))
    assert strlcpy("abc", 100) == ("abc", len("abc"))


def test_strlcat_appends_when_room():
    result, total = strlcat("Hello", " World!", 20)
    assert result == "Hello" + " World!"
    assert total == len("Hello") + len(" World!")


def test_strlcat_truncates_to_size():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("Hello", "abc", 5)
    assert result == "Hello"
    assert total == len("Hello") + len("abc")
    result, total = strlcat("Hello", "x", 3)
    assert result == "Hello"
    assert total == 3 + len("x")