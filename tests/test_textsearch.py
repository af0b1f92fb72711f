import pytest

from minishell.textsearch import (
    in_single_quotes,
    replace_unquoted,
    strchr,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize(
    "haystack, needle",
    [("hello world", "world"), ("abcabc", "cab"), ("aaa", "a"), ("x=1;y=2", "y=")],
)
def test_strnstr_finds_needle(haystack, needle):
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_strnstr_empty_needle_is_index_zero():
    assert strnstr("anything", "", 3) == 0


def test_strnstr_needle_must_fit_in_limit():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack) - 1) is None
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")


def test_strnstr_missing_input_returns_none():
    assert strnstr(None, "a", 0) is None
    assert strnstr("a", None, 0) is None


def test_strnstr_negative_limit():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strchr_first_occurrence():
    text = "a/b/c"
    index = strchr(text, "/")
    assert text[index] == "/"
    assert "/" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_last_occurrence():
    text = "a/b/c"
    index = strrchr(text, "/")
    assert text[index] == "/"
    assert "/" not in text[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("abc", "z") is None
    assert strrchr("", "\0") == 0


def test_strchr_rejects_multiple_characters():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(ValueError):
        strrchr("abc", "")


def test_in_single_quotes():
    text = "'$a' $b"
    assert in_single_quotes(text, text.index("$a")) is True
    assert in_single_quotes(text, text.index("$b")) is False


def test_single_quote_inside_double_quotes_does_not_count():
    text = "\"'$a'\""
    assert in_single_quotes(text, text.index("$a")) is False


def test_replace_unquoted_first_occurrence_only():
    assert replace_unquoted("$A $A", "$A", "x") == "x $A"


def test_replace_unquoted_skips_single_quoted():
    assert replace_unquoted("'$A' $A", "$A", "x") == "'$A' x"


def test_replace_unquoted_only_quoted_gives_none():
    assert replace_unquoted("'$A'", "$A", "x") is None


def test_replace_unquoted_not_found():
    assert replace_unquoted("echo hi", "$HOME", "/root") is None


def test_replace_bare_dollar_with_empty_keeps_text():
    assert replace_unquoted("a $", "$", "") == "a $"


def test_replace_unquoted_length_invariant():
    text = "echo $USER done"
    result = replace_unquoted(text, "$USER", "someone")
    assert len(result) == len(text) - len("$USER") + len("someone")
    assert "$USER" not in result