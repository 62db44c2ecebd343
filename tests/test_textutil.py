import pytest

from enginecommon.textutil import (
    describe,
    remove_line_comments,
    remove_whitespace,
    replace_char,
    tokenize,
)


def test_remove_line_comments_cuts_at_marker():
    code = "VERTEX"
    assert remove_line_comments(code + "//" + "trailing note", "//") == code


def test_remove_line_comments_first_marker_wins():
    code = "NFACES 2 "
    line = code + "// one // two"
    assert remove_line_comments(line, "//") == code


def test_remove_line_comments_without_marker_is_unchanged():
    line = "NVERTS 4"
    assert remove_line_comments(line, "//") == line


@pytest.mark.parametrize(
    "words",
    [["NVERTS", "4"], ["END"], ["1.0", "2.0", "3.0"]],
)
def test_melt_strips_ends_and_keeps_single_spaces(words):
    joined = " ".join(words)
    assert remove_whitespace("  \t" + joined + " \r\n", "melt") == joined


def test_melt_collapses_first_double_space():
    assert remove_whitespace("a  b", "melt") == " ".join(["a", "b"])


def test_melt_on_only_whitespace_gives_empty():
    assert remove_whitespace(" \t \n ", "melt") == ""


def test_leading_and_trailing_only():
    line = "\t x y \n"
    assert remove_whitespace(line, "lt") == line.strip()


def test_leading_only_without_inner_spaces():
    line = "   ab"
    assert remove_whitespace(line, "l") == line.lstrip()


def test_middle_and_trailing_removes_all_inner_spaces():
    line = "a b c"
    assert remove_whitespace(line, "mt") == line.replace(" ", "")


def test_all_but_extra_removes_every_space():
    line = "  a b \t c  "
    result = remove_whitespace(line, "lmt")
    assert result == "".join(line.split())


def test_empty_line():
    assert remove_whitespace("", "melt") == ""


def test_tokenize_multiple_delimiters():
    assert tokenize("a,b;c", ",;") == ["a", "b", "c"]


def test_tokenize_keeps_empty_tokens():
    assert tokenize(",", ",") == ["", ""]


def test_tokenize_round_trip():
    text = "one,,two,three,"
    assert ",".join(tokenize(text, ",")) == text


def test_tokenize_no_delimiters():
    assert tokenize("abc", "") == ["abc"]


def test_tokenize_count_is_delimiters_plus_one():
    text = "x/y/z//w"
    assert len(tokenize(text, "/")) == text.count("/") + 1


def test_replace_char():
    assert replace_char("a.b.c", ".", "/") == "a/b/c"


def test_replace_char_absent():
    assert replace_char("abc", "z", "y") == "abc"


def test_describe_reports_length_and_value():
    text = "hello"
    summary = describe(text)
    assert f"[length] {len(text)}" in summary
    assert f'"{text}"' in summary