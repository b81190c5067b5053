from __future__ import annotations

import pytest

from csvtable.io.text import count_columns, format_table_text, join_line, parse_table_text, split_line


def test_count_columns_from_header_line():
    assert count_columns("a,b,c", ",") == 3
    assert count_columns("abc", ",") == 1
    assert count_columns(",", ",") == 2
    assert count_columns("", ",") == 0


def test_split_line_drops_extra_tokens_and_pads_missing_ones():
    assert split_line("1,2,3", ",", 3) == ("1", "2", "3")
    assert split_line("1,2,3,4,5", ",", 3) == ("1", "2", "3")
    assert split_line("1", ",", 3) == ("1", "", "")
    assert split_line("", ",", 2) == ("", "")
    assert split_line("anything", ",", 0) == ()


def test_split_line_keeps_carriage_return_on_last_field():
    assert split_line("1,2\r", ",", 2) == ("1", "2\r")


def test_join_line_has_no_quoting():
    assert join_line(["a", "b,c"], ",") == "a,b,c\n"
    assert join_line([], ",") == "\n"


def test_parse_trailing_newline_does_not_add_an_empty_row():
    header, rows = parse_table_text("a,b\n1,2\n")
    assert header == ("a", "b")
    assert rows == [("1", "2")]


def test_parse_unterminated_last_line_is_a_row():
    header, rows = parse_table_text("a,b\n1,2\n3,4")
    assert rows == [("1", "2"), ("3", "4")]


def test_parse_blank_middle_line_becomes_empty_fields():
    _, rows = parse_table_text("a,b\n\n1,2\n")
    assert rows == [("", ""), ("1", "2")]


@pytest.mark.parametrize("text", ["", "\n"])
def test_parse_empty_input(text):
    assert parse_table_text(text) == ((), [])


def test_parse_with_custom_separator():
    header, rows = parse_table_text("a;b\n1,5;2\n", ";")
    assert header == ("a", "b")
    assert rows == [("1,5", "2")]


def test_format_matches_documented_example():
    text = format_table_text(["a", "b", "c"], [["1", "2", "3"], ["4", "5", "6"]])
    assert text == "a,b,c\n1,2,3\n4,5,6\n"


def test_format_rejects_bad_separator():
    with pytest.raises(ValueError, match=r"single character"):
        format_table_text(["a"], [], "::")
