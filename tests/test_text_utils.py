from __future__ import annotations

import re
import sys
from decimal import Decimal
from fractions import Fraction
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.errors import ParseError, PatternError
from gridkit.text_utils import (
    compile_pattern,
    filter_text,
    lines,
    parse_numeric,
    parse_numeric_grid,
    split,
    split_lines,
)

DELIMITERS = r",|\.|\|| "


def test_split_test():
    assert split("1,2.3|4 5", DELIMITERS) == ["1", "2", "3", "4", "5"]
    assert parse_numeric(split("1,2.3|4 5", DELIMITERS)) == [1, 2, 3, 4, 5]


def test_split_keeps_empty_tokens():
    assert split(",a,,b,", ",") == ["", "a", "", "b", ""]
    assert split("", ",") == [""]


def test_split_ignores_capture_groups():
    assert split("1a2b3", "(a|b)") == ["1", "2", "3"]


def test_split_accepts_compiled_pattern():
    assert split("x-y", re.compile("-")) == ["x", "y"]
    assert compile_pattern(DELIMITERS) is compile_pattern(DELIMITERS)


def test_invalid_pattern():
    with pytest.raises(PatternError) as excinfo:
        split("abc", "(")
    assert excinfo.value.pattern == "("
    assert isinstance(excinfo.value, ValueError)


def test_split_lines():
    assert split_lines("1 2\n3 4 5", " ") == [["1", "2"], ["3", "4", "5"]]
    assert split_lines("a b\nc", r"\s") == [["a", "b"], ["c"]]
    assert split_lines("", ",") == []


def test_filter_text():
    assert filter_text("a1b22c", r"\d") == "abc"
    assert filter_text("Game 1: 3 blue", r"[^0-9 ]") == " 1 3 "


def test_parse_numeric_kinds():
    assert parse_numeric(["1.5", "2"], float) == [1.5, 2.0]
    assert parse_numeric(["1/2", "3"], Fraction) == [Fraction(1, 2), Fraction(3)]
    assert parse_numeric(["-7", "+3"]) == [-7, 3]


def test_parse_numeric_reports_token():
    with pytest.raises(ParseError) as excinfo:
        parse_numeric(["1", "x", "3"])
    error = excinfo.value
    assert error.token == "x"
    assert error.index == 1
    assert error.kind == "int"
    assert "'x'" in str(error)


def test_parse_numeric_rejects_empty_token():
    with pytest.raises(ParseError) as excinfo:
        parse_numeric(split("1,,2", ","))
    assert excinfo.value.token == ""
    assert excinfo.value.index == 1


def test_parse_numeric_decimal_failure():
    with pytest.raises(ParseError) as excinfo:
        parse_numeric(["1.5", "abc"], Decimal)
    assert excinfo.value.kind == "Decimal"


def test_parse_numeric_grid():
    assert parse_numeric_grid(split_lines("1 2\n3 4", " ")) == [[1, 2], [3, 4]]
    with pytest.raises(ParseError) as excinfo:
        parse_numeric_grid([["1"], ["2", "z"]])
    assert excinfo.value.row == 1
    assert excinfo.value.index == 1


def test_lines_break_only_on_newlines():
    assert lines("a\x0cb\nc\r\nd\n") == ["a\x0cb", "c", "d"]
    assert lines("a\n\nb") == ["a", "", "b"]
    assert lines("a\n\n") == ["a", ""]
    assert lines("") == []
    assert lines("x y") == ["x y"]


def test_split_lines_keeps_form_feed_inside_line():
    assert split_lines("a b\x0cc d", " ") == [["a", "b\x0cc", "d"]]
    assert split_lines("1 2\r\n3 4\r\n", " ") == [["1", "2"], ["3", "4"]]


def test_parse_numeric_rejects_padded_and_underscored_tokens():
    for tokens, bad in ((["1", " 2"], " 2"), (["1_000"], "1_000"), (["3\n"], "3\n")):
        with pytest.raises(ParseError) as excinfo:
            parse_numeric(tokens)
        assert excinfo.value.token == bad
    with pytest.raises(ParseError):
        parse_numeric(["1.5 "], float)
