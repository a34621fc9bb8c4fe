import pytest

from mostools.args import ParsedArgs, UsageError, parse_args


def test_separate_flags_and_operand():
    parsed = parse_args(["-a", "-b", "file"])
    assert parsed.options == [("a", None), ("b", None)]
    assert parsed.operands == ["file"]


def test_bundled_flags():
    assert parse_args(["-ab"]).options == [("a", None), ("b", None)]


def test_value_attached():
    parsed = parse_args(["-ofile", "rest"], "o")
    assert parsed.options == [("o", "file")]
    assert parsed.operands == ["rest"]


def test_value_in_next_argument():
    parsed = parse_args(["-o", "file", "rest"], "o")
    assert parsed.options == [("o", "file")]
    assert parsed.operands == ["rest"]


def test_value_flag_ends_bundle():
    parsed = parse_args(["-aob"], "o")
    assert parsed.options == [("a", None), ("o", "b")]


def test_value_flag_last_in_bundle_takes_next():
    parsed = parse_args(["-ao", "x"], "o")
    assert parsed.options == [("a", None), ("o", "x")]
    assert parsed.operands == []


def test_double_dash_stops_and_is_consumed():
    parsed = parse_args(["-a", "--", "-b"])
    assert parsed.options == [("a", None)]
    assert parsed.operands == ["-b"]


def test_single_dash_is_operand():
    parsed = parse_args(["-", "-a"])
    assert parsed.options == []
    assert parsed.operands == ["-", "-a"]


def test_first_operand_stops_scanning():
    parsed = parse_args(["x", "-a"])
    assert parsed == ParsedArgs(options=[], operands=["x", "-a"])


def test_repeated_flags_kept_in_order():
    parsed = parse_args(["-v", "-v", "-f", "one", "-ftwo"], "f")
    assert parsed.options == [("v", None), ("v", None), ("f", "one"), ("f", "two")]


def test_missing_value_raises():
    with pytest.raises(UsageError):
        parse_args(["-o"], "o")


def test_empty_argv():
    assert parse_args([]) == ParsedArgs()