import pytest

from mostools.fmt import format_string, vprintfmt


@pytest.mark.parametrize(
    "fmt,value",
    [
        ("%d", 12345),
        ("%d", -12345),
        ("%5d", -7),
        ("%-6d", 42),
        ("%07d", -42),
        ("%08x", 255),
        ("%x", 48879),
        ("%X", 48879),
        ("%o", 8),
        ("%u", 3000000000),
        ("%8s", "abc"),
        ("%-8s", "abc"),
        ("%c", "z"),
        ("%3c", "z"),
        ("%-3c", "z"),
    ],
)
def test_agrees_with_standard_formatting(fmt, value):
    assert format_string(fmt, value) == fmt % value


def test_long_flag_is_accepted():
    assert format_string("%ld", -1) == "%d" % -1


def test_negative_hex_is_twos_complement():
    assert format_string("%x", -1) == "%x" % 0xFFFFFFFF


def test_signed_wraparound():
    assert format_string("%d", 2**31) == "%d" % -(2**31)


def test_binary_conversion():
    assert format_string("%b", 10) == format(10, "b")


def test_left_adjust_ignores_zero_width_prefix():
    assert format_string("%-05d", -3) == "%-5d" % -3


def test_zero_padding_not_applied_to_strings():
    assert format_string("%05s", "ab") == "%5s" % "ab"


def test_char_from_integer():
    assert format_string("%c", ord("A")) == "A"


def test_percent_literal_and_unknown_conversion():
    assert format_string("100%%") == "100%"
    assert format_string("%q") == "q"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"
    assert format_string("abc%-5") == "abc"


def test_string_stops_at_nul():
    assert format_string("%s", "ab\0cd") == "ab"


def test_mixed_text():
    assert format_string("x=%d, y=%s!", 3, "hi") == "x=3, y=hi!"


def test_vprintfmt_pieces_join_to_format_string():
    pieces = []
    vprintfmt(pieces.append, "a%db%sc", [1, "two"])
    assert "".join(pieces) == format_string("a%db%sc", 1, "two")
    assert all(pieces)


def test_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_string_conversion_requires_str():
    with pytest.raises(TypeError):
        format_string("%s", 5)