import pytest

from mandelbrot.parsing import parse_pair, parse_complex, parse_bounds


@pytest.mark.parametrize(
    "s, separator, parse, expected",
    [
        ("10,20", ",", int, (10, 20)),
        ("10x20", "x", int, (10, 20)),
        ("0.5x1.5", "x", float, (0.5, 1.5)),
        ("10,20", ",", float, (10.0, 20.0)),
        ("-3,4", ",", int, (-3, 4)),
    ],
)
def test_parse_pair(s, separator, parse, expected):
    assert parse_pair(s, separator, parse) == expected


@pytest.mark.parametrize(
    "s, separator",
    [
        ("10,20,30", ","),  # right side is "20,30"
        ("10", ","),
        ("", ","),
        (",20", ","),
        ("10,", ","),
        ("a,20", ","),
        ("10,b", ","),
        (" 10,20", ","),
        ("10, 20", ","),
        ("1_0,20", ","),
        ("10,2_0", ","),
    ],
)
def test_parse_pair_failure(s, separator):
    assert parse_pair(s, separator, int) is None


def test_parse_pair_splits_on_first_separator():
    assert parse_pair("1x2x3", "x", str) == ("1", "2x3")


def test_parse_pair_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        parse_pair("10,,20", ",,", int)


def test_parse_pair_defaults_to_float():
    assert parse_pair("1.5,2", ",") == (1.5, 2.0)


def test_parse_complex():
    assert parse_complex("1.25,-0.0625") == complex(1.25, -0.0625)
    assert parse_complex("0.5,0.5") == complex(0.5, 0.5)
    assert parse_complex("1.0") is None
    assert parse_complex("1.0,x") is None


def test_parse_bounds():
    assert parse_bounds("1000x750") == (1000, 750)
    assert parse_bounds("1000,750") is None
    assert parse_bounds("10.5x7") is None


def test_parsing_is_pure():
    assert parse_complex("-1.20,0.35") == parse_complex("-1.20,0.35")
    assert parse_pair("10,20", ",", int) == parse_pair("10,20", ",", int)
