import pytest

from aligncols.columns import Alignment
from aligncols.errors import PositioningError
from aligncols.positioning import parse_positioning

L, R, C = Alignment.LEFT, Alignment.RIGHT, Alignment.CENTERED


def test_empty_format_is_all_left():
    p = parse_positioning("")
    assert p.max_width.values == [0]
    assert p.align.values == []
    assert p.align.get(0) is L
    assert p.align.get(42) is L


def test_documented_example():
    p = parse_positioning("<50>=<")
    assert p.max_width.values == [0, 50, 0, 0, 0]
    assert p.align.values == [L, R, C, L]
    assert p.align.get(10) is L
    assert p.max_width.get(10) == 0


def test_trailing_columns_inherit_last_alignment():
    p = parse_positioning(">")
    assert [p.align.get(i) for i in range(4)] == [R, R, R, R]


def test_width_default_resets_after_last_entry():
    p = parse_positioning("3=")
    assert p.max_width.values == [3, 0]
    assert p.max_width.get(5) == 0
    assert p.align.get(5) is C


@pytest.mark.parametrize("fmt, message", [
    ("5", "Invalid format sequence"),
    ("<12", "Invalid format sequence"),
    ("x", "Invalid format character: x"),
    ("<a>", "Invalid format character: a"),
    ("10 <", "Invalid format character:  "),
    ("１<", "Invalid format character: １"),
])
def test_invalid_format(fmt, message):
    with pytest.raises(PositioningError) as excinfo:
        parse_positioning(fmt)
    assert str(excinfo.value) == message


def test_positioning_error_is_value_error():
    with pytest.raises(ValueError):
        parse_positioning("!")
