import pytest

from quadkit.primitives import BLANK, WHITE, Color, Rect, Vec2


def test_vec2_arithmetic_round_trip():
    a = Vec2(3.0, -2.0)
    b = Vec2(1.5, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2 == a + a
    assert tuple(a) == (3.0, -2.0)


def test_rect_contains_edges():
    rect = Rect(10.0, 20.0, 5.0, 5.0)
    assert rect.contains(Vec2(10.0, 20.0))
    assert rect.contains((12.0, 22.0))
    assert not rect.contains(Vec2(15.0, 22.0))
    assert not rect.contains(Vec2(12.0, 25.0))
    assert not rect.contains(Vec2(9.9, 22.0))


def test_rect_overlaps_is_symmetric():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    c = Rect(20.0, 20.0, 1.0, 1.0)
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c) and not c.overlaps(a)


def test_rect_overlaps_touching_edges():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 10.0, 10.0)
    assert a.overlaps(b)


def test_from_rgba_extremes():
    assert Color.from_rgba(255, 255, 255, 255) == WHITE
    assert Color.from_rgba(0, 0, 0, 0) == BLANK


def test_to_bytes_round_trip_for_extremes():
    data = bytes([255, 0, 255, 0])
    assert Color.from_bytes(data).to_bytes() == data


def test_to_bytes_saturates():
    color = Color(2.0, -1.0, float("nan"), 1.0)
    assert color.to_bytes() == bytes([255, 0, 0, 255])


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Color.from_bytes(b"\x00\x01\x02")