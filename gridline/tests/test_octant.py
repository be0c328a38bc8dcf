import numpy as np
import pytest

from gridline.src.core.errors import InvalidOctantError, InvalidPointError
from gridline.src.core.point import Point
from gridline.src.octant import Octant


# every end point lies in a different octant around the origin and maps
# onto (5, 2) in canonical space
OCTANT_CASES = [
    ((5, 2), 0),
    ((2, 5), 1),
    ((-2, 5), 2),
    ((-5, 2), 3),
    ((-5, -2), 4),
    ((-2, -5), 5),
    ((2, -5), 6),
    ((5, -2), 7),
]

TIE_CASES = [
    ((0, 0), 0),
    ((3, 0), 0),
    ((3, 3), 0),
    ((0, 3), 1),
    ((-3, 3), 2),
    ((-3, 0), 3),
    ((-3, -3), 4),
    ((0, -3), 5),
    ((3, -3), 6),
]

SAMPLE_POINTS = [(0, 0), (1, 0), (0, 1), (3, -7), (-4, 9), (-11, -2), (123, 456)]


def test_from_points_each_octant():
    for end, tag in OCTANT_CASES:
        assert Octant.from_points((0, 0), end).tag == tag, end


def test_from_points_tie_breaks():
    for end, tag in TIE_CASES:
        assert Octant.from_points((0, 0), end).tag == tag, end


def test_from_points_depends_only_on_delta():
    for end, tag in OCTANT_CASES:
        start = (10, -4)
        shifted = (end[0] + 10, end[1] - 4)
        assert Octant.from_points(start, shifted).tag == tag


def test_to_canonical_maps_every_octant_onto_shallow_line():
    for end, tag in OCTANT_CASES:
        octant = Octant(tag)
        assert octant.to_canonical(Point(0, 0)) == (0, 0)
        assert octant.to_canonical(Point(*end)) == (5, 2)


def test_canonical_delta_is_shallow_and_non_negative():
    for ex in range(-6, 7):
        for ey in range(-6, 7):
            start, end = Point(2, -1), Point(ex, ey)
            octant = Octant.from_points(start, end)
            s = octant.to_canonical(start)
            e = octant.to_canonical(end)
            dx, dy = e.x - s.x, e.y - s.y
            assert dx >= 0
            assert 0 <= dy <= dx


def test_round_trip_all_octants():
    for tag in range(8):
        octant = Octant(tag)
        for p in SAMPLE_POINTS:
            assert octant.from_canonical(octant.to_canonical(Point(*p))) == p
            assert octant.to_canonical(octant.from_canonical(Point(*p))) == p


def test_transforms_return_points():
    octant = Octant(6)
    out = octant.to_canonical((1, 2))
    assert isinstance(out, Point)
    assert out == (-2, 1)
    assert octant.from_canonical(out) == (1, 2)


def test_is_steep():
    steep = {tag for tag in range(8) if Octant(tag).is_steep}
    assert steep == {1, 2, 5, 6}
    assert int(Octant(3)) == 3


def test_invalid_tag():
    for bad in (-1, 8, 2.0, True, "3"):
        with pytest.raises(InvalidOctantError):
            Octant(bad)


def test_invalid_tag_is_value_error():
    with pytest.raises(ValueError):
        Octant(9)


def test_from_points_validates_input():
    for bad in [(0.5, 0), (1, 2, 3), "xy", (True, 1)]:
        with pytest.raises(InvalidPointError):
            Octant.from_points(bad, (1, 1))
        with pytest.raises(InvalidPointError):
            Octant.from_points((1, 1), bad)
    assert Octant.from_points(np.array([0, 0]), (np.int64(-5), 2)).tag == 3
