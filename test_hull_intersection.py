import numpy as np
import pytest

from errors import PreconditionViolation
from geometry import Point
from hull_intersection import check_intersect, hulls_intersect_matrix, point_in_hull, segments_intersect
from hull_point_set import HullPointSet, new_scratch_stack


@pytest.fixture
def stack():
    return new_scratch_stack()


@pytest.fixture
def make_hull(stack):
    def _make(coords) -> HullPointSet:
        hull = HullPointSet()
        hull.add_points(coords)
        assert hull.compute(stack)
        return hull
    return _make


def square(x0, y0, size):
    return [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)]


@pytest.mark.parametrize("a0, a1, b0, b1, expected", [
    ((0, 0), (2, 2), (0, 2), (2, 0), True),
    ((0, 0), (1, 0), (2, -1), (2, 1), False),
    ((0, 0), (1, 0), (1, -1), (1, 1), True),       # touching at an endpoint
    ((0, 0), (1, 0), (0, 1), (1, 1), False),       # parallel
    ((0, 0), (2, 0), (1, 0), (3, 0), False),       # collinear overlap counts as parallel
    ((0, 0), (1, 1), (0, 3), (3, 0), False),
])
def test_segments_intersect(a0, a1, b0, b1, expected):
    assert segments_intersect(Point(*a0), Point(*a1), Point(*b0), Point(*b1)) == expected


def test_point_in_hull(make_hull):
    hull = make_hull(square(0, 0, 1))

    assert point_in_hull(hull, Point(0.5, 0.5))
    assert point_in_hull(hull, Point(1, 0.5))       # on an edge
    assert point_in_hull(hull, Point(0, 0))         # on a vertex
    assert not point_in_hull(hull, Point(1.01, 0.5))
    assert not point_in_hull(hull, Point(-0.5, -0.5))


def test_disjoint_clusters(make_hull):
    rng = np.random.default_rng(11)
    a = make_hull(rng.uniform(-0.2, 0.2, size=(40, 2)) + (-0.5, -0.5))
    b = make_hull(rng.uniform(-0.2, 0.2, size=(40, 2)) + (0.5, 0.5))

    assert not check_intersect(a, b)
    assert not check_intersect(b, a)


def test_overlapping_squares(make_hull):
    a = make_hull(square(0, 0, 2))
    b = make_hull(square(1, 1, 2))

    assert check_intersect(a, b)
    assert check_intersect(b, a)


def test_square_inside_square(make_hull):
    inner = make_hull(square(0.4, 0.4, 0.2))
    outer = make_hull(square(0, 0, 1))

    assert check_intersect(inner, outer)
    assert check_intersect(outer, inner)


def test_hull_intersects_itself(make_hull):
    hull = make_hull([(0, 0), (2, 0), (1, 2)])
    assert check_intersect(hull, hull)


def test_side_by_side_squares(make_hull):
    a = make_hull(square(0, 0, 1))
    b = make_hull(square(1.5, 0, 1))
    assert not check_intersect(a, b)
    assert not check_intersect(b, a)


def test_dirty_hull_is_rejected(make_hull):
    computed = make_hull(square(0, 0, 1))
    dirty = HullPointSet()
    dirty.add_points(square(0, 0, 1))

    with pytest.raises(PreconditionViolation):
        check_intersect(computed, dirty)
    with pytest.raises(PreconditionViolation):
        check_intersect(dirty, computed)
    with pytest.raises(PreconditionViolation):
        point_in_hull(dirty, Point(0.5, 0.5))

    computed.add_point((3, 3))
    with pytest.raises(PreconditionViolation):
        computed.intersects(computed)


def test_intersect_matrix(make_hull):
    hulls = [
        make_hull(square(0, 0, 2)),
        make_hull(square(1, 1, 2)),
        make_hull(square(10, 10, 1)),
    ]

    matrix = hulls_intersect_matrix(hulls)

    expected = np.array([
        [True, True, False],
        [True, True, False],
        [False, False, True],
    ])
    assert np.array_equal(matrix, expected)
