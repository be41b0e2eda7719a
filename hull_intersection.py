"""
Intersection tests for convex hulls.

The two-hull test is a simplified version of the convex polygon
intersection of O'Rourke (Section 7.6): it walks the edges of both
hulls in tandem and only reports whether an intersection exists.
For hulls with n and m boundary vertices it runs in O(n + m).
"""
import logging

import numpy as np

from typing import TYPE_CHECKING

from config import EPSILON
from errors import PreconditionViolation
from geometry import Point, edge_cross, left, left_on

if TYPE_CHECKING:
    from hull_point_set import HullPointSet


logger = logging.getLogger(__name__)


def segments_intersect(a0: Point, a1: Point, b0: Point, b1: Point, eps: float = EPSILON) -> bool:
    """
    Check if segments [a0, a1] and [b0, b1] intersect.
    Parallel (and collinear) segments are reported as non-intersecting.
    """
    denom = (
        a0.x * (b1.y - b0.y)
        + a1.x * (b0.y - b1.y)
        + b1.x * (a1.y - a0.y)
        + b0.x * (a0.y - a1.y)
    )
    if abs(denom) < eps:
        return False

    num = a0.x * (b1.y - b0.y) + b0.x * (a0.y - b1.y) + b1.x * (b0.y - a0.y)
    s = num / denom

    num = -(a0.x * (b0.y - a1.y) + a1.x * (a0.y - b0.y) + b0.x * (a1.y - a0.y))
    t = num / denom

    # intersection at a0 + s * (a1 - a0) == b0 + t * (b1 - b0)
    return 0.0 <= s <= 1.0 and 0.0 <= t <= 1.0


def point_in_hull(hull: 'HullPointSet', p: Point) -> bool:
    """
    Check if p is inside or on the boundary of a computed hull:
    it has to be left of or on every counter-clockwise edge.
    """
    hull.require_computed()
    n = hull.boundary_count
    for i in range(n):
        p0 = hull.point_at(i)
        p1 = hull.point_at((i + 1) % n)
        if not left_on(p0, p1, p, hull.eps):
            return False
    return True


def check_intersect(hull_a: 'HullPointSet', hull_b: 'HullPointSet') -> bool:
    """
    Check if two computed convex hulls intersect.

    On each step the current edges of both hulls are tested against each
    other; if they miss, the edge which is behind (judged by the sign of
    the edge cross product and on which side the other edge's head lies)
    is advanced. The walk stops once either hull has run through all of
    its edges. If no edge pair crosses, the hulls still intersect when one
    of them lies entirely inside the other.
    """
    if hull_a.dirty or hull_b.dirty:
        raise PreconditionViolation('Both hulls must be computed before an intersection test')

    eps = max(hull_a.eps, hull_b.eps)
    a_max = hull_a.boundary_count
    b_max = hull_b.boundary_count

    idx_a = idx_b = 0
    while idx_a < a_max and idx_b < b_max:
        a0 = hull_a.point_at(idx_a)
        a1 = hull_a.point_at((idx_a + 1) % a_max)
        b0 = hull_b.point_at(idx_b)
        b1 = hull_b.point_at((idx_b + 1) % b_max)

        if segments_intersect(a0, a1, b0, b1, eps):
            return True

        a_left_b = left(b0, b1, a1, eps)
        b_left_a = left(a0, a1, b1, eps)

        if edge_cross(a0, a1, b0, b1) < -eps:
            if a_left_b:
                idx_b += 1
            else:
                idx_a += 1
        else:
            if b_left_a:
                idx_a += 1
            else:
                idx_b += 1

    # no edges cross, so either one hull contains the other or they are disjoint
    if point_in_hull(hull_b, hull_a.point_at(0)):
        logger.debug('Hull A lies inside hull B')
        return True
    if point_in_hull(hull_a, hull_b.point_at(0)):
        logger.debug('Hull B lies inside hull A')
        return True
    return False


def hulls_intersect_matrix(hulls: list['HullPointSet']) -> np.ndarray:
    """
    Pairwise intersection of a group of computed hulls as a symmetric
    boolean matrix. A hull always intersects itself.
    """
    for hull in hulls:
        hull.require_computed()

    n = len(hulls)
    result = np.eye(n, dtype=bool)
    for i in range(n):
        for j in range(i + 1, n):
            result[i, j] = result[j, i] = check_intersect(hulls[i], hulls[j])
    return result
