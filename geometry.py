import numpy as np

from dataclasses import dataclass

from config import EPSILON


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point. Coordinates are rounded to single precision
    on construction, so equal inputs always compare equal once stored.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(np.float32(self.x)))
        object.__setattr__(self, 'y', float(np.float32(self.y)))

    def __iter__(self):
        return iter((self.x, self.y))

    @classmethod
    def of(cls, value) -> 'Point':
        """
        Coerce a Point or any (x, y) pair (tuple, list, numpy row) into a Point.
        """
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob (twice the signed area of triangle oab).
    """
    return (a.x - o.x) * (b.y - o.y) - (b.x - o.x) * (a.y - o.y)


def area_sign(a: Point, b: Point, c: Point, eps: float = EPSILON) -> int:
    """
    Winding of triangle abc: 1 for counter-clockwise, -1 for clockwise
    and 0 when the three points are collinear within `eps`.
    """
    area2 = cross(a, b, c)
    if area2 > eps:
        return 1
    if area2 < -eps:
        return -1
    return 0


def left(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    """
    Point c is strictly left of the directed line ab.
    """
    return area_sign(a, b, c, eps) > 0


def left_on(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    """
    Point c is left of or on the directed line ab.
    """
    return area_sign(a, b, c, eps) >= 0


def collinear(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    return area_sign(a, b, c, eps) == 0


def edge_cross(a0: Point, a1: Point, b0: Point, b1: Point) -> float:
    """
    2D cross product of edge directions a0->a1 and b0->b1.
    """
    return (a1.x - a0.x) * (b1.y - b0.y) - (a1.y - a0.y) * (b1.x - b0.x)
