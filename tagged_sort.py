from dataclasses import dataclass, replace
from functools import cmp_to_key

from config import EPSILON
from geometry import Point, area_sign, collinear


@dataclass(frozen=True, slots=True)
class FlaggedIndex:
    """
    Boundary record: a reference into a hull's point list and a removal marker.
    """
    point_idx: int
    remove: bool = False


def displacement_delta(origin: Point, b: Point, c: Point) -> tuple[float, float]:
    """
    Difference of the absolute per-axis displacements of b and c from origin.
    Negative components mean b is closer to origin on that axis.
    """
    dx = abs(b.x - origin.x) - abs(c.x - origin.x)
    dy = abs(b.y - origin.y) - abs(c.y - origin.y)
    return dx, dy


def compare_polar(
    points: list[Point],
    origin: Point,
    b: FlaggedIndex,
    c: FlaggedIndex,
    eps: float = EPSILON,
) -> int:
    """
    Three-way ordering of two records by polar angle around origin.

    Counter-clockwise winding of (origin, b, c) puts b first. Collinear
    records are ordered nearer first, then by point index. The relation
    never touches the records, so it is safe for any sort algorithm.
    """
    if b.point_idx == c.point_idx:
        return 0

    sign = area_sign(origin, points[b.point_idx], points[c.point_idx], eps)
    if sign > 0:
        return -1
    if sign < 0:
        return 1

    dx, dy = displacement_delta(origin, points[b.point_idx], points[c.point_idx])
    if dx < -eps or dy < -eps:
        return -1
    if dx > eps or dy > eps:
        return 1
    return (b.point_idx > c.point_idx) - (b.point_idx < c.point_idx)


def redundant(
    points: list[Point],
    origin: Point,
    b: FlaggedIndex,
    c: FlaggedIndex,
    eps: float = EPSILON,
) -> FlaggedIndex | None:
    """
    Pick which of two records is redundant relative to origin.

    Returns None if b and c lie at different angles. Otherwise the record
    closer to origin is redundant; with equal displacements the one with
    the larger point index is. Two references to the same point make the
    second one redundant.
    """
    if b.point_idx == c.point_idx:
        return c

    pb, pc = points[b.point_idx], points[c.point_idx]
    if not collinear(origin, pb, pc, eps):
        return None

    dx, dy = displacement_delta(origin, pb, pc)
    if dx < -eps or dy < -eps:
        return b
    if dx > eps or dy > eps:
        return c
    return b if b.point_idx > c.point_idx else c


def mark_redundant(
    points: list[Point],
    origin: Point,
    records: list[FlaggedIndex],
    eps: float = EPSILON,
) -> list[FlaggedIndex]:
    """
    Mark all but the farthest record of every run of angle-tied records.
    Expects `records` sorted by `compare_polar`. Time complexity: O(n).
    """
    marked = list(records)
    keep = 0
    for i in range(1, len(marked)):
        loser = redundant(points, origin, marked[keep], marked[i], eps)
        if loser is None:
            keep = i
        elif loser is marked[i]:
            marked[i] = replace(marked[i], remove=True)
        else:
            marked[keep] = replace(marked[keep], remove=True)
            keep = i
    return marked


def polar_sort(
    points: list[Point],
    origin: Point,
    records: list[FlaggedIndex],
    eps: float = EPSILON,
) -> list[FlaggedIndex]:
    """
    Sort records by increasing polar angle around origin, then mark every
    angle-tied record except the farthest one for removal.

    Sorting and marking are separate passes: the comparator is pure,
    and marking is a single scan over neighbours in sorted order.
    Time complexity: O(n*log(n)).
    """
    key = cmp_to_key(lambda b, c: compare_polar(points, origin, b, c, eps))
    return mark_redundant(points, origin, sorted(records, key=key), eps)
