from typing import Iterable

import hull_builder
import hull_intersection

from config import DEFAULT_CONFIG, HullConfig
from errors import CapacityExceeded, PreconditionViolation
from geometry import Point
from scratch_stack import ScratchStack
from tagged_sort import FlaggedIndex


class HullPointSet:
    """
    Points of a single hull together with the indices of its boundary.

    Before the hull is computed, `boundary` references every inserted point
    (or the last computed boundary followed by points added since).
    After a successful computation it holds only hull vertices
    in counter-clockwise order, starting at the lowest point.

    `lowest_ref` is a position in `boundary`, not in `points`: it names
    the record referencing the point with minimum y (maximum x among ties).
    """

    def __init__(self, config: HullConfig = DEFAULT_CONFIG):
        self.config: HullConfig = config
        self.eps: float = config.epsilon
        self._points: list[Point] = []
        self._boundary: list[FlaggedIndex] = []
        self.lowest_ref: int = 0
        self.dirty: bool = True

    def clear(self):
        self._points.clear()
        self._boundary.clear()
        self.lowest_ref = 0
        self.dirty = True

    @property
    def capacity(self) -> int:
        return self.config.capacity

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def boundary(self) -> tuple[FlaggedIndex, ...]:
        return tuple(self._boundary)

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def boundary_count(self) -> int:
        return len(self._boundary)

    def is_full(self) -> bool:
        return len(self._points) >= self.capacity

    def point_at(self, boundary_pos: int) -> Point:
        """
        Point referenced by the boundary record at `boundary_pos`.
        """
        return self._points[self._boundary[boundary_pos].point_idx]

    @property
    def lowest_point(self) -> Point | None:
        if not self._boundary:
            return None
        return self.point_at(self.lowest_ref)

    def boundary_points(self) -> tuple[Point, ...]:
        """
        Hull vertices in counter-clockwise order. Only valid for a computed hull.
        """
        self.require_computed()
        return tuple(self._points[rec.point_idx] for rec in self._boundary)

    def require_computed(self):
        if self.dirty:
            raise PreconditionViolation('Hull must be computed before boundary queries')

    def _is_lower(self, p: Point, p0: Point) -> bool:
        return p.y < p0.y or (abs(p.y - p0.y) <= self.eps and p.x > p0.x)

    def add_point(self, point):
        """
        Append a point and a fresh boundary record referencing it.
        """
        if self.is_full():
            raise CapacityExceeded(f'Hull already holds {self.capacity} points')

        p = Point.of(point)
        self._points.append(p)
        self._boundary.append(FlaggedIndex(len(self._points) - 1))
        self.dirty = True

        if len(self._boundary) == 1 or self._is_lower(p, self.point_at(self.lowest_ref)):
            self.lowest_ref = len(self._boundary) - 1

    def add_points(self, points: Iterable):
        """
        Append a batch of points. The batch is rejected as a whole
        if it does not fit, nothing is appended in that case.
        Time complexity: O(k) for a batch of k points.
        """
        batch = [Point.of(pt) for pt in points]
        if len(self._points) + len(batch) > self.capacity:
            raise CapacityExceeded(
                f'Cannot add {len(batch)} points to a hull holding '
                f'{len(self._points)} of {self.capacity}'
            )
        if not batch:
            return

        lowest = self.point_at(self.lowest_ref) if self._boundary else batch[0]
        for p in batch:
            self._points.append(p)
            self._boundary.append(FlaggedIndex(len(self._points) - 1))
            if len(self._boundary) == 1 or self._is_lower(p, lowest):
                lowest = p
                self.lowest_ref = len(self._boundary) - 1
        self.dirty = True

    def move_lowest_to_front(self):
        """
        Swap the lowest record into boundary position 0.
        """
        b = self._boundary
        b[0], b[self.lowest_ref] = b[self.lowest_ref], b[0]
        self.lowest_ref = 0

    def set_boundary(self, records: list[FlaggedIndex], computed: bool = False):
        """
        Replace boundary records. Records must reference existing points;
        when `computed` is set they are taken as the final hull boundary.
        """
        if len(records) > len(self._points):
            raise CapacityExceeded('Boundary cannot be longer than the point list')
        for rec in records:
            if not 0 <= rec.point_idx < len(self._points):
                raise IndexError(f'Boundary record references missing point {rec.point_idx}')
        self._boundary = list(records)
        self.lowest_ref = 0
        if computed:
            self.dirty = False

    def new_scratch_stack(self) -> ScratchStack:
        return new_scratch_stack(self.config)

    def compute(self, stack: ScratchStack, strict: bool = False) -> bool:
        if strict:
            hull_builder.compute_hull_or_raise(self, stack)
            return True
        return hull_builder.compute_hull(self, stack)

    def contains(self, point) -> bool:
        return hull_intersection.point_in_hull(self, Point.of(point))

    def intersects(self, other: 'HullPointSet') -> bool:
        return hull_intersection.check_intersect(self, other)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        state = 'dirty' if self.dirty else 'computed'
        return f'HullPointSet({len(self._points)} points, {len(self._boundary)} boundary, {state})'


def new_scratch_stack(config: HullConfig = DEFAULT_CONFIG) -> ScratchStack:
    """
    Scratch stack large enough to compute any hull of the given configuration.
    """
    return ScratchStack(config.capacity, FlaggedIndex)
