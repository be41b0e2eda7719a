"""
Graham's scan over the boundary records of a hull point set,
after Chapter 3 of O'Rourke, Computational Geometry in C (1998).
"""
import logging

from typing import TYPE_CHECKING

from config import EPSILON
from errors import DegenerateInput, InsufficientPoints, PreconditionViolation
from geometry import left
from scratch_stack import ScratchStack
from tagged_sort import FlaggedIndex, polar_sort

if TYPE_CHECKING:
    from hull_point_set import HullPointSet


logger = logging.getLogger(__name__)


class HullBuilder:
    def __init__(self, eps: float = EPSILON):
        self.eps: float = eps

    @staticmethod
    def check_stack(hull: 'HullPointSet', stack: ScratchStack):
        if stack.record_type is not FlaggedIndex:
            raise PreconditionViolation(
                f'Scratch stack holds {stack.record_type.__name__}, expected FlaggedIndex'
            )
        if stack.capacity < hull.capacity:
            raise PreconditionViolation(
                f'Scratch stack capacity {stack.capacity} is below hull capacity {hull.capacity}'
            )

    def sort(self, hull: 'HullPointSet') -> list[FlaggedIndex]:
        """
        Move the lowest point to the front and sort the remaining records
        by polar angle around it, marking angle-tied records for removal.
        """
        hull.move_lowest_to_front()
        records = list(hull.boundary)
        origin = hull.point_at(0)
        return records[:1] + polar_sort(list(hull.points), origin, records[1:], self.eps)

    @staticmethod
    def squash(records: list[FlaggedIndex]) -> list[FlaggedIndex]:
        """
        Drop records marked for removal, keeping the order of the rest.
        """
        return [rec for rec in records if not rec.remove]

    def scan(self, hull: 'HullPointSet', stack: ScratchStack):
        """
        The stack sweep of Graham's algorithm. Expects the boundary sorted
        by polar angle with at least 3 records; leaves hull vertices
        on the stack, bottom to top.

        Time complexity: O(n), every record is pushed and popped at most once.
        """
        points = hull.points
        records = hull.boundary
        stack.clear()

        # the lowest point and the first one in angular order are always on the hull
        stack.push(records[0])
        stack.push(records[1])

        i = 2
        while i < len(records):
            if stack.count() < 2:
                stack.push(records[i])
                i += 1
                continue

            p1 = points[stack.peek(1).point_idx]
            p2 = points[stack.peek(0).point_idx]
            p3 = points[records[i].point_idx]
            if left(p1, p2, p3, self.eps):
                stack.push(records[i])
                i += 1
            else:
                stack.pop()

    @staticmethod
    def copy_stack(hull: 'HullPointSet', stack: ScratchStack):
        hull.set_boundary(list(stack), computed=True)
        stack.clear()

    def compute_hull(self, hull: 'HullPointSet', stack: ScratchStack) -> bool:
        """
        Recompute the hull boundary from the current point set.

        Returns False if fewer than 3 records are available, either before
        or after collinear points are removed; the hull stays dirty then.
        A hull that is not dirty is left untouched.

        Time complexity: O(n*log(n)).
        """
        if not hull.dirty:
            return True

        self.check_stack(hull, stack)

        if hull.boundary_count < 3:
            logger.debug(f'Not enough points to build a hull: {hull.boundary_count}')
            return False

        records = self.squash(self.sort(hull))
        hull.set_boundary(records)

        if len(records) < 3:
            logger.debug(
                f'Only {len(records)} of {hull.point_count} points left after removing collinear ones'
            )
            return False

        self.scan(hull, stack)
        self.copy_stack(hull, stack)
        logger.debug(f'Hull of {hull.point_count} points has {hull.boundary_count} vertices')
        return True


def compute_hull(hull: 'HullPointSet', stack: ScratchStack) -> bool:
    return HullBuilder(hull.eps).compute_hull(hull, stack)


def compute_hull_or_raise(hull: 'HullPointSet', stack: ScratchStack):
    """
    Same as `compute_hull`, but raises InsufficientPoints (or DegenerateInput
    when enough points were given but all of them collapsed onto a line).
    """
    count = hull.boundary_count
    if compute_hull(hull, stack):
        return
    if count < 3:
        raise InsufficientPoints(f'A hull needs at least 3 points, got {count}')
    raise DegenerateInput(f'All {hull.point_count} points are collinear or coincident')
