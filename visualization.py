import itertools
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from geometry import Point
from hull_intersection import hulls_intersect_matrix
from hull_point_set import HullPointSet

INTERSECT_COLOR = (1.0, 0.6, 0.6)
DISJOINT_COLOR = (0.6, 1.0, 0.6)


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(hull: HullPointSet, ax: Axes | None = None, color='k'):
    """
    Draw every sample of a hull as a small dot and, once the hull is computed,
    its outline with the boundary vertices emphasized.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(hull.points, ax=ax, c=color, s=2)
    if hull.dirty:
        return

    vertices = hull.boundary_points()
    ax.add_patch(Polygon(
        [(p.x, p.y) for p in vertices],
        closed=True, fill=False, edgecolor='k', linewidth=1,
    ))
    plot_points(vertices, ax=ax, c='r', s=12)


def plot_hulls(hulls: list[HullPointSet], ax: Axes | None = None) -> bool:
    """
    Draw several hulls on one axes. The background turns red if any two of
    the computed hulls intersect and green otherwise.
    Returns the intersection state shown.
    """
    if ax is None:
        ax = plt.gca()

    clrs = ['b', 'g', 'm', 'c', 'y', 'k']
    color_cycle = itertools.cycle(clrs)
    for hull in hulls:
        plot_hull(hull, ax=ax, color=next(color_cycle))

    computed = [hull for hull in hulls if not hull.dirty]
    intersect = False
    if len(computed) > 1:
        matrix = hulls_intersect_matrix(computed)
        intersect = bool(matrix.sum() > len(computed))

    ax.set_facecolor(INTERSECT_COLOR if intersect else DISJOINT_COLOR)
    return intersect
