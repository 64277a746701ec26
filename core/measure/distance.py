"""
PF2e Reference: Core Rulebook p.422 (measuring distance), p.455 (reach).
Purpose: Point and rectangle distance under Pathfinder 2e grid counting, with a fallback to the
         host grid's own measurement on non-square grids.
Dependencies: core/measure/metric.py, core/grid/canvas.py, core/grid/types.py, math, abc.
Ext Hooks: Token elevation (3D reach).
"""

import math
from abc import ABC, abstractmethod
from core.grid.canvas import Canvas
from core.grid.types import Displacement, Point, Rectangle
from core.measure.metric import measure_on_grid
from utils.logger import get_logger

logger = get_logger(__name__)


def snap_bounds(rectangle: Rectangle, toward: Rectangle, grid_width: float) -> Rectangle:
    """
    Snap a rectangle to whole grid squares. The leading edges round toward the other
    rectangle; the size always rounds up.
    """
    round_left = math.ceil if rectangle.left < toward.left else math.floor
    round_top = math.ceil if rectangle.top < toward.top else math.floor

    left = round_left(rectangle.left / grid_width) * grid_width
    top = round_top(rectangle.top / grid_width) * grid_width
    width = math.ceil(rectangle.width / grid_width) * grid_width
    height = math.ceil(rectangle.height / grid_width) * grid_width
    return Rectangle(left, top, width, height)


class DistanceStrategy(ABC):
    """How a canvas measures between two points or two rectangles."""

    def __init__(self, canvas: Canvas):
        self.canvas = canvas

    @abstractmethod
    def points(self, p0: Point, p1: Point) -> float:
        ...

    @abstractmethod
    def rectangles(self, r0: Rectangle, r1: Rectangle, reach=None) -> float:
        ...


class SquareGridMetric(DistanceStrategy):
    """Pathfinder 2e square counting."""

    def points(self, p0, p1):
        return measure_on_grid(Displacement.between(p0, p1), self.canvas)

    def rectangles(self, r0, r1, reach=None):
        # Return early if the rectangles overlap
        if any(a.overlaps(b) for a, b in ((r0, r1), (r1, r0))):
            return 0

        grid_width = self.canvas.grid.w
        r0_snapped = snap_bounds(r0, toward=r1, grid_width=grid_width)
        r1_snapped = snap_bounds(r1, toward=r0, grid_width=grid_width)

        # Minimum gap on each axis, plus one square so adjacent squares count as 5 ft
        dx = max(r0_snapped.left - r1_snapped.right, r1_snapped.left - r0_snapped.right, 0) + grid_width
        dy = max(r0_snapped.top - r1_snapped.bottom, r1_snapped.top - r0_snapped.bottom, 0) + grid_width
        return measure_on_grid(Displacement(dx, dy), self.canvas, reach=reach)


class DelegatedMetric(DistanceStrategy):
    """Non-square grids measure with their own rules."""

    def points(self, p0, p1):
        return self.canvas.grid.measure_distance(p0, p1)

    def rectangles(self, r0, r1, reach=None):
        return self.canvas.grid.measure_distance(r0, r1)


class UnmeasurableMetric(DistanceStrategy):
    """Canvas not drawn yet: every measurement is nan."""

    def points(self, p0, p1):
        return math.nan

    def rectangles(self, r0, r1, reach=None):
        return math.nan


def distance_strategy(canvas: Canvas) -> DistanceStrategy:
    if canvas.dimensions is None or canvas.grid is None:
        logger.debug("Canvas has no dimensions; distance is unmeasurable")
        return UnmeasurableMetric(canvas)
    if canvas.grid.is_square:
        return SquareGridMetric(canvas)
    logger.debug("Delegating measurement to %s grid", canvas.grid.type.name.lower())
    return DelegatedMetric(canvas)


def measure_distance(p0: Point, p1: Point, canvas: Canvas) -> float:
    """Measure distance between two points using Pathfinder 2e grid-counting rules."""
    return distance_strategy(canvas).points(p0, p1)


def measure_distance_rect(r0: Rectangle, r1: Rectangle, canvas: Canvas, reach=None) -> float:
    """
    Measure the minimum distance between two rectangles.

    Args:
        r0: The origin rectangle
        r1: The destination rectangle
        canvas: Canvas to measure on
        reach: If this is a reach measurement, the origin actor's reach

    Returns:
        float: Distance in game units; 0 for overlapping rectangles, nan before the canvas is ready
    """
    return distance_strategy(canvas).rectangles(r0, r1, reach=reach)
