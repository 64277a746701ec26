"""
PF2e Reference: Core Rulebook p.422 (diagonals), p.455 (10-foot reach).
Purpose: Pathfinder 2e grid-counting distance for a displacement in pixels.
Dependencies: core/config.py, core/grid/types.py, core/grid/canvas.py, math.
Ext Hooks: Variant diagonal rules (e.g., 5/5/5).
"""

import math
from core.config import DIAGONAL_COST, REACH_DIAGONAL_EXCEPTION
from core.grid.canvas import Canvas
from core.grid.types import Displacement, GridSquareCount
from utils.logger import get_logger

logger = get_logger(__name__)


def count_squares(segment: Displacement, grid_size: float) -> GridSquareCount:
    """Split a displacement into diagonal and straight moves, partial squares rounded up."""
    nx = math.ceil(abs(segment.dx / grid_size))
    ny = math.ceil(abs(segment.dy / grid_size))
    return GridSquareCount.from_cells(nx, ny)


def measure_on_grid(segment: Displacement, canvas: Canvas, reach=None) -> float:
    """
    Measure a displacement in game distance units using Pathfinder 2e grid counting.

    Every second diagonal costs double, so diagonals count as 1.5 squares (rounded down
    over the whole path).

    Args:
        segment: Pixel deltas between the two features
        canvas: Canvas supplying grid size and distance per square
        reach: The origin actor's reach, if this is a reach measurement

    Returns:
        float: Distance in game units, or nan while the canvas has no dimensions
    """
    dimensions = canvas.dimensions
    if dimensions is None:
        logger.debug("Canvas has no dimensions; distance is unmeasurable")
        return math.nan

    squares = count_squares(segment, dimensions.size)

    # "Unlike with measuring most distances, 10-foot reach can reach 2 squares diagonally."
    reduction = 1 if squares.diagonal > 1 and reach == REACH_DIAGONAL_EXCEPTION else 0

    distance = math.floor(squares.diagonal * DIAGONAL_COST + squares.straight) - reduction
    return distance * dimensions.distance
