"""
PF2e Reference: Core Rulebook p.456-457 (areas: burst, cone, emanation).
Purpose: Highlight the grid squares covered by an effect area.
Dependencies: core/measure/distance.py, core/grid/canvas.py, core/grid/types.py, core/config.py, math.
Ext Hooks: Line areas; cover/line-of-effect filtering per square.
"""

import math
from typing import Tuple
from core.config import ANGLE_PRECISION, WINDOW_INFLATION
from core.grid.canvas import Canvas
from core.grid.types import AngularSector, Displacement, HighlightColors, Point, ShapeSpec
from core.measure.distance import measure_distance
from utils.logger import get_logger

logger = get_logger(__name__)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def within_angle(min_angle: float, max_angle: float, value: float) -> bool:
    """Wrap-aware check that value lies in [min_angle, max_angle] (degrees)."""
    return AngularSector(min_angle, max_angle).contains(value)


def ray_in_sector(sector: AngularSector, ray: Displacement) -> bool:
    """
    Whether a ray from the cone origin falls inside the sector. Angles are compared at
    ANGLE_PRECISION decimals so float noise on an edge ray does not flip it outside.
    A zero-length ray is always inside.
    """
    if ray.length == 0:
        return True
    return sector.contains(round(ray.angle, ANGLE_PRECISION))


def cone_origin_offset(shape: ShapeSpec, grid_size: float) -> Tuple[float, float]:
    """
    Offset, in squares, that moves a cone's origin onto the border of its square in the
    direction it points. Cones only measure from square borders; an axis already on a
    grid line gets no offset.
    """
    # Degrees anticlockwise from pointing right
    facing = (360 - shape.direction if shape.direction >= 0 else -shape.direction) % 360
    radians = math.radians(facing)

    x_offset = 0
    if shape.origin.x % grid_size != 0:
        x_offset = _sign(round(math.cos(radians), 2)) / 2
    # Screen y grows downward, so the sine is inverted
    y_offset = 0
    if shape.origin.y % grid_size != 0:
        y_offset = -_sign(round(math.sin(radians), 2)) / 2
    return x_offset, y_offset


def window_size(shape: ShapeSpec, canvas: Canvas) -> Tuple[int, int]:
    """(column_count, row_count) of candidate squares on each side of the origin."""
    dimensions, grid = canvas.dimensions, canvas.grid
    reach_in_squares = shape.distance * WINDOW_INFLATION / dimensions.distance
    column_count = math.ceil(reach_in_squares / (dimensions.size / grid.w))
    row_count = math.ceil(reach_in_squares / (dimensions.size / grid.h))
    return column_count, row_count


def highlight_grid(shape: ShapeSpec, obj, colors: HighlightColors, canvas: Canvas) -> None:
    """
    Highlight the grid according to a Pathfinder 2e effect-area shape.

    The object's highlight layer is cleared, then every square whose center is within
    shape.distance of the origin (and, for cones, inside the cone's angle) is painted.

    Args:
        shape: Area shape; origin in pixels, distance in game units
        obj: Template or token owning the highlight; needs `id` and `highlight_id`
        colors: Border and fill colors, passed through to the layer
        canvas: Canvas whose grid owns the highlight layers
    """
    # Previews have no id and are never highlighted
    if not getattr(obj, 'id', None):
        logger.debug("Skipping highlight for preview object")
        return

    grid, dimensions = canvas.grid, canvas.dimensions
    if grid is None or dimensions is None:
        logger.debug("Canvas not ready; skipping highlight for %s", obj.highlight_id)
        return

    layer = grid.add_highlight_layer(obj.highlight_id).clear()
    x, y = shape.origin.x, shape.origin.y
    size = dimensions.size

    cx, cy = grid.get_center(x, y)
    col0, row0 = grid.pixel_to_grid(cx, cy)
    sector = shape.sector

    offset_x, offset_y = cone_origin_offset(shape, size) if shape.is_cone else (0, 0)
    # Point we are measuring distances from
    origin = Point(x + offset_x * size, y + offset_y * size)

    column_count, row_count = window_size(shape, canvas)
    painted = 0
    for a in range(-column_count, column_count):
        for b in range(-row_count, row_count):
            gx, gy = grid.grid_to_pixel(col0 + a, row0 + b)
            cell_center = Point(gx + size * 0.5, gy + size * 0.5)

            if shape.is_cone:
                ray = Displacement.between(origin, cell_center)
                if not ray_in_sector(sector, ray):
                    continue

            distance = measure_distance(cell_center, origin, canvas)
            if distance <= shape.distance and layer.paint_cell(gx, gy, colors.border, colors.fill):
                painted += 1

    logger.debug("Highlighted %d squares for %s %s", painted, shape.type.value, obj.highlight_id)
