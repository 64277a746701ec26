"""
PF2e Reference: Core Rulebook p.421-422 (the grid).
Purpose: Host-side grid, dimensions and highlight layers consumed by measurement and highlighting.
Dependencies: core/config.py, core/grid/types.py, utils/logger.py, math.
Ext Hooks: Scene-specific grids; hex topologies plug in through measure_distance.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple, Union
from core.config import GRID_SIZE, GRID_DISTANCE
from core.grid.types import HighlightColors, Point, Rectangle
from utils.logger import get_logger

logger = get_logger(__name__)

Feature = Union[Point, Rectangle]


class GridType(IntEnum):
    GRIDLESS = 0
    SQUARE = 1


@dataclass(frozen=True)
class Dimensions:
    """size: pixels per grid square; distance: game distance (ft) per square."""
    size: float = GRID_SIZE
    distance: float = GRID_DISTANCE


class HighlightLayer:
    """
    Named drawing surface holding highlighted cells keyed by their top-left pixel corner.
    The renderer reads `cells`; measurement code only clears and paints.
    """

    def __init__(self, name: str):
        self.name = name
        self.cells: Dict[Tuple[float, float], HighlightColors] = {}

    def clear(self) -> "HighlightLayer":
        self.cells.clear()
        return self

    def paint_cell(self, x: float, y: float, border: int, fill: int) -> bool:
        """Paint the cell at (x, y). Returns False if it was already painted."""
        key = (x, y)
        if key in self.cells:
            return False
        self.cells[key] = HighlightColors(border=border, fill=fill)
        return True

    def __contains__(self, key) -> bool:
        return tuple(key) in self.cells

    def __len__(self) -> int:
        return len(self.cells)


class Grid:
    def __init__(self, grid_type=GridType.SQUARE, size=GRID_SIZE, distance=GRID_DISTANCE):
        try:
            self.type = GridType(grid_type)
        except ValueError:
            raise ValueError(f"Invalid grid type: {grid_type}") from None
        self.size = size
        self.distance = distance
        self.w = size  # Cell width in pixels
        self.h = size  # Cell height in pixels
        self.highlight_layers: Dict[str, HighlightLayer] = {}

    @property
    def is_square(self) -> bool:
        return self.type == GridType.SQUARE

    def grid_to_pixel(self, col, row):
        """Top-left pixel corner of the cell at (col, row)."""
        return col * self.w, row * self.h

    def pixel_to_grid(self, x, y):
        """Cell (col, row) containing the pixel (x, y)."""
        return math.floor(x / self.w), math.floor(y / self.h)

    def get_center(self, x, y):
        """Center of the cell containing (x, y). Gridless canvases have no cells to snap to."""
        if not self.is_square:
            return x, y
        gx, gy = self.grid_to_pixel(*self.pixel_to_grid(x, y))
        return gx + self.w / 2, gy + self.h / 2

    def measure_distance(self, a: Feature, b: Feature) -> float:
        """Straight-line distance in game units; rectangles measure between their centers."""
        if isinstance(a, Rectangle):
            a = a.center
        if isinstance(b, Rectangle):
            b = b.center
        pixels = math.hypot(b.x - a.x, b.y - a.y)
        return pixels / self.size * self.distance

    # Highlight layers, keyed by object highlight id
    def get_highlight_layer(self, name: str) -> Optional[HighlightLayer]:
        return self.highlight_layers.get(name)

    def add_highlight_layer(self, name: str) -> HighlightLayer:
        layer = self.highlight_layers.get(name)
        if layer is None:
            layer = HighlightLayer(name)
            self.highlight_layers[name] = layer
            logger.debug("Added highlight layer %s", name)
        return layer

    def destroy_highlight_layer(self, name: str) -> None:
        if self.highlight_layers.pop(name, None) is not None:
            logger.debug("Destroyed highlight layer %s", name)


@dataclass
class Canvas:
    """
    What measurement sees of the rendering host. dimensions stays None until the
    scene is drawn; every measurement returns nan until then.
    """
    grid: Optional[Grid] = None
    dimensions: Optional[Dimensions] = None

    @classmethod
    def ready(cls, grid_type=GridType.SQUARE, size=GRID_SIZE, distance=GRID_DISTANCE) -> "Canvas":
        return cls(grid=Grid(grid_type, size, distance), dimensions=Dimensions(size, distance))
