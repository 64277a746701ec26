"""
PF2e Reference: Core Rulebook p.455 (reach), p.456-457 (areas).
Purpose: Tokens and measured templates placed on the canvas - the callers of rectangle
         distance and area highlighting.
Dependencies: core/measure/distance.py, core/highlight/area.py, core/grid/types.py, core/grid/canvas.py.
Ext Hooks: Token auras with their own colors; template ownership/visibility.
Client Only: Scene objects.
"""

from typing import Any, Dict, Optional, Set, Tuple
from core.config import GRID_DISTANCE, GRID_SIZE, HIGHLIGHT_BORDER, HIGHLIGHT_FILL
from core.grid.canvas import Canvas
from core.grid.types import HighlightColors, Point, Rectangle, ShapeSpec, ShapeType
from core.highlight.area import highlight_grid
from core.measure.distance import measure_distance_rect


class TokenObject:
    def __init__(self, token_id: Optional[str], x: float, y: float, width: float = 1, height: float = 1,
                 reach: Optional[float] = None):
        """
        Token occupying width x height squares with its top-left corner at pixel (x, y).
        reach: Melee reach in feet; None for creatures without a reach override.
        """
        self.id = token_id
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.reach = reach

    @property
    def highlight_id(self) -> str:
        return f"Token.{self.id}"

    def bounds(self, canvas: Canvas) -> Rectangle:
        """Pixel rectangle of the token's space; uses the default square size until the canvas is drawn."""
        if canvas.dimensions:
            size = canvas.dimensions.size
        elif canvas.grid:
            size = canvas.grid.size
        else:
            size = GRID_SIZE
        return Rectangle(self.x, self.y, self.width * size, self.height * size)

    def distance_to(self, target: "TokenObject", canvas: Canvas, reach: Optional[float] = None) -> float:
        """Distance between this token's space and the target's, in feet."""
        return measure_distance_rect(self.bounds(canvas), target.bounds(canvas), canvas, reach=reach)

    def can_reach(self, target: "TokenObject", canvas: Canvas) -> bool:
        """Whether the target is within this token's melee reach (5 ft when unset)."""
        reach = self.reach if self.reach is not None else GRID_DISTANCE
        return self.distance_to(target, canvas, reach=reach) <= reach

    def aura(self, distance: float, canvas: Canvas) -> ShapeSpec:
        """Emanation of the given radius, measured from the center of this token's space."""
        return ShapeSpec(ShapeType.EMANATION, self.bounds(canvas).center, distance)

    def highlight_aura(self, distance: float, canvas: Canvas, colors: HighlightColors = HighlightColors()):
        highlight_grid(self.aura(distance, canvas), self, colors, canvas)


class TemplateObject:
    """A measured template; templates without an id are previews being dragged."""

    def __init__(self, template_id: Optional[str], shape: ShapeSpec, colors: HighlightColors = HighlightColors()):
        self.id = template_id
        self.shape = shape
        self.colors = colors

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "TemplateObject":
        """Build from stored template data ('t', 'x', 'y', 'distance', optional 'angle', 'direction', colors)."""
        shape = ShapeSpec(
            type=data['t'],
            origin=Point(data['x'], data['y']),
            distance=data['distance'],
            angle=data.get('angle'),
            direction=data.get('direction'),
        )
        colors = HighlightColors(
            border=data.get('borderColor', HIGHLIGHT_BORDER),
            fill=data.get('fillColor', HIGHLIGHT_FILL),
        )
        return cls(data.get('_id'), shape, colors)

    @property
    def highlight_id(self) -> str:
        return f"Template.{self.id}"

    def highlight(self, canvas: Canvas):
        highlight_grid(self.shape, self, self.colors, canvas)

    def highlighted_cells(self, canvas: Canvas) -> Set[Tuple[float, float]]:
        """Top-left corners of the squares currently highlighted for this template."""
        layer = canvas.grid.get_highlight_layer(self.highlight_id) if canvas.grid else None
        return set(layer.cells) if layer else set()

    def destroy(self, canvas: Canvas):
        if canvas.grid:
            canvas.grid.destroy_highlight_layer(self.highlight_id)
