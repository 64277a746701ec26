"""
PF2e Reference: Core Rulebook p.456-457 (burst, cone, emanation).
Purpose: Value types shared by grid measurement and area highlighting.
Dependencies: core/config.py.
Ext Hooks: Line areas.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from core.config import DEFAULT_CONE_ANGLE, DEFAULT_DIRECTION, HIGHLIGHT_BORDER, HIGHLIGHT_FILL


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Displacement:
    """Signed pixel deltas between two geometric features."""
    dx: float
    dy: float

    @classmethod
    def between(cls, p0: Point, p1: Point) -> "Displacement":
        return cls(p1.x - p0.x, p1.y - p0.y)

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> float:
        """Angle in degrees, Y-down screen convention (0 = east, 90 = south)."""
        return math.degrees(math.atan2(self.dy, self.dx))


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle in pixel space, always normalized (left <= right, top <= bottom).
    A negative width or height flips the rectangle around its anchor corner.
    """
    left: float
    top: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0:
            object.__setattr__(self, "left", self.left + self.width)
            object.__setattr__(self, "width", -self.width)
        if self.height < 0:
            object.__setattr__(self, "top", self.top + self.height)
            object.__setattr__(self, "height", -self.height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2, self.top + self.height / 2)

    def overlaps(self, other: "Rectangle") -> bool:
        """Interior overlap; rectangles sharing only an edge do not overlap."""
        return (other.right > self.left and other.left < self.right
                and other.bottom > self.top and other.top < self.bottom)


@dataclass(frozen=True)
class GridSquareCount:
    """A displacement split into diagonal and straight moves."""
    diagonal: int
    straight: int

    @classmethod
    def from_cells(cls, nx: int, ny: int) -> "GridSquareCount":
        return cls(diagonal=min(nx, ny), straight=abs(ny - nx))


class ShapeType(str, Enum):
    BURST = 'burst'
    CONE = 'cone'
    EMANATION = 'emanation'


@dataclass(frozen=True)
class AngularSector:
    """
    Degree range [min_angle, max_angle], both in [0, 360).
    min_angle > max_angle means the sector wraps past 360 -> 0.
    """
    min_angle: float
    max_angle: float

    @classmethod
    def from_direction(cls, direction: float, angle: float) -> "AngularSector":
        return cls((direction - angle * 0.5) % 360, (direction + angle * 0.5) % 360)

    def contains(self, value: float) -> bool:
        lo = self.min_angle % 360
        hi = self.max_angle % 360
        value = value % 360
        if lo < hi:
            return lo <= value <= hi
        return value >= lo or value <= hi


@dataclass(frozen=True)
class HighlightColors:
    """Opaque color values handed to the highlight layer untouched."""
    border: int = HIGHLIGHT_BORDER
    fill: int = HIGHLIGHT_FILL


@dataclass
class ShapeSpec:
    """
    Effect-area shape as placed on the canvas.

    Attributes:
        type: 'burst', 'cone' or 'emanation'
        origin: Anchor point in pixels
        distance: Radius / length in feet
        angle: Cone width in degrees (default 0)
        direction: Facing in degrees, clockwise from east (default 45)
    """
    type: ShapeType
    origin: Point
    distance: float
    angle: Optional[float] = DEFAULT_CONE_ANGLE
    direction: Optional[float] = DEFAULT_DIRECTION

    def __post_init__(self):
        try:
            self.type = ShapeType(self.type)
        except ValueError:
            raise ValueError(f"Invalid shape type: {self.type}") from None
        if self.angle is None:
            self.angle = DEFAULT_CONE_ANGLE
        if self.direction is None:
            self.direction = DEFAULT_DIRECTION

    @property
    def sector(self) -> AngularSector:
        return AngularSector.from_direction(self.direction, self.angle)

    @property
    def is_cone(self) -> bool:
        return self.type is ShapeType.CONE
