"""
PF2e Reference: Core Rulebook p.456-457 (areas).
Purpose: Interactive viewer - place a template, rotate and resize it, see the highlighted squares
         and the reach distance from a token to the hovered square.
Dependencies: pygame, client/objects.py, client/render/highlight_renderer.py, core/config.py.
Ext Hooks: Multiple templates; drag-to-place.
Client Only: Input and visuals.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame
from client.objects import TemplateObject, TokenObject
from client.render.highlight_renderer import draw_square_grid, draw_highlight_layers
from core.config import SCREEN_WIDTH, SCREEN_HEIGHT, VIEWER_GRID_SIZE, GRID_DISTANCE, FPS
from core.grid.canvas import Canvas
from core.grid.types import Point, ShapeSpec, ShapeType
from utils.logger import get_logger

logger = get_logger(__name__)

SHAPE_CYCLE = [ShapeType.BURST, ShapeType.CONE, ShapeType.EMANATION]
CONE_ANGLE = 90  # PF2e cones are quarter circles


class TemplateViewer:
    """Pygame loop around a single measured template and one reference token."""

    def __init__(self):
        pygame.init()
        pygame.font.init()
        self.font = pygame.font.SysFont('Arial', 18)
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("PF2e Templates")
        self.clock = pygame.time.Clock()

        self.canvas = Canvas.ready(size=VIEWER_GRID_SIZE, distance=GRID_DISTANCE)
        size = VIEWER_GRID_SIZE
        self.token = TokenObject("viewer-token", 4 * size, 4 * size, reach=10)
        self.template = TemplateObject("viewer", ShapeSpec(ShapeType.BURST, Point(10 * size, 8 * size), 20))
        self.hover_distance = None
        self.running = True
        self.template.highlight(self.canvas)

    def _snap(self, pos):
        """Snap to the nearest half square so templates land on corners, edges or centers."""
        half = VIEWER_GRID_SIZE / 2
        return Point(round(pos[0] / half) * half, round(pos[1] / half) * half)

    def _replace_shape(self, **changes):
        shape = self.template.shape
        values = dict(type=shape.type, origin=shape.origin, distance=shape.distance,
                      angle=shape.angle, direction=shape.direction)
        values.update(changes)
        self.template.shape = ShapeSpec(**values)
        self.template.highlight(self.canvas)
        logger.info("Template: %s %s ft, direction %s", self.template.shape.type.value,
                    self.template.shape.distance, self.template.shape.direction)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._replace_shape(origin=self._snap(event.pos))
            elif event.type == pygame.MOUSEMOTION:
                self._update_hover(event.pos)
            elif event.type == pygame.KEYDOWN:
                self._handle_key_press(event.key)

    def _handle_key_press(self, key):
        shape = self.template.shape
        if key == pygame.K_t:
            next_type = SHAPE_CYCLE[(SHAPE_CYCLE.index(shape.type) + 1) % len(SHAPE_CYCLE)]
            angle = CONE_ANGLE if next_type is ShapeType.CONE else 0
            self._replace_shape(type=next_type, angle=angle)
        elif key == pygame.K_RIGHT:
            self._replace_shape(direction=(shape.direction + 45) % 360)
        elif key == pygame.K_LEFT:
            self._replace_shape(direction=(shape.direction - 45) % 360)
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_UP):
            self._replace_shape(distance=shape.distance + GRID_DISTANCE)
        elif key in (pygame.K_MINUS, pygame.K_DOWN) and shape.distance > GRID_DISTANCE:
            self._replace_shape(distance=shape.distance - GRID_DISTANCE)

    def _update_hover(self, pos):
        grid = self.canvas.grid
        col, row = grid.pixel_to_grid(*pos)
        x, y = grid.grid_to_pixel(col, row)
        target = TokenObject("hover", x, y)
        self.hover_distance = self.token.distance_to(target, self.canvas, reach=self.token.reach)

    def draw(self):
        self.screen.fill((20, 20, 20))
        draw_highlight_layers(self.screen, self.canvas.grid)
        draw_square_grid(self.screen, self.canvas.grid)

        bounds = self.token.bounds(self.canvas)
        center = bounds.center
        pygame.draw.circle(self.screen, (80, 160, 255), (int(center.x), int(center.y)), int(bounds.width / 2) - 4)

        shape = self.template.shape
        origin = (int(shape.origin.x), int(shape.origin.y))
        pygame.draw.circle(self.screen, (255, 255, 255), origin, 4)

        lines = [
            f"{shape.type.value} {shape.distance:g} ft, direction {shape.direction:g} (T: type, arrows: rotate/resize)",
            f"Squares: {len(self.template.highlighted_cells(self.canvas))}",
        ]
        if self.hover_distance is not None:
            lines.append(f"Token (reach {self.token.reach}) to hovered square: {self.hover_distance:g} ft")
        for i, line in enumerate(lines):
            self.screen.blit(self.font.render(line, True, (255, 255, 255)), (10, 10 + i * 20))

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            self.handle_input()
            self.draw()
            pygame.display.flip()
        pygame.quit()


def main():
    viewer = TemplateViewer()
    viewer.run()


if __name__ == "__main__":
    main()
