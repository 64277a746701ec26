"""
PF2e Reference: N/A - Client-only visuals.
Purpose: Draw the square grid and highlight layers onto a pygame surface.
Dependencies: pygame, core/grid/canvas.py, core/config.py.
Ext Hooks: Dashed borders per template type.
Client Only: Visuals; highlight cells come from core/highlight/area.py.
"""

import pygame
from typing import Tuple
from core.config import HIGHLIGHT_ALPHA
from core.grid.canvas import Grid, HighlightLayer


def hex_to_rgb(color: int) -> Tuple[int, int, int]:
    """0xRRGGBB -> (r, g, b)."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def draw_square_grid(screen, grid: Grid, color=(60, 60, 60)):
    """Draw grid lines covering the whole surface."""
    width, height = screen.get_size()
    x = 0
    while x <= width:
        pygame.draw.line(screen, color, (x, 0), (x, height), 1)
        x += grid.w
    y = 0
    while y <= height:
        pygame.draw.line(screen, color, (0, y), (width, y), 1)
        y += grid.h


def draw_highlight_layer(screen, layer: HighlightLayer, grid: Grid, alpha=HIGHLIGHT_ALPHA):
    """Draw every highlighted square as a translucent fill with a solid border."""
    if layer is None or not layer.cells:
        return

    cell_w, cell_h = int(grid.w), int(grid.h)
    for (x, y), colors in layer.cells.items():
        # Draw semi-transparent overlay
        temp_surf = pygame.Surface((cell_w, cell_h), pygame.SRCALPHA)
        temp_surf.fill(hex_to_rgb(colors.fill) + (alpha,))
        screen.blit(temp_surf, (int(x), int(y)))
        pygame.draw.rect(screen, hex_to_rgb(colors.border), pygame.Rect(int(x), int(y), cell_w, cell_h), 1)


def draw_highlight_layers(screen, grid: Grid, alpha=HIGHLIGHT_ALPHA):
    for layer in grid.highlight_layers.values():
        draw_highlight_layer(screen, layer, grid, alpha)
