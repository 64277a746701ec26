import os
import unittest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame
from client.render.highlight_renderer import draw_highlight_layer, draw_square_grid, hex_to_rgb
from core.grid.canvas import Grid, HighlightLayer


class TestHighlightRenderer(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    def setUp(self):
        self.grid = Grid(size=10, distance=5)
        self.screen = pygame.Surface((40, 40))
        self.screen.fill((0, 0, 0))

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb(0xFF9829), (255, 152, 41))
        self.assertEqual(hex_to_rgb(0x000000), (0, 0, 0))

    def test_draws_border_and_fill(self):
        layer = HighlightLayer('Template.a')
        layer.paint_cell(10, 10, 0x00FF00, 0xFF0000)
        draw_highlight_layer(self.screen, layer, self.grid, alpha=128)

        self.assertEqual(tuple(self.screen.get_at((10, 10)))[:3], (0, 255, 0))
        r, g, b = tuple(self.screen.get_at((15, 15)))[:3]
        self.assertGreater(r, 0)
        self.assertEqual((g, b), (0, 0))
        # Outside the highlighted square stays untouched
        self.assertEqual(tuple(self.screen.get_at((30, 30)))[:3], (0, 0, 0))

    def test_empty_layer_draws_nothing(self):
        draw_highlight_layer(self.screen, HighlightLayer('Template.a'), self.grid)
        draw_highlight_layer(self.screen, None, self.grid)
        self.assertEqual(tuple(self.screen.get_at((15, 15)))[:3], (0, 0, 0))

    def test_grid_lines(self):
        draw_square_grid(self.screen, self.grid, color=(60, 60, 60))
        self.assertEqual(tuple(self.screen.get_at((10, 5)))[:3], (60, 60, 60))
        self.assertEqual(tuple(self.screen.get_at((5, 5)))[:3], (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
