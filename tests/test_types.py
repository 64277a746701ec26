import unittest
from core.grid.canvas import HighlightLayer
from core.grid.types import AngularSector, Displacement, GridSquareCount, Point, Rectangle, ShapeSpec, ShapeType


class TestShapeSpec(unittest.TestCase):
    def test_defaults(self):
        shape = ShapeSpec(ShapeType.BURST, Point(0, 0), 20)
        self.assertEqual(shape.angle, 0)
        self.assertEqual(shape.direction, 45)

    def test_none_means_default(self):
        shape = ShapeSpec('cone', Point(0, 0), 15, angle=None, direction=None)
        self.assertEqual((shape.angle, shape.direction), (0, 45))
        self.assertIs(shape.type, ShapeType.CONE)
        self.assertTrue(shape.is_cone)

    def test_invalid_type(self):
        with self.assertRaises(ValueError):
            ShapeSpec('line', Point(0, 0), 30)

    def test_sector_from_direction(self):
        shape = ShapeSpec(ShapeType.CONE, Point(0, 0), 15, angle=90, direction=0)
        self.assertEqual(shape.sector, AngularSector(315, 45))


class TestAngularSector(unittest.TestCase):
    def test_wraps_past_zero(self):
        sector = AngularSector.from_direction(0, 20)
        self.assertEqual((sector.min_angle, sector.max_angle), (350, 10))
        self.assertTrue(sector.contains(0))
        self.assertTrue(sector.contains(5))
        self.assertFalse(sector.contains(180))

    def test_normalizes_direction(self):
        sector = AngularSector.from_direction(-90, 90)
        self.assertEqual((sector.min_angle, sector.max_angle), (225, 315))
        self.assertTrue(sector.contains(270))
        self.assertFalse(sector.contains(90))


class TestRectangle(unittest.TestCase):
    def test_edges(self):
        rect = Rectangle(10, 20, 30, 40)
        self.assertEqual((rect.left, rect.top, rect.right, rect.bottom), (10, 20, 40, 60))
        self.assertEqual(rect.center, Point(25, 40))

    def test_negative_size_is_normalized(self):
        rect = Rectangle(100, 100, -50, -20)
        self.assertEqual((rect.left, rect.top, rect.width, rect.height), (50, 80, 50, 20))

    def test_overlap_is_strict(self):
        a = Rectangle(0, 0, 100, 100)
        self.assertTrue(a.overlaps(Rectangle(99, 99, 100, 100)))
        self.assertFalse(a.overlaps(Rectangle(100, 0, 100, 100)))
        self.assertFalse(a.overlaps(Rectangle(0, 100, 100, 100)))


class TestDisplacement(unittest.TestCase):
    def test_between(self):
        segment = Displacement.between(Point(10, 10), Point(40, 50))
        self.assertEqual((segment.dx, segment.dy), (30, 40))
        self.assertEqual(segment.length, 50)

    def test_angle_is_screen_convention(self):
        self.assertAlmostEqual(Displacement(0, 10).angle, 90)
        self.assertAlmostEqual(Displacement(-10, 0).angle, 180)

    def test_square_count(self):
        self.assertEqual(GridSquareCount.from_cells(3, 5), GridSquareCount(diagonal=3, straight=2))


class TestHighlightLayer(unittest.TestCase):
    def test_paint_once(self):
        layer = HighlightLayer('Template.a')
        self.assertTrue(layer.paint_cell(0, 0, 0x000000, 0xFF0000))
        self.assertFalse(layer.paint_cell(0, 0, 0x000000, 0xFF0000))
        self.assertEqual(len(layer), 1)
        self.assertIn((0, 0), layer)

    def test_clear(self):
        layer = HighlightLayer('Template.a')
        layer.paint_cell(0, 0, 0, 0)
        self.assertIs(layer.clear(), layer)
        self.assertEqual(len(layer), 0)


if __name__ == '__main__':
    unittest.main()
