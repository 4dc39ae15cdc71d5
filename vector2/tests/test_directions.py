import unittest

import vector2
from vector2 import Vec2


class DirectionTests(unittest.TestCase):
    def test_class_attributes(self) -> None:
        self.assertEqual(Vec2.top, Vec2(0, -1))
        self.assertEqual(Vec2.left, Vec2(-1, 0))
        self.assertEqual(Vec2.right, Vec2(1, 0))
        self.assertEqual(Vec2.down, Vec2(0, 1))

    def test_module_functions(self) -> None:
        self.assertEqual(vector2.top(), Vec2(0, -1))
        self.assertEqual(vector2.left(), Vec2(-1, 0))
        self.assertEqual(vector2.right(), Vec2(1, 0))
        self.assertEqual(vector2.down(), Vec2(0, 1))

    def test_each_access_is_fresh(self) -> None:
        first = Vec2.top
        second = Vec2.top
        self.assertIsNot(first, second)
        first.set_xy(5, 5)
        self.assertEqual(Vec2.top, Vec2(0, -1))
        self.assertIsNot(vector2.down(), vector2.down())

    def test_directions_are_unit_length(self) -> None:
        for direction in (Vec2.top, Vec2.left, Vec2.right, Vec2.down):
            self.assertEqual(direction.length(), 1)

    def test_subclass_access_builds_subclass(self) -> None:
        class Point(Vec2):
            pass

        self.assertIsInstance(Point.right, Point)
        self.assertIsInstance(Point(1, 2).clone(), Point)


if __name__ == "__main__":
    unittest.main()
