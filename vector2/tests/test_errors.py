import unittest

from vector2 import DivisionByZeroError, Vec2


class DivisionByZeroErrorTests(unittest.TestCase):
    def test_caught_as_builtin_errors(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            Vec2(1, 2).div(0)
        with self.assertRaises(ValueError):
            Vec2(1, 2).div(0.0)

    def test_message_names_vector(self) -> None:
        with self.assertRaises(DivisionByZeroError) as ctx:
            Vec2(1, 2).div(0)
        self.assertEqual(str(ctx.exception), "Cannot divide Vector2(1, 2) by zero.")

    def test_failure_is_logged(self) -> None:
        with self.assertLogs("vector2.vec2", level="DEBUG") as logs:
            with self.assertRaises(DivisionByZeroError):
                Vec2(1, 2) / 0
        self.assertIn("Vector2(1, 2)", logs.output[0])

    def test_norm_and_move_toward_never_raise(self) -> None:
        self.assertEqual(Vec2().norm(), Vec2())
        self.assertEqual(Vec2().move_toward(Vec2(), 1), Vec2())


if __name__ == "__main__":
    unittest.main()
