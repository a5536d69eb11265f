import unittest

from core.color import Color, WHITE


class ColorTests(unittest.TestCase):
    def test_default_is_black_sentinel(self) -> None:
        self.assertTrue(Color().is_black())
        self.assertFalse(Color(0, 0, 0, 1).is_black())

    def test_add_and_multiply(self) -> None:
        a = Color(0.1, 0.2, 0.3, 1.0)
        b = Color(0.5, 0.5, 0.5, 0.5)
        total = a + b
        self.assertAlmostEqual(total.red, 0.6)
        self.assertAlmostEqual(total.alpha, 1.5)

        product = a * b
        self.assertAlmostEqual(product.green, 0.1)
        self.assertAlmostEqual(product.alpha, 0.5)

        scaled = a * 2
        self.assertAlmostEqual(scaled.blue, 0.6)
        self.assertEqual(2 * a, scaled)

    def test_white_is_identity_for_component_product(self) -> None:
        c = Color(0.25, 0.5, 0.75, 1.0)
        self.assertEqual(c * WHITE, c)

    def test_from_sequence(self) -> None:
        self.assertEqual(Color.from_sequence([0.1, 0.2, 0.3]), Color(0.1, 0.2, 0.3, 1.0))
        self.assertEqual(Color.from_sequence([0.1, 0.2, 0.3, 0.4]), Color(0.1, 0.2, 0.3, 0.4))
        with self.assertRaises(ValueError):
            Color.from_sequence([1, 2])

    def test_rgba8_is_clamped(self) -> None:
        self.assertEqual(Color(1.4, -0.2, 0.5, 1.0).to_rgba8(), (255, 0, 128, 255))


if __name__ == "__main__":
    unittest.main()
