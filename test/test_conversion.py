import math
import unittest

from perceptualcolor.conversion import (
    D50,
    get_converter,
    lab_to_lch,
    lch_to_lab,
    srgb_to_linear_srgb,
    xyz_d50_to_xyz,
    xyz_to_xyz_d50,
)
from perceptualcolor.space import resolve


class TestConversion(unittest.TestCase):

    def assertCloseEnough(
        self,
        coordinates1: tuple[float, ...],
        coordinates2: tuple[float, ...],
        places: int = 6,
    ) -> None:
        self.assertEqual(len(coordinates1), len(coordinates2))
        for c1, c2 in zip(coordinates1, coordinates2):
            self.assertAlmostEqual(c1, c2, places=places)

    def test_linearization(self) -> None:
        self.assertCloseEnough(srgb_to_linear_srgb(0, 0.5, 1), (0, 0.21404114048223255, 1))
        # Negative values are linearized symmetrically
        self.assertCloseEnough(
            srgb_to_linear_srgb(-0.5, 0.02, 0), (-0.21404114048223255, 0.02 / 12.92, 0)
        )

    def test_chromatic_adaptation(self) -> None:
        # Bradford maps white point onto white point
        d65 = xyz_d50_to_xyz(*D50)
        self.assertCloseEnough(d65, (0.3127 / 0.3290, 1, (1 - 0.3127 - 0.3290) / 0.3290))
        self.assertCloseEnough(xyz_to_xyz_d50(*d65), D50)

    def test_srgb_to_lab(self) -> None:
        convert = get_converter('srgb', 'lab')
        self.assertEqual(
            getattr(convert, 'route'), ('srgb', 'linear_srgb', 'xyz', 'xyz_d50', 'lab')
        )

        for rgb, lab in (
            ((0, 0, 0), (0, 0, 0)),
            ((1, 1, 1), (100, 0, 0)),
            ((1, 0, 0), (54.29, 80.81, 69.89)),
            ((0, 1, 0), (87.82, -79.29, 80.99)),
            ((0, 0, 1), (29.57, 68.29, -112.03)),
        ):
            with self.subTest(rgb=rgb):
                for actual, expected in zip(convert(*rgb), lab):
                    self.assertAlmostEqual(actual, expected, delta=0.1)

    def test_round_trip(self) -> None:
        for source in ('srgb', 'p3'):
            to_lch = get_converter(source, 'lch')
            from_lch = get_converter('lch', source)
            for rgb in (
                (0.0, 0.0, 0.0),
                (1.0, 1.0, 1.0),
                (0.5, 0.5, 0.5),
                (1.0, 0.0, 0.0),
                (0.2, 0.6, 0.9),
                (0.95, 0.85, 0.05),
            ):
                with self.subTest(space=source, rgb=rgb):
                    self.assertCloseEnough(from_lch(*to_lch(*rgb)), rgb, places=9)

    def test_p3_is_wider_than_srgb(self) -> None:
        p3_to_srgb = get_converter('p3', 'srgb')
        srgb_to_p3 = get_converter('srgb', 'p3')
        srgb = resolve('srgb')
        p3 = resolve('p3')

        self.assertFalse(srgb.in_gamut(*p3_to_srgb(0, 1, 0)))
        self.assertTrue(p3.in_gamut(*srgb_to_p3(0, 1, 0)))
        self.assertCloseEnough(srgb_to_p3(1, 1, 1), (1, 1, 1))

    def test_lab_to_lch(self) -> None:
        for lab, lch in (
            ((50, 0, 0), (50, 0, 0)),
            ((50, 10, 0), (50, 10, 0)),
            ((50, 0, 10), (50, 10, 90)),
            ((50, -10, 0), (50, 10, 180)),
            ((50, 0, -10), (50, 10, 270)),
            ((75, 3, 4), (75, 5, math.degrees(math.atan2(4, 3)))),
        ):
            with self.subTest(lab=lab):
                self.assertCloseEnough(lab_to_lch(*lab), lch, places=9)

        self.assertCloseEnough(lch_to_lab(50, 10, 90), (50, 0, 10), places=9)
        self.assertCloseEnough(lch_to_lab(50, 10, 450), (50, 0, 10), places=9)

    def test_converter_cache(self) -> None:
        self.assertIs(get_converter('srgb', 'lch'), get_converter('srgb', 'lch'))
        self.assertEqual(get_converter('lab', 'lab')(1, 2, 3), (1, 2, 3))
        self.assertEqual(get_converter('lch', 'p3').__name__, 'lch_to_p3')

    def test_unknown_space(self) -> None:
        with self.assertRaises(ValueError):
            get_converter('cmyk', 'srgb')
        with self.assertRaises(ValueError):
            get_converter('srgb', 'hsl')
        with self.assertRaises(ValueError):
            get_converter('oklab', 'oklab')
