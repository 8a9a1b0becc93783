import unittest

from perceptualcolor.gamut import GAMUT_PRECISION, max_chroma, move_chroma_into_gamut
from perceptualcolor.profile import ColorSpaceProfile
from perceptualcolor.spec import Lch


class NoGamutProfile:
    """A profile stand-in, for which nothing is in gamut."""

    blackpoint_lightness = 10.0
    whitepoint_lightness = 90.0

    def in_gamut(self, *args: object) -> bool:
        return False


class TestGamutMapping(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.profile = ColorSpaceProfile()

    def test_in_gamut_is_unchanged(self) -> None:
        for lch in (
            Lch(50, 0, 0),
            Lch(50, 10, 120),
            Lch(75, 20, 300),
            Lch(self.profile.whitepoint_lightness, 0, 45),
        ):
            with self.subTest(lch=lch):
                self.assertIs(move_chroma_into_gamut(self.profile, lch), lch)

    def test_convergence(self) -> None:
        for lch in (
            Lch(50, 200, 0),
            Lch(50, 200, 135),
            Lch(30, 150, 270),
            Lch(90, 120, 100),
            Lch(5, 50, 200),
        ):
            with self.subTest(lch=lch):
                mapped = move_chroma_into_gamut(self.profile, lch)
                self.assertEqual(mapped.L, lch.L)
                self.assertEqual(mapped.h, lch.h)
                self.assertLess(mapped.C, lch.C)
                self.assertTrue(self.profile.in_gamut(mapped))
                self.assertFalse(
                    self.profile.in_gamut(mapped.L, mapped.C + 2 * GAMUT_PRECISION, mapped.h)
                )

                # Mapping is idempotent
                self.assertEqual(move_chroma_into_gamut(self.profile, mapped), mapped)

    def test_lightness_out_of_range(self) -> None:
        profile = self.profile

        self.assertEqual(
            move_chroma_into_gamut(profile, Lch(-1, 10, 30)),
            Lch(profile.blackpoint_lightness, 0, 30),
        )
        self.assertEqual(
            move_chroma_into_gamut(profile, Lch(101, 10, 30)),
            Lch(profile.whitepoint_lightness, 0, 30),
        )
        self.assertEqual(
            move_chroma_into_gamut(profile, Lch(150, 200, 250)),
            Lch(profile.whitepoint_lightness, 0, 250),
        )

    def test_neutral_axis_out_of_gamut(self) -> None:
        profile = NoGamutProfile()

        self.assertEqual(
            move_chroma_into_gamut(profile, Lch(5, 20, 60)),  # type: ignore
            Lch(10, 0, 60),
        )
        self.assertEqual(
            move_chroma_into_gamut(profile, Lch(95, 20, 60)),  # type: ignore
            Lch(90, 0, 60),
        )

        # Lightness between black and white points is left alone
        lch = Lch(50, 20, 60)
        self.assertEqual(move_chroma_into_gamut(profile, lch), lch)  # type: ignore

    def test_max_chroma(self) -> None:
        for lightness, hue in ((50, 0), (50, 135), (70, 250), (20, 300)):
            with self.subTest(lightness=lightness, hue=hue):
                chroma = max_chroma(self.profile, lightness, hue)
                self.assertGreater(chroma, 0)
                self.assertTrue(self.profile.in_gamut(lightness, chroma, hue))
                self.assertFalse(
                    self.profile.in_gamut(lightness, chroma + 2 * GAMUT_PRECISION, hue)
                )

                mapped = move_chroma_into_gamut(self.profile, Lch(lightness, 200, hue))
                self.assertAlmostEqual(mapped.C, chroma, delta=2 * GAMUT_PRECISION)

    def test_max_chroma_limits(self) -> None:
        self.assertEqual(max_chroma(self.profile, 50, 0, limit=5), 5)
        self.assertEqual(max_chroma(self.profile, -10, 0), 0)
        self.assertEqual(max_chroma(self.profile, 110, 0), 0)

        with self.assertRaises(ValueError):
            max_chroma(self.profile, 50, 0, precision=0)
        with self.assertRaises(ValueError):
            max_chroma(self.profile, 50, 0, mesh_size=0.01, precision=0.1)
