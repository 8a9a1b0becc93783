import importlib.util
import unittest

from perceptualcolor.profile import ColorSpaceProfile
from perceptualcolor.spec import Lch


HAS_MATPLOTLIB = importlib.util.find_spec('matplotlib') is not None


@unittest.skipUnless(HAS_MATPLOTLIB, 'plotting requires matplotlib')
class TestPlot(unittest.TestCase):

    def test_sample_diagram(self) -> None:
        from perceptualcolor.plot import sample_diagram

        profile = ColorSpaceProfile()
        samples = sample_diagram(profile, 0, 11, 100)

        # Ten lightness steps of 10 each, for lightness and chroma
        self.assertEqual(len(samples), 11)
        for row in samples:
            self.assertEqual(len(row), 11)

        # Row 0 is L=100, last row is L=0, and column 0 is the neutral axis
        self.assertEqual(samples[5][0], profile.to_rgb(Lch(50, 0, 0)))
        self.assertIsNotNone(samples[5][0])
        self.assertIsNone(samples[0][10])
        self.assertIsNotNone(samples[5][1])
        self.assertIsNone(samples[5][10])
        self.assertIsNone(samples[10][10])

        with self.assertRaises(ValueError):
            sample_diagram(profile, 0, 1)

    def test_parser(self) -> None:
        from perceptualcolor.plot import create_parser

        options = create_parser().parse_args(['--hue', '120', '-p', 'p3', '-c', '50', '200', '120'])
        self.assertEqual(options.hue, 120)
        self.assertEqual(options.profile, 'p3')
        self.assertEqual(options.color, [50, 200, 120])
        self.assertEqual(options.size, 101)
