import unittest

from perceptualcolor.device import DeviceColor, HUE_STEPS, MAX_CHANNEL


class TestDeviceColor(unittest.TestCase):

    def test_invalid(self) -> None:
        color = DeviceColor()
        self.assertFalse(color.is_valid())
        self.assertEqual(color, DeviceColor())
        self.assertEqual(str(color), '<invalid>')
        self.assertIs(color.to_rgb(), color)
        self.assertIs(color.to_hsv(), color)

    def test_rgb(self) -> None:
        color = DeviceColor.from_rgb_f(1, 0.5, 0)
        self.assertTrue(color.is_valid())
        self.assertEqual(color.spec, 'rgb')
        self.assertEqual(color.components, (MAX_CHANNEL, 32768, 0))
        self.assertEqual(color.alpha, MAX_CHANNEL)
        self.assertEqual(color.red_f, 1.0)
        self.assertAlmostEqual(color.green_f, 0.5, places=4)
        self.assertEqual(color.blue_f, 0.0)
        self.assertEqual(color.alpha_f, 1.0)

        with self.assertRaises(ValueError):
            DeviceColor.from_rgb_f(1.5, 0, 0)
        with self.assertRaises(ValueError):
            DeviceColor.from_rgb_f(0, 0, -0.1)
        with self.assertRaises(ValueError):
            DeviceColor.from_rgb_f(0, 0, 0, 2.0)

    def test_hsv(self) -> None:
        red = DeviceColor.from_hsv_f(0, 1, 1)
        self.assertEqual(red.spec, 'hsv')
        self.assertEqual(red.components, (0, MAX_CHANNEL, MAX_CHANNEL))
        self.assertEqual(red.to_rgb(), DeviceColor.from_rgb_f(1, 0, 0))
        self.assertEqual(red.rgb_f, (1.0, 0.0, 0.0))

        # A full turn is the same as no turn
        self.assertEqual(DeviceColor.from_hsv_f(1, 1, 1), red)

        cyan = DeviceColor.from_rgb_f(0, 1, 1).to_hsv()
        self.assertEqual(cyan.components, (HUE_STEPS // 2, MAX_CHANNEL, MAX_CHANNEL))
        self.assertEqual(cyan.hue_f, 0.5)
        self.assertEqual(cyan.saturation_f, 1.0)
        self.assertEqual(cyan.value_f, 1.0)

        with self.assertRaises(ValueError):
            DeviceColor.from_hsv_f(1.5, 1, 1)

    def test_achromatic_hue(self) -> None:
        gray = DeviceColor.from_rgb_f(0.5, 0.5, 0.5)
        self.assertEqual(gray.to_hsv().components[0], -1)
        self.assertEqual(gray.hue_f, -1.0)
        self.assertEqual(gray.saturation_f, 0.0)

        # The hue of a color without saturation is meaningless
        self.assertEqual(DeviceColor.from_hsv_f(0.3, 0, 0.5).components[0], -1)
        self.assertEqual(
            DeviceColor.from_hsv_f(-1, 0, 1).to_rgb(),
            DeviceColor.from_rgb_f(1, 1, 1),
        )

    def test_alpha(self) -> None:
        color = DeviceColor.from_rgb_f(0.2, 0.4, 0.6, 0.5)
        self.assertAlmostEqual(color.alpha_f, 0.5, places=4)

        opaque = color.with_alpha_f(1)
        self.assertEqual(opaque.alpha, MAX_CHANNEL)
        self.assertEqual(opaque.components, color.components)
        self.assertEqual(color.with_alpha_f(0.25).alpha, 16384)

        # Conversions retain alpha
        self.assertEqual(color.to_hsv().alpha, color.alpha)
        self.assertEqual(color.to_hsv().to_rgb().alpha, color.alpha)

    def test_parse(self) -> None:
        for text, components in (
            ('#000', (0, 0, 0)),
            ('#fff', (MAX_CHANNEL, MAX_CHANNEL, MAX_CHANNEL)),
            ('#ff0000', (MAX_CHANNEL, 0, 0)),
            ('#aabbcc', (170 * 257, 187 * 257, 204 * 257)),
            ('rgb:0/8/80', (0, 34952, 32896)),
            ('rgb:ffff/0/0', (MAX_CHANNEL, 0, 0)),
            ('rgbi:1/0.5/0', (MAX_CHANNEL, 32768, 0)),
        ):
            with self.subTest(text=text):
                color = DeviceColor.parse(text)
                self.assertEqual(color.spec, 'rgb')
                self.assertEqual(color.components, components)

        for text in ('', 'red', '#12', '#1234', '#zzzzzz', 'rgb:1/2', 'rgb:12345/0/0', 'rgbi:2/0/0'):
            with self.subTest(text=text):
                with self.assertRaises(SyntaxError):
                    DeviceColor.parse(text)

    def test_str(self) -> None:
        for text in ('#000000', '#ffffff', '#aabbcc', '#123456'):
            with self.subTest(text=text):
                self.assertEqual(str(DeviceColor.parse(text)), text)

        self.assertEqual(str(DeviceColor.parse('#abc')), '#aabbcc')
        self.assertEqual(str(DeviceColor.from_hsv_f(0, 1, 1)), '#ff0000')
