import argparse

from perceptualcolor import (
    ColorSpaceProfile,
    FullColor,
    Lch,
    max_chroma,
    OutOfGamut,
)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='map a ring of LCh colors with equal lightness and chroma into gamut'
    )
    parser.add_argument(
        '-p', '--profile',
        choices=('srgb', 'p3'),
        default='srgb',
        help='use the RGB working space as profile (default: srgb)',
    )
    parser.add_argument(
        '-L', '--lightness',
        type=float,
        default=50.0,
        help='use the lightness for all colors (default: 50)',
    )
    parser.add_argument(
        '-C', '--chroma',
        type=float,
        default=100.0,
        help='use the chroma for all colors (default: 100)',
    )
    parser.add_argument(
        '--steps',
        type=int,
        default=12,
        help='sample as many hues around the circle (default: 12)',
    )
    return parser


def main() -> None:
    options = create_parser().parse_args()
    profile = ColorSpaceProfile(options.profile)

    print(f'{profile.description}: black point L={profile.blackpoint_lightness:g}, '
          f'white point L={profile.whitepoint_lightness:g}\n')
    print('   hue  max C   mapped C  color')

    for index in range(options.steps):
        hue = 360 * index / options.steps
        limit = max_chroma(profile, options.lightness, hue)
        color = FullColor(
            profile,
            Lch(options.lightness, options.chroma, hue),
            OutOfGamut.SacrificeChroma,
        )
        r, g, b = (round(c * 255) for c in color.rgb)
        swatch = f'\x1b[48;2;{r};{g};{b}m      \x1b[0m'
        print(f'{hue:6.1f} {limit:7.3f}  {color.lch.C:8.3f}  {swatch} {color.rgb_color}')


if __name__ == '__main__':
    main()
