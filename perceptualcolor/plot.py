"""
Plotting the chroma/lightness plane of a single hue.
"""
import sys

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("perceptualcolor.plot requires matplotlib. Please install the package,")
    print("e.g., by executing `pip install matplotlib`, and then")
    print("run `python -m perceptualcolor.plot` again.")
    sys.exit(1)

import argparse
from typing import Any

from .color import FullColor, OutOfGamut
from .gamut import max_chroma
from .polar import normalize_angle
from .profile import ColorSpaceProfile
from .spec import Lch, Rgb


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="""
            Plot the chroma/lightness plane of CIE LCh for one hue. In-gamut
            samples are drawn in their own color, out-of-gamut samples are left
            transparent, and a line traces the largest in-gamut chroma for each
            lightness. If the -c/--color option is specified, this script also
            marks that LCh color and the in-gamut color resulting from
            sacrificing its chroma.
        """,
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="run silently, without printing status updates"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="run in verbose mode, which prints extra information to the console"
    )
    parser.add_argument(
        "--hue",
        type=float,
        default=0.0,
        help="plot the plane for the hue in degrees (default: 0)",
    )
    parser.add_argument(
        "-p", "--profile",
        choices=("srgb", "p3"),
        default="srgb",
        help="use the RGB working space as profile (default: srgb)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=101,
        help="sample lightness at as many steps (default: 101)",
    )
    parser.add_argument(
        "--max-chroma",
        type=float,
        default=150.0,
        help="extend the chroma axis to this value (default: 150)",
    )
    parser.add_argument(
        "-c", "--color",
        nargs=3,
        type=float,
        metavar=("L", "C", "h"),
        help="also mark the LCh color and its gamut-mapped counterpart",
    )
    parser.add_argument(
        "-o", "--output",
        help="write plot to the named file"
    )
    return parser


def sample_diagram(
    profile: ColorSpaceProfile,
    hue: float,
    size: int,
    chroma_limit: float = 150.0,
) -> list[list[None | Rgb]]:
    """
    Sample the chroma/lightness plane for the hue. The result has ``size``
    rows, starting with lightness 100 in the first row and ending with
    lightness 0 in the last row. Columns start with chroma 0 and use the same
    spacing as rows up to ``chroma_limit``. Each sample is the in-gamut RGB
    color or ``None`` if the sample is out of gamut.
    """
    if size < 2:
        raise ValueError(f'diagram size {size} is smaller than 2')

    step = 100 / (size - 1)
    columns = int(chroma_limit / step) + 1
    hue = normalize_angle(hue)

    return [
        [profile.to_rgb(Lch(100 - row * step, column * step, hue)) for column in range(columns)]
        for row in range(size)
    ]


class DiagramPlotter:
    def __init__(
        self,
        profile: ColorSpaceProfile,
        hue: float,
        volume: int = 1,
    ) -> None:
        self._profile = profile
        self._hue = normalize_angle(hue)
        self._volume = volume

    def status(self, msg: str) -> None:
        if self._volume >= 1:
            print(msg)

    def detail(self, msg: str) -> None:
        if self._volume >= 2:
            print(msg)

    def boundary(self, size: int) -> tuple[list[float], list[float]]:
        """Trace the largest in-gamut chroma for each lightness."""
        lightness: list[float] = []
        chroma: list[float] = []
        for index in range(size):
            L = 100 * index / (size - 1)
            C = max_chroma(self._profile, L, self._hue)
            self.detail(f"L={L:6.2f}  max C={C:8.3f}")
            lightness.append(L)
            chroma.append(C)
        return lightness, chroma

    def create_figure(
        self,
        size: int,
        chroma_limit: float,
        color: None | Lch = None,
    ) -> Any:
        self.status(
            f"Sampling {self._profile.description} gamut "
            f"at hue {self._hue:.1f}° with {size} lightness steps"
        )
        samples = sample_diagram(self._profile, self._hue, size, chroma_limit)
        image = [
            [(0.0, 0.0, 0.0, 0.0) if rgb is None else (*rgb, 1.0) for rgb in row]
            for row in samples
        ]

        fig, axes = plt.subplots(figsize=(8, 6))  # type: ignore
        axes.imshow(
            image,
            extent=(0, len(image[0]) * 100 / (size - 1), 0, 100),
            interpolation="nearest",
            aspect="auto",
        )

        self.status("Tracing gamut boundary")
        lightness, chroma = self.boundary(size)
        axes.plot(chroma, lightness, color="#000", linewidth=1)

        if color is not None:
            mapped = FullColor(self._profile, color, OutOfGamut.SacrificeChroma).lch
            self.status(
                f"LCh({color.L:.2f}, {color.C:.2f}, {color.h:.1f}) maps to "
                f"LCh({mapped.L:.2f}, {mapped.C:.3f}, {mapped.h:.1f})"
            )
            axes.plot([color.C], [color.L], marker="x", color="#000", markersize=8)
            axes.plot(
                [mapped.C], [mapped.L],
                marker="o", markerfacecolor="none", color="#000", markersize=8,
            )
            axes.annotate(
                "",
                xy=(mapped.C, mapped.L),
                xytext=(color.C, color.L),
                arrowprops=dict(arrowstyle="->", color="#444"),
            )

        axes.set_xlim(0, chroma_limit)
        axes.set_ylim(0, 100)
        axes.set_xlabel("Chroma (C)")
        axes.set_ylabel("Lightness (L)")
        fig.suptitle(
            f"{self._profile.description} Gamut at Hue {self._hue:g}°",
            weight="bold", size=13,
        )
        axes.set_title(
            f"Black point L={self._profile.blackpoint_lightness:g}, "
            f"white point L={self._profile.whitepoint_lightness:g}",
            style="italic", size=11,
        )
        return fig


def main(options: Any) -> None:
    profile = ColorSpaceProfile(options.profile)
    plotter = DiagramPlotter(
        profile,
        options.hue,
        volume=1-options.quiet+options.verbose,
    )

    color = None if options.color is None else Lch(*options.color)
    fig = plotter.create_figure(options.size, options.max_chroma, color)

    file_name = options.output or f"{options.profile}-hue-{options.hue:g}.svg"
    plotter.status(f"Saving plot to `{file_name}`")
    fig.savefig(file_name, bbox_inches="tight")  # type: ignore


if __name__ == "__main__":
    main(create_parser().parse_args())
