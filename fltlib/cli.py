"""Command that filters a test signal and writes the result to a text file."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

from .bandpass import Bandpass
from .bandstop import Bandstop
from .filter import Filter
from .highpass import Highpass
from .lowpass import Lowpass
from .rectifier import Rectifier

__all__ = ["make_filter", "test_signal", "main"]

_SAMPLES = 1000
_DT = 0.001


def make_filter(choice: int, fs: float) -> Filter:
    """Build the demonstration filter selected by ``choice``."""
    if choice == 0:
        return Lowpass(50, fs, 20)
    if choice == 1:
        return Highpass(50, fs, 20)
    if choice == 2:
        return Bandpass(49, 80, fs, 20)
    if choice == 3:
        return Bandstop(48, 52, fs, 40)
    if choice == 4:
        return Rectifier(fs)
    return Lowpass(50, fs, 2)


def test_signal(n: int, dt: float) -> tuple[list[float], list[float]]:
    """Timestamps and a sum of 10 Hz, 50 Hz and 100 Hz sines sampled every ``dt``."""
    timestamps = [i * dt for i in range(n)]
    data = [
        math.sin(2 * math.pi * 10 * t)
        + math.sin(2 * math.pi * 100 * t)
        + math.sin(2 * math.pi * 50 * t)
        for t in timestamps
    ]
    return timestamps, data


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fltlib",
        description="Filter a test signal and write time, raw and filtered columns.",
    )
    parser.add_argument(
        "choice",
        type=int,
        help="0 lowpass, 1 highpass, 2 bandpass, 3 bandstop, 4 rectifier, other: low-order lowpass",
    )
    parser.add_argument("-o", "--output", default="data.txt", help="output file")
    args = parser.parse_args(argv)

    fs = 1 / _DT
    timestamps, raw = test_signal(_SAMPLES, _DT)
    filt = make_filter(args.choice, fs)
    filt.print_coefficients()
    filtered = filt.apply_many(raw)

    with open(args.output, "w", encoding="utf-8") as fh:
        for t, r, f in zip(timestamps, raw, filtered):
            fh.write(f"{t:f} {r:f} {f:f}\n")
    return 0