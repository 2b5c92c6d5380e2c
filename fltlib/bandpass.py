"""Butterworth band-pass filter."""

from __future__ import annotations

import math

from .filter import Filter, Stage

__all__ = ["Bandpass", "butterworth_coefficients"]


def _round_order(order: int, fs: float) -> int:
    if order < 0:
        raise ValueError("order must not be negative")
    if fs <= 0:
        raise ValueError("sampling rate must be positive")
    if order % 4:
        order += 4 - order % 4
    return order


def butterworth_coefficients(order: int, low: float, high: float, fs: float) -> list[Stage]:
    """Fourth-order sections of a Butterworth band-pass filter.

    The order is rounded up to a multiple of four.
    """
    order = _round_order(order, fs)
    a = math.cos(math.pi * (high + low) / fs) / math.cos(math.pi * (high - low) / fs)
    b = math.tan(math.pi * (high - low) / fs)
    stages = []
    for i in range(order // 4):
        r = math.sin(math.pi * (2.0 * i + 1.0) / order)
        s = b * b + 2 * b * r + 1
        stages.append(
            Stage(
                a=(
                    1.0,
                    -4.0 * a * (1.0 + b * r) / s,
                    -2.0 * (b * b - 2.0 * a * a - 1.0) / s,
                    -4.0 * a * (1.0 - b * r) / s,
                    (b * b - 2.0 * b * r + 1.0) / s,
                ),
                b=(b * b / s, 0.0, -2.0 * b * b / s, 0.0, b * b / s),
            )
        )
    return stages


class Bandpass(Filter):
    """Butterworth band-pass filter between ``low`` and ``high``."""

    def __init__(self, low: float, high: float, fs: float, order: int) -> None:
        rounded = _round_order(order, fs)
        super().__init__(fs, rounded, "Bandpass", butterworth_coefficients(order, low, high, fs))
        self.low = low
        self.high = high