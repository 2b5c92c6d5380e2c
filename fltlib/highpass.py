"""Butterworth high-pass filter."""

from __future__ import annotations

import math

from .filter import Filter, Stage

__all__ = ["Highpass", "butterworth_coefficients"]


def butterworth_coefficients(order: int, fc: float, fs: float) -> list[Stage]:
    """Second-order sections of a Butterworth high-pass filter.

    An odd order is rounded up to the next even one.
    """
    if order < 0:
        raise ValueError("order must not be negative")
    if fs <= 0:
        raise ValueError("sampling rate must be positive")
    if order % 2:
        order += 1
    a = math.tan(math.pi * fc / fs)
    stages = []
    for i in range(order // 2):
        r = math.sin(math.pi * (2.0 * i + 1.0) / (2.0 * order))
        s = a * a + 2 * a * r + 1
        stages.append(
            Stage(
                a=(1.0, -2.0 * (1 - a * a) / s, (a * a - 2.0 * a * r + 1.0) / s),
                b=(1 / s, -2.0 / s, 1 / s),
            )
        )
    return stages


class Highpass(Filter):
    """Butterworth high-pass filter with cutoff ``fc``."""

    def __init__(self, fc: float, fs: float, order: int) -> None:
        stages = butterworth_coefficients(order, fc, fs)
        super().__init__(fs, order, "Highpass", stages[: order // 2])
        self.fc = fc