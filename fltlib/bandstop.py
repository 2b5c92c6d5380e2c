"""Butterworth band-stop filter."""

from __future__ import annotations

import math

from .filter import Filter, Stage

__all__ = ["Bandstop", "butterworth_coefficients"]


def _round_order(order: int, fs: float) -> int:
    if order < 0:
        raise ValueError("order must not be negative")
    if fs <= 0:
        raise ValueError("sampling rate must be positive")
    if order % 4:
        order += 4 - order % 4
    return order


def butterworth_coefficients(order: int, low: float, high: float, fs: float) -> list[Stage]:
    """Fourth-order sections of a Butterworth band-stop filter.

    The order is rounded up to a multiple of four.
    """
    order = _round_order(order, fs)
    a = math.cos(math.pi * (high + low) / fs) / math.cos(math.pi * (high - low) / fs)
    b = math.tan(math.pi * (high - low) / fs)
    stages = []
    for i in range(order // 4):
        r = math.sin(math.pi * (2.0 * i + 1.0) / order)
        s = b * b + 2 * b * r + 1
        denominator = (
            1.0,
            -4.0 * a * (1.0 + b * r) / s,
            -2.0 * (b * b - 2.0 * a * a - 1.0) / s,
            -4.0 * a * (1.0 - b * r) / s,
            (b * b - 2.0 * b * r + 1.0) / s,
        )
        r = 4.0 * a
        s2 = 4.0 * a * a + 2.0
        numerator = (1 / s, -r / s, s2 / s, -r / s, 1 / s)
        stages.append(Stage(a=denominator, b=numerator))
    return stages


class Bandstop(Filter):
    """Butterworth band-stop filter rejecting ``low`` to ``high``."""

    def __init__(self, low: float, high: float, fs: float, order: int) -> None:
        rounded = _round_order(order, fs)
        super().__init__(fs, rounded, "Bandstop", butterworth_coefficients(order, low, high, fs))
        self.low = low
        self.high = high