"""Butterworth and Chebyshev low-pass filters."""

from __future__ import annotations

import math

from .filter import Filter, Stage

__all__ = ["Lowpass", "butterworth_coefficients", "chebyshev_coefficients"]


def _check(order: int, fs: float) -> int:
    if order < 0:
        raise ValueError("order must not be negative")
    if fs <= 0:
        raise ValueError("sampling rate must be positive")
    return order + 1 if order % 2 else order


def butterworth_coefficients(order: int, fc: float, fs: float) -> list[Stage]:
    """Second-order sections of a Butterworth low-pass filter.

    An odd order is rounded up to the next even one.
    """
    order = _check(order, fs)
    a = math.tan(math.pi * fc / fs)
    stages = []
    for i in range(order // 2):
        r = math.sin(math.pi * (2.0 * i + 1.0) / (2.0 * order))
        s = a * a + 2 * a * r + 1
        stages.append(
            Stage(
                a=(1.0, -2.0 * (1 - a * a) / s, (a * a - 2.0 * a * r + 1.0) / s),
                b=(a * a / s, 2.0 * a * a / s, a * a / s),
            )
        )
    return stages


def chebyshev_coefficients(order: int, fc: float, ep: float, fs: float) -> list[Stage]:
    """Second-order sections of a Chebyshev low-pass filter with ripple ``ep``.

    An odd order is rounded up to the next even one.
    """
    order = _check(order, fs)
    if ep <= 0:
        raise ValueError("ripple factor must be positive")
    a = math.tan(math.pi * fc / fs)
    u = math.log((1.0 + math.sqrt(1.0 + ep * ep)) / ep)
    su = math.sinh(u / order)
    cu = math.cosh(u / order)
    stages = []
    for i in range(order // 2):
        angle = math.pi * (2.0 * i + 1.0) / (2.0 * order)
        b = math.sin(angle) * su
        c = math.cos(angle) * cu
        c = b * b + c * c
        s = a * a * c + 2.0 * a * b + 1.0
        gain = a * a / (4 * s) * 2 / ep
        stages.append(
            Stage(
                a=(1.0, -2.0 * (1 - a * a * c) / s, (a * a * c - 2.0 * a * b + 1.0) / s),
                b=(gain, 2.0 * gain, gain),
            )
        )
    return stages


class Lowpass(Filter):
    """Low-pass filter: Butterworth, or Chebyshev when a ripple ``ep`` is given."""

    def __init__(self, fc: float, fs: float, order: int, ep: float | None = None) -> None:
        if ep is None:
            stages = butterworth_coefficients(order, fc, fs)
        else:
            stages = chebyshev_coefficients(order, fc, ep, fs)
        # Only order // 2 sections run, so an odd order drops its last section.
        super().__init__(fs, order, "Lowpass", stages[: order // 2])
        self.fc = fc
        self.ep = ep