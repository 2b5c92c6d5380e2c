"""Half- and full-wave rectifier."""

from __future__ import annotations

from .filter import Filter

__all__ = ["Rectifier"]


def _half_wave(x: float) -> float:
    return max(x, 0.0)


class Rectifier(Filter):
    """Rectifier: keeps positive values, or the magnitude when double sided."""

    def __init__(self, fs: float, double_sided: bool = False) -> None:
        name = "Rectifier" + (" (double sided)" if double_sided else " (single sided)")
        super().__init__(fs, name=name, filtering_function=abs if double_sided else _half_wave)
        self.double_sided = double_sided