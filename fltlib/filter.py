"""Cascaded IIR filter core and resampling helpers."""

from __future__ import annotations

import math
import sys
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

__all__ = [
    "Stage",
    "Filter",
    "interpolate",
    "resample_to_uniform",
    "resample_to_original",
]


def interpolate(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Linear interpolation at ``x`` through the points (x1, y1) and (x2, y2)."""
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def resample_to_uniform(
    data: Sequence[float], timestamps: Sequence[float], sampling_rate: float
) -> list[float]:
    """Resample irregularly timed data onto a uniform grid at ``sampling_rate``.

    The grid starts at the first timestamp and runs up to and including the
    last one. Points outside the timestamps take the nearest end value.
    """
    if not timestamps or not data:
        raise ValueError("data and timestamps must not be empty")
    if len(data) != len(timestamps):
        raise ValueError("data and timestamps must have the same length")

    start_time = timestamps[0]
    end_time = timestamps[-1]
    dt = 1 / sampling_rate

    result: list[float] = []
    t = start_time
    while t <= end_time:
        index = bisect_right(timestamps, t)
        if index == 0:
            result.append(data[0])
        elif index == len(timestamps):
            result.append(data[-1])
        else:
            result.append(
                interpolate(
                    t,
                    timestamps[index - 1],
                    data[index - 1],
                    timestamps[index],
                    data[index],
                )
            )
        t += dt
    return result


def resample_to_original(
    data: Sequence[float], src_fs: float, timestamps: Sequence[float]
) -> list[float]:
    """Project uniformly sampled data (rate ``src_fs``) back onto ``timestamps``.

    The uniform data is taken to start at the first timestamp. Returns an
    empty list when there is no data, no timestamps or a non-positive rate.
    """
    if not data or not timestamps or src_fs <= 0.0:
        return []

    t0 = timestamps[0]
    dt = 1.0 / src_fs
    last = len(data) - 1

    result: list[float] = []
    for t in timestamps:
        p = (t - t0) * src_fs
        if p <= 0.0:
            result.append(data[0])
        elif p >= float(last):
            result.append(data[-1])
        else:
            idx = math.floor(p)
            t1 = t0 + idx * dt
            t2 = t1 + dt
            result.append(interpolate(t, t1, data[idx], t2, data[idx + 1]))
    return result


@dataclass(frozen=True)
class Stage:
    """One section of a cascade: denominator ``a`` and numerator ``b``."""

    a: tuple[float, ...]
    b: tuple[float, ...]

    def __post_init__(self) -> None:
        a = tuple(float(v) for v in self.a)
        b = tuple(float(v) for v in self.b)
        if not a:
            raise ValueError("a stage needs at least one coefficient")
        if len(a) != len(b):
            raise ValueError("a and b coefficients must have the same length")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    def __len__(self) -> int:
        return len(self.a)


@dataclass(eq=False)
class _Timeline:
    timestamp: float = 0.0
    value: float = 0.0
    last_filtered: float = 0.0
    filtered: float = 0.0


class Filter:
    """A cascade of IIR stages, or a plain per-sample function."""

    def __init__(
        self,
        fs: float,
        order: int = 0,
        name: str = "Filter",
        coefficients: Iterable[Stage] = (),
        filtering_function: Callable[[float], float] | None = None,
    ) -> None:
        self.fs = fs
        self.order = order
        self.name = name
        self._stages: list[Stage] = []
        self._state: list[list[float]] = []
        self._filtering_function = filtering_function
        self._timeline = _Timeline()
        self.set_coefficients(coefficients)

    @property
    def stages(self) -> tuple[Stage, ...]:
        """The stages of the cascade, in processing order."""
        return tuple(self._stages)

    def set_coefficients(self, coefficients: Iterable[Stage]) -> None:
        """Replace the cascade stages and clear the filter state."""
        self._stages = list(coefficients)
        self.reset()

    def set_filtering_function(
        self, function: Callable[[float], float] | None
    ) -> None:
        """Use ``function`` per sample instead of the cascade (None restores it)."""
        self._filtering_function = function

    def reset(self) -> None:
        """Zero the delay lines of every stage."""
        self._state = [[0.0] * len(stage) for stage in self._stages]

    def _cascade(self, value: float) -> float:
        for stage, w in zip(self._stages, self._state):
            acc = stage.a[0] * value
            for coef, past in zip(stage.a[1:], w[1:]):
                acc -= coef * past
            w[0] = acc
            value = sum(coef * past for coef, past in zip(stage.b, w))
            w[1:] = w[:-1]
        return value

    def apply(self, value: float) -> float:
        """Filter one sample taken at the filter's sampling rate."""
        if self._filtering_function is not None:
            return self._filtering_function(value)
        return self._cascade(value)

    def apply_many(self, data: Iterable[float], init: bool = True) -> list[float]:
        """Filter a uniformly sampled sequence; ``init`` clears the state first."""
        if init:
            self.reset()
        return [self.apply(value) for value in data]

    def apply_timed(
        self, value: float, timestamp: float, out: list[float] | None = None
    ) -> float:
        """Filter a sample taken at an arbitrary time.

        The input is linearly resampled at the filter rate between the last
        processed time and ``timestamp``; each filtered grid sample is
        appended to ``out`` when given. Returns the filtered output
        interpolated at ``timestamp``.
        """
        line = self._timeline
        period = 1 / self.fs
        steps = int((timestamp - line.timestamp) / period)
        for _ in range(steps):
            line.value = interpolate(
                line.timestamp + period, line.timestamp, line.value, timestamp, value
            )
            line.timestamp += period
            line.last_filtered = line.filtered
            line.filtered = self.apply(line.value)
            if out is not None:
                out.append(line.filtered)
        return interpolate(
            timestamp,
            line.timestamp - period,
            line.last_filtered,
            line.timestamp,
            line.filtered,
        )

    def apply_resampled(
        self,
        data: Sequence[float],
        timestamps: Sequence[float],
        init: bool = True,
        reresample: bool = False,
    ) -> list[float]:
        """Filter irregularly sampled data by resampling it at the filter rate.

        With ``reresample`` the result is projected back onto ``timestamps``;
        otherwise the uniformly sampled result is returned.
        """
        uniform = resample_to_uniform(data, timestamps, self.fs)
        filtered = self.apply_many(uniform, init)
        if reresample:
            return resample_to_original(filtered, self.fs, timestamps)
        return filtered

    def _coefficient_lines(self) -> Iterator[str]:
        yield f"Filter: {self.name} (order: {int(self.order)}, fs: {self.fs:.2f})"
        for n, stage in enumerate(self._stages):
            yield f"Stage: {n}"
            yield "a: [" + "".join(f"{c:.5f}\t" for c in stage.a) + " ]"
            yield "b: [" + "".join(f"{c:.5f}\t" for c in stage.b) + " ]"

    def describe_coefficients(self) -> str:
        """Text listing of the filter and its stage coefficients."""
        return "".join(f"{line}\n" for line in self._coefficient_lines())

    def print_coefficients(self) -> None:
        """Write the coefficient listing to standard output, line by line."""
        stream = sys.stdout
        for line in self._coefficient_lines():
            stream.write(line)
            stream.write("\n")
        stream.flush()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, fs={self.fs!r}, "
            f"order={self.order!r}, stages={len(self._stages)})"
        )