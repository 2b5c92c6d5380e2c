# fltlib

Digital filters for sampled signals. Each filter is a cascade of second-order
or fourth-order sections:

- `fltlib.lowpass.Lowpass(fc, fs, order, ep=None)`: Butterworth. When a
  ripple factor `ep` is given it is Chebyshev instead.
- `fltlib.highpass.Highpass(fc, fs, order)`: Butterworth
- `fltlib.bandpass.Bandpass(low, high, fs, order)`: Butterworth
- `fltlib.bandstop.Bandstop(low, high, fs, order)`: Butterworth
- `fltlib.rectifier.Rectifier(fs, double_sided=False)`: single-sided
  (`max(x, 0)`) or double-sided (`abs(x)`)

The package needs only the standard library.

## Installation

```
pip install .
```

## Filtering a signal

```python
import math
from fltlib.lowpass import Lowpass

samples = [math.sin(2 * math.pi * 10 * i / 1000) for i in range(1000)]
lp = Lowpass(50, 1000, 4)      # cutoff 50 Hz, sampling rate 1000 Hz, order 4
filtered = lp.apply_many(samples)
```

Filtering with state:

- `apply(value)` filters one sample. The filter keeps its state between calls.
- `apply_many(data, init=True)` filters a whole sequence and returns a list.
  When `init` is true, the state is cleared first.
- `reset()` clears the state.

Orders:

- `Lowpass` and `Highpass` run `order // 2` second-order sections, so an odd
  order behaves like the even order below it. The coefficients are still
  computed for the even order above it.
- `Bandpass` and `Bandstop` round the order up to a multiple of four. Each
  fourth-order section covers four of that order.

Invalid arguments raise `ValueError`:

- a negative order
- a sampling rate that is zero or negative
- a Chebyshev ripple factor that is zero or negative

## Coefficients and custom filters

The module-level functions return the sections as a list of
`fltlib.filter.Stage` objects. Each `Stage` holds a denominator `a` and a
numerator `b`:

- `fltlib.lowpass.butterworth_coefficients`
- `fltlib.lowpass.chebyshev_coefficients`
- `fltlib.highpass.butterworth_coefficients`
- `fltlib.bandpass.butterworth_coefficients`
- `fltlib.bandstop.butterworth_coefficients`

Every filter derives from `fltlib.filter.Filter`:

```python
Filter(fs, order=0, name="Filter", coefficients=(), filtering_function=None)
```

Its members:

- `stages` exposes the current sections.
- `set_coefficients(stages)` replaces the sections and clears the state.
- `set_filtering_function(func)` makes `apply` call `func` on each sample
  instead of running the cascade. Passing `None` restores the cascade.

`print_coefficients()` writes the name, order, sampling rate and the `a` and
`b` coefficients of every section to standard output.
`describe_coefficients()` returns the same text as a string.

## Irregularly sampled data

`apply_resampled(data, timestamps, init=True, reresample=False)` handles
samples that do not arrive at the filter's sampling rate:

1. The data is interpolated linearly onto a uniform grid at the filter's rate.
   The grid runs from the first timestamp to the last one.
2. The grid data is filtered.
3. When `reresample` is true, the result is mapped back onto the original
   timestamps. Otherwise the result on the uniform grid is returned.

The helpers `interpolate`, `resample_to_uniform` and `resample_to_original`
are in `fltlib.filter`. `resample_to_uniform` raises `ValueError` when the
data or the timestamps are empty, or when their lengths differ.

For streaming input there is `apply_timed(value, timestamp, out=None)`:

- It advances the filter in whole sample periods up to `timestamp`. The
  filter's timeline starts at time 0 with value 0.
- At each step it feeds in the input interpolated at that time.
- It returns the filtered value interpolated at `timestamp`.
- If `out` is a list, each filtered grid sample is appended to it.

## Demo command

```
fltlib-demo 0
fltlib-demo 3 --output bandstop.txt
```

The command builds a 1000-sample test signal: 10 Hz, 50 Hz and 100 Hz sines
added together and sampled at 1 kHz. `fltlib.cli.test_signal(n, dt)` builds the
same signal. The command runs the signal through the filter selected by the
argument. `fltlib.cli.make_filter(choice, fs)` builds that filter.

| choice | filter |
|-------:|--------|
| 0 | Lowpass, 50 Hz, order 20 |
| 1 | Highpass, 50 Hz, order 20 |
| 2 | Bandpass, 49–80 Hz, order 20 |
| 3 | Bandstop, 48–52 Hz, order 40 |
| 4 | Rectifier, single-sided |
| other | Lowpass, 50 Hz, order 2 |

The command prints the filter's coefficients. It then writes the output file
(`data.txt` unless `-o`/`--output` names another). Each line of the file holds
one sample: the timestamp, the raw value and the filtered value.

The command does not plot the result. Plot the three columns with any
plotting tool.