import math

import pytest

from fltlib.bandstop import Bandstop, butterworth_coefficients


def _steady_amplitude(filt, freq, fs=1000.0, n=4000):
    data = [math.sin(2 * math.pi * freq * i / fs) for i in range(n)]
    out = filt.apply_many(data)
    return max(abs(v) for v in out[n // 2 :])


def test_order_rounds_up_to_multiple_of_four():
    filt = Bandstop(48, 52, 1000, 38)
    assert filt.order == 40
    assert len(filt.stages) == 10


def test_numerator_is_symmetric():
    for stage in butterworth_coefficients(8, 40, 60, 1000):
        assert stage.b[0] == pytest.approx(stage.b[4])
        assert stage.b[1] == pytest.approx(stage.b[3])
        assert stage.a[0] == 1.0


def test_unit_dc_gain_per_stage():
    for stage in butterworth_coefficients(8, 40, 60, 1000):
        assert sum(stage.b) / sum(stage.a) == pytest.approx(1.0)


def test_frequency_selection():
    assert _steady_amplitude(Bandstop(40, 60, 1000, 8), 5) > 0.9
    assert _steady_amplitude(Bandstop(40, 60, 1000, 8), 300) > 0.9
    assert _steady_amplitude(Bandstop(40, 60, 1000, 8), 50) < 0.1


def test_attributes_and_errors():
    filt = Bandstop(40, 60, 1000, 8)
    assert (filt.low, filt.high, filt.name) == (40, 60, "Bandstop")
    with pytest.raises(ValueError):
        butterworth_coefficients(-1, 40, 60, 1000)