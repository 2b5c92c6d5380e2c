import math

import pytest

from fltlib import cli
from fltlib.bandpass import Bandpass
from fltlib.bandstop import Bandstop
from fltlib.highpass import Highpass
from fltlib.lowpass import Lowpass
from fltlib.rectifier import Rectifier


@pytest.mark.parametrize(
    "choice, cls, order",
    [(0, Lowpass, 20), (1, Highpass, 20), (2, Bandpass, 20), (3, Bandstop, 40), (7, Lowpass, 2)],
)
def test_make_filter(choice, cls, order):
    filt = cli.make_filter(choice, 1000.0)
    assert type(filt) is cls
    assert filt.order == order


def test_make_filter_rectifier():
    filt = cli.make_filter(4, 1000.0)
    assert type(filt) is Rectifier
    assert filt.apply(-1.0) == 0.0


def test_signal_shape():
    timestamps, data = cli.test_signal(5, 0.001)
    assert len(timestamps) == len(data) == 5
    assert timestamps[0] == 0.0
    assert data[0] == 0.0
    assert timestamps[3] == pytest.approx(0.003)
    t = timestamps[2]
    expected = sum(math.sin(2 * math.pi * f * t) for f in (10, 50, 100))
    assert data[2] == pytest.approx(expected)


def test_main_writes_file(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert cli.main(["0", "--output", str(out)]) == 0
    lines = out.read_text().splitlines()
    assert len(lines) == 1000
    assert lines[0] == "0.000000 0.000000 0.000000"
    assert all(len(line.split()) == 3 for line in lines)
    printed = capsys.readouterr().out
    assert printed.startswith("Filter: Lowpass (order: 20, fs: 1000.00)")


def test_main_rectifier_output_non_negative(tmp_path):
    out = tmp_path / "rect.txt"
    cli.main(["4", "-o", str(out)])
    rows = [line.split() for line in out.read_text().splitlines()]
    for _, raw, filtered in rows:
        assert float(filtered) == pytest.approx(max(float(raw), 0.0), abs=1e-6)


def test_main_requires_choice():
    with pytest.raises(SystemExit):
        cli.main([])