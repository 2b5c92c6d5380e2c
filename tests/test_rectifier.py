import pytest

from fltlib.rectifier import Rectifier


def test_single_sided_clips_negatives():
    filt = Rectifier(1000)
    assert filt.apply_many([-1.0, 2.0, -3.0, 0.5]) == [0.0, 2.0, 0.0, 0.5]


def test_double_sided_takes_magnitude():
    filt = Rectifier(1000, double_sided=True)
    assert filt.apply_many([-1.0, 2.0, -3.0]) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize(
    "double_sided, name",
    [(False, "Rectifier (single sided)"), (True, "Rectifier (double sided)")],
)
def test_name(double_sided, name):
    assert Rectifier(500, double_sided).name == name


def test_has_no_stages():
    filt = Rectifier(1000)
    assert filt.stages == ()
    assert filt.describe_coefficients() == "Filter: Rectifier (single sided) (order: 0, fs: 1000.00)\n"