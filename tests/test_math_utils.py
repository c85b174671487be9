import pytest

from voxelcraft.math_utils import clamp, int_floor, lerp, mod


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (-3.5, 7.25), (10.0, -10.0)])
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


@pytest.mark.parametrize("a,b", [(2.0, 10.0), (-4.0, 4.0), (1.5, 1.5)])
def test_lerp_midpoint_is_average(a, b):
    assert lerp(a, b, 0.5) * 2 == pytest.approx(a + b)


def test_clamp_inside_range_is_unchanged():
    assert clamp(5, 0, 10) == 5
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_clamp_below_and_above():
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10
    assert clamp(1.5, -1.0, 1.0) == 1.0


def test_int_floor_documented_examples():
    assert int_floor(-0.1) == -1
    assert int_floor(3.7) == 3


@pytest.mark.parametrize("x", [-2.5, -1.0, -0.0001, 0.0, 0.9999, 7.0, 123.456])
def test_int_floor_bounds(x):
    f = int_floor(x)
    assert f <= x < f + 1


def test_mod_documented_example():
    assert mod(-1, 16) == 15


@pytest.mark.parametrize("a", range(-40, 41))
def test_mod_positive_divisor_invariants(a):
    r = mod(a, 16)
    assert 0 <= r < 16
    assert (a - r) % 16 == 0


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod(3, 0)