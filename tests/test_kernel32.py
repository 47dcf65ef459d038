import cmath
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from offt.kernel32 import dft32

N = 32
TOL = 1e-9


def _sample():
    return [complex(math.sin(1.3 * n + 0.2), math.cos(0.7 * n * n - 1.1)) for n in range(N)]


_finite = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)
_vectors = st.lists(st.builds(complex, _finite, _finite), min_size=N, max_size=N)


def test_impulse_gives_all_ones():
    values = [1.0] + [0.0] * (N - 1)
    result = dft32(values)
    assert len(result) == N
    assert all(abs(c - 1.0) <= TOL for c in result)


def test_constant_concentrates_at_zero():
    result = dft32([1.0] * N)
    assert abs(result[0] - N) < TOL
    assert all(abs(c) < TOL for c in result[1:])


@pytest.mark.parametrize("m", range(N))
def test_tone_maps_to_its_bin(m):
    values = [cmath.exp(-2j * math.pi * m * n / N) for n in range(N)]
    result = dft32(values)
    expected = [N if k == m else 0 for k in range(N)]
    assert all(abs(r - e) < 1e-8 for r, e in zip(result, expected))


@pytest.mark.parametrize("shift", [1, 3, 7, 16, 31])
def test_shifted_impulse_is_phase_ramp(shift):
    values = [0j] * N
    values[shift] = 1
    result = dft32(values)
    for k, c in enumerate(result):
        assert abs(c - cmath.exp(2j * math.pi * k * shift / N)) < TOL


def test_round_trip_through_conjugation():
    x = _sample()
    y = dft32(x)
    back = [c.conjugate() / N for c in dft32([c.conjugate() for c in y])]
    assert len(back) == N
    assert all(abs(p - q) <= TOL * max(1.0, abs(q)) for p, q in zip(back, x))


def test_twiddles_multiply_inputs():
    x = _sample()
    w = [cmath.exp(0.37j * n) for n in range(N)]
    with_twiddles = dft32(x, w)
    expected = dft32([a * b for a, b in zip(x, w)])
    assert len(with_twiddles) == len(expected)
    assert all(abs(p - q) <= TOL * max(1.0, abs(q)) for p, q in zip(with_twiddles, expected))


def test_unit_twiddles_change_nothing():
    x = _sample()
    with_twiddles = dft32(x, [1] * N)
    plain = dft32(x)
    assert len(with_twiddles) == len(plain)
    assert all(abs(p - q) <= TOL * max(1.0, abs(q)) for p, q in zip(with_twiddles, plain))


@settings(max_examples=50)
@given(_vectors, _vectors)
def test_linearity(a, b):
    left = dft32([p + 2 * q for p, q in zip(a, b)])
    fa, fb = dft32(a), dft32(b)
    right = [p + 2 * q for p, q in zip(fa, fb)]
    assert all(abs(p - q) < 1e-7 * max(1.0, abs(q)) for p, q in zip(left, right))


@settings(max_examples=50)
@given(_vectors)
def test_parseval(x):
    energy_in = sum(abs(c) ** 2 for c in x)
    energy_out = sum(abs(c) ** 2 for c in dft32(x))
    assert math.isclose(energy_out, N * energy_in, rel_tol=1e-9, abs_tol=1e-6)


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        dft32([1.0] * 31)


def test_wrong_twiddle_length_raises():
    with pytest.raises(ValueError):
        dft32([1.0] * N, [1.0] * 30)