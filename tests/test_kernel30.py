import cmath
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from offt.kernel30 import dft30

N = 30
TOL = 1e-9

_finite = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)
_complex = st.builds(complex, _finite, _finite)
_vectors = st.lists(_complex, min_size=N, max_size=N)


def _norm(values):
    return math.sqrt(sum(abs(v) ** 2 for v in values))


def test_constant_input_concentrates_in_bin_zero():
    result = dft30([1.0] * N)
    assert abs(result[0] - N) < TOL
    assert all(abs(v) < TOL for v in result[1:])


def test_unit_impulse_at_zero_is_flat():
    result = dft30([1.0] + [0.0] * (N - 1))
    assert all(abs(v - 1.0) < TOL for v in result)


@pytest.mark.parametrize("position", list(range(N)))
def test_shifted_impulse_gives_positive_phase_ramp(position):
    values = [0.0] * N
    values[position] = 1.0
    result = dft30(values)
    expected = [cmath.exp(2j * math.pi * k * position / N) for k in range(N)]
    assert len(result) == N
    assert all(abs(p - q) <= TOL for p, q in zip(result, expected))


@pytest.mark.parametrize("frequency", [1, 7, 13, 29])
def test_pure_tone_lands_in_conjugate_bin(frequency):
    values = [cmath.exp(-2j * math.pi * frequency * n / N) for n in range(N)]
    result = dft30(values)
    assert abs(result[frequency] - N) < 1e-8
    assert all(abs(v) < 1e-8 for k, v in enumerate(result) if k != frequency)


@settings(max_examples=50)
@given(_vectors)
def test_inverse_by_conjugation_round_trips(values):
    spectrum = dft30(values)
    back = [v.conjugate() / N for v in dft30([s.conjugate() for s in spectrum])]
    tolerance = TOL * max(1.0, _norm(values))
    assert len(back) == N
    assert all(abs(p - q) <= tolerance for p, q in zip(back, values))


@settings(max_examples=50)
@given(_vectors)
def test_parseval(values):
    spectrum = dft30(values)
    lhs = sum(abs(v) ** 2 for v in spectrum)
    rhs = N * sum(abs(v) ** 2 for v in values)
    assert abs(lhs - rhs) <= 1e-9 * max(1.0, rhs)


@settings(max_examples=30)
@given(_vectors, _vectors, _complex)
def test_linearity(a, b, alpha):
    combined = dft30([p + alpha * q for p, q in zip(a, b)])
    separate = [p + alpha * q for p, q in zip(dft30(a), dft30(b))]
    scale = _norm(a) + abs(alpha) * _norm(b)
    tolerance = TOL * max(1.0, scale * N)
    assert len(combined) == len(separate)
    assert all(abs(p - q) <= tolerance for p, q in zip(combined, separate))


@settings(max_examples=30)
@given(_vectors)
def test_twiddles_multiply_inputs(values):
    twiddles = [cmath.exp(1j * 0.1 * n) for n in range(N)]
    premultiplied = [v * w for v, w in zip(values, twiddles)]
    with_twiddles = dft30(values, twiddles)
    expected = dft30(premultiplied)
    tolerance = TOL * max(1.0, _norm(values) * N)
    assert len(with_twiddles) == len(expected)
    assert all(abs(p - q) <= tolerance for p, q in zip(with_twiddles, expected))


@settings(max_examples=30)
@given(_vectors)
def test_circular_shift_multiplies_by_phase(values):
    shifted = values[-1:] + values[:-1]
    original = dft30(values)
    expected = [v * cmath.exp(2j * math.pi * k / N) for k, v in enumerate(original)]
    moved = dft30(shifted)
    tolerance = TOL * max(1.0, _norm(values) * N)
    assert len(moved) == len(expected)
    assert all(abs(p - q) <= tolerance for p, q in zip(moved, expected))


def test_real_input_has_hermitian_spectrum():
    values = [math.sin(n * 0.7) + 0.3 * n for n in range(N)]
    result = dft30(values)
    for k in range(1, N):
        assert abs(result[k] - result[N - k].conjugate()) < 1e-8


@pytest.mark.parametrize("length", [0, 29, 31])
def test_wrong_number_of_values_is_rejected(length):
    with pytest.raises(ValueError):
        dft30([1.0] * length)


def test_wrong_number_of_twiddles_is_rejected():
    with pytest.raises(ValueError):
        dft30([1.0] * N, [1.0] * (N - 1))