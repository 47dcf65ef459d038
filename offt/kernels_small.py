"""Unscaled discrete Fourier transforms of lengths 3, 4, 5 and 6.

Each kernel computes ``X[k] = sum(x[n] * exp(2j*pi*k*n/N))`` where every
input ``x[n]`` is ``values[n]`` multiplied by ``twiddles[n]`` (or left as is
when no twiddles are given).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["dft3", "dft4", "dft5", "dft6"]

_SIN_60 = 0.86602540378443864676


def _prepare(
    values: Iterable[complex], twiddles: Iterable[complex] | None, length: int
) -> Sequence[complex]:
    x = [complex(v) for v in values]
    if len(x) != length:
        raise ValueError(f"expected {length} values, got {len(x)}")
    if twiddles is None:
        return x
    t = [complex(w) for w in twiddles]
    if len(t) != length:
        raise ValueError(f"expected {length} twiddles, got {len(t)}")
    return [v * w for v, w in zip(x, t)]


def dft3(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-3 transform of ``values``."""
    x = _prepare(values, twiddles, 3)

    r3 = x[2]
    r5 = x[1] - r3
    r6 = r3 + x[1]
    r7 = r6 + x[0]
    r12 = -1.5 * r6
    r15 = r7 + r12
    s1 = 1j * _SIN_60 * r5
    return [r7, r15 + s1, r15 - s1]


def dft4(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-4 transform of ``values``."""
    x = _prepare(values, twiddles, 4)

    r4 = x[3]
    r6 = x[1] - r4
    r8 = r4 + x[1]
    r5 = x[0] - x[2]
    s3 = x[0] + x[2]
    return [r8 + s3, r5 + 1j * r6, s3 - r8, r5 - 1j * r6]


def dft5(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-5 transform of ``values``."""
    x = _prepare(values, twiddles, 5)

    r5 = x[4]
    r7 = x[1] - r5
    r10 = r5 + x[1]
    r8 = x[2] - x[3]
    s3 = x[2] + x[3]
    r14 = s3 - r10
    r15 = r10 + s3
    r17 = r15 + x[0]
    r27 = -1.25 * r15
    r33 = r17 + r27

    s1 = -0.5590169943749474241 * r14
    r38 = s1 - r33
    r39 = r33 + s1

    s1 = -1j * 0.36327126400268044295 * r8
    s2 = r7 - r8
    s3 = 1j * 1.5388417685876267013 * r7
    s4 = -1j * 0.58778525229247312917 * s2
    r37 = s1 - s4
    s5 = s3 + s4

    return [r17, r39 + s5, r37 - r38, -r38 - r37, r39 - s5]


def dft6(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-6 transform of ``values``."""
    x = _prepare(values, twiddles, 6)

    r6 = x[5]
    r8 = x[1] - r6
    r12 = r6 + x[1]
    r16 = r12 + x[3]
    r24 = -1.5 * r12

    r9 = x[2] - x[4]
    s4 = x[2] + x[4]
    r13 = x[0] + s4
    s5 = -1.5 * s4
    r29 = s5 - r24
    r30 = r24 + s5

    r25 = r13 - r16
    total = r16 + r13
    r36 = r30 + total

    s1 = 1j * _SIN_60 * r9
    s2 = -1j * _SIN_60 * r8
    r26 = s2 - s1
    s3 = s1 + s2

    s1 = r29 + r25
    return [total, s1 - r26, r36 - s3, r25, r36 + s3, r26 + s1]