"""Unscaled discrete Fourier transforms of lengths 7, 8 and 9.

Each kernel computes ``X[k] = sum(x[n] * exp(2j*pi*k*n/N))`` where every
input ``x[n]`` is ``values[n]`` multiplied by ``twiddles[n]`` (or left as is
when no twiddles are given).
"""

from __future__ import annotations

from collections.abc import Iterable

from offt.kernels_small import _prepare

__all__ = ["dft7", "dft8", "dft9"]

_SIN_60 = 0.86602540378443864676
_SQRT_HALF = 0.7071067811865475244

# Rotations used by the length-9 kernel.
_ROT_80 = complex(0.17364817766693034885, 0.98480775301220805937)
_ROT_40 = complex(0.7660444431189780352, 0.64278760968653932632)
_ROT_260 = complex(-0.17364817766693034885, -0.98480775301220805937)
_ROT_MINUS_20 = complex(0.93969262078590838405, -0.34202014332566873304)


def dft7(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-7 transform of ``values``."""
    x = _prepare(values, twiddles, 7)

    r7 = x[6]
    r9 = x[1] - r7
    r14 = r7 + x[1]

    r11 = x[3] - x[4]
    s5 = x[3] + x[4]
    r10 = x[2] - x[5]
    s6 = x[2] + x[5]
    r20 = s6 - s5
    r22 = s5 - r14
    r19 = r14 + s5 + s6
    r21 = r14 - s6

    r38 = 0.055854267289647737622 * r21

    s2 = 0.79015646852540019719 * r20
    s3 = -0.73430220123575245957 * r22
    total = r19 + x[0]
    s6 = total + -1.1666666666666666667 * r19
    r55 = s2 + s6 - s3
    r54 = r38 + s2 - s6
    r53 = r38 + s3 + s6

    s1 = r11 + r10
    s2 = r9 + r10 - r11
    s3 = r9 - r10
    s4 = 1j * 1.4088116512993817275 * s1
    s5 = 1j * 0.44095855184409843175 * s2
    s6 = s1 - s3
    s7 = -1j * 1.2157152215855879292 * s3
    s8 = -1j * 0.87484229096165655223 * s6
    s9 = s4 + s8
    s10 = s7 + s8
    r52 = s9 - s5
    s11 = s5 - s10
    r50 = s5 + s9 + s10

    return [
        total,
        r53 + s11,
        r50 - r54,
        r55 + r52,
        r55 - r52,
        -r54 - r50,
        r53 - s11,
    ]


def dft8(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-8 transform of ``values``."""
    x = _prepare(values, twiddles, 8)

    r8 = x[7]
    r20 = x[3] - r8
    r24 = r8 + x[3]

    r18 = x[1] - x[5]
    s3 = x[1] + x[5]
    r38 = s3 - r24
    r40 = r24 + s3

    r9 = x[0] - x[4]
    s5 = x[0] + x[4]
    r11 = x[2] - x[6]
    s6 = x[2] + x[6]
    r21 = s5 - s6
    s7 = s5 + s6

    r19 = r11 - 1j * r9
    r17 = r9 - 1j * r11

    s1 = _SQRT_HALF * (1 + 1j) * r18
    s2 = _SQRT_HALF * (-1 + 1j) * r20
    s3 = s1 - s2
    r36 = s1 + s2

    return [
        r40 + s7,
        r36 + 1j * r19,
        r21 + 1j * r38,
        r17 + 1j * s3,
        s7 - r40,
        1j * r19 - r36,
        r21 - 1j * r38,
        r17 - 1j * s3,
    ]


def dft9(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-9 transform of ``values``."""
    x = _prepare(values, twiddles, 9)

    r9 = x[8]
    r15 = x[5] - r9
    r18 = r9 + x[5]
    r21 = r18 + x[2]
    r36 = -1.5 * r18

    r5 = x[4]
    r8 = x[7]
    r17 = r5 + r8
    r20 = x[1] + r17
    r65 = r20 - r21
    r66 = r21 + r20
    r45 = r21 + r36

    s1 = 1j * _SIN_60 * r15
    r51 = s1 - r45
    r54 = r45 + s1

    r63 = _ROT_80 * r54

    s2 = 1j * _SIN_60 * (r5 - r8)
    s4 = r20 + -1.5 * r17
    r50 = s2 - s4
    s6 = _ROT_40 * (s2 + s4)
    r71 = s6 - r63
    r72 = r63 + s6

    s5 = x[3] + x[6]
    s6 = 1j * _SIN_60 * (x[3] - x[6])
    s7 = x[0] + s5
    s9 = s7 + -1.5 * s5
    r49 = s6 - s9
    s10 = s6 + s9
    r73 = r66 + s7
    r79 = r72 + s10
    r90 = -1.5 * r72

    r99 = r79 + r90
    s1 = 1j * _SIN_60 * r71
    out7 = r99 - s1
    out4 = r99 + s1

    r93 = r73 + -1.5 * r66
    s1 = 1j * _SIN_60 * r65
    out6 = r93 - s1
    out3 = r93 + s1

    s1 = _ROT_260 * r50
    s2 = _ROT_MINUS_20 * r51
    r68 = s1 - s2
    s3 = s1 + s2
    r76 = r49 - s3
    r87 = -1.5 * s3

    r96 = r87 - r76
    s1 = 1j * _SIN_60 * r68
    out8 = r96 - s1
    out5 = r96 + s1

    return [r73, r79, -r76, out3, out4, out5, out6, out7, out8]