"""Unscaled discrete Fourier transform of length 30.

The kernel computes ``X[k] = sum(x[n] * exp(2j*pi*k*n/30))`` where every
input ``x[n]`` is ``values[n]`` multiplied by ``twiddles[n]`` (or left as is
when no twiddles are given).
"""

from __future__ import annotations

from collections.abc import Iterable

from offt.kernels_small import _prepare

__all__ = ["dft30"]

_C0 = 1.0825317547305483085
_C1 = 0.86602540378443864676
_C2 = 0.48412291827592711065
_C3 = 0.31460214309120474243
_C4 = 1.3326760640014591093
_C5 = 0.50903696045512718345
_C6 = 0.54490689600402066442
_C7 = 2.3082626528814400519
_C8 = 0.36327126400268044295
_C9 = 1.5388417685876267013
_C10 = 0.88167787843870969375
_C11 = 0.83852549156242113615
_C12 = 0.58778525229247312917
_C13 = 0.5590169943749474241


def dft30(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-30 transform of ``values``."""
    x = _prepare(values, twiddles, 30)
    out = [0j] * 30

    r30 = x[29]
    r50 = x[19] - r30
    r60 = r30 + x[19]

    r32 = x[1] - x[11]
    s5 = x[1] + x[11]
    r82 = x[21] + s5
    r70 = r60 + x[9]
    r102 = s5 - r60
    r120 = r60 + s5

    r38 = x[7] - x[17]
    s7 = x[7] + x[17]
    r44 = x[13] - x[23]
    s8 = x[13] + x[23]
    r88 = x[27] + s7
    r64 = x[3] + s8
    r108 = s7 - s8
    s9 = s7 + s8
    r144 = s9 - r120
    r150 = r120 + s9

    r36 = x[5] - x[25]
    s4 = x[5] + x[25]
    r76 = x[15] + s4
    r182 = r150 + s4
    r222 = 1.875 * r150

    r3, r5, r9, r11, r15 = x[2], x[4], x[8], x[10], x[14]
    r17, r21, r23, r27, r29 = x[16], x[20], x[22], x[26], x[28]
    r45 = r5 + r15
    r51 = r11 + r21
    r53 = r3 + r23
    r57 = r17 + r27
    r59 = r9 + r29
    r117 = r45 + r57
    r119 = r53 + r59
    r149 = r117 + r119
    r213 = -1.5 * (r51 + r149)
    s2 = -1.5 * r182
    r258 = r222 + s2
    r345 = r213 - s2
    r350 = r213 + s2

    s6 = r45 + x[24]
    s7 = r51 + x[0]
    s8 = r53 + x[12]
    s9 = r57 + x[6]
    r105 = r45 - r57
    s10 = r59 + x[18]
    r113 = r53 - r59
    r94 = r64 - r88
    s11 = r88 + r64
    r97 = s9 - s6
    s12 = s6 + s9
    r103 = s8 - s10
    s13 = s8 + s10
    r100 = r70 - r82
    s14 = r82 + r70
    r139 = s13 - s12
    s15 = s12 + s13
    r142 = s14 - s11
    s16 = s11 + s14
    s17 = s7 + s15
    s18 = -1.25 * s15
    s19 = r76 + s16
    s20 = -1.25 * s16
    r253 = s17 + s18
    r325 = s17 - s19
    s21 = s17 + s19
    r256 = s19 + s20
    out[0] = s21
    r380 = r350 + s21

    s1 = r5 - r15
    s2 = r11 - r21
    s3 = r3 - r23
    s4 = r17 - r27
    s5 = r9 - r29
    r98 = r38 - r44
    s6 = r38 + r44
    r95 = s1 - s4
    s7 = s1 + s4
    r93 = s3 - s5
    s8 = s3 + s5
    r92 = r32 - r50
    s9 = r50 + r32
    s10 = s8 - s7
    r137 = s7 + s8
    r134 = s6 - s9
    s11 = s6 + s9
    s12 = s2 - s10
    s13 = 1j * _C0 * s10
    s14 = r36 - s11
    s15 = -1j * _C0 * s11
    s16 = 1j * _C1 * s12
    s17 = -1j * _C1 * s14
    r237 = s13 + s16
    r248 = s15 + s17
    r330 = s17 - s16
    s18 = s16 + s17
    out[20] = r380 - s18
    out[10] = r380 + s18

    out[15] = r325
    s1 = r345 + r325
    out[25] = s1 - r330
    out[5] = r330 + s1

    s1 = -1j * _C2 * r134
    r278 = s1 - r248
    r284 = r248 + s1

    s1 = _C3 * r98
    s2 = r98 - r92
    s3 = -_C4 * r92
    s4 = -_C5 * s2
    r272 = s1 - s4
    s5 = s3 + s4
    r296 = s5 - r284
    r314 = r284 + s5

    s1 = _C4 * r95
    s2 = r93 - r95
    s3 = -_C3 * r93
    s4 = _C5 * s2
    s5 = 1j * _C2 * r137
    s6 = s1 + s4
    r267 = s3 - s4
    r273 = r237 - s5
    s7 = r237 + s5
    r299 = s6 - s7
    s8 = s6 + s7
    r341 = s8 - r314
    r344 = r314 + s8

    s1 = 1j * _C6 * r108
    s2 = 1j * _C7 * r105
    s3 = r105 + r113
    s4 = 1j * _C6 * r113
    s5 = r117 - r119
    s6 = r102 - r108
    s7 = -1j * _C7 * r102
    s8 = 1j * _C8 * r94
    s9 = 1j * _C9 * r97
    s10 = r103 - r97
    s11 = -1j * _C8 * r103
    s12 = -1j * _C10 * s3
    s13 = -_C11 * s5
    s14 = 1.875 * r149
    s15 = r94 - r100
    s16 = -1j * _C9 * r100
    s17 = 1j * _C10 * s6
    s18 = _C11 * r144
    s19 = 1j * _C12 * s10
    s20 = -_C13 * r139
    s21 = s2 + s12
    r287 = s4 - s12
    s22 = -1j * _C12 * s15
    s23 = _C13 * r142
    r282 = s1 - s17
    s24 = s7 + s17
    s25 = s9 + s19
    r277 = s11 - s19
    s26 = r213 + s14
    r268 = s8 - s22
    s27 = s16 + s22
    r283 = s20 - r253
    s28 = r253 + s20
    r291 = s13 - s26
    s29 = s13 + s26
    r286 = s23 - r256
    s30 = r256 + s23
    r288 = s18 - r258
    s31 = r258 + s18
    r301 = s25 - s28
    s32 = s25 + s28
    r309 = s21 - s29
    s33 = s21 + s29
    r304 = s27 - s30
    s34 = s27 + s30
    r306 = s24 - s31
    s35 = s24 + s31
    r349 = s32 - s34
    s36 = s32 + s34
    r353 = s33 - s35
    s37 = s33 + s35
    out[6] = s36
    s38 = s36 + s37
    out[26] = s38 - r344
    out[16] = r344 + s38

    out[21] = r349
    r383 = r349 + r353
    out[11] = r383 - r341
    out[1] = r341 + r383
    r339 = r309 - r306
    r336 = r309 + r306

    r334 = r304 - r301
    s1 = r301 + r304
    out[24] = -s1
    r366 = r336 + s1

    r329 = r299 - r296
    s1 = r296 + r299
    out[4] = -r366 - s1
    out[14] = s1 - r366

    out[9] = r334
    s1 = r339 - r334
    out[19] = -r329 - s1
    out[29] = r329 - s1

    r318 = r288 - r282
    r312 = r282 + r288

    r317 = r287 - r291
    s1 = r287 + r291
    r351 = s1 - r312
    r342 = r312 + s1

    r307 = r277 - r283
    s1 = r277 + r283
    r316 = r286 - r268
    s2 = r268 + r286
    r343 = s1 - s2
    s3 = s1 + s2
    out[18] = -s3
    r372 = r342 + s3

    s1 = r267 - r273
    r303 = r267 + r273
    r308 = r278 - r272
    s2 = r278 + r272
    r327 = s1 - s2
    s3 = s1 + s2
    out[28] = -r372 - s3
    out[8] = s3 - r372

    out[3] = -r343
    s1 = r351 + r343
    out[13] = -r327 - s1
    out[23] = r327 - s1

    r333 = r303 - r308
    r338 = r303 + r308

    r346 = r316 - r307
    s1 = r307 + r316
    r348 = r318 - r317
    s2 = r318 + r317
    out[27] = s1
    s3 = s1 + s2
    out[17] = s3 - r338
    out[7] = r338 + s3

    out[12] = -r346
    r378 = r346 + r348
    out[2] = -r333 - r378
    out[22] = r333 - r378

    return out