"""Unscaled discrete Fourier transform of length 32.

The kernel computes ``X[k] = sum(x[n] * exp(2j*pi*k*n/32))`` where every
input ``x[n]`` is ``values[n]`` multiplied by ``twiddles[n]`` (or left as is
when no twiddles are given).
"""

from __future__ import annotations

from collections.abc import Iterable

from offt.kernels_small import _prepare

__all__ = ["dft32"]

_SQRT_HALF = 0.7071067811865475244
_C22 = 0.92387953251128675613  # cos(pi/8)
_S22 = 0.38268343236508977173  # sin(pi/8)
_C11 = 0.98078528040323044913  # cos(pi/16)
_S11 = 0.19509032201612826785  # sin(pi/16)
_C33 = 0.83146961230254523708  # cos(3*pi/16)
_S33 = 0.55557023301960222474  # sin(3*pi/16)

_ROT_45 = _SQRT_HALF * (1 + 1j)
_ROT_135 = _SQRT_HALF * (-1 + 1j)


def dft32(values: Iterable[complex], twiddles: Iterable[complex] | None = None) -> list[complex]:
    """Return the length-32 transform of ``values``."""
    x = _prepare(values, twiddles, 32)
    out = [0j] * 32

    r32 = x[31]
    r176 = x[15] - r32
    r192 = r32 + x[15]

    r168 = x[7] - x[23]
    s3 = x[7] + x[23]
    r248 = s3 - r192
    r256 = r192 + s3

    r100 = x[3] - x[19]
    s5 = x[3] + x[19]
    r108 = x[11] - x[27]
    s6 = x[11] + x[27]
    r180 = s5 - s6
    s7 = s5 + s6
    r284 = s7 - r256
    r288 = r256 + s7

    r98 = x[1] - x[17]
    s9 = x[1] + x[17]
    r166 = x[5] - x[21]
    s10 = x[5] + x[21]
    r106 = x[9] - x[25]
    s11 = x[9] + x[25]
    r174 = x[13] - x[29]
    s12 = x[13] + x[29]
    r178 = s9 - s11
    s13 = s9 + s11
    r246 = s10 - s12
    s14 = s10 + s12
    r282 = s13 - s14
    s15 = s13 + s14
    r350 = s15 - r288
    r352 = r288 + s15

    r33 = x[0] - x[16]
    s17 = x[0] + x[16]
    r67 = x[2] - x[18]
    s18 = x[2] + x[18]
    r69 = x[4] - x[20]
    s19 = x[4] + x[20]
    r71 = x[6] - x[22]
    s20 = x[6] + x[22]
    r41 = x[8] - x[24]
    s21 = x[8] + x[24]
    r75 = x[10] - x[26]
    s22 = x[10] + x[26]
    r77 = x[12] - x[28]
    s23 = x[12] + x[28]
    r79 = x[14] - x[30]
    s24 = x[14] + x[30]
    r81 = s17 - s21
    s25 = s17 + s21
    r147 = s18 - s22
    s26 = s18 + s22
    r149 = s19 - s23
    s27 = s19 + s23
    r151 = s20 - s24
    s28 = s20 + s24
    r185 = s25 - s27
    s29 = s25 + s27
    r251 = s26 - s28
    s30 = s26 + s28
    r285 = s29 - s30
    s31 = s29 + s30
    out[16] = s31 - r352
    out[0] = r352 + s31

    out[24] = r285 - 1j * r350
    out[8] = r285 + 1j * r350
    r283 = r251 - 1j * r185
    r281 = r185 - 1j * r251

    s1 = _ROT_45 * r282
    s2 = _ROT_135 * r284
    s3 = s1 - s2
    r348 = s1 + s2
    out[28] = r281 - 1j * s3
    out[12] = r281 + 1j * s3

    out[20] = 1j * r283 - r348
    out[4] = r348 + 1j * r283

    r215 = _ROT_135 * r151
    s1 = _ROT_45 * r147
    r243 = s1 - r215
    r247 = r215 + s1

    s1 = r149 - 1j * r81
    r177 = r81 - 1j * r149
    r279 = r247 + 1j * s1
    r277 = s1 + 1j * r247

    s1 = r246 - 1j * r178
    r274 = r178 - 1j * r246
    s2 = r248 - 1j * r180
    r276 = r180 - 1j * r248
    s3 = complex(-_S22, _C22) * s1
    s4 = complex(-_C22, _S22) * s2
    s5 = s3 - s4
    r344 = s3 + s4
    out[26] = 1j * (r277 - s5)
    out[10] = 1j * (r277 + s5)

    out[18] = r279 - r344
    out[2] = r279 + r344

    r308 = complex(-_C22, -_S22) * r276
    s1 = complex(_S22, _C22) * r274
    r338 = s1 - r308
    r340 = r308 + s1

    s1 = r243 - 1j * r177
    r273 = r177 - 1j * r243
    out[22] = 1j * s1 - r340
    out[6] = r340 + 1j * s1

    out[30] = r273 - 1j * r338
    out[14] = r273 + 1j * r338

    r143 = r79 + 1j * r71
    r135 = r71 + 1j * r79
    r199 = complex(_S22, _C22) * r135

    r139 = r75 + 1j * r67
    s1 = r67 + 1j * r75
    s2 = complex(_C22, _S22) * s1
    r227 = s2 - r199
    r231 = r199 + s2

    s1 = _ROT_45 * r69
    s2 = r41 - 1j * r33
    r65 = r33 - 1j * r41
    s3 = _ROT_135 * r77
    r133 = s1 - s3
    s4 = s1 + s3
    s5 = s4 + 1j * s2
    r169 = s2 + 1j * s4
    r263 = r231 - s5
    r269 = r231 + s5

    s1 = _ROT_45 * r166
    s2 = _ROT_45 * r168
    s3 = r106 - 1j * r98
    r162 = r98 - 1j * r106
    s4 = r108 - 1j * r100
    r164 = r100 - 1j * r108
    s5 = _ROT_135 * r174
    s6 = _ROT_135 * r176
    r230 = s1 - s5
    s7 = s1 + s5
    r232 = s2 - s6
    s8 = s2 + s6
    s9 = s7 + 1j * s3
    r266 = s3 + 1j * s7
    s10 = s8 + 1j * s4
    r268 = s4 + 1j * s8
    s11 = complex(_C11, _S11) * s9
    s12 = complex(_C33, _S33) * s10
    r334 = s11 - s12
    s13 = s11 + s12
    out[17] = r269 - s13
    out[1] = r269 + s13

    out[25] = -r263 - 1j * r334
    out[9] = -r263 + 1j * r334

    r300 = complex(-_S11, -_C11) * r268
    s1 = complex(-_C33, _S33) * r266
    r330 = s1 - r300
    r332 = r300 + s1

    r259 = r227 - r169
    s1 = r227 + r169
    out[21] = 1j * s1 - r332
    out[5] = r332 + 1j * s1

    out[29] = -1j * (r330 + r259)
    out[13] = -1j * (r259 - r330)

    r264 = r232 - 1j * r164
    r260 = r164 - 1j * r232
    r292 = complex(-_S33, -_C33) * r260

    r262 = r230 - 1j * r162
    s1 = r162 - 1j * r230
    s2 = complex(_S11, _C11) * s1
    r322 = s2 - r292
    r324 = r292 + s2

    s1 = complex(_C22, -_S22) * r139
    s2 = complex(-_S22, _C22) * r143
    s3 = r133 + 1j * r65
    r161 = r65 + 1j * r133
    s4 = s1 - s2
    r239 = s1 + s2
    s5 = s4 - s3
    r261 = s3 + s4
    out[23] = 1j * s5 - r324
    out[7] = r324 + 1j * s5

    out[31] = -1j * (r322 + r261)
    out[15] = -1j * (r261 - r322)

    r257 = r161 - r239
    r271 = r161 + r239

    s1 = complex(-_S33, _C33) * r262
    s2 = complex(-_C11, -_S11) * r264
    r326 = s1 - s2
    s3 = s1 + s2
    out[19] = r271 - s3
    out[3] = r271 + s3
    out[27] = r257 - 1j * r326
    out[11] = r257 + 1j * r326

    return out