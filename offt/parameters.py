"""Conventions for the scaling and sign of a Fourier transform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["FourierParameters"]


@dataclass(frozen=True)
class FourierParameters:
    """The pair ``(a, b)`` that fixes scaling (``a``) and sign of the exponent (``b``)."""

    a: int
    b: int

    DEFAULT: ClassVar[FourierParameters]
    WOLFRAM_LANGUAGE: ClassVar[FourierParameters]
    MATHEMATICA: ClassVar[FourierParameters]
    FFTW: ClassVar[FourierParameters]


FourierParameters.DEFAULT = FourierParameters(1, 1)
FourierParameters.WOLFRAM_LANGUAGE = FourierParameters(0, 1)
FourierParameters.MATHEMATICA = FourierParameters.WOLFRAM_LANGUAGE
FourierParameters.FFTW = FourierParameters(1, -1)