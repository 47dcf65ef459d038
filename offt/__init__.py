"""Fast Fourier transform building blocks: Fourier conventions, number-theoretic helpers and fixed-size DFT kernels."""

__version__ = "0.1.0"

__all__ = [
    "parameters",
    "arith",
    "primes",
    "kernels_small",
    "kernels_medium",
    "kernel30",
    "kernel32",
]