"""Integer arithmetic helpers: parity, remainders, GCDs and modular powers."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "even_q",
    "odd_q",
    "mod",
    "gcd",
    "extended_gcd",
    "list_product",
    "times_plus_mod",
    "power_mod",
]

# Smallest value whose negation is still representable as a signed 64-bit integer.
_MIN_NEGATABLE = -(2**63 - 1)


def _check_negatable(name: str, func: str, value: int) -> None:
    if value < _MIN_NEGATABLE:
        raise ValueError(f"{func}(): parameter '{name}' is out of range.")


def even_q(value: int) -> bool:
    """Return True if ``value`` is even."""
    return value % 2 == 0


def odd_q(value: int) -> bool:
    """Return True if ``value`` is a positive odd number.

    The remainder is taken with truncating division, so negative values
    never count as odd.
    """
    return value > 0 and value % 2 == 1


def mod(dividend: int, divisor: int) -> int:
    """Return the remainder of ``dividend / divisor`` in ``0 .. divisor - 1``."""
    _check_negatable("dividend", "mod", dividend)
    if divisor <= 0:
        raise ValueError("mod(): parameter 'divisor' must be positive.")
    return dividend % divisor


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (never negative)."""
    _check_negatable("a", "gcd", a)
    _check_negatable("b", "gcd", b)
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    _check_negatable("a", "extended_gcd", a)
    _check_negatable("b", "extended_gcd", b)
    r0, r1 = abs(a), abs(b)
    s0, s1 = 1, 0
    t0, t1 = 0, 1
    while r1:
        quotient = r0 // r1
        r0, r1 = r1, r0 - quotient * r1
        s0, s1 = s1, s0 - quotient * s1
        t0, t1 = t1, t0 - quotient * t1
    x = s0 if a >= 0 else -s0
    y = t0 if b >= 0 else -t0
    return r0, x, y


def list_product(factors: Iterable[int]) -> int:
    """Return the product of all ``factors``; an empty sequence gives 1."""
    return math.prod(factors)


def times_plus_mod(a: int, b: int, c: int, modulus: int) -> int:
    """Return ``(a * b + c) mod modulus`` for non-negative ``a``, ``b``, ``c``."""
    if a < 0:
        raise ValueError("times_plus_mod(): 'a' must be non-negative.")
    if b < 0:
        raise ValueError("times_plus_mod(): 'b' must be non-negative.")
    if c < 0:
        raise ValueError("times_plus_mod(): 'c' must be non-negative.")
    if modulus <= 0:
        raise ValueError("times_plus_mod(): 'm' must be positive.")
    return (a * b + c) % modulus


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent mod modulus``.

    A negative exponent uses the modular inverse of ``base``; ValueError is
    raised when that inverse does not exist. An exponent of zero gives 1.
    """
    if base < 0:
        raise ValueError("power_mod(): parameter 'base' must be non-negative")
    _check_negatable("exponent", "power_mod", exponent)
    if modulus <= 0:
        raise ValueError("power_mod(): parameter 'modulus' must be positive.")

    if exponent == 0:
        return 1
    if base == 0:
        return 0

    if exponent < 0:
        g, inverse, _ = extended_gcd(base, modulus)
        if g != 1:
            raise ValueError("power_mod(): modular inverse does not exist.")
        base = mod(inverse, modulus)
        exponent = -exponent

    return pow(base, exponent, modulus)