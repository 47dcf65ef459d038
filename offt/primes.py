"""Primality testing, integer factorisation and primitive roots."""

from __future__ import annotations

import math
from collections.abc import Iterator

from offt.arith import even_q, gcd, odd_q, power_mod, times_plus_mod

__all__ = [
    "miller_rabin_probable_prime_q",
    "prime_q",
    "factor_integer",
    "primitive_root",
]

# Bases of the deterministic Miller-Rabin test, each paired with the smallest
# number from which on the base is needed (OEIS A014233).
_MILLER_RABIN_BASES = (
    (2, 0),
    (3, 2047),
    (5, 1373653),
    (7, 25326001),
    (11, 3215031751),
    (13, 2152302898747),
    (17, 3474749660383),
    (19, 341550071728321),
    (23, 341550071728321),
    (29, 3825123056546413051),
    (31, 3825123056546413051),
    (37, 3825123056546413051),
)


def miller_rabin_probable_prime_q(base: int, n: int) -> bool:
    """Return True if ``n`` is a strong probable prime to ``base``."""
    if n < 3 or not odd_q(n):
        raise ValueError(
            "miller_rabin_probable_prime_q(): 'n' must be an odd integer greater than 2."
        )
    if base <= 0 or base >= n:
        raise ValueError(
            "miller_rabin_probable_prime_q(): 'base' must be a positive integer less than 'n'."
        )

    r = 0
    d = n - 1
    while even_q(d):
        d //= 2
        r += 1

    x = power_mod(base, d, n)
    if x in (1, n - 1):
        return True

    for _ in range(r - 1):
        x = power_mod(x, 2, n)
        if x == n - 1:
            return True

    return False


def prime_q(n: int) -> bool:
    """Return True if ``n`` (or ``-n``) is prime."""
    n = abs(n)

    if n < 2:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    if n < 1000:
        k = 5
        while k * k <= n:
            if n % k == 0 or n % (k + 2) == 0:
                return False
            k += 6
        return True

    return all(
        miller_rabin_probable_prime_q(base, n)
        for base, threshold in _MILLER_RABIN_BASES
        if n >= threshold
    )


def _pollard_rho(n: int, c: int) -> int | None:
    """Find a non-trivial factor of ``n`` with Brent's variant of Pollard's rho.

    Returns None if no factor could be extracted for this ``c``.
    """
    y = 2
    r = 1
    q = 1
    # Number of steps taken between two GCD computations.
    m = 1 + math.floor(0.5 * n**0.25)

    while True:
        x = y
        for _ in range(r):
            y = times_plus_mod(y, y, c, n)

        k = 0
        while True:
            ys = y
            for _ in range(min(m, r - k)):
                y = times_plus_mod(y, y, c, n)
                q = times_plus_mod(q, abs(x - y), 0, n)
            g = gcd(q, n)
            k += m
            if not (k < r and g <= 1):
                break

        r *= 2
        if g > 1:
            break

    if g == n:
        # Too many steps were batched; retrace one step at a time.
        while True:
            ys = times_plus_mod(ys, ys, c, n)
            g = gcd(x - ys, n)
            if g > 1:
                break

    return None if g == n else g


def _pollard_factors(n: int) -> Iterator[int]:
    rest = n
    while not prime_q(rest):
        c = 1
        factor = _pollard_rho(rest, c)
        while factor is None:
            c += 1
            factor = _pollard_rho(rest, c)

        if prime_q(factor):
            yield factor
        else:
            yield from _pollard_factors(factor)

        rest //= factor

    yield rest


def _trial_factors(n: int, found: list[int]) -> int:
    """Strip factors up to 61 from ``n`` into ``found`` and return what is left."""
    for p in (2, 3):
        while n % p == 0:
            found.append(p)
            n //= p

    k = 5
    while k <= 59 and k * k <= n:
        for p in (k, k + 2):
            while n % p == 0:
                found.append(p)
                n //= p
        k += 6

    return n


def factor_integer(n: int) -> list[int]:
    """Return the prime factors of ``n``, repeated by multiplicity.

    For ``n`` in ``-1 .. 1`` the result is ``[n]``; a negative ``n`` yields
    ``-1`` as its first factor.
    """
    if -1 <= n <= 1:
        return [n]

    factors: list[int] = []
    if n < 0:
        factors.append(-1)
        n = -n

    n = _trial_factors(n, factors)
    if n > 1:
        factors.extend(_pollard_factors(n))
    return factors


def primitive_root(n: int) -> int:
    """Return the smallest primitive root of the prime ``n``."""
    if not n > 1:
        raise ValueError("primitive_root(): parameter 'n' must be greater than 1.")
    if not prime_q(n):
        raise ValueError("primitive_root(): parameter 'n' must be a prime number.")

    euler_phi = n - 1
    tests = sorted({euler_phi // factor for factor in factor_integer(euler_phi)})

    for a in range(2, n):
        if all(power_mod(a, t, n) != 1 for t in tests):
            return a

    raise RuntimeError(
        "primitive_root(): internal error. Should have found a primitive root but did not."
    )