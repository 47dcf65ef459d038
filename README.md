# offt

Building blocks for fast Fourier transforms in pure Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `offt.parameters`

`FourierParameters` is a frozen dataclass holding the pair `(a, b)` that
describes a Fourier convention: `a` sets the scaling and `b` the sign of the
exponent. Ready-made values are class attributes:

- `FourierParameters.DEFAULT`: `(1, 1)`
- `FourierParameters.WOLFRAM_LANGUAGE` and `FourierParameters.MATHEMATICA`: `(0, 1)`
- `FourierParameters.FFTW`: `(1, -1)`

### `offt.arith`

Integer helpers:

- `even_q(value)`, `odd_q(value)`: parity tests. `odd_q` is true only for
  positive odd numbers.
- `mod(dividend, divisor)`: remainder in `0 .. divisor - 1`. The divisor must
  be positive.
- `gcd(a, b)`: the greatest common divisor, never negative.
- `extended_gcd(a, b)`: returns `(g, x, y)` with `a*x + b*y == g`.
- `list_product(factors)`: the product of an iterable; empty gives `1`.
- `times_plus_mod(a, b, c, modulus)`: `(a*b + c) mod modulus` for non-negative
  `a`, `b`, `c`.
- `power_mod(base, exponent, modulus)`: modular power. A negative exponent
  uses the modular inverse of `base`.

Invalid arguments raise `ValueError`. `gcd`, `extended_gcd`, `mod` and
`power_mod` also reject values below `-(2**63 - 1)`.

### `offt.primes`

- `miller_rabin_probable_prime_q(base, n)`: one strong-probable-prime test.
  `n` must be odd and greater than 2, and `base` in `1 .. n - 1`.
- `prime_q(n)`: primality of `n` (or `-n`). Small numbers use trial division.
  Larger ones use Miller-Rabin with a set of bases that gives exact answers
  for all 64-bit integers.
- `factor_integer(n)`: the prime factors of `n` as a list, repeated by
  multiplicity. It uses trial division up to 61 and then Brent's variant of
  Pollard's rho. A negative `n` gives `-1` as the first factor. For
  `n` in `-1 .. 1` the result is `[n]`.
- `primitive_root(n)`: the smallest primitive root of the prime `n`.

### DFT kernels

- `offt.kernels_small`: `dft3`, `dft4`, `dft5`, `dft6`
- `offt.kernels_medium`: `dft7`, `dft8`, `dft9`
- `offt.kernel30`: `dft30`
- `offt.kernel32`: `dft32`

Each kernel `dftN(values, twiddles=None)` takes exactly `N` values. When
`twiddles` is given, it must also hold `N` factors. Each value is first
multiplied by its twiddle factor. The kernel then returns the unscaled
transform `X[k] = sum(x[n] * exp(2j*pi*k*n/N))` as a list of complex numbers.
A wrong length raises `ValueError`.

## Examples

```python
from offt.arith import extended_gcd, power_mod
from offt.primes import factor_integer, primitive_root

g, x, y = extended_gcd(240, 46)   # 240*x + 46*y == g == 2
power_mod(3, -1, 7)               # 5, the inverse of 3 modulo 7
factor_integer(360)               # [2, 2, 2, 3, 3, 5]
primitive_root(23)                # 5
```

```python
from offt.kernels_small import dft4

dft4([1, 2, 3, 4])                # [(10+0j), (-2-2j), (-2+0j), (-2+2j)]
```

## What the package does not do

The package provides the pieces listed above and nothing more. It has no
transform object for arbitrary lengths or for several dimensions. It does not
handle strided arrays and has no inverse transform. The kernels do not apply
`FourierParameters`: they always use the unscaled convention with a positive
exponent shown above. Kernels exist only for lengths 3 to 9, 30 and 32.