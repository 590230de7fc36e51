# curve25519ref

Arithmetic for the prime field GF(2^255 - 19) and the twisted Edwards curve
Edwards25519, written in plain Python with no third-party dependencies.

A field element is a tuple of ten signed 32-bit limbs in radix 2^25.5
(26, 25, 26, 25, ... bits). Additions and subtractions work limb by limb
without carrying; multiplications end in a fixed carry chain that brings the
limbs back to small bounds. Encodings are the usual 32-byte little-endian
form.

This package is meant for study, testing and cross-checking. It is **not**
constant-time. Do not use it to protect real secrets.

## Installation

```
pip install curve25519ref
```

With the test dependencies:

```
pip install "curve25519ref[test]"
```

## Modules

- `curve25519ref.field`: `from_limbs` (checks for ten 32-bit integers) and
  `to_limbs`, the constants `ZERO` and `ONE`, `carry`, and `add`, `sub`,
  `neg` and `mul`.
- `curve25519ref.field_ops`: `square`, `square2` (2·f²), `mul121666`, and
  the conditional selections `cmov(f, g, b)` and `cswap(f, g, b)`, which
  take a bit `b` of 0 or 1 and return new elements.
- `curve25519ref.encoding`: `from_bytes` and `to_bytes` for the 32-byte
  encoding, plus `is_negative` (the canonical value is odd) and
  `is_nonzero`.
- `curve25519ref.powers`: `invert` (z^(p-2), so zero maps to zero) and
  `pow22523` (z^((p-5)/8)).
- `curve25519ref.group`: the point classes `ProjectivePoint`,
  `ExtendedPoint`, `CompletedPoint`, `PrecomputedPoint` and `CachedPoint`,
  with doubling, `add`, `madd`, `msub`, conversions between forms, and
  `ExtendedPoint.from_bytes_negate_vartime` / `ExtendedPoint.to_bytes`. The
  curve constants are `D`, `D2` and `SQRTM1`.
- `curve25519ref.montgomery`: `ladder_step`, one step of the Montgomery
  ladder on u-coordinates, returning `(x4, z4, x5, z5)`.
- `curve25519ref.scalarmult`: `slide`, which recodes a 32-byte scalar into
  256 signed odd digits in -15..15, and `double_scalarmult_vartime`, which
  computes `a*A + b*B` with B the Ed25519 base point and returns a
  `ProjectivePoint`.

Functions that take bytes raise `ValueError` when the length is not 32 and
`TypeError` when given an `int` or `str`.

## Examples

Field inversion:

```python
from curve25519ref import encoding, field, powers

x = encoding.from_bytes(bytes([9]) + bytes(31))
y = field.mul(x, powers.invert(x))
assert encoding.to_bytes(y) == bytes([1]) + bytes(31)
```

Decoding a point and computing `a*A + b*B`. Decoding returns the *negation*
of the encoded point, so decoding the base point and adding `1*B` gives the
neutral element, whose X coordinate is zero:

```python
from curve25519ref import encoding
from curve25519ref.group import ExtendedPoint
from curve25519ref.scalarmult import double_scalarmult_vartime

base = bytes([0x58]) + bytes([0x66] * 31)   # encoding of the base point B
minus_b = ExtendedPoint.from_bytes_negate_vartime(base)
one = bytes([1]) + bytes(31)
result = double_scalarmult_vartime(one, minus_b, one)
assert not encoding.is_nonzero(result.x)
```

When the input does not encode a point on the curve,
`from_bytes_negate_vartime` raises `ValueError`.

## What this package does not do

It provides the field and group building blocks only. There is no key
generation, no signing or signature verification, no hashing, no fixed-base
scalar multiplication, no complete X25519 function (only a single ladder
step), and no reduction of scalars modulo the group order. There is no
command-line interface.

## Running the tests

```
pytest
```