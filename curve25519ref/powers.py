"""Fixed exponentiations in the field: inversion and the square-root helper."""

from __future__ import annotations

from curve25519ref.field import FieldElement, mul
from curve25519ref.field_ops import square


def _square_times(f: FieldElement, n: int) -> FieldElement:
    """Square f n times in a row."""
    for _ in range(n):
        f = square(f)
    return f


def _pow_2_250_minus_1(z: FieldElement) -> tuple[FieldElement, FieldElement]:
    """Return (z**11, z**(2**250 - 1)) by the shared addition chain."""
    z2 = square(z)
    z9 = mul(z, _square_times(z2, 2))
    z11 = mul(z2, z9)
    z_5_0 = mul(z9, square(z11))
    z_10_0 = mul(_square_times(z_5_0, 5), z_5_0)
    z_20_0 = mul(_square_times(z_10_0, 10), z_10_0)
    z_40_0 = mul(_square_times(z_20_0, 20), z_20_0)
    z_50_0 = mul(_square_times(z_40_0, 10), z_10_0)
    z_100_0 = mul(_square_times(z_50_0, 50), z_50_0)
    z_200_0 = mul(_square_times(z_100_0, 100), z_100_0)
    z_250_0 = mul(_square_times(z_200_0, 50), z_50_0)
    return z11, z_250_0


def invert(z: FieldElement) -> FieldElement:
    """Return z**(p - 2), the inverse of z; zero maps to zero."""
    z11, z_250_0 = _pow_2_250_minus_1(z)
    return mul(_square_times(z_250_0, 5), z11)


def pow22523(z: FieldElement) -> FieldElement:
    """Return z**((p - 5) / 8), that is z**(2**252 - 3)."""
    _, z_250_0 = _pow_2_250_minus_1(z)
    return mul(_square_times(z_250_0, 2), z)