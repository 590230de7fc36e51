"""Points on the twisted Edwards curve -x**2 + y**2 = 1 + d x**2 y**2.

Here d = -121665/121666.  Points are kept in several coordinate systems:

* :class:`ProjectivePoint` (X:Y:Z) with x = X/Z, y = Y/Z;
* :class:`ExtendedPoint` (X:Y:Z:T) with x = X/Z, y = Y/Z and XY = ZT;
* :class:`CompletedPoint` ((X:Z),(Y:T)) with x = X/Z, y = Y/T;
* :class:`PrecomputedPoint` (y+x, y-x, 2dxy) for affine points;
* :class:`CachedPoint` (Y+X, Y-X, Z, 2dT) for fast repeated additions.

Additions and doublings produce a :class:`CompletedPoint`, which is then
converted to whichever form the next step needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from curve25519ref.encoding import from_bytes, is_negative, is_nonzero, to_bytes
from curve25519ref.field import ONE, ZERO, FieldElement, add, from_limbs, mul, neg, sub
from curve25519ref.field_ops import square, square2
from curve25519ref.powers import invert, pow22523

# d = -121665/121666
D: FieldElement = from_limbs(
    [-10913610, 13857413, -15372611, 6949391, 114729,
     -8787816, -6275908, -3247719, -18696448, -12055116]
)

# 2 * d
D2: FieldElement = from_limbs(
    [-21827239, -5839606, -30745221, 13898782, 229458,
     15978800, -12551817, -6495438, 29715968, 9444199]
)

# A square root of -1.
SQRTM1: FieldElement = from_limbs(
    [-32595792, -7943725, 9377950, 3500415, 12389472,
     -272473, -25146209, -2005654, 326686, 11406482]
)


@dataclass(frozen=True)
class CompletedPoint:
    """A point ((X:Z),(Y:T)) with x = X/Z and y = Y/T."""

    x: FieldElement
    y: FieldElement
    z: FieldElement
    t: FieldElement

    def to_projective(self) -> ProjectivePoint:
        """Convert to projective coordinates."""
        return ProjectivePoint(
            mul(self.x, self.t),
            mul(self.y, self.z),
            mul(self.z, self.t),
        )

    def to_extended(self) -> ExtendedPoint:
        """Convert to extended coordinates."""
        return ExtendedPoint(
            mul(self.x, self.t),
            mul(self.y, self.z),
            mul(self.z, self.t),
            mul(self.x, self.y),
        )


@dataclass(frozen=True)
class ProjectivePoint:
    """A point (X:Y:Z) with x = X/Z and y = Y/Z."""

    x: FieldElement
    y: FieldElement
    z: FieldElement

    @classmethod
    def zero(cls) -> ProjectivePoint:
        """Return the neutral element (0, 1)."""
        return cls(ZERO, ONE, ONE)

    def double(self) -> CompletedPoint:
        """Return 2 * self."""
        xx = square(self.x)
        yy = square(self.y)
        b = square2(self.z)
        aa = square(add(self.x, self.y))
        y3 = add(yy, xx)
        z3 = sub(yy, xx)
        x3 = sub(aa, y3)
        t3 = sub(b, z3)
        return CompletedPoint(x3, y3, z3, t3)


@dataclass(frozen=True)
class PrecomputedPoint:
    """An affine point stored as (y + x, y - x, 2dxy)."""

    yplusx: FieldElement
    yminusx: FieldElement
    xy2d: FieldElement

    @classmethod
    def zero(cls) -> PrecomputedPoint:
        """Return the neutral element (0, 1)."""
        return cls(ONE, ONE, ZERO)


@dataclass(frozen=True)
class CachedPoint:
    """A point stored as (Y + X, Y - X, Z, 2dT)."""

    yplusx: FieldElement
    yminusx: FieldElement
    z: FieldElement
    t2d: FieldElement


@dataclass(frozen=True)
class ExtendedPoint:
    """A point (X:Y:Z:T) with x = X/Z, y = Y/Z and XY = ZT."""

    x: FieldElement
    y: FieldElement
    z: FieldElement
    t: FieldElement

    @classmethod
    def zero(cls) -> ExtendedPoint:
        """Return the neutral element (0, 1)."""
        return cls(ZERO, ONE, ONE, ZERO)

    @classmethod
    def from_bytes_negate_vartime(cls, s: bytes) -> ExtendedPoint:
        """Decode a 32-byte point encoding and return the point's negation.

        Raises ValueError if the encoded y has no matching x on the curve.
        Runs in variable time.
        """
        y = from_bytes(s)
        sign = s[31] >> 7
        z = ONE
        u = square(y)
        v = mul(u, D)
        u = sub(u, z)  # y**2 - 1
        v = add(v, z)  # d y**2 + 1

        v3 = mul(square(v), v)  # v**3
        x = mul(mul(square(v3), v), u)  # u v**7
        x = pow22523(x)  # (u v**7)**((p - 5) / 8)
        x = mul(mul(x, v3), u)  # u v**3 (u v**7)**((p - 5) / 8)

        vxx = mul(square(x), v)
        if is_nonzero(sub(vxx, u)):
            if is_nonzero(add(vxx, u)):
                raise ValueError("encoding does not describe a point on the curve")
            x = mul(x, SQRTM1)

        if int(is_negative(x)) == sign:
            x = neg(x)

        return cls(x, y, z, mul(x, y))

    def to_bytes(self) -> bytes:
        """Encode the point as y with the sign of x in the top bit."""
        recip = invert(self.z)
        x = mul(self.x, recip)
        y = mul(self.y, recip)
        encoded = bytearray(to_bytes(y))
        encoded[31] ^= int(is_negative(x)) << 7
        return bytes(encoded)

    def to_projective(self) -> ProjectivePoint:
        """Drop T to get projective coordinates."""
        return ProjectivePoint(self.x, self.y, self.z)

    def to_cached(self) -> CachedPoint:
        """Convert to the cached form used by :meth:`add`."""
        return CachedPoint(
            add(self.y, self.x),
            sub(self.y, self.x),
            self.z,
            mul(self.t, D2),
        )

    def double(self) -> CompletedPoint:
        """Return 2 * self."""
        return self.to_projective().double()

    def add(self, q: CachedPoint) -> CompletedPoint:
        """Return self + q."""
        ypx1 = add(self.y, self.x)
        ymx1 = sub(self.y, self.x)
        a = mul(ypx1, q.yplusx)
        b = mul(ymx1, q.yminusx)
        c = mul(q.t2d, self.t)
        zz = mul(self.z, q.z)
        d = add(zz, zz)
        return CompletedPoint(sub(a, b), add(a, b), add(d, c), sub(d, c))

    def madd(self, q: PrecomputedPoint) -> CompletedPoint:
        """Return self + q for a precomputed affine q."""
        ypx1 = add(self.y, self.x)
        ymx1 = sub(self.y, self.x)
        a = mul(ypx1, q.yplusx)
        b = mul(ymx1, q.yminusx)
        c = mul(q.xy2d, self.t)
        d = add(self.z, self.z)
        return CompletedPoint(sub(a, b), add(a, b), add(d, c), sub(d, c))

    def msub(self, q: PrecomputedPoint) -> CompletedPoint:
        """Return self - q for a precomputed affine q."""
        ypx1 = add(self.y, self.x)
        ymx1 = sub(self.y, self.x)
        a = mul(ypx1, q.yminusx)
        b = mul(ymx1, q.yplusx)
        c = mul(q.xy2d, self.t)
        d = add(self.z, self.z)
        return CompletedPoint(sub(a, b), add(a, b), sub(d, c), add(d, c))