"""One step of the Montgomery ladder on Curve25519.

Points on the Montgomery curve v**2 = u**3 + 486662 u**2 + u are handled
by their u-coordinate alone, kept projectively as (X:Z) with u = X/Z.
"""

from __future__ import annotations

from curve25519ref.field import FieldElement, add, mul, sub
from curve25519ref.field_ops import mul121666, square


def ladder_step(
    x1: FieldElement,
    x2: FieldElement,
    z2: FieldElement,
    x3: FieldElement,
    z3: FieldElement,
) -> tuple[FieldElement, FieldElement, FieldElement, FieldElement]:
    """Double (x2:z2) and add it to (x3:z3), whose difference has u = x1.

    Returns (x4, z4, x5, z5), where (x4:z4) is 2 * (x2:z2) and (x5:z5) is
    (x2:z2) + (x3:z3).
    """
    d = sub(x3, z3)
    b = sub(x2, z2)
    a = add(x2, z2)
    c = add(x3, z3)
    da = mul(d, a)
    cb = mul(c, b)
    bb = square(b)
    aa = square(a)
    t0 = add(da, cb)
    t1 = sub(da, cb)
    x4 = mul(aa, bb)
    e = sub(aa, bb)
    t2 = square(t1)
    t3 = mul121666(e)
    x5 = square(t0)
    t4 = add(bb, t3)
    z5 = mul(x1, t2)
    z4 = mul(e, t4)
    return x4, z4, x5, z5