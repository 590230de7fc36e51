"""Arithmetic in the field of integers modulo 2**255 - 19.

A field element is a tuple of ten signed 32-bit limbs ``t`` representing
``t[0] + 2**26 t[1] + 2**51 t[2] + 2**77 t[3] + 2**102 t[4] + ...
+ 2**230 t[9]``.  Even-numbered limbs carry 26 bits and odd-numbered limbs
25 bits once reduced; the bounds on each limb vary with context, exactly as
in the radix-2**25.5 reference arithmetic.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

LIMB_COUNT = 10

FieldElement = tuple[int, int, int, int, int, int, int, int, int, int]

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

# Bit width of each limb: 26, 25, 26, 25, ...
_LIMB_BITS = tuple(26 if i % 2 == 0 else 25 for i in range(LIMB_COUNT))

# Order in which the carry chain propagates limbs after a multiplication.
_CARRY_ORDER = (0, 4, 1, 5, 2, 6, 3, 7, 4, 8, 9, 0)


def _int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range, as limb storage does."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def from_limbs(limbs: Iterable[int]) -> FieldElement:
    """Build a field element from ten signed 32-bit limbs."""
    values = tuple(limbs)
    if len(values) != LIMB_COUNT:
        raise ValueError(
            f"a field element has {LIMB_COUNT} limbs, got {len(values)}"
        )
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"limbs must be integers, got {value!r}")
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"limb {value} does not fit in 32 signed bits")
    return values  # type: ignore[return-value]


def to_limbs(f: FieldElement) -> list[int]:
    """Return the limbs of a field element as a list."""
    return list(f)


ZERO: FieldElement = from_limbs([0] * LIMB_COUNT)
ONE: FieldElement = from_limbs([1] + [0] * (LIMB_COUNT - 1))


def carry(h: Sequence[int]) -> FieldElement:
    """Reduce ten wide (64-bit) limbs to a field element with small limbs."""
    limbs = list(h)
    if len(limbs) != LIMB_COUNT:
        raise ValueError(
            f"a field element has {LIMB_COUNT} limbs, got {len(limbs)}"
        )
    for i in _CARRY_ORDER:
        bits = _LIMB_BITS[i]
        c = (limbs[i] + (1 << (bits - 1))) >> bits
        if i == LIMB_COUNT - 1:
            limbs[0] += c * 19
        else:
            limbs[i + 1] += c
        limbs[i] -= c << bits
    return tuple(_int32(value) for value in limbs)  # type: ignore[return-value]


def add(f: FieldElement, g: FieldElement) -> FieldElement:
    """Return f + g, limb by limb, without carrying."""
    return tuple(_int32(a + b) for a, b in zip(f, g, strict=True))  # type: ignore[return-value]


def sub(f: FieldElement, g: FieldElement) -> FieldElement:
    """Return f - g, limb by limb, without carrying."""
    return tuple(_int32(a - b) for a, b in zip(f, g, strict=True))  # type: ignore[return-value]


def neg(f: FieldElement) -> FieldElement:
    """Return -f, limb by limb."""
    return tuple(_int32(-a) for a in f)  # type: ignore[return-value]


def mul(f: FieldElement, g: FieldElement) -> FieldElement:
    """Return f * g reduced to small limbs.

    Schoolbook multiplication: products that land at or beyond limb ten
    wrap around with a factor of 19, and the product of two odd limbs is
    doubled because their radix offsets sum half a bit short.
    """
    if len(f) != LIMB_COUNT or len(g) != LIMB_COUNT:
        raise ValueError(f"field elements have {LIMB_COUNT} limbs")
    t = [0] * LIMB_COUNT
    for i, fi in enumerate(f):
        for j, gj in enumerate(g):
            factor = 2 if (i % 2 and j % 2) else 1
            k = i + j
            if k >= LIMB_COUNT:
                factor *= 19
                k -= LIMB_COUNT
            t[k] += fi * gj * factor
    return carry(t)