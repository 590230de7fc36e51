"""Squaring, small-constant multiplication and constant-time selection.

These build on :mod:`curve25519ref.field` and work on the same ten-limb
field elements.
"""

from __future__ import annotations

from curve25519ref.field import LIMB_COUNT, FieldElement, add, carry, mul

# (A + 2) / 4 for the Montgomery form of the curve, A = 486662.
A24 = 121666


def _check_length(f: FieldElement) -> None:
    if len(f) != LIMB_COUNT:
        raise ValueError(f"a field element has {LIMB_COUNT} limbs, got {len(f)}")


def _mask(b: int) -> int:
    """Turn a selection bit into an all-zeros or all-ones mask."""
    if isinstance(b, bool):
        b = int(b)
    if b not in (0, 1):
        raise ValueError(f"selection bit must be 0 or 1, got {b!r}")
    return -b


def square(f: FieldElement) -> FieldElement:
    """Return f * f reduced to small limbs."""
    return mul(f, f)


def square2(f: FieldElement) -> FieldElement:
    """Return 2 * f * f reduced to small limbs."""
    return mul(add(f, f), f)


def mul121666(f: FieldElement) -> FieldElement:
    """Return f * 121666 reduced to small limbs."""
    _check_length(f)
    return carry([limb * A24 for limb in f])


def cmov(f: FieldElement, g: FieldElement, b: int) -> FieldElement:
    """Return g if b is 1 and f if b is 0, without branching on b."""
    mask = _mask(b)
    _check_length(f)
    _check_length(g)
    return tuple(a ^ ((a ^ c) & mask) for a, c in zip(f, g))  # type: ignore[return-value]


def cswap(
    f: FieldElement, g: FieldElement, b: int
) -> tuple[FieldElement, FieldElement]:
    """Return (g, f) if b is 1 and (f, g) if b is 0, without branching on b."""
    mask = _mask(b)
    _check_length(f)
    _check_length(g)
    diffs = [(a ^ c) & mask for a, c in zip(f, g)]
    new_f = tuple(a ^ x for a, x in zip(f, diffs))
    new_g = tuple(c ^ x for c, x in zip(g, diffs))
    return new_f, new_g  # type: ignore[return-value]