"""Conversion between field elements and their 32-byte little-endian form."""

from __future__ import annotations

from curve25519ref.field import LIMB_COUNT, FieldElement, from_limbs

ENCODED_LENGTH = 32

# Bit offset of each limb within the 255-bit little-endian value.
_LIMB_OFFSETS = (0, 26, 51, 77, 102, 128, 153, 179, 204, 230)
_LIMB_BITS = tuple(26 if i % 2 == 0 else 25 for i in range(LIMB_COUNT))

# (byte offset, byte count, left shift) used to load each limb.
_LOADS = (
    (0, 4, 0),
    (4, 3, 6),
    (7, 3, 5),
    (10, 3, 3),
    (13, 3, 2),
    (16, 4, 0),
    (20, 3, 7),
    (23, 3, 5),
    (26, 3, 4),
    (29, 3, 2),
)

# Carry order on loading: odd limbs first, then even limbs.
_LOAD_CARRY_ORDER = (9, 1, 3, 5, 7, 0, 2, 4, 6, 8)

_ZERO_ENCODING = bytes(ENCODED_LENGTH)


def _check_encoding(s: bytes) -> bytes:
    if isinstance(s, (int, str)):
        raise TypeError(f"expected bytes, got {type(s).__name__}")
    data = bytes(s)
    if len(data) != ENCODED_LENGTH:
        raise ValueError(
            f"an encoded field element is {ENCODED_LENGTH} bytes, got {len(data)}"
        )
    return data


def from_bytes(s: bytes) -> FieldElement:
    """Decode 32 little-endian bytes into a field element.

    The top bit of the last byte is ignored.  Values between p and
    2**255 - 1 are accepted and are not reduced to canonical form.
    """
    data = _check_encoding(s)
    limbs = []
    for offset, count, shift in _LOADS:
        limbs.append(int.from_bytes(data[offset:offset + count], "little") << shift)
    limbs[9] = (int.from_bytes(data[29:32], "little") & 0x7FFFFF) << 2

    for i in _LOAD_CARRY_ORDER:
        bits = _LIMB_BITS[i]
        c = (limbs[i] + (1 << (bits - 1))) >> bits
        if i == LIMB_COUNT - 1:
            limbs[0] += c * 19
        else:
            limbs[i + 1] += c
        limbs[i] -= c << bits
    return from_limbs(limbs)


def to_bytes(f: FieldElement) -> bytes:
    """Encode a field element as its canonical 32 little-endian bytes.

    The limbs must be within the usual bounds of a reduced or lightly
    added element (about 1.1 * 2**26 for even limbs, 1.1 * 2**25 for odd).
    """
    h = list(f)
    if len(h) != LIMB_COUNT:
        raise ValueError(f"a field element has {LIMB_COUNT} limbs, got {len(h)}")

    # q = floor(value / p), computed from the top limb downwards.
    q = (19 * h[9] + (1 << 24)) >> 25
    for limb, bits in zip(h, _LIMB_BITS):
        q = (limb + q) >> bits

    h[0] += 19 * q
    for i, bits in enumerate(_LIMB_BITS):
        c = h[i] >> bits
        if i < LIMB_COUNT - 1:
            h[i + 1] += c
        h[i] -= c << bits

    value = sum(limb << offset for limb, offset in zip(h, _LIMB_OFFSETS))
    return value.to_bytes(ENCODED_LENGTH, "little")


def is_negative(f: FieldElement) -> bool:
    """Return True if the canonical value of f is odd."""
    return bool(to_bytes(f)[0] & 1)


def is_nonzero(f: FieldElement) -> bool:
    """Return True if f is not congruent to zero."""
    return to_bytes(f) != _ZERO_ENCODING