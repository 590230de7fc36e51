import hashlib

import pytest

from curve25519ref.encoding import from_bytes, to_bytes
from curve25519ref.field import ONE, ZERO, add, from_limbs, mul, sub
from curve25519ref.field_ops import cswap
from curve25519ref.group import ExtendedPoint
from curve25519ref.montgomery import ladder_step
from curve25519ref.powers import invert
from curve25519ref.scalarmult import double_scalarmult_vartime

NINE = from_limbs([9] + [0] * 9)


def _ratio(x, z):
    return to_bytes(mul(x, invert(z)))


def _scalar(seed: bytes) -> bytes:
    data = bytearray(hashlib.sha256(seed).digest())
    data[31] &= 0x0F
    return bytes(data)


def _ladder(scalar: bytes, u):
    x2, z2, x3, z3 = ONE, ZERO, u, ONE
    swap = 0
    for pos in range(254, -1, -1):
        bit = (scalar[pos >> 3] >> (pos & 7)) & 1
        swap ^= bit
        x2, x3 = cswap(x2, x3, swap)
        z2, z3 = cswap(z2, z3, swap)
        swap = bit
        x2, z2, x3, z3 = ladder_step(u, x2, z2, x3, z3)
    x2, x3 = cswap(x2, x3, swap)
    z2, z3 = cswap(z2, z3, swap)
    return mul(x2, invert(z2))


def test_step_from_infinity_keeps_infinity_and_point():
    u = from_limbs([12345, 0, 0, 0, 0, 0, 0, 0, 0, 0])
    x4, z4, x5, z5 = ladder_step(u, ONE, ZERO, u, ONE)
    assert to_bytes(z4) == bytes(32)
    assert _ratio(x5, z5) == to_bytes(u)


def test_step_is_invariant_under_projective_scaling():
    u = NINE
    # Start from (P, 2P) computed by one step from (infinity, P).
    _, _, x3, z3 = ladder_step(u, ONE, ZERO, u, ONE)
    x2, z2 = u, ONE
    plain = ladder_step(u, x2, z2, x3, z3)
    lam = from_limbs([7, 3, 0, 0, 11, 0, 0, 0, 0, 2])
    scaled = ladder_step(u, mul(x2, lam), mul(z2, lam), x3, z3)
    assert _ratio(plain[0], plain[1]) == _ratio(scaled[0], scaled[1])
    assert _ratio(plain[2], plain[3]) == _ratio(scaled[2], scaled[3])


@pytest.mark.parametrize("seed", [b"one", b"two", b"three"])
def test_ladder_matches_edwards_scalar_multiplication(seed):
    scalar = _scalar(seed)
    edwards = double_scalarmult_vartime(bytes(32), ExtendedPoint.zero(), scalar)
    # u = (1 + y) / (1 - y) = (Z + Y) / (Z - Y)
    u_from_edwards = mul(add(edwards.z, edwards.y), invert(sub(edwards.z, edwards.y)))
    assert to_bytes(_ladder(scalar, NINE)) == to_bytes(u_from_edwards)


def test_diffie_hellman_agreement():
    first = _scalar(b"first party")
    second = _scalar(b"second party")
    first_public = from_bytes(to_bytes(_ladder(first, NINE)))
    second_public = from_bytes(to_bytes(_ladder(second, NINE)))
    shared_a = to_bytes(_ladder(first, second_public))
    shared_b = to_bytes(_ladder(second, first_public))
    assert shared_a == shared_b
    assert shared_a != bytes(32)