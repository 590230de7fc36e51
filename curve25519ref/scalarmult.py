"""Variable-time double scalar multiplication on the Edwards curve."""

from __future__ import annotations

from curve25519ref.field import from_limbs, neg
from curve25519ref.group import (
    CachedPoint,
    CompletedPoint,
    ExtendedPoint,
    PrecomputedPoint,
    ProjectivePoint,
)

SCALAR_LENGTH = 32
_BITS = 8 * SCALAR_LENGTH


def _precomp(yplusx, yminusx, xy2d) -> PrecomputedPoint:
    return PrecomputedPoint(from_limbs(yplusx), from_limbs(yminusx), from_limbs(xy2d))


# B, 3B, 5B, ..., 15B for the Ed25519 base point B.
_BASE_ODD_MULTIPLES = (
    _precomp(
        [25967493, -14356035, 29566456, 3660896, -12694345, 4014787, 27544626, -11754271, -6079156, 2047605],
        [-12545711, 934262, -2722910, 3049990, -727428, 9406986, 12720692, 5043384, 19500929, -15469378],
        [-8738181, 4489570, 9688441, -14785194, 10184609, -12363380, 29287919, 11864899, -24514362, -4438546],
    ),
    _precomp(
        [15636291, -9688557, 24204773, -7912398, 616977, -16685262, 27787600, -14772189, 28944400, -1550024],
        [16568933, 4717097, -11556148, -1102322, 15682896, -11807043, 16354577, -11775962, 7689662, 11199574],
        [30464156, -5976125, -11779434, -15670865, 23220365, 15915852, 7512774, 10017326, -17749093, -9920357],
    ),
    _precomp(
        [10861363, 11473154, 27284546, 1981175, -30064349, 12577861, 32867885, 14515107, -15438304, 10819380],
        [4708026, 6336745, 20377586, 9066809, -11272109, 6594696, -25653668, 12483688, -12668491, 5581306],
        [19563160, 16186464, -29386857, 4097519, 10237984, -4348115, 28542350, 13850243, -23678021, -15815942],
    ),
    _precomp(
        [5153746, 9909285, 1723747, -2777874, 30523605, 5516873, 19480852, 5230134, -23952439, -15175766],
        [-30269007, -3463509, 7665486, 10083793, 28475525, 1649722, 20654025, 16520125, 30598449, 7715701],
        [28881845, 14381568, 9657904, 3680757, -20181635, 7843316, -31400660, 1370708, 29794553, -1409300],
    ),
    _precomp(
        [-22518993, -6692182, 14201702, -8745502, -23510406, 8844726, 18474211, -1361450, -13062696, 13821877],
        [-6455177, -7839871, 3374702, -4740862, -27098617, -10571707, 31655028, -7212327, 18853322, -14220951],
        [4566830, -12963868, -28974889, -12240689, -7602672, -2830569, -8514358, -10431137, 2207753, -3209784],
    ),
    _precomp(
        [-25154831, -4185821, 29681144, 7868801, -6854661, -9423865, -12437364, -663000, -31111463, -16132436],
        [25576264, -2703214, 7349804, -11814844, 16472782, 9300885, 3844789, 15725684, 171356, 6466918],
        [23103977, 13316479, 9739013, -16149481, 817875, -15038942, 8965339, -14088058, -30714912, 16193877],
    ),
    _precomp(
        [-33521811, 3180713, -2394130, 14003687, -16903474, -16270840, 17238398, 4729455, -18074513, 9256800],
        [-25182317, -4174131, 32336398, 5036987, -21236817, 11360617, 22616405, 9761698, -19827198, 630305],
        [-13720693, 2639453, -24237460, -7406481, 9494427, -5774029, -6554551, -15960994, -2449256, -14291300],
    ),
    _precomp(
        [-3151181, -5046075, 9282714, 6866145, -31907062, -863023, -18940575, 15033784, 25105118, -7894876],
        [-24326370, 15950226, -31801215, -14592823, -11662737, -5090925, 1573892, -2625887, 2198790, -15804619],
        [-3099351, 10324967, -2241613, 7453183, -5446979, -2735503, -13812022, -16236442, -32461234, -12290683],
    ),
)


def _check_scalar(a: bytes) -> bytes:
    if isinstance(a, (int, str)):
        raise TypeError(f"expected bytes, got {type(a).__name__}")
    data = bytes(a)
    if len(data) != SCALAR_LENGTH:
        raise ValueError(f"a scalar is {SCALAR_LENGTH} bytes, got {len(data)}")
    return data


def slide(a: bytes) -> list[int]:
    """Recode a 32-byte little-endian scalar into signed odd digits.

    Returns 256 digits r with a = sum(r[i] * 2**i), each digit zero or odd
    in the range -15..15 (carries past bit 255 are dropped).
    """
    data = _check_scalar(a)
    r = [(data[i >> 3] >> (i & 7)) & 1 for i in range(_BITS)]

    for i in range(_BITS):
        if not r[i]:
            continue
        for b in range(1, 7):
            if i + b >= _BITS:
                break
            if not r[i + b]:
                continue
            step = r[i + b] << b
            if r[i] + step <= 15:
                r[i] += step
                r[i + b] = 0
            elif r[i] - step >= -15:
                r[i] -= step
                for k in range(i + b, _BITS):
                    if not r[k]:
                        r[k] = 1
                        break
                    r[k] = 0
            else:
                break
    return r


def _negate_cached(q: CachedPoint) -> CachedPoint:
    return CachedPoint(q.yminusx, q.yplusx, q.z, neg(q.t2d))


def double_scalarmult_vartime(
    a: bytes, point: ExtendedPoint, b: bytes
) -> ProjectivePoint:
    """Return a * point + b * B, where B is the Ed25519 base point.

    Both scalars are 32 little-endian bytes.  Runs in variable time.
    """
    aslide = slide(a)
    bslide = slide(b)

    odd_multiples = [point.to_cached()]
    doubled = point.double().to_extended()
    for _ in range(7):
        odd_multiples.append(doubled.add(odd_multiples[-1]).to_extended().to_cached())

    r = ProjectivePoint.zero()
    top = next(
        (i for i in reversed(range(_BITS)) if aslide[i] or bslide[i]), None
    )
    if top is None:
        return r

    for i in range(top, -1, -1):
        t: CompletedPoint = r.double()

        digit = aslide[i]
        if digit > 0:
            t = t.to_extended().add(odd_multiples[digit // 2])
        elif digit < 0:
            t = t.to_extended().add(_negate_cached(odd_multiples[-digit // 2]))

        digit = bslide[i]
        if digit > 0:
            t = t.to_extended().madd(_BASE_ODD_MULTIPLES[digit // 2])
        elif digit < 0:
            t = t.to_extended().msub(_BASE_ODD_MULTIPLES[-digit // 2])

        r = t.to_projective()
    return r