import pytest
from hypothesis import given, strategies as st

from curve25519ref import field

P = 2**255 - 19
OFFSETS = [0, 26, 51, 77, 102, 128, 153, 179, 204, 230]


def _value(limbs):
    return sum(limb << off for limb, off in zip(limbs, OFFSETS))


def _limbs_of(n):
    limbs = []
    for i, off in enumerate(OFFSETS):
        bits = 26 if i % 2 == 0 else 25
        limbs.append((n >> off) & ((1 << bits) - 1))
    return field.from_limbs(limbs)


def _small_limbs(even_bits=25, odd_bits=24):
    return st.tuples(
        *[
            st.integers(-(1 << b), (1 << b) - 1)
            for b in [even_bits if i % 2 == 0 else odd_bits for i in range(10)]
        ]
    ).map(field.from_limbs)


field_ints = st.integers(0, P - 1)


def test_round_trip_limbs():
    limbs = [1, -2, 3, -4, 5, -6, 7, -8, 9, -10]
    assert field.to_limbs(field.from_limbs(limbs)) == limbs


def test_from_limbs_wrong_length():
    with pytest.raises(ValueError):
        field.from_limbs([0] * 9)


def test_from_limbs_out_of_range():
    with pytest.raises(ValueError):
        field.from_limbs([2**31] + [0] * 9)


def test_from_limbs_rejects_non_integer():
    with pytest.raises(TypeError):
        field.from_limbs([1.5] + [0] * 9)


def test_zero_and_one_values():
    assert field.to_limbs(field.ZERO) == [0] * 10
    assert field.to_limbs(field.ONE) == [1] + [0] * 9
    assert _value(field.add(field.ZERO, field.ONE)) == 1
    assert _value(field.mul(field.ONE, field.ONE)) == 1


def test_add_wraps_like_int32():
    top = field.from_limbs([2**31 - 1] + [0] * 9)
    assert field.to_limbs(field.add(top, field.ONE))[0] == -(2**31)


def test_neg_of_neg_is_identity():
    f = field.from_limbs([5, -7, 11, 0, 3, 2, -1, 9, 8, -4])
    assert field.neg(field.neg(f)) == f


@given(field_ints, field_ints)
def test_add_matches_integer_sum(a, b):
    assert _value(field.add(_limbs_of(a), _limbs_of(b))) == a + b


@given(field_ints, field_ints)
def test_sub_matches_integer_difference(a, b):
    assert _value(field.sub(_limbs_of(a), _limbs_of(b))) == a - b


@given(field_ints)
def test_neg_matches_integer_negation(a):
    assert _value(field.neg(_limbs_of(a))) == -a


@given(field_ints)
def test_sub_self_is_zero(a):
    f = _limbs_of(a)
    assert field.sub(f, f) == field.ZERO


@given(field_ints, field_ints)
def test_mul_matches_modular_product(a, b):
    product = field.mul(_limbs_of(a), _limbs_of(b))
    assert _value(product) % P == (a * b) % P


@given(_small_limbs(26, 25), _small_limbs(26, 25))
def test_mul_output_bounds(f, g):
    h = field.mul(f, g)
    for i, limb in enumerate(h):
        bound = 1.01 * 2 ** (25 if i % 2 == 0 else 24)
        assert abs(limb) <= bound


@given(_small_limbs(26, 25), _small_limbs(26, 25))
def test_mul_commutes(f, g):
    assert _value(field.mul(f, g)) % P == _value(field.mul(g, f)) % P


@given(_small_limbs())
def test_mul_by_one_keeps_reduced_limbs(f):
    assert field.mul(field.ONE, f) == f


@given(_small_limbs())
def test_mul_by_zero_is_zero(f):
    assert field.mul(f, field.ZERO) == field.ZERO


@given(st.lists(st.integers(-(2**50), 2**50), min_size=10, max_size=10))
def test_carry_preserves_value_mod_p(wide):
    reduced = field.carry(wide)
    assert _value(reduced) % P == _value(wide) % P


def test_carry_wrong_length():
    with pytest.raises(ValueError):
        field.carry([0] * 11)


def test_mul_wrong_length():
    with pytest.raises(ValueError):
        field.mul((0,) * 9, field.ONE)