"""Unit tests for Goldilocks field arithmetic."""

import itertools

import pytest

from r1cs_spec.primitives.field import (
    FF,
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
    PrimeField,
    add,
    exp,
    inv,
    mul,
    neg,
    sub,
)

P = GOLDILOCKS_PRIME


class TestClosure:
    """Every result lands in [0, p)."""

    @pytest.mark.parametrize("op", [add, sub, mul])
    def test_binary_ops_stay_in_range(self, op, sample_elements) -> None:
        for a, b in itertools.product(sample_elements, repeat=2):
            result = op(a, b)
            assert 0 <= result < P, f"{op.__name__}({a}, {b}) = {result}"

    def test_add_wraps_past_modulus(self) -> None:
        assert add(P - 1, 1) == 0
        assert add(P - 1, P - 1) == P - 2

    def test_sub_underflow_wraps(self) -> None:
        assert sub(0, 1) == P - 1
        assert sub(3, 5) == P - 2

    def test_sub_reduces_oversized_subtrahend(self) -> None:
        assert sub(5, P + 2) == 3

    def test_mul_large_operands(self) -> None:
        # (-1) * (-1) = 1
        assert mul(P - 1, P - 1) == 1

    def test_negative_inputs_reduce(self) -> None:
        assert add(5, -1) == 4
        assert mul(-1, 7) == P - 7


class TestIdentities:
    """Additive and multiplicative identities."""

    def test_identities(self, field_element) -> None:
        a = field_element
        assert add(a, 0) == a
        assert mul(a, 1) == a
        assert sub(a, a) == 0
        assert exp(a, 0) == 1

    def test_zero_to_the_zero_is_one(self) -> None:
        assert exp(0, 0) == 1

    def test_neg(self, field_element) -> None:
        a = field_element
        assert add(a, neg(a)) == 0


class TestExp:
    """Square-and-multiply exponentiation."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    @pytest.mark.parametrize("a", [0, 1, 7, 2**40 + 3, P - 1])
    def test_matches_repeated_mul(self, a, n) -> None:
        expected = 1
        for _ in range(n):
            expected = mul(expected, a)
        assert exp(a, n) == expected

    def test_matches_builtin_pow(self, sample_elements) -> None:
        for a in sample_elements:
            assert exp(a, 123456789) == pow(a, 123456789, P)

    def test_huge_exponent(self) -> None:
        # Fermat: a^(p-1) = 1 for a != 0
        assert exp(7, P - 1) == 1
        assert exp(7, (P - 1) * 2**70) == 1

    def test_negative_exponent_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            exp(3, -1)

    def test_matches_galois(self) -> None:
        assert exp(12345, 5) == int(FF(12345) ** 5)


class TestInverse:
    """Fermat inversion."""

    @pytest.mark.parametrize("a", [1, 2, 12345, P - 1])
    def test_inverse(self, a) -> None:
        assert mul(a, inv(a)) == 1

    def test_inverse_of_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            inv(0)
        with pytest.raises(ZeroDivisionError):
            inv(P)


class TestPrimeField:
    """PrimeField configuration value."""

    def test_default_is_goldilocks(self) -> None:
        assert GOLDILOCKS.modulus == 0xFFFFFFFF00000001
        assert GOLDILOCKS.gf is FF

    def test_small_field(self) -> None:
        f = PrimeField(17)
        assert f.add(16, 5) == 4
        assert f.sub(2, 5) == 14
        assert f.mul(4, 5) == 3
        assert f.exp(3, 16) == 1
        assert f.gf.order == 17

    def test_is_element(self) -> None:
        assert GOLDILOCKS.is_element(0)
        assert GOLDILOCKS.is_element(P - 1)
        assert not GOLDILOCKS.is_element(P)
        assert not GOLDILOCKS.is_element(-1)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            GOLDILOCKS.modulus = 7

    def test_rejects_bad_modulus(self) -> None:
        with pytest.raises(ValueError):
            PrimeField(1)
