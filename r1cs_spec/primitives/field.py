"""Goldilocks prime field GF(p).

Scalar arithmetic is done on plain Python ints reduced into [0, p). The
galois array class FF is used where whole vectors or matrices of field
elements are evaluated at once (see protocol.verifier.verify_matrices).

The modulus is bound into a PrimeField value built once at import time.
Module-level add/sub/mul/exp delegate to that default instance.
"""

from dataclasses import dataclass
from functools import cached_property

import galois

# --- Field Construction ---

# Goldilocks prime: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) as a galois array class."""


@dataclass(frozen=True)
class PrimeField:
    """Arithmetic modulo a fixed prime.

    Every method returns a representative in [0, modulus). Inputs may be any
    int, including negative values or values >= modulus; they are reduced
    first, so ``field.add(x, -1)`` is the same as ``field.sub(x, 1)``.
    """
    modulus: int

    def __post_init__(self):
        if self.modulus < 2:
            raise ValueError(f"modulus must be >= 2, got {self.modulus}")

    @cached_property
    def gf(self):
        """galois array class for this modulus."""
        if self.modulus == GOLDILOCKS_PRIME:
            return FF
        return galois.GF(self.modulus)

    def reduce(self, a: int) -> int:
        return a % self.modulus

    def is_element(self, a: int) -> bool:
        return 0 <= a < self.modulus

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def sub(self, a: int, b: int) -> int:
        p = self.modulus
        return (a % p + p - (b % p)) % p

    def neg(self, a: int) -> int:
        return (-a) % self.modulus

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def exp(self, base: int, exponent: int) -> int:
        """
        Modular exponentiation by repeated squaring.

        exp(x, 0) is 1 for every x, including 0.

        Raises:
            ValueError: If exponent is negative
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        p = self.modulus
        result = 1 % p
        base = base % p
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % p
            exponent >>= 1
            base = (base * base) % p
        return result

    def inv(self, a: int) -> int:
        """
        Modular inverse using Fermat's little theorem.

        Raises:
            ZeroDivisionError: If a is zero mod p
        """
        if a % self.modulus == 0:
            raise ZeroDivisionError("0 has no inverse in a prime field")
        return self.exp(a, self.modulus - 2)


GOLDILOCKS = PrimeField(GOLDILOCKS_PRIME)
"""Process-wide default field."""


def add(a: int, b: int) -> int:
    return GOLDILOCKS.add(a, b)


def sub(a: int, b: int) -> int:
    return GOLDILOCKS.sub(a, b)


def neg(a: int) -> int:
    return GOLDILOCKS.neg(a)


def mul(a: int, b: int) -> int:
    return GOLDILOCKS.mul(a, b)


def exp(base: int, exponent: int) -> int:
    return GOLDILOCKS.exp(base, exponent)


def inv(a: int) -> int:
    return GOLDILOCKS.inv(a)
