"""Primitives - field arithmetic and the toy permutation."""

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
from r1cs_spec.primitives.poseidon import (
    MDS_MATRIX,
    SBOX_DEGREE,
    STATE_WIDTH,
    permutation_round,
    permute,
)

__all__ = [
    # Field
    "FF",
    "GOLDILOCKS",
    "GOLDILOCKS_PRIME",
    "PrimeField",
    "add",
    "sub",
    "neg",
    "mul",
    "exp",
    "inv",
    # Permutation
    "MDS_MATRIX",
    "SBOX_DEGREE",
    "STATE_WIDTH",
    "permutation_round",
    "permute",
]
