"""
R1CS Python Specification

A small rank-1 constraint system builder and witness checker over the
Goldilocks prime field.

This package provides:
- Goldilocks field arithmetic (ints, with galois arrays for batch checks)
- Linear combinations and (A, B, C) constraints
- Witness assignment with lenient or strict lookup
- A circuit Builder with multiplication and addition gates
- A witness verifier
- A toy S-box + MDS permutation round

There is no proof system here: verification only checks that a witness
numerically satisfies the constraints.

Usage:
    from r1cs_spec import Builder, Witness, verify

    b = Builder()
    x, y, z = b.alloc(3), b.alloc(5), b.alloc(15)
    b.multiplication_gate(x, y, z)

    w = Witness({x: 3, y: 5, z: 15})
    assert verify(b, w)
"""

# Field arithmetic
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

# Toy permutation
from r1cs_spec.primitives.poseidon import (
    MDS_MATRIX,
    STATE_WIDTH,
    permutation_round,
    permute,
)

# Constraint data model
from r1cs_spec.constraints import Constraint, LinComb
from r1cs_spec.witness import UnboundVariableError, Witness

# Builder and verifier
from r1cs_spec.protocol import (
    Builder,
    first_unsatisfied,
    unsatisfied,
    verify,
    verify_matrices,
)

__version__ = "0.1.0"
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
    "STATE_WIDTH",
    "permutation_round",
    "permute",
    # Constraints
    "Constraint",
    "LinComb",
    "Witness",
    "UnboundVariableError",
    # Builder / verifier
    "Builder",
    "verify",
    "verify_matrices",
    "first_unsatisfied",
    "unsatisfied",
]
