"""Protocol - circuit building and witness verification."""

from r1cs_spec.protocol.builder import Builder
from r1cs_spec.protocol.verifier import (
    first_unsatisfied,
    unsatisfied,
    verify,
    verify_matrices,
    witness_vector,
)

__all__ = [
    "Builder",
    "verify",
    "verify_matrices",
    "first_unsatisfied",
    "unsatisfied",
    "witness_vector",
]
