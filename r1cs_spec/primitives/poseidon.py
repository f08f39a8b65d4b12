"""
Toy Poseidon-style permutation over the Goldilocks field.

One round is an x^5 S-box on every state element followed by a fixed 3x3
MDS-style mixing matrix. There are no round constants and no partial rounds,
so this is NOT a hash function and must not be used as one. It exists to
produce realistic-looking gate values when experimenting with circuits.
"""

from typing import List

from .field import GOLDILOCKS, PrimeField

STATE_WIDTH = 3
SBOX_DEGREE = 5

MDS_MATRIX = (
    (2, 1, 1),
    (1, 2, 1),
    (1, 1, 2),
)


def _sbox(x: int, field: PrimeField) -> int:
    return field.exp(x, SBOX_DEGREE)


def _matmul_mds(state: List[int], field: PrimeField) -> List[int]:
    """Apply MDS_MATRIX to the state vector."""
    result = []
    for row in MDS_MATRIX:
        acc = 0
        for coeff, x in zip(row, state):
            acc = field.add(acc, field.mul(coeff, x))
        result.append(acc)
    return result


def permutation_round(state: List[int], field: PrimeField = GOLDILOCKS) -> None:
    """
    Apply one S-box + MDS round to ``state`` in place.

    Args:
        state: List of exactly STATE_WIDTH field elements (as integers)
        field: Field to compute in

    Raises:
        ValueError: If state does not have STATE_WIDTH elements
    """
    if len(state) != STATE_WIDTH:
        raise ValueError(f"state must have {STATE_WIDTH} elements, got {len(state)}")

    sboxed = [_sbox(x, field) for x in state]
    state[:] = _matmul_mds(sboxed, field)


def permute(state: List[int], n_rounds: int, field: PrimeField = GOLDILOCKS) -> None:
    """Apply ``n_rounds`` rounds to ``state`` in place."""
    if n_rounds < 0:
        raise ValueError(f"n_rounds must be non-negative, got {n_rounds}")
    for _ in range(n_rounds):
        permutation_round(state, field)
