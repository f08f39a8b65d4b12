"""Witness verification for a Builder's constraint system.

verify() is a pure conjunction over the constraints: it is true iff every
(A·X)(B·X) - (C·X) is zero mod p. Neither the builder nor the witness is
mutated, so independent (builder, witness) pairs can be checked concurrently.

Two evaluation paths are provided:
    verify():          constraint by constraint on Python ints
    verify_matrices(): the whole system at once on galois arrays
They must always agree.
"""

import logging
from typing import List, Optional

import numpy as np

from r1cs_spec.witness.base import Witness
from .builder import Builder

logger = logging.getLogger(__name__)


def unsatisfied(builder: Builder, witness: Witness) -> List[int]:
    """Positions of every constraint the witness does not satisfy."""
    return [
        position
        for position, constraint in enumerate(builder.constraints)
        if not constraint.is_satisfied(witness)
    ]


def first_unsatisfied(builder: Builder, witness: Witness) -> Optional[int]:
    """Position of the first failing constraint, or None if all pass."""
    for position, constraint in enumerate(builder.constraints):
        if not constraint.is_satisfied(witness):
            return position
    return None


def verify(builder: Builder, witness: Witness) -> bool:
    """
    Check that ``witness`` satisfies every constraint in ``builder``.

    Args:
        builder: Constraint system to check
        witness: Variable assignment

    Returns:
        True if all constraints are satisfied, False otherwise

    Raises:
        UnboundVariableError: If the witness is strict and a constraint
            references a variable it has no value for
    """
    position = first_unsatisfied(builder, witness)
    if position is None:
        return True

    if logger.isEnabledFor(logging.DEBUG):
        constraint = builder.constraints[position]
        logger.debug(
            "constraint %d of %d not satisfied: residual %d",
            position, builder.num_constraints, constraint.residual(witness),
        )
    return False


def witness_vector(builder: Builder, witness: Witness):
    """
    Lay out ``witness`` as the column vector z matching builder.column_map().

    z[0] is 1; the other entries are the referenced variables in ascending
    index order. Only those variables are read, so a strict witness raises
    only for variables that actually matter. Values are reduced into the
    builder's field, as LinComb.evaluate does.
    """
    field = builder.field
    z = [1] + [
        field.reduce(witness.get(variable))
        for variable in sorted(builder.referenced_variables())
    ]
    return field.gf(z)


def verify_matrices(builder: Builder, witness: Witness) -> bool:
    """
    Vectorized form of verify(): checks (A·z) * (B·z) - (C·z) == 0 row-wise.

    Raises:
        UnboundVariableError: Same condition as verify()
    """
    if builder.num_constraints == 0:
        return True

    A, B, C = builder.to_matrices()
    z = witness_vector(builder, witness).reshape(-1, 1)
    residual = (A @ z) * (B @ z) - (C @ z)

    failing = np.flatnonzero(residual != 0)
    if failing.size == 0:
        return True

    logger.debug(
        "%d of %d constraints not satisfied, first at %d",
        failing.size, builder.num_constraints, int(failing[0]),
    )
    return False
