"""Circuit builder: allocates variables and accumulates constraints.

The builder describes structure only. Values belong to a Witness, so
alloc() accepts an initial value for call-site readability and discards it.

Example:
    b = Builder()
    x, y, z = b.alloc(3), b.alloc(5), b.alloc(15)
    b.multiplication_gate(x, y, z)
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from r1cs_spec.constraints.base import Constraint
from r1cs_spec.constraints.lincomb import LinComb
from r1cs_spec.primitives.field import GOLDILOCKS, PrimeField

logger = logging.getLogger(__name__)


class Builder:
    """Growth-only arena of variable indices plus an ordered constraint list.

    Indices are handed out from 0 upwards and never reused. Constraint order
    only matters for diagnostics.
    """

    def __init__(self, field: PrimeField = GOLDILOCKS):
        self.field = field
        self._constraints: List[Constraint] = []
        self._next_var = 0

    # --- Variables ---

    def alloc(self, initial_value: Optional[int] = None) -> int:
        """Return a fresh variable index. ``initial_value`` is not stored."""
        variable = self._next_var
        self._next_var += 1
        return variable

    @property
    def num_variables(self) -> int:
        """Number of indices handed out by alloc()."""
        return self._next_var

    # --- Constraints ---

    def add_constraint(self, a: LinComb, b: LinComb, c: LinComb) -> int:
        """Append (a)(b) - (c) = 0 and return its position.

        Variable indices are not checked against num_variables. The LinCombs
        are copied, so later changes to them do not affect the builder.
        """
        self._constraints.append(Constraint.snapshot(a, b, c))
        position = len(self._constraints) - 1
        logger.debug("constraint %d: (%r) * (%r) = %r", position, a, b, c)
        return position

    def multiplication_gate(self, x: int, y: int, z: int) -> int:
        """Enforce x * y = z."""
        field = self.field
        return self.add_constraint(
            LinComb.of_variable(x, field=field),
            LinComb.of_variable(y, field=field),
            LinComb.of_variable(z, field=field),
        )

    def addition_gate(self, x: int, y: int, z: int) -> int:
        """Enforce x + y = z, written as (x + y) * 1 = z."""
        field = self.field
        return self.add_constraint(
            LinComb(field).add_term(x).add_term(y),
            LinComb.of_constant(1, field=field),
            LinComb.of_variable(z, field=field),
        )

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    @property
    def num_constraints(self) -> int:
        return len(self._constraints)

    def referenced_variables(self) -> Set[int]:
        """All variable indices used by any constraint."""
        referenced: Set[int] = set()
        for constraint in self._constraints:
            referenced |= constraint.variables()
        return referenced

    # --- Matrix export ---

    def column_map(self) -> Dict[int, int]:
        """Matrix column of each referenced variable.

        Column 0 is the constant "one" wire. Referenced variables follow in
        ascending index order, so the width depends on how many variables the
        constraints use, not on how large their indices are.
        """
        return {
            variable: column
            for column, variable in enumerate(sorted(self.referenced_variables()), start=1)
        }

    def num_columns(self) -> int:
        """Width of the exported matrices: the constant column plus one per referenced variable."""
        return 1 + len(self.referenced_variables())

    def to_matrices(self):
        """
        Export the system as dense R1CS matrices over the field.

        Columns follow column_map(); row j is constraint j. Duplicate terms
        are summed into a single entry.

        Returns:
            (A, B, C): galois arrays of shape (num_constraints, num_columns())
        """
        field = self.field
        columns = self.column_map()
        n_cols = 1 + len(columns)

        def _rows(select):
            rows = []
            for constraint in self._constraints:
                lc = select(constraint)
                row = [0] * n_cols
                row[0] = lc.constant
                for variable, coeff in lc.terms:
                    col = columns[variable]
                    row[col] = field.add(row[col], coeff)
                rows.append(row)
            return rows

        GF = field.gf
        if not self._constraints:
            empty = GF.Zeros((0, n_cols))
            return empty, empty.copy(), empty.copy()

        A = GF(_rows(lambda con: con.a))
        B = GF(_rows(lambda con: con.b))
        C = GF(_rows(lambda con: con.c))
        return A, B, C
