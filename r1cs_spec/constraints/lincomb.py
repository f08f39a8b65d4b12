"""Linear combinations: sum(coeff_i * x_i) + constant."""

from typing import List, Sequence, Tuple

from r1cs_spec.primitives.field import GOLDILOCKS, PrimeField
from r1cs_spec.witness.base import Witness


class LinComb:
    """Sparse weighted sum of variables plus a constant term.

    Terms keep insertion order. The same variable may appear more than once;
    its coefficients are summed when the combination is evaluated.

    A LinComb is mutable until frozen() is called on it. The frozen copy
    stores its terms as a tuple, rejects add_term/add_constant and attribute
    assignment, and is hashable.

    Example:
        # 3*x0 + x1 + 7
        lc = LinComb().add_term(0, 3).add_term(1).add_constant(7)
    """

    def __init__(self, field: PrimeField = GOLDILOCKS):
        self.field = field
        self.terms: Sequence[Tuple[int, int]] = []
        self.constant = 0
        self._frozen = False

    @classmethod
    def of_variable(cls, variable: int, coeff: int = 1,
                    field: PrimeField = GOLDILOCKS) -> "LinComb":
        return cls(field).add_term(variable, coeff)

    @classmethod
    def of_constant(cls, value: int, field: PrimeField = GOLDILOCKS) -> "LinComb":
        return cls(field).add_constant(value)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("cannot modify a frozen LinComb")

    def add_term(self, variable: int, coeff: int = 1) -> "LinComb":
        """Append ``coeff * variable``. Returns self for chaining."""
        self._check_mutable()
        if variable < 0:
            raise ValueError(f"variable index must be non-negative, got {variable}")
        self.terms.append((variable, self.field.reduce(coeff)))
        return self

    def add_constant(self, value: int) -> "LinComb":
        """Accumulate ``value`` into the constant term. Returns self for chaining."""
        self._check_mutable()
        self.constant = self.field.add(self.constant, value)
        return self

    def evaluate(self, witness: Witness) -> int:
        """Evaluate against ``witness``.

        Unassigned variables read through Witness.get, so they count as 0
        unless the witness is strict.
        """
        field = self.field
        acc = self.constant
        for variable, coeff in self.terms:
            acc = field.add(acc, field.mul(coeff, witness.get(variable)))
        return acc

    def variables(self) -> List[int]:
        """Referenced variable indices in term order (duplicates kept)."""
        return [variable for variable, _ in self.terms]

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "LinComb":
        """Mutable copy, whether or not self is frozen."""
        lc = LinComb(self.field)
        lc.terms = list(self.terms)
        lc.constant = self.constant
        return lc

    def frozen(self) -> "LinComb":
        """Immutable copy. Returns self if already frozen."""
        if self._frozen:
            return self
        lc = self.copy()
        lc.terms = tuple(lc.terms)
        lc._frozen = True
        return lc

    def __setattr__(self, name, value) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"cannot assign to '{name}' on a frozen LinComb")
        super().__setattr__(name, value)

    def __len__(self) -> int:
        return len(self.terms)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinComb):
            return NotImplemented
        return (self.field == other.field
                and list(self.terms) == list(other.terms)
                and self.constant == other.constant)

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: mutable LinComb (call frozen() first)")
        return hash((self.field, self.terms, self.constant))

    def __repr__(self) -> str:
        parts = [f"{coeff}*x{variable}" for variable, coeff in self.terms]
        if self.constant or not parts:
            parts.append(str(self.constant))
        return f"LinComb({' + '.join(parts)})"
