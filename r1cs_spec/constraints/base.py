"""Rank-1 constraint: (A·X) * (B·X) - (C·X) = 0 (mod p)."""

from dataclasses import dataclass

from r1cs_spec.witness.base import Witness
from .lincomb import LinComb


@dataclass(frozen=True)
class Constraint:
    """One multiplicative check over three linear combinations.

    The LinCombs are stored as frozen copies, so neither the caller's
    objects nor the ones read back from a constraint can change it.
    """
    a: LinComb
    b: LinComb
    c: LinComb

    def __post_init__(self):
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, getattr(self, name).frozen())

    @classmethod
    def snapshot(cls, a: LinComb, b: LinComb, c: LinComb) -> "Constraint":
        return cls(a, b, c)

    def residual(self, witness: Witness) -> int:
        """Compute (A·X)(B·X) - (C·X) mod p. Zero iff satisfied."""
        field = self.a.field
        a_val = self.a.evaluate(witness)
        b_val = self.b.evaluate(witness)
        c_val = self.c.evaluate(witness)
        return field.sub(field.mul(a_val, b_val), c_val)

    def is_satisfied(self, witness: Witness) -> bool:
        return self.residual(witness) == 0

    def variables(self) -> set:
        return set(self.a.variables()) | set(self.b.variables()) | set(self.c.variables())
