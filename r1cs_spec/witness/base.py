"""Witness: a sparse assignment of field values to variable indices.

Lookup policy:
    lenient (default): an unassigned variable reads as 0. Useful for
        "don't care" wires, but it can also hide an incomplete witness.
    strict: an unassigned variable raises UnboundVariableError.
"""

from typing import Dict, Iterator, Mapping, Optional

from r1cs_spec.primitives.field import GOLDILOCKS, PrimeField


class UnboundVariableError(KeyError):
    """A strict witness was asked for a variable it has no value for."""

    def __init__(self, variable: int):
        super().__init__(variable)
        self.variable = variable

    def __str__(self) -> str:
        return f"variable {self.variable} has no value in the witness"


class Witness:
    """Mapping from variable index to field element.

    Values are reduced into the field on assignment. Keys need not match
    anything a Builder allocated.
    """

    def __init__(
        self,
        values: Optional[Mapping[int, int]] = None,
        strict: bool = False,
        field: PrimeField = GOLDILOCKS,
    ):
        self.field = field
        self.strict = strict
        self._values: Dict[int, int] = {}
        if values is not None:
            for variable, value in values.items():
                self.assign(variable, value)

    def assign(self, variable: int, value: int) -> None:
        if variable < 0:
            raise ValueError(f"variable index must be non-negative, got {variable}")
        self._values[variable] = self.field.reduce(value)

    def unassign(self, variable: int) -> None:
        self._values.pop(variable, None)

    def get(self, variable: int) -> int:
        """Value of ``variable``, or 0 if unassigned and the witness is lenient.

        Raises:
            UnboundVariableError: If unassigned and the witness is strict
        """
        try:
            return self._values[variable]
        except KeyError:
            if self.strict:
                raise UnboundVariableError(variable) from None
            return 0

    @property
    def values(self) -> Dict[int, int]:
        """Copy of the explicit assignments."""
        return dict(self._values)

    def __contains__(self, variable: int) -> bool:
        return variable in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __setitem__(self, variable: int, value: int) -> None:
        self.assign(variable, value)

    def __getitem__(self, variable: int) -> int:
        return self.get(variable)

    def __repr__(self) -> str:
        mode = "strict" if self.strict else "lenient"
        return f"Witness({self._values!r}, {mode})"
