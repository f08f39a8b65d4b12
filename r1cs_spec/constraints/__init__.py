"""Constraint data model.

LinComb is the weighted sum of variables every constraint is made of.
Constraint holds the (A, B, C) triple and checks it against a Witness.
"""

from .base import Constraint
from .lincomb import LinComb

__all__ = [
    "Constraint",
    "LinComb",
]
