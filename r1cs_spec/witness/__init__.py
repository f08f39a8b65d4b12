"""Witness assignment."""

from .base import UnboundVariableError, Witness

__all__ = [
    'UnboundVariableError',
    'Witness',
]
