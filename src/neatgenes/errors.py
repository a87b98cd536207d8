"""
NEAT Genes Errors Module

This module defines the exceptions raised by the trait and gene layer.

Classes:
    NeatGenesError:    Base class for all errors raised by this package
    TraitKindMismatch: Two trait values under the same name have different kinds
    InvalidTraitSpec:  A trait specification is malformed
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neatgenes.genotype.trait import TraitKind

class NeatGenesError(Exception):
    """
    Base class for all errors raised by this package.
    """

class TraitKindMismatch(NeatGenesError, TypeError):
    """
    Raised when a named trait holds values of different kinds in two operands
    (mating, distance) or when a stored value disagrees with its spec (mutation).

    This is a configuration error: the same trait name must always carry the
    same kind across a population. It is not meant to be retried.

    Public Attributes:
        name:     Name of the offending trait
        expected: Kind held locally (or required by the TraitSpec)
        actual:   Kind found in the other operand
    """

    def __init__(self, name: str, expected: 'TraitKind', actual: 'TraitKind'):
        self.name    : str         = name
        self.expected: 'TraitKind' = expected
        self.actual  : 'TraitKind' = actual
        super().__init__(f"Types of trait '{name}' don't match: "
                         f"expected {expected.value}, got {actual.value}")

class InvalidTraitSpec(NeatGenesError, ValueError):
    """
    Raised when a trait specification is malformed (e.g. 'min > max',
    mismatched candidate/weight lengths, all-zero weights).
    """
