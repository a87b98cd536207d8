"""
NEAT Gene Module

This module implements the Gene base class, which owns a gene's trait map
and knows how to initialize, mutate, mate and compare it.

Classes:
    Gene: Base class for connection and node genes, carrying arbitrary traits
"""

import logging
from typing import Mapping

from neatgenes.errors          import TraitKindMismatch
from neatgenes.genotype.trait  import (TraitKind, TraitValue, TraitSpec, IntTraitSpec,
                                       BoolTraitSpec, FloatTraitSpec, StringTraitSpec)
from neatgenes.rng             import RandomSource

logger = logging.getLogger(__name__)

def _truncated_mean(a: int, b: int) -> int:
    """
    Integer mean of 'a' and 'b', rounded toward zero.
    """
    s = a + b
    q = abs(s) // 2
    return q if s >= 0 else -q

class Gene:
    """
    Base class for genes: holds a mapping from trait name to TraitValue.

    The trait map is created empty and populated by 'init_traits()' (or by
    copying a parent's traits during reproduction). Afterwards its kinds are
    fixed: any operation that would combine two values of different kinds
    under the same name raises TraitKindMismatch.

    Names missing on one side are never an error: mutation skips traits the
    gene doesn't carry, and mating / distance skip partner traits absent here.

    Public Attributes:
        traits: Mapping from trait name to TraitValue

    Public Methods:
        init_traits():      Randomize all traits according to a spec table
        mutate_traits():    Stochastically mutate traits according to a spec table
        mate_traits():      Merge another parent's traits into this gene's traits
        trait_distances():  Per-trait distances to another trait map
        copy_traits_from(): Replace this gene's traits with another gene's
    """

    def __init__(self):
        self.traits: dict[str, TraitValue] = {}

    def init_traits(self, specs: Mapping[str, TraitSpec], rng: RandomSource) -> None:
        """
        Draw a fresh value for every trait in 'specs', overwriting prior values.

        Parameters:
            specs: Mapping from trait name to its specification
            rng:   Random source
        """
        for name, spec in specs.items():
            self.traits[name] = spec.sample(rng)

    def mutate_traits(self, specs: Mapping[str, TraitSpec], rng: RandomSource) -> None:
        """
        Stochastically mutate the traits (in place).

        Each trait named in 'specs' is considered independently; it mutates
        with probability 'spec.mutation_prob'. Numeric traits are either
        replaced by a fresh draw or perturbed around their current value,
        booleans are flipped and strings are redrawn from their weighted set.

        Parameters:
            specs: Mapping from trait name to its specification (normally
                   the one used to initialize the traits)
            rng:   Random source

        Raises:
            TraitKindMismatch: if a stored value's kind differs from its spec's kind.
                               Traits processed earlier in the call stay mutated.
        """
        for name, spec in specs.items():
            if name not in self.traits:
                logger.debug("Trait '%s' not carried by gene, skipping mutation", name)
                continue

            current = self.traits[name]
            if current.kind != spec.kind:
                raise TraitKindMismatch(name, spec.kind, current.kind)

            # Mutate?
            if rng.rand_float() >= spec.mutation_prob:
                continue

            if isinstance(spec, IntTraitSpec):
                if rng.rand_float() < spec.replace_prob:
                    new = rng.rand_int(spec.min, spec.max)
                else:
                    new = current.value + rng.rand_int(-spec.perturb_power, spec.perturb_power)
                    new = max(spec.min, min(spec.max, new))  # Clip it
                self.traits[name] = TraitValue(TraitKind.INT, new)

            elif isinstance(spec, BoolTraitSpec):
                self.traits[name] = TraitValue(TraitKind.BOOL, not current.value)

            elif isinstance(spec, FloatTraitSpec):
                if rng.rand_float() < spec.replace_prob:
                    new = spec.scale(rng.rand_float())
                else:
                    new = current.value + rng.rand_float_signed() * spec.perturb_power
                    new = max(spec.min, min(spec.max, new))  # Clip it
                self.traits[name] = TraitValue(TraitKind.FLOAT, new)

            elif isinstance(spec, StringTraitSpec):
                self.traits[name] = spec.sample(rng)

            else:
                raise TypeError(f"Unsupported trait spec {spec!r} for trait '{name}'")

    def mate_traits(self, other: Mapping[str, TraitValue], rng: RandomSource) -> None:
        """
        Merge the traits of another parent into this gene's traits (in place).

        For every trait of 'other' also carried here: half the time one of the
        two parents' values is inherited verbatim (50/50); the other half the
        values are averaged. Only int (truncated mean) and float (arithmetic
        mean) can be averaged; bools and strings fall back to the 50/50 pick.

        Parameters:
            other: The other parent's trait map (not modified)
            rng:   Random source

        Raises:
            TraitKindMismatch: if a trait has different kinds in the two maps.
                               Traits processed earlier in the call stay merged.
        """
        for name, yours in other.items():
            if name not in self.traits:
                logger.debug("Trait '%s' not carried by gene, skipping mating", name)
                continue

            mine = self.traits[name]
            if mine.kind != yours.kind:
                raise TraitKindMismatch(name, mine.kind, yours.kind)

            if rng.rand_float() < 0.5:
                # pick either one
                self.traits[name] = mine if rng.rand_float() < 0.5 else yours

            elif mine.kind == TraitKind.INT:
                self.traits[name] = TraitValue(TraitKind.INT, _truncated_mean(mine.value, yours.value))

            elif mine.kind == TraitKind.FLOAT:
                self.traits[name] = TraitValue(TraitKind.FLOAT, mine.value / 2.0 + yours.value / 2.0)

            elif mine.kind in (TraitKind.BOOL, TraitKind.STRING):
                # can't be averaged, always either-or
                self.traits[name] = mine if rng.rand_float() < 0.5 else yours

            else:
                raise TypeError(f"Unsupported trait kind {mine.kind!r} for trait '{name}'")

    def trait_distances(self, other: Mapping[str, TraitValue]) -> dict[str, float]:
        """
        Compute the distance between each matching pair of traits.

        Only the names in 'other' are considered, and of those only the ones
        this gene carries too, so the result is not symmetric in general.
        Combining the per-trait distances into a single number is up to the caller.

        Parameters:
            other: The trait map to compare against (not modified)

        Returns:
            mapping from trait name to distance: the absolute difference for
            int & float traits, 0.0 (equal) or 1.0 (different) for bool & string traits

        Raises:
            TraitKindMismatch: if a trait has different kinds in the two maps
        """
        dist: dict[str, float] = {}
        for name, yours in other.items():
            if name not in self.traits:
                continue

            mine = self.traits[name]
            if mine.kind != yours.kind:
                raise TraitKindMismatch(name, mine.kind, yours.kind)

            if mine.kind in (TraitKind.INT, TraitKind.FLOAT):
                dist[name] = float(abs(mine.value - yours.value))
            elif mine.kind in (TraitKind.BOOL, TraitKind.STRING):
                dist[name] = 0.0 if mine.value == yours.value else 1.0
            else:
                raise TypeError(f"Unsupported trait kind {mine.kind!r} for trait '{name}'")

        return dist

    def copy_traits_from(self, other: 'Gene') -> None:
        """
        Replace this gene's traits with (a copy of) another gene's traits.
        """
        if other is not self:
            self.traits = dict(other.traits)
