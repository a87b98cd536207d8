"""
neatgenes - Trait and gene representation for NEAT-style neuroevolution.

This package provides the smallest evolvable units of a NEAT genome:
connection genes and node genes, each carrying an arbitrary set of named,
typed traits that can be randomly initialized, mutated, mated and compared.

Main components:
- genotype: Traits, trait specifications, and the connection/node genes
- run:      Configuration (trait specification tables loaded from INI files)
- rng:      The explicit random source handed to every stochastic operation
- errors:   Exceptions raised by the package

Example:
    >>> from neatgenes import Config, ConnectionGene, RNG
    >>> config = Config("traits.ini")
    >>> rng    = RNG(seed=42)
    >>> gene   = ConnectionGene(0, 3, innovation_id=7, weight=0.5)
    >>> gene.init_traits(config.link_traits, rng)
    >>> gene.mutate_traits(config.link_traits, rng)
"""

__version__ = "0.1.0"

from neatgenes.errors                     import NeatGenesError, TraitKindMismatch, InvalidTraitSpec
from neatgenes.rng                        import RandomSource, RNG
from neatgenes.run.config                 import Config
from neatgenes.genotype.trait             import (TraitKind, TraitValue, TraitSpec, IntTraitSpec,
                                                  BoolTraitSpec, FloatTraitSpec, StringTraitSpec)
from neatgenes.genotype.gene              import Gene
from neatgenes.genotype.connection_gene   import ConnectionGene
from neatgenes.genotype.node_gene         import NodeType, ActivationFunction, NodeGene

__all__ = [
    "NeatGenesError",
    "TraitKindMismatch",
    "InvalidTraitSpec",
    "RandomSource",
    "RNG",
    "Config",
    "TraitKind",
    "TraitValue",
    "TraitSpec",
    "IntTraitSpec",
    "BoolTraitSpec",
    "FloatTraitSpec",
    "StringTraitSpec",
    "Gene",
    "ConnectionGene",
    "NodeType",
    "ActivationFunction",
    "NodeGene",
]
