"""
NEAT Genotype Package

This package implements the gene-level representation for the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

There are two types of genes, both carrying arbitrary named traits:
- Node genes:       Encode individual neurons (type, depth, activation parameters)
- Connection genes: Encode weighted connections between neurons with innovation numbers

Modules:
    trait:           TraitKind, TraitValue and the TraitSpec classes
    gene:            Gene base class (trait initialization, mutation, mating, distance)
    connection_gene: ConnectionGene class
    node_gene:       NodeType & ActivationFunction enumerations and NodeGene class
"""

from neatgenes.genotype.trait           import (TraitKind, TraitValue, TraitSpec, IntTraitSpec,
                                                BoolTraitSpec, FloatTraitSpec, StringTraitSpec)
from neatgenes.genotype.gene            import Gene
from neatgenes.genotype.connection_gene import ConnectionGene
from neatgenes.genotype.node_gene       import NodeType, ActivationFunction, NodeGene

__all__ = ['TraitKind',
           'TraitValue',
           'TraitSpec',
           'IntTraitSpec',
           'BoolTraitSpec',
           'FloatTraitSpec',
           'StringTraitSpec',
           'Gene',
           'ConnectionGene',
           'NodeType',
           'ActivationFunction',
           'NodeGene']
