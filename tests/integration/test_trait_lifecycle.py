"""
Integration tests for the trait lifecycle.

These tests drive connection and node genes through the way an evolutionary
loop uses them: initialization from a loaded configuration, repeated mutation,
crossover of aligned genes, and distance computation for speciation.
"""

import pytest

from neatgenes import (ConnectionGene, NodeGene, NodeType, ActivationFunction,
                       RNG, TraitKindMismatch, TraitValue)


def make_links(config, rng, innovations):
    links = []
    for innov in innovations:
        link = ConnectionGene(innov % 3, 3 + innov % 2, innov, rng.rand_float_signed())
        link.init_traits(config.link_traits, rng)
        links.append(link)
    return links


class TestTraitLifecycle:

    def test_initialized_genes_carry_configured_traits(self, config):
        rng = RNG(seed=1)
        node = NodeGene(NodeType.HIDDEN, 5, 0.5)
        node.init_traits(config.neuron_traits, rng)
        link = ConnectionGene(0, 5, 0, 0.3)
        link.init_traits(config.link_traits, rng)

        assert set(node.traits) == {'time_scale', 'rule'}
        assert set(link.traits) == {'delay', 'plastic'}

    def test_many_generations_stay_within_bounds(self, config):
        rng = RNG(seed=2)
        node = NodeGene(NodeType.HIDDEN, 5, 0.5)
        link = ConnectionGene(0, 5, 0, 0.3)
        node.init_traits(config.neuron_traits, rng)
        link.init_traits(config.link_traits, rng)

        for _ in range(500):
            node.mutate_traits(config.neuron_traits, rng)
            link.mutate_traits(config.link_traits, rng)

            assert 0.1 <= node.traits['time_scale'].value <= 2.0
            assert node.traits['rule'].value in ('hebbian', 'oja', 'none')
            assert 0 <= link.traits['delay'].value <= 4
            assert isinstance(link.traits['plastic'].value, bool)

    def test_crossover_of_aligned_genes(self, config):
        """Test mating genes matched by innovation number, as genome crossover does."""
        rng = RNG(seed=3)
        mom = make_links(config, rng, [0, 1, 2, 4])
        dad = make_links(config, rng, [0, 2, 3, 4])

        dad_by_innov = {g.innovation_id: g for g in dad}
        child = []
        for gene in sorted(mom):
            offspring = gene.copy()
            if gene.innovation_id in dad_by_innov:
                partner = dad_by_innov[gene.innovation_id]
                assert partner == gene
                offspring.mate_traits(partner.traits, rng)
                mine, yours = gene.traits['delay'].value, partner.traits['delay'].value
                assert offspring.traits['delay'].value in (mine, yours, int((mine + yours) / 2))
            child.append(offspring)

        assert [g.innovation_id for g in child] == [0, 1, 2, 4]
        # parents untouched
        assert all(m.traits == c.traits for m, c in zip(sorted(mom), child)
                   if m.innovation_id not in dad_by_innov)

    def test_trait_distances_feed_compatibility(self, config):
        rng = RNG(seed=4)
        a = NodeGene(NodeType.OUTPUT, 9, 1.0)
        b = NodeGene(NodeType.OUTPUT, 9, 1.0)
        a.init_traits(config.neuron_traits, rng)
        b.copy_traits_from(a)
        assert sum(a.trait_distances(b.traits).values()) == 0.0

        b.traits['rule'] = TraitValue.of('oja' if a.traits['rule'].value != 'oja' else 'none')
        dist = a.trait_distances(b.traits)
        assert dist['rule'] == 1.0
        assert dist['time_scale'] == 0.0

    def test_same_seed_same_history(self, config):
        def run(seed):
            rng = RNG(seed=seed)
            node = NodeGene(NodeType.HIDDEN, 1, 0.5)
            node.init_activation(1.0, 0.0, 0.1, 0.0, ActivationFunction.TANH)
            node.init_traits(config.neuron_traits, rng)
            for _ in range(100):
                node.mutate_traits(config.neuron_traits, rng)
            return node.fields()

        assert run(77) == run(77)

    def test_mismatched_tables_fail_loudly(self, config):
        """Test that comparing genes whose traits were built from different tables fails."""
        rng = RNG(seed=5)
        link = ConnectionGene(0, 3, 0, 0.1)
        link.init_traits(config.link_traits, rng)

        other = ConnectionGene(0, 3, 0, 0.1)
        other.traits = {'delay': TraitValue.of(1.5), 'plastic': TraitValue.of(True)}

        with pytest.raises(TraitKindMismatch):
            link.trait_distances(other.traits)
        with pytest.raises(TraitKindMismatch):
            link.mate_traits(other.traits, rng)
