"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    from neatgenes.rng import RNG
    return RNG(seed=42)


@pytest.fixture
def scripted_rng():
    """
    Provide a factory for random sources returning scripted values.

    Usage: scripted_rng(floats=[...], signed=[...], ints=[...], picks=[...])
    """
    from neatgenes.rng import RNG

    def make(floats=(), signed=(), ints=(), picks=()):
        rng = Mock(spec=RNG)
        rng.rand_float.side_effect        = list(floats)
        rng.rand_float_signed.side_effect = list(signed)
        rng.rand_int.side_effect          = list(ints)
        rng.roulette.side_effect          = list(picks)
        return rng

    return make


@pytest.fixture
def trait_specs():
    """A spec table with one trait of each kind."""
    from neatgenes.genotype.trait import IntTraitSpec, BoolTraitSpec, FloatTraitSpec, StringTraitSpec
    return {
        'steps':  IntTraitSpec(min=0, max=10, mutation_prob=0.5, replace_prob=0.2, perturb_power=2),
        'gated':  BoolTraitSpec(mutation_prob=0.5),
        'rate':   FloatTraitSpec(min=-1.0, max=1.0, mutation_prob=0.5, replace_prob=0.2, perturb_power=0.3),
        'rule':   StringTraitSpec(candidates=['hebb', 'oja', 'none'], weights=[1.0, 1.0, 2.0]),
    }
