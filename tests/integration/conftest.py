"""
Shared fixtures for integration tests.
"""

import pytest
from neatgenes.run.config import Config

TRAITS_INI = """
[LINK_TRAIT:delay]
type             = int
min              = 0
max              = 4
mutation_prob    = 0.3
mut_replace_prob = 0.2
mut_power        = 1

[LINK_TRAIT:plastic]
type          = bool
mutation_prob = 0.1

[NEURON_TRAIT:time_scale]
type             = float
min              = 0.1
max              = 2.0
mutation_prob    = 0.4
mut_replace_prob = 0.1
mut_power        = 0.25

[NEURON_TRAIT:rule]
type          = string
set           = hebbian, oja, none
probs         = 1.0, 1.0, 2.0
mutation_prob = 0.2
"""


@pytest.fixture
def config(tmp_path):
    """Config loaded from a trait table written to a temporary INI file."""
    path = tmp_path / "traits.ini"
    path.write_text(TRAITS_INI)
    return Config(str(path))
