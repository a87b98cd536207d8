"""
Unit tests for Config class.
"""

import pytest
import os

from neatgenes.errors         import InvalidTraitSpec
from neatgenes.genotype.trait import IntTraitSpec, BoolTraitSpec, FloatTraitSpec, StringTraitSpec
from neatgenes.run.config     import Config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


@pytest.fixture
def config(test_config_dir):
    return Config(os.path.join(test_config_dir, 'traits.ini'))


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_creates_empty_config(self):
        config = Config()
        assert config.link_traits   == {}
        assert config.neuron_traits == {}

    def test_init_with_nonexistent_file_raises_error(self):
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_file_without_trait_sections(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'empty.ini'))
        assert config.link_traits   == {}
        assert config.neuron_traits == {}

    def test_tables_split_by_gene_kind(self, config):
        assert list(config.link_traits)   == ['delay', 'plastic']
        assert list(config.neuron_traits) == ['time_scale', 'rule']


# ============================================================================
# Test Config Trait Sections
# ============================================================================

class TestConfigTraitSections:
    """Test parsing of each kind of trait section."""

    def test_int_trait(self, config):
        spec = config.link_traits['delay']
        assert isinstance(spec, IntTraitSpec)
        assert (spec.min, spec.max) == (0, 5)
        assert spec.mutation_prob == 0.25
        assert spec.replace_prob  == 0.1
        assert spec.perturb_power == 2

    def test_bool_trait(self, config):
        spec = config.link_traits['plastic']
        assert isinstance(spec, BoolTraitSpec)
        assert spec.mutation_prob == 0.05

    def test_float_trait(self, config):
        spec = config.neuron_traits['time_scale']
        assert isinstance(spec, FloatTraitSpec)
        assert (spec.min, spec.max) == (0.1, 2.0)
        assert spec.mutation_prob == 0.2
        assert spec.replace_prob  == 0.1
        assert spec.perturb_power == 0.3

    def test_string_trait(self, config):
        spec = config.neuron_traits['rule']
        assert isinstance(spec, StringTraitSpec)
        assert spec.candidates == ['hebbian', 'oja', 'none']
        assert spec.weights    == [1.0, 1.0, 2.0]
        assert spec.mutation_prob == 0.5

    def test_optional_keys_take_defaults(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'defaults.ini'))

        delay = config.link_traits['delay']
        assert (delay.mutation_prob, delay.replace_prob, delay.perturb_power) == (0.0, 0.0, 1)

        assert config.neuron_traits['flag'].mutation_prob == 0.0

        gain = config.neuron_traits['gain']
        assert (gain.min, gain.max) == (0.0, 1.0)
        assert (gain.mutation_prob, gain.replace_prob, gain.perturb_power) == (0.0, 0.0, 0.0)

        assert config.neuron_traits['kind'].mutation_prob == 1.0

    def test_percent_sign_is_literal(self, test_config_dir):
        """Test that "%" in a value is kept as-is rather than interpolated."""
        config = Config(os.path.join(test_config_dir, 'percent.ini'))
        assert config.neuron_traits['dropout'].candidates == ['50%', '25%', 'none']


# ============================================================================
# Test Config Validation
# ============================================================================

class TestConfigValidation:
    """Test that malformed trait sections are rejected at load time."""

    @pytest.mark.parametrize("filename, message", [
        ('bad_range.ini',   r"\[LINK_TRAIT:delay\].*min"),
        ('bad_type.ini',    r"\[NEURON_TRAIT:mystery\]: unknown trait type 'complex'"),
        ('missing_key.ini', r"\[NEURON_TRAIT:gain\]: missing required key 'max'"),
        ('bad_weights.ini', r"\[NEURON_TRAIT:rule\].*2 candidates but 1 weights"),
        ('bad_number.ini',  r"\[NEURON_TRAIT:gain\]: bad value for 'min'"),
        ('bad_probs.ini',   r"\[NEURON_TRAIT:rule\]: bad value for 'probs'"),
        ('no_name.ini',     r"missing trait name"),
        ('duplicate.ini',   r"defined twice"),
        ('nan_power.ini',   r"\[NEURON_TRAIT:gain\].*perturb_power"),
        ('inf_bound.ini',   r"\[NEURON_TRAIT:gain\].*must be finite"),
    ])
    def test_invalid_files(self, test_config_dir, filename, message):
        with pytest.raises(InvalidTraitSpec, match=message):
            Config(os.path.join(test_config_dir, filename))
