import configparser
import logging
import os

from neatgenes.errors         import InvalidTraitSpec
from neatgenes.genotype.trait import (TraitKind, TraitSpec, IntTraitSpec, BoolTraitSpec,
                                      FloatTraitSpec, StringTraitSpec)

logger = logging.getLogger(__name__)

class Config:
    """
    Trait specification tables, loaded from an INI file.

    Each trait is described in its own section, whose name says which kind
    of gene carries the trait and what the trait is called:

        [NEURON_TRAIT:time_scale]
        type             = float
        min              = 0.1
        max              = 2.0
        mutation_prob    = 0.2
        mut_replace_prob = 0.1
        mut_power        = 0.3

        [LINK_TRAIT:plasticity]
        type  = string
        set   = hebbian, oja, none
        probs = 1.0, 1.0, 2.0

    Sections with any other name are ignored. Tables keep the order in
    which the sections appear in the file.

    Public Attributes:
        link_traits:   Mapping from trait name to TraitSpec, for connection genes
        neuron_traits: Mapping from trait name to TraitSpec, for node genes
    """

    LINK_PREFIX   = 'LINK_TRAIT:'
    NEURON_PREFIX = 'NEURON_TRAIT:'

    @staticmethod
    def _parse_list(raw: str) -> list[str]:
        """
        Parse a comma-separated list, dropping surrounding whitespace and empty items.
        """
        return [item.strip() for item in raw.split(',') if item.strip()]

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create an empty Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates an empty Config for manual setup.
        """
        self.link_traits  : dict[str, TraitSpec] = {}
        self.neuron_traits: dict[str, TraitSpec] = {}

        # Empty config for testing/manual setup
        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        # no interpolation: a literal "%" is valid in string candidates
        parser = configparser.ConfigParser(interpolation=None)
        parser.read(config_file)

        for section in parser.sections():
            if section.startswith(self.LINK_PREFIX):
                table, name = self.link_traits, section[len(self.LINK_PREFIX):].strip()
            elif section.startswith(self.NEURON_PREFIX):
                table, name = self.neuron_traits, section[len(self.NEURON_PREFIX):].strip()
            else:
                continue

            if not name:
                raise InvalidTraitSpec(f"[{section}]: missing trait name")
            if name in table:
                raise InvalidTraitSpec(f"[{section}]: trait '{name}' defined twice")

            table[name] = self._parse_spec(parser, section)
            logger.debug("Loaded %s for trait '%s'", table[name], name)

    @staticmethod
    def _parse_spec(parser: configparser.ConfigParser, section: str) -> TraitSpec:
        """
        Build the TraitSpec described by one section.

        Raises:
            InvalidTraitSpec: if the section is incomplete or describes a malformed spec
        """
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(key, value_type, default=_NO_DEFAULT):
            try:
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                else:
                    return parser.get(section, key)
            except configparser.NoOptionError:
                if default is not _NO_DEFAULT:
                    return default
                raise InvalidTraitSpec(f"[{section}]: missing required key '{key}'") from None
            except ValueError as e:
                raise InvalidTraitSpec(f"[{section}]: bad value for '{key}': {e}") from None

        raw_type = get_value('type', str).strip().lower()
        try:
            kind = TraitKind(raw_type)
        except ValueError:
            raise InvalidTraitSpec(f"[{section}]: unknown trait type '{raw_type}'") from None

        try:
            if kind == TraitKind.INT:
                return IntTraitSpec(min           = get_value('min', int),
                                    max           = get_value('max', int),
                                    mutation_prob = get_value('mutation_prob',    float, default=0.0),
                                    replace_prob  = get_value('mut_replace_prob', float, default=0.0),
                                    perturb_power = get_value('mut_power',        int,   default=1))

            elif kind == TraitKind.BOOL:
                return BoolTraitSpec(mutation_prob = get_value('mutation_prob', float, default=0.0))

            elif kind == TraitKind.FLOAT:
                return FloatTraitSpec(min           = get_value('min', float),
                                      max           = get_value('max', float),
                                      mutation_prob = get_value('mutation_prob',    float, default=0.0),
                                      replace_prob  = get_value('mut_replace_prob', float, default=0.0),
                                      perturb_power = get_value('mut_power',        float, default=0.0))

            else:
                candidates = Config._parse_list(get_value('set', str))
                try:
                    weights = [float(p) for p in Config._parse_list(get_value('probs', str))]
                except ValueError as e:
                    raise InvalidTraitSpec(f"[{section}]: bad value for 'probs': {e}") from None
                return StringTraitSpec(candidates    = candidates,
                                       weights       = weights,
                                       mutation_prob = get_value('mutation_prob', float, default=1.0))

        except InvalidTraitSpec as e:
            if str(e).startswith(f"[{section}]"):
                raise
            raise InvalidTraitSpec(f"[{section}]: {e}") from e
