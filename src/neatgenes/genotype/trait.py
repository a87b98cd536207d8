"""
NEAT Trait Module

This module implements the value and specification types for traits: named,
typed, evolvable scalars that can be attached to any gene independently of
the gene's structural fields.

Classes:
    TraitKind:       Enumeration of the four trait kinds (int, bool, float, string)
    TraitValue:      Immutable tagged value holding exactly one kind
    TraitSpec:       Base class for trait specifications
    IntTraitSpec:    Specification for integer traits
    BoolTraitSpec:   Specification for boolean traits
    FloatTraitSpec:  Specification for real-valued traits
    StringTraitSpec: Specification for traits drawn from a weighted set of strings
"""

import math
import warnings
from enum   import Enum
from typing import Sequence

from neatgenes.errors import InvalidTraitSpec
from neatgenes.rng    import RandomSource

class TraitKind(Enum):
    """
    Traits come in four kinds. The values are the names used in configuration files.
    """
    INT    = "int"
    BOOL   = "bool"
    FLOAT  = "float"
    STRING = "string"

# Python types accepted as payload for each kind
_PAYLOAD_TYPES = {TraitKind.INT   : int,
                  TraitKind.BOOL  : bool,
                  TraitKind.FLOAT : float,
                  TraitKind.STRING: str}

class TraitValue:
    """
    A trait value: a payload tagged with its kind.

    Instances are immutable, so trait maps can be copied between genes
    without aliasing concerns.

    Public Attributes (read-only):
        kind:  The kind of the value
        value: The payload (int, bool, float or str, according to 'kind')
    """

    __slots__ = ('_kind', '_value')

    def __init__(self, kind: TraitKind, value: int | bool | float | str):
        """
        Parameters:
            kind:  Kind of the value
            value: Payload; must match 'kind' (an int is accepted, and
                   converted, for FLOAT; a bool is never accepted as INT;
                   a FLOAT payload must be finite)
        """
        if not isinstance(kind, TraitKind):
            raise TypeError(f"Invalid trait kind {kind!r}")

        if kind == TraitKind.FLOAT and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)

        expected = _PAYLOAD_TYPES[kind]
        if isinstance(value, bool) and kind != TraitKind.BOOL:
            raise TypeError(f"A bool is not a valid {kind.value} trait value")
        if not isinstance(value, expected):
            raise TypeError(f"{value!r} is not a valid {kind.value} trait value")
        if kind == TraitKind.FLOAT and not math.isfinite(value):
            raise ValueError(f"A float trait value must be finite, got {value}")

        object.__setattr__(self, '_kind',  kind)
        object.__setattr__(self, '_value', expected(value))

    @classmethod
    def of(cls, value: int | bool | float | str) -> 'TraitValue':
        """
        Build a TraitValue, inferring its kind from the payload's Python type.
        """
        if isinstance(value, bool):
            return cls(TraitKind.BOOL, value)
        if isinstance(value, int):
            return cls(TraitKind.INT, value)
        if isinstance(value, float):
            return cls(TraitKind.FLOAT, value)
        if isinstance(value, str):
            return cls(TraitKind.STRING, value)
        raise TypeError(f"Cannot infer a trait kind for {value!r}")

    @property
    def kind(self) -> TraitKind:
        return self._kind

    @property
    def value(self) -> int | bool | float | str:
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError("TraitValue is immutable")

    def __eq__(self, other):
        if not isinstance(other, TraitValue):
            return NotImplemented
        return self._kind == other._kind and self._value == other._value

    def __hash__(self):
        return hash((self._kind, self._value))

    def __getstate__(self):
        return (self._kind, self._value)

    def __setstate__(self, state):
        kind, value = state
        object.__setattr__(self, '_kind',  kind)
        object.__setattr__(self, '_value', value)

    def __repr__(self):
        return f"TraitValue({self._kind.name}, {self._value!r})"

    def __str__(self):
        return str(self._value)

def _check_probability(name: str, p: float) -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise InvalidTraitSpec(f"'{name}' must be a probability in [0, 1], got {p}")
    return p

def _is_integral(x) -> bool:
    if isinstance(x, int):
        return True
    try:
        return math.isfinite(x) and int(x) == x
    except TypeError:
        return False

class TraitSpec:
    """
    Base class for trait specifications.

    A spec describes how one named trait is created and mutated. Specs are
    validated eagerly at construction, so a malformed table is rejected when
    configuration is loaded rather than deep inside a mutation.

    Public Attributes:
        kind:          The kind of the values this spec produces (class attribute)
        mutation_prob: Probability that a mutation pass touches the trait

    Public Methods:
        sample(): Draw a fresh random value
    """

    kind: TraitKind

    def __init__(self, mutation_prob: float):
        self.mutation_prob: float = _check_probability('mutation_prob', mutation_prob)

    def sample(self, rng: RandomSource) -> TraitValue:
        raise NotImplementedError

class IntTraitSpec(TraitSpec):
    """
    Integer trait, uniformly distributed over the inclusive range [min, max].

    Mutation either replaces the value with a fresh draw (probability
    'replace_prob') or adds a random step in [-perturb_power, perturb_power]
    and clamps the result to [min, max].
    """

    kind = TraitKind.INT

    def __init__(self,
                 min          : int,
                 max          : int,
                 mutation_prob: float = 0.0,
                 replace_prob : float = 0.0,
                 perturb_power: int   = 1):
        super().__init__(mutation_prob)
        if not (_is_integral(min) and _is_integral(max)):
            raise InvalidTraitSpec(f"Integer trait bounds must be integers, got [{min}, {max}]")
        if min > max:
            raise InvalidTraitSpec(f"Empty range: min ({min}) > max ({max})")
        if not _is_integral(perturb_power) or perturb_power < 0:
            raise InvalidTraitSpec(f"'perturb_power' must be a non-negative integer, got {perturb_power}")

        self.min          : int   = int(min)
        self.max          : int   = int(max)
        self.replace_prob : float = _check_probability('replace_prob', replace_prob)
        self.perturb_power: int   = int(perturb_power)

    def sample(self, rng: RandomSource) -> TraitValue:
        return TraitValue(TraitKind.INT, rng.rand_int(self.min, self.max))

    def __repr__(self):
        return (f"IntTraitSpec(min={self.min}, max={self.max}, mutation_prob={self.mutation_prob}, "
                f"replace_prob={self.replace_prob}, perturb_power={self.perturb_power})")

class BoolTraitSpec(TraitSpec):
    """
    Boolean trait, true with probability 0.5. Mutation flips it.
    """

    kind = TraitKind.BOOL

    def __init__(self, mutation_prob: float = 0.0):
        super().__init__(mutation_prob)

    def sample(self, rng: RandomSource) -> TraitValue:
        return TraitValue(TraitKind.BOOL, rng.rand_float() < 0.5)

    def __repr__(self):
        return f"BoolTraitSpec(mutation_prob={self.mutation_prob})"

class FloatTraitSpec(TraitSpec):
    """
    Real-valued trait, uniformly distributed over [min, max].

    Mutation either replaces the value with a fresh draw (probability
    'replace_prob') or adds 'perturb_power' times a signed uniform number
    in [-1, 1) and clamps the result to [min, max].
    """

    kind = TraitKind.FLOAT

    def __init__(self,
                 min          : float,
                 max          : float,
                 mutation_prob: float = 0.0,
                 replace_prob : float = 0.0,
                 perturb_power: float = 0.0):
        super().__init__(mutation_prob)
        min, max = float(min), float(max)
        if not (math.isfinite(min) and math.isfinite(max)):
            raise InvalidTraitSpec(f"Float trait bounds must be finite, got [{min}, {max}]")
        if min > max:
            raise InvalidTraitSpec(f"Empty range: min ({min}) > max ({max})")
        if not math.isfinite(perturb_power) or perturb_power < 0:
            raise InvalidTraitSpec(f"'perturb_power' must be finite and non-negative, got {perturb_power}")

        self.min          : float = min
        self.max          : float = max
        self.replace_prob : float = _check_probability('replace_prob', replace_prob)
        self.perturb_power: float = float(perturb_power)

    def scale(self, u: float) -> float:
        """
        Rescale 'u' from [0, 1] to [min, max].
        """
        # interpolate; 'max - min' overflows for ranges wider than the largest float
        x = (1.0 - u) * self.min + u * self.max
        return min(max(x, self.min), self.max)

    def sample(self, rng: RandomSource) -> TraitValue:
        return TraitValue(TraitKind.FLOAT, self.scale(rng.rand_float()))

    def __repr__(self):
        return (f"FloatTraitSpec(min={self.min}, max={self.max}, mutation_prob={self.mutation_prob}, "
                f"replace_prob={self.replace_prob}, perturb_power={self.perturb_power})")

class StringTraitSpec(TraitSpec):
    """
    Trait taking one of a fixed set of strings, selected with probability
    proportional to its weight.

    Mutation redraws from the same distribution; the new value may equal the
    old one (forcing a change would loop forever when only one weight is positive).
    """

    kind = TraitKind.STRING

    def __init__(self,
                 candidates   : Sequence[str],
                 weights      : Sequence[float],
                 mutation_prob: float = 1.0):
        super().__init__(mutation_prob)
        candidates = list(candidates)
        weights    = [float(w) for w in weights]

        if not candidates:
            raise InvalidTraitSpec("The candidate set of a string trait cannot be empty")
        if any(not isinstance(c, str) for c in candidates):
            raise InvalidTraitSpec(f"String trait candidates must be strings, got {candidates}")
        if len(weights) != len(candidates):
            raise InvalidTraitSpec(f"{len(candidates)} candidates but {len(weights)} weights")
        if any(w < 0 or not math.isfinite(w) for w in weights):
            raise InvalidTraitSpec(f"Selection weights must be finite and non-negative, got {weights}")
        if sum(weights) <= 0:
            raise InvalidTraitSpec("At least one selection weight must be positive")

        unreachable = [c for c, w in zip(candidates, weights) if w == 0]
        if unreachable:
            warnings.warn(f"String trait candidates {unreachable} have zero weight and will never be selected")

        self.candidates: list[str]   = candidates
        self.weights   : list[float] = weights

    def sample(self, rng: RandomSource) -> TraitValue:
        idx = rng.roulette(self.weights)
        return TraitValue(TraitKind.STRING, self.candidates[idx])

    def __repr__(self):
        return (f"StringTraitSpec(candidates={self.candidates}, weights={self.weights}, "
                f"mutation_prob={self.mutation_prob})")
