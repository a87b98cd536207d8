"""
NEAT Node Gene Module.

This module implements the NodeGene class and the NodeType and
ActivationFunction enumerations for the NEAT (NeuroEvolution of
Augmenting Topologies) algorithm.

Classes:
    NodeType:           Enumeration for node types (NONE, INPUT, BIAS, HIDDEN, OUTPUT)
    ActivationFunction: Enumeration of the available activation functions
    NodeGene:           Gene encoding a single network node with parameters
"""

from enum   import Enum
from typing import Any

from neatgenes.genotype.gene import Gene

class NodeType(Enum):
    """
    The role of a node in the network.
    """
    NONE   = 0
    INPUT  = 1
    BIAS   = 2
    HIDDEN = 3
    OUTPUT = 4

class ActivationFunction(Enum):
    """
    All the activation function types a node can use.
    """
    SIGNED_SIGMOID   = 0   # blurred cutting plane
    UNSIGNED_SIGMOID = 1
    TANH             = 2
    TANH_CUBIC       = 3
    SIGNED_STEP      = 4   # threshold (cutting plane)
    UNSIGNED_STEP    = 5
    SIGNED_GAUSS     = 6   # symmetry
    UNSIGNED_GAUSS   = 7
    ABS              = 8   # another symmetry
    SIGNED_SINE      = 9   # smooth repetition
    UNSIGNED_SINE    = 10
    LINEAR           = 11  # combining coordinate frames only
    RELU             = 12
    SOFTPLUS         = 13

# 3-letter codes used by __str__
activation_codes = {ActivationFunction.SIGNED_SIGMOID  : "SSG",
                    ActivationFunction.UNSIGNED_SIGMOID: "USG",
                    ActivationFunction.TANH            : "TNH",
                    ActivationFunction.TANH_CUBIC      : "TNC",
                    ActivationFunction.SIGNED_STEP     : "SST",
                    ActivationFunction.UNSIGNED_STEP   : "UST",
                    ActivationFunction.SIGNED_GAUSS    : "SGS",
                    ActivationFunction.UNSIGNED_GAUSS  : "UGS",
                    ActivationFunction.ABS             : "ABS",
                    ActivationFunction.SIGNED_SINE     : "SSN",
                    ActivationFunction.UNSIGNED_SINE   : "USN",
                    ActivationFunction.LINEAR          : "LIN",
                    ActivationFunction.RELU            : "RLU",
                    ActivationFunction.SOFTPLUS        : "SFP"}

class NodeGene(Gene):
    """
    A gene describing a node in a Neural Network.

    Node genes are identified by a unique node ID which remains consistent
    across structural mutations and crossover operations. The ID and the
    node's type are fixed at construction.

    Besides its depth within the network, a node carries the parameters of
    its activation function. Which of them matter depends on the function:
        a:             usually scales the function's slope (sigmoid, gauss, sine)
        b:             usually shifts the function (sigmoid, step, gauss, abs, linear)
        time_constant: used when activating in leaky integrator mode
        bias:          used when activating in leaky integrator mode
    They are read-only from the outside and set together by 'init_activation()',
    so the activation configuration is never observed half-updated.

    Public Attributes:
        split_y: Depth of the node within the network (modified during evolution)
        x, y:    Display coordinates (no evolutionary meaning)
        traits:  Auxiliary per-node traits (see Gene)

    Public Properties (read-only):
        id:            Unique identifier for this node
        type:          Type of node
        a, b:          Free activation function parameters
        time_constant: Leaky integrator time constant
        bias:          Leaky integrator bias
        act_function:  The activation function type

    Public Methods:
        init_activation(): Set all activation parameters at once
        copy():            Independent copy of the gene, traits included
        fields():          The gene's state as (name, value) pairs, in declaration order
    """

    def __init__(self, node_type: NodeType, node_id: int, split_y: float):
        """
        Initialize a node gene.
        The activation parameters start at 0 and the activation function is
        UNSIGNED_SIGMOID; use 'init_activation()' to change them.

        Parameters:
            node_type: Type of node
            node_id:   Unique identifier for this node
            split_y:   Depth of the node within the network
        """
        super().__init__()
        if not isinstance(node_type, NodeType):
            raise TypeError(f"Invalid node type {node_type!r}")

        self._id     : int      = node_id
        self._type   : NodeType = node_type
        self._split_y: float    = float(split_y)

        self.x: int = 0
        self.y: int = 0

        self._a            : float              = 0.0
        self._b            : float              = 0.0
        self._time_constant: float              = 0.0
        self._bias         : float              = 0.0
        self._act_function : ActivationFunction = ActivationFunction.UNSIGNED_SIGMOID

    @property
    def id(self) -> int:
        return self._id

    @property
    def type(self) -> NodeType:
        return self._type

    @property
    def split_y(self) -> float:
        return self._split_y

    @split_y.setter
    def split_y(self, value: float) -> None:
        self._split_y = float(value)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def time_constant(self) -> float:
        return self._time_constant

    @property
    def bias(self) -> float:
        return self._bias

    @property
    def act_function(self) -> ActivationFunction:
        return self._act_function

    def init_activation(self,
                        a            : float,
                        b            : float,
                        time_constant: float,
                        bias         : float,
                        act_function : ActivationFunction) -> None:
        """
        Set the activation function and all of its parameters together.
        Nothing is changed if any argument is invalid.

        Parameters:
            a:             First free parameter of the activation function
            b:             Second free parameter of the activation function
            time_constant: Leaky integrator time constant
            bias:          Leaky integrator bias
            act_function:  The activation function type
        """
        if not isinstance(act_function, ActivationFunction):
            raise TypeError(f"Invalid activation function {act_function!r}")
        a, b, time_constant, bias = float(a), float(b), float(time_constant), float(bias)

        self._a             = a
        self._b             = b
        self._time_constant = time_constant
        self._bias          = bias
        self._act_function  = act_function

    def copy(self) -> 'NodeGene':
        clone = NodeGene(self._type, self._id, self._split_y)
        clone.x, clone.y = self.x, self.y
        clone.init_activation(self._a, self._b, self._time_constant, self._bias, self._act_function)
        clone.copy_traits_from(self)
        return clone

    def fields(self) -> list[tuple[str, Any]]:
        """
        Return the gene's state field by field, in stable declaration order,
        for use by an external persistence layer.
        """
        return [('id',            self._id),
                ('type',          self._type),
                ('a',             self._a),
                ('b',             self._b),
                ('time_constant', self._time_constant),
                ('bias',          self._bias),
                ('x',             self.x),
                ('y',             self.y),
                ('act_function',  self._act_function),
                ('split_y',       self._split_y),
                ('traits',        dict(self.traits))]

    def __repr__(self):
        return (f"NodeGene(node_type=NodeType.{self._type.name}, node_id={self._id}, "
                f"split_y={self._split_y}, act_function=ActivationFunction.{self._act_function.name})")

    def __str__(self):
        act_code = activation_codes[self._act_function]
        return f"[{self._type.name[0]}{self._id},{act_code},d={self._split_y:.2f}]"
