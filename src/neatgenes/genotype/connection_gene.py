"""
NEAT Connection Gene Module

This module implements the ConnectionGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

from typing import Any

from neatgenes.genotype.gene import Gene

class ConnectionGene(Gene):
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    Connection genes are uniquely identified by their innovation number, which
    serves as a historical marker enabling proper gene alignment during crossover.
    Comparisons ('<', '>', '==', ...) look at the innovation number only: two
    genes created independently with the same innovation number are the same gene.

    The endpoints, innovation number and recurrence flag are fixed at construction.
    The weight is modified during evolution; it is not bounded at this level.

    Public Attributes:
        weight: Weight of the connection
        traits: Auxiliary per-connection traits (see Gene)

    Public Properties (read-only):
        from_node_id:        ID of the source node
        to_node_id:          ID of the destination node
        innovation_id:       Global innovation number uniquely identifying this connection
        is_recurrent:        Whether the connection was created as a recurrent one
        is_looped_recurrent: Whether the connection is a self-loop (source == destination)

    Public Methods:
        copy():   Independent copy of the gene, traits included
        fields(): The gene's state as (name, value) pairs, in declaration order
    """

    def __init__(self,
                 from_node_id : int,
                 to_node_id   : int,
                 innovation_id: int,
                 weight       : float,
                 is_recurrent : bool = False):
        """
        Initialize a connection gene.

        Parameters:
            from_node_id:  ID of the source node
            to_node_id:    ID of the destination node
            innovation_id: Number uniquely and globally identifying this connection
            weight:        Weight of the connection
            is_recurrent:  Whether this connection is recurrent
        """
        super().__init__()
        self._from_node_id : int  = from_node_id
        self._to_node_id   : int  = to_node_id
        self._innovation_id: int  = innovation_id
        self._is_recurrent : bool = is_recurrent
        self.weight        : float = weight

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = float(value)

    @property
    def from_node_id(self) -> int:
        return self._from_node_id

    @property
    def to_node_id(self) -> int:
        return self._to_node_id

    @property
    def innovation_id(self) -> int:
        return self._innovation_id

    @property
    def is_recurrent(self) -> bool:
        return self._is_recurrent

    @property
    def is_looped_recurrent(self) -> bool:
        return self._from_node_id == self._to_node_id

    def copy(self) -> 'ConnectionGene':
        clone = ConnectionGene(self._from_node_id, self._to_node_id, self._innovation_id,
                               self._weight, self._is_recurrent)
        clone.copy_traits_from(self)
        return clone

    def fields(self) -> list[tuple[str, Any]]:
        """
        Return the gene's state field by field, in stable declaration order,
        for use by an external persistence layer.
        """
        return [('from_node_id',  self._from_node_id),
                ('to_node_id',    self._to_node_id),
                ('innovation_id', self._innovation_id),
                ('is_recurrent',  self._is_recurrent),
                ('weight',        self._weight),
                ('traits',        dict(self.traits))]

    # Ordering & equality use the innovation number only (used for sorting and alignment)
    def __lt__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id < other._innovation_id

    def __gt__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id > other._innovation_id

    def __le__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id <= other._innovation_id

    def __ge__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id >= other._innovation_id

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id == other._innovation_id

    def __ne__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return self._innovation_id != other._innovation_id

    def __hash__(self):
        return hash(self._innovation_id)

    def __repr__(self):
        return (f"ConnectionGene(from_node_id={self._from_node_id:03d}, to_node_id={self._to_node_id:03d}, "
                f"innovation_id={self._innovation_id:03d}, weight={self._weight:+.6f}, "
                f"is_recurrent={self._is_recurrent})")

    def __str__(self):
        s  = f"[{self._innovation_id:03d},{'R' if self._is_recurrent else 'F'},"
        s += f"{self._from_node_id:02d}=>{self._to_node_id:02d},{self._weight:+.02f}]"
        return s
