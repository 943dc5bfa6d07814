"""
Node and edge records for the ontology graph.

Nodes carry the visual state mutated by the layout engine alongside the
semantic state copied from the ontology. Type tags are closed unions:
each has a fixed set of variants plus a ``Special`` variant that keeps
the unrecognised type string as its payload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class NodeKind(Enum):
    CLASS = "Class"
    DATATYPE = "Datatype"
    SPECIAL = "Special"


class EdgeKind(Enum):
    OBJECT_PROPERTY = "ObjectProperty"
    DATATYPE_PROPERTY = "DatatypeProperty"
    SUBCLASS = "SubClass"
    SPECIAL = "Special"


@dataclass(frozen=True)
class NodeType:
    """Graph-level node type. Use the class constants or ``special(name)``."""
    kind: NodeKind
    name: Optional[str] = None

    @classmethod
    def special(cls, name: str) -> "NodeType":
        return cls(NodeKind.SPECIAL, name)

    @property
    def is_special(self) -> bool:
        return self.kind is NodeKind.SPECIAL

    def __str__(self) -> str:
        if self.is_special:
            return f"Special({self.name})"
        return self.kind.value


NodeType.CLASS = NodeType(NodeKind.CLASS)
NodeType.DATATYPE = NodeType(NodeKind.DATATYPE)


@dataclass(frozen=True)
class EdgeType:
    """Graph-level edge type. Use the class constants or ``special(name)``."""
    kind: EdgeKind
    name: Optional[str] = None

    @classmethod
    def special(cls, name: str) -> "EdgeType":
        return cls(EdgeKind.SPECIAL, name)

    @property
    def is_special(self) -> bool:
        return self.kind is EdgeKind.SPECIAL

    def __str__(self) -> str:
        if self.is_special:
            return f"Special({self.name})"
        return self.kind.value


EdgeType.OBJECT_PROPERTY = EdgeType(EdgeKind.OBJECT_PROPERTY)
EdgeType.DATATYPE_PROPERTY = EdgeType(EdgeKind.DATATYPE_PROPERTY)
EdgeType.SUBCLASS = EdgeType(EdgeKind.SUBCLASS)


@dataclass
class VisualAttributes:
    """Position, velocity and rendering hints. Mutated by the simulation."""
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    fixed: bool = False
    weight: float = 0.0
    color: Optional[str] = None  # hex

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class SemanticAttributes:
    iri: str = ""
    external: bool = False
    equivalent: List[str] = field(default_factory=list)
    individuals: Optional[int] = None


@dataclass
class Node:
    """Graph node representing a class or datatype."""
    id: str
    label: str
    node_type: NodeType = NodeType.CLASS
    visual: VisualAttributes = field(default_factory=VisualAttributes)
    semantic: SemanticAttributes = field(default_factory=SemanticAttributes)


@dataclass
class EdgeCharacteristics:
    functional: bool = False
    inverse_functional: bool = False
    transitive: bool = False
    symmetric: bool = False
    cardinality: Optional[Tuple[Optional[int], Optional[int]]] = None  # (min, max)


@dataclass
class Edge:
    """Directed graph edge representing a property."""
    id: str
    label: str
    edge_type: EdgeType = EdgeType.OBJECT_PROPERTY
    characteristics: EdgeCharacteristics = field(default_factory=EdgeCharacteristics)


class NodeBuilder:
    """
    Fluent builder for nodes.

    The label defaults to the id and the type to ``NodeType.CLASS``.
    """

    def __init__(self, node_id: str):
        self._node = Node(id=node_id, label=node_id)

    def label(self, label: str) -> "NodeBuilder":
        self._node.label = label
        return self

    def node_type(self, node_type: NodeType) -> "NodeBuilder":
        self._node.node_type = node_type
        return self

    def position(self, x: float, y: float) -> "NodeBuilder":
        self._node.visual.x = x
        self._node.visual.y = y
        return self

    def fixed(self, fixed: bool = True) -> "NodeBuilder":
        self._node.visual.fixed = fixed
        return self

    def weight(self, weight: float) -> "NodeBuilder":
        self._node.visual.weight = weight
        return self

    def color(self, color: str) -> "NodeBuilder":
        self._node.visual.color = color
        return self

    def iri(self, iri: str) -> "NodeBuilder":
        self._node.semantic.iri = iri
        return self

    def external(self, external: bool) -> "NodeBuilder":
        self._node.semantic.external = external
        return self

    def equivalent(self, ids: List[str]) -> "NodeBuilder":
        self._node.semantic.equivalent = list(ids)
        return self

    def individuals(self, count: Optional[int]) -> "NodeBuilder":
        self._node.semantic.individuals = count
        return self

    def build(self) -> Node:
        return self._node


class EdgeBuilder:
    """Fluent builder for edges. The label defaults to the id."""

    def __init__(self, edge_id: str):
        self._edge = Edge(id=edge_id, label=edge_id)

    def label(self, label: str) -> "EdgeBuilder":
        self._edge.label = label
        return self

    def edge_type(self, edge_type: EdgeType) -> "EdgeBuilder":
        self._edge.edge_type = edge_type
        return self

    def functional(self, value: bool = True) -> "EdgeBuilder":
        self._edge.characteristics.functional = value
        return self

    def inverse_functional(self, value: bool = True) -> "EdgeBuilder":
        self._edge.characteristics.inverse_functional = value
        return self

    def transitive(self, value: bool = True) -> "EdgeBuilder":
        self._edge.characteristics.transitive = value
        return self

    def symmetric(self, value: bool = True) -> "EdgeBuilder":
        self._edge.characteristics.symmetric = value
        return self

    def cardinality(self, min_count: Optional[int], max_count: Optional[int]) -> "EdgeBuilder":
        self._edge.characteristics.cardinality = (min_count, max_count)
        return self

    def build(self) -> Edge:
        return self._edge
