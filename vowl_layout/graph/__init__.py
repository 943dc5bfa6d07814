"""Graph model and ontology-to-graph construction."""

from .elements import (
    Node, Edge, NodeType, EdgeType, NodeKind, EdgeKind,
    VisualAttributes, SemanticAttributes, EdgeCharacteristics,
    NodeBuilder, EdgeBuilder
)
from .ontology_graph import OntologyGraph, GraphMetadata
from .builder import GraphBuilder

__all__ = [
    'OntologyGraph',
    'GraphMetadata',
    'GraphBuilder',
    'Node',
    'Edge',
    'NodeType',
    'EdgeType',
    'NodeKind',
    'EdgeKind',
    'VisualAttributes',
    'SemanticAttributes',
    'EdgeCharacteristics',
    'NodeBuilder',
    'EdgeBuilder'
]
