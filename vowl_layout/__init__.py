"""Force-directed layout of ontology graphs for visualization."""

from .errors import (
    VowlError, DuplicateNodeId, UnknownNode, ConstructionError,
    DuplicateClass, UnresolvedEndpoint
)
from .graph import OntologyGraph, GraphBuilder, GraphMetadata
from .layout import ForceSimulation, LayoutConfig
from .pipeline import layout_ontology, graph_statistics

__version__ = "0.1.0"

__all__ = [
    'VowlError',
    'DuplicateNodeId',
    'UnknownNode',
    'ConstructionError',
    'DuplicateClass',
    'UnresolvedEndpoint',
    'OntologyGraph',
    'GraphBuilder',
    'GraphMetadata',
    'ForceSimulation',
    'LayoutConfig',
    'layout_ontology',
    'graph_statistics'
]
