"""
Directed multigraph of ontology classes and properties.

Nodes and edges live in insertion-ordered arenas addressed by integer
handles; a string-id table maps node ids to handles for O(1) lookup.
The topology (which handle points at which) is held in a networkx
``MultiDiGraph`` keyed by those handles, so parallel edges between the
same ordered pair are kept.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple, Optional, Any, Iterator

import networkx as nx

from ..errors import DuplicateNodeId, UnknownNode
from .elements import Node, Edge, NodeKind

logger = logging.getLogger(__name__)


@dataclass
class GraphMetadata:
    """
    Derived graph statistics.

    A snapshot as of the last ``OntologyGraph.update_metadata()`` call; it
    is not refreshed when nodes or edges are added.
    """
    class_count: int = 0
    property_count: int = 0
    max_degree: int = 0
    density: float = 0.0


class OntologyGraph:
    """
    Graph of ontology nodes and directed property edges.

    Nodes are never removed once added. After construction only the
    ``visual`` fields of stored nodes are expected to change, and that is
    done in place on the instances returned by ``get_node``.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._endpoints: List[Tuple[int, int]] = []
        self._node_map: Dict[str, int] = {}
        self._topology = nx.MultiDiGraph()
        self._metadata = GraphMetadata()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._node_map

    def __repr__(self) -> str:
        return f"OntologyGraph(nodes={self.node_count()}, edges={self.edge_count()})"

    def _handle(self, node_id: str) -> int:
        try:
            return self._node_map[node_id]
        except KeyError:
            raise UnknownNode(node_id) from None

    def add_node(self, node: Node) -> int:
        """
        Insert a node.

        Args:
            node: Node with an id not yet used in this graph

        Returns:
            Stable integer handle of the stored node

        Raises:
            DuplicateNodeId: if a node with the same id already exists
        """
        if node.id in self._node_map:
            raise DuplicateNodeId(node.id)

        handle = len(self._nodes)
        self._nodes.append(node)
        self._node_map[node.id] = handle
        self._topology.add_node(handle)
        return handle

    def add_edge(self, from_id: str, to_id: str, edge: Edge) -> int:
        """
        Insert a directed edge between two existing nodes.

        Args:
            from_id: Source node id
            to_id: Target node id
            edge: Edge payload

        Returns:
            Integer handle of the stored edge

        Raises:
            UnknownNode: if either endpoint is absent; the graph is unchanged
        """
        source = self._handle(from_id)
        target = self._handle(to_id)

        handle = len(self._edges)
        self._edges.append(edge)
        self._endpoints.append((source, target))
        self._topology.add_edge(source, target, key=handle)
        return handle

    def contains(self, node_id: str) -> bool:
        return node_id in self._node_map

    def get_node(self, node_id: str) -> Optional[Node]:
        """Return the stored node for ``node_id``, or None."""
        handle = self._node_map.get(node_id)
        if handle is None:
            return None
        return self._nodes[handle]

    def get_node_mut(self, node_id: str) -> Optional[Node]:
        """
        Return the stored node for in-place edits of its visual state.

        Identical to ``get_node``: nodes are returned by reference, so this
        exists to make the mutation channel explicit at call sites.
        """
        return self.get_node(node_id)

    def node_at(self, handle: int) -> Node:
        return self._nodes[handle]

    def nodes(self) -> List[Node]:
        """All nodes in insertion order."""
        return list(self._nodes)

    def edges(self) -> List[Edge]:
        """All edges in insertion order. Endpoints are available via ``edge_list``."""
        return list(self._edges)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def endpoints(self, edge_handle: int) -> Tuple[str, str]:
        """Source and target node ids of an edge."""
        source, target = self._endpoints[edge_handle]
        return self._nodes[source].id, self._nodes[target].id

    def edge_list(self) -> Iterator[Tuple[str, str, Edge]]:
        """Yield ``(source_id, target_id, edge)`` in insertion order."""
        for handle, edge in enumerate(self._edges):
            source, target = self.endpoints(handle)
            yield source, target, edge

    def successor_handles(self, handle: int) -> List[int]:
        """Target handles of every outgoing edge of ``handle``, one per edge."""
        return [target for _, target, _ in self._topology.out_edges(handle, keys=True)]

    def neighbors(self, node_id: str) -> List[Node]:
        """
        Nodes reached through outgoing edges of ``node_id``.

        Only successors are returned, never predecessors. A target reached
        by several parallel edges appears once per edge.

        Raises:
            UnknownNode: if ``node_id`` is absent
        """
        handle = self._handle(node_id)
        return [self._nodes[target] for target in self.successor_handles(handle)]

    def degree(self, node_id: str) -> int:
        """
        Number of outgoing edges of ``node_id``.

        Raises:
            UnknownNode: if ``node_id`` is absent
        """
        return self._topology.out_degree(self._handle(node_id))

    def update_metadata(self) -> GraphMetadata:
        """Recompute the metadata snapshot from the current graph."""
        node_count = self.node_count()
        edge_count = self.edge_count()

        self._metadata.class_count = sum(
            1 for node in self._nodes if node.node_type.kind is NodeKind.CLASS
        )
        self._metadata.property_count = edge_count
        self._metadata.max_degree = max(
            (degree for _, degree in self._topology.out_degree()), default=0
        )
        if node_count > 1:
            self._metadata.density = edge_count / (node_count * (node_count - 1))
        else:
            self._metadata.density = 0.0

        return self._metadata

    def metadata(self) -> GraphMetadata:
        return self._metadata

    def positions(self) -> Dict[str, Tuple[float, float]]:
        """Map node ids to their current (x, y) positions."""
        return {node.id: (node.visual.x, node.visual.y) for node in self._nodes}

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of nodes, edges and metadata suitable for JSON."""
        nodes = []
        for node in self._nodes:
            nodes.append({
                'id': node.id,
                'label': node.label,
                'x': node.visual.x,
                'y': node.visual.y,
                'node_type': str(node.node_type),
                'fixed': node.visual.fixed,
                'color': node.visual.color,
                'iri': node.semantic.iri,
                'external': node.semantic.external,
            })

        edges = []
        for source, target, edge in self.edge_list():
            characteristics = asdict(edge.characteristics)
            if characteristics['cardinality'] is not None:
                characteristics['cardinality'] = list(characteristics['cardinality'])
            edges.append({
                'id': edge.id,
                'label': edge.label,
                'source': source,
                'target': target,
                'edge_type': str(edge.edge_type),
                'characteristics': characteristics,
            })

        return {
            'nodes': nodes,
            'edges': edges,
            'metadata': asdict(self._metadata),
        }

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Copy of the graph keyed by node id, with flat scalar attributes.

        Used for GraphML export and for analysis with networkx algorithms.
        """
        graph = nx.MultiDiGraph()
        for node in self._nodes:
            graph.add_node(
                node.id,
                label=node.label,
                node_type=str(node.node_type),
                x=node.visual.x,
                y=node.visual.y,
                iri=node.semantic.iri,
                external=node.semantic.external,
            )
        # Keyed by edge handle: edge ids are not required to be unique.
        for handle, (source, target, edge) in enumerate(self.edge_list()):
            graph.add_edge(
                source, target, key=handle,
                id=edge.id,
                label=edge.label,
                edge_type=str(edge.edge_type),
                functional=edge.characteristics.functional,
                inverse_functional=edge.characteristics.inverse_functional,
                transitive=edge.characteristics.transitive,
                symmetric=edge.characteristics.symmetric,
            )
        return graph

    def export_graph(self, filepath: Path, format: str = 'json'):
        """Export graph to file as 'json' or 'graphml'."""
        filepath = Path(filepath)

        if format == 'json':
            with open(filepath, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
        elif format == 'graphml':
            nx.write_graphml(self.to_networkx(), filepath)
        else:
            raise ValueError(f"Unknown export format: {format}")

        logger.debug("Exported %s to %s (%s)", self, filepath, format)
