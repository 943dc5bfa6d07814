"""
End-to-end layout of an ontology: build the graph, then run the simulation.
"""

import logging
from typing import Dict, Any, Optional, Union

from .graph import GraphBuilder, OntologyGraph
from .layout import ForceSimulation, LayoutConfig, get_layout_config
from .ontology import OntologyData

logger = logging.getLogger(__name__)


def layout_ontology(ontology: Union[OntologyData, Dict[str, Any]],
                    iterations: int = 300,
                    config: Optional[Union[LayoutConfig, str]] = None) -> OntologyGraph:
    """
    Create a laid-out graph directly from ontology data.

    Args:
        ontology: Validated ontology, as dataclasses or a plain dict
        iterations: Maximum number of simulation ticks
        config: Layout config or preset name (default preset if None)

    Returns:
        OntologyGraph with node positions filled in
    """
    if isinstance(ontology, dict):
        ontology = OntologyData.from_dict(ontology)
    if config is None or isinstance(config, str):
        config = get_layout_config(config or "default")

    graph = GraphBuilder.from_ontology(ontology)

    simulation = ForceSimulation(config)
    simulation.run(graph, iterations)

    return graph


def graph_statistics(graph: OntologyGraph) -> Dict[str, Any]:
    """Node/edge counts plus the last computed metadata snapshot."""
    metadata = graph.metadata()
    return {
        'node_count': graph.node_count(),
        'edge_count': graph.edge_count(),
        'class_count': metadata.class_count,
        'property_count': metadata.property_count,
        'max_degree': metadata.max_degree,
        'density': metadata.density,
    }


if __name__ == "__main__":
    ontology = {
        'metadata': {'iri': 'http://example.org/people', 'title': 'People'},
        'classes': [
            {'id': 'person', 'label': 'Person'},
            {'id': 'organization', 'label': 'Organization'},
            {'id': 'string', 'label': 'String', 'class_type': 'rdfs:Datatype'},
        ],
        'properties': [
            {'id': 'worksFor', 'label': 'works for', 'property_type': 'owl:ObjectProperty',
             'domain': 'person', 'range': 'organization',
             'characteristics': {'functional': True}},
            {'id': 'name', 'label': 'name', 'property_type': 'owl:DatatypeProperty',
             'domain': 'person', 'range': 'string'},
        ],
    }

    print("Laying out example ontology...")
    graph = layout_ontology(ontology)

    for node_id, (x, y) in graph.positions().items():
        print(f"  {node_id}: ({x:.2f}, {y:.2f})")

    stats = graph_statistics(graph)
    print(f"\nNodes: {stats['node_count']}, Edges: {stats['edge_count']}")
    print(f"Max degree: {stats['max_degree']}, Density: {stats['density']:.3f}")
