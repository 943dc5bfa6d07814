"""
Ontology-to-graph translation.

Classes become nodes, properties become directed edges from domain to
range. All nodes are inserted before any edge because edges resolve their
endpoints by node id.
"""

import logging

from ..errors import DuplicateNodeId, UnknownNode, DuplicateClass, UnresolvedEndpoint
from ..ontology.model import OntologyData, PropertyType, PropertyKind
from .elements import NodeBuilder, EdgeBuilder, NodeType, EdgeType
from .ontology_graph import OntologyGraph

logger = logging.getLogger(__name__)

CLASS_TYPES = ('owl:Class', 'rdfs:Class')
DATATYPE_TYPES = ('rdfs:Datatype', 'xsd:*')


class GraphBuilder:
    """Builds an ``OntologyGraph`` from validated ``OntologyData``."""

    def __init__(self):
        self.graph = OntologyGraph()

    @classmethod
    def from_ontology(cls, data: OntologyData) -> OntologyGraph:
        """
        Build a graph from ontology data.

        The build is all-or-nothing: on failure the partially filled graph
        is discarded and only the exception reaches the caller.

        Args:
            data: Validated ontology

        Returns:
            Graph with one node per class, one edge per property and
            freshly computed metadata

        Raises:
            DuplicateClass: two classes share an id
            UnresolvedEndpoint: a property's domain or range is not a class id
        """
        builder = cls()
        builder._add_classes(data)
        builder._add_properties(data)
        builder.graph.update_metadata()

        logger.debug(
            "Built graph for %s: %d nodes, %d edges",
            data.metadata.iri, builder.graph.node_count(), builder.graph.edge_count()
        )
        return builder.build()

    def _add_classes(self, data: OntologyData):
        for ontology_class in data.classes:
            node = (NodeBuilder(ontology_class.id)
                    .label(ontology_class.label)
                    .node_type(self.map_node_type(ontology_class.class_type))
                    .iri(ontology_class.iri)
                    .external(ontology_class.attributes.external)
                    .equivalent(ontology_class.equivalent)
                    .individuals(ontology_class.attributes.individuals)
                    .build())
            try:
                self.graph.add_node(node)
            except DuplicateNodeId as e:
                raise DuplicateClass(ontology_class.id) from e

    def _add_properties(self, data: OntologyData):
        for prop in data.properties:
            chars = prop.characteristics
            edge = (EdgeBuilder(prop.id)
                    .label(prop.label)
                    .edge_type(self.map_edge_type(prop.property_type))
                    .functional(chars.functional)
                    .inverse_functional(chars.inverse_functional)
                    .transitive(chars.transitive)
                    .symmetric(chars.symmetric))
            card = chars.cardinality
            if card is not None:
                # An exact count bounds both ends unless min/max are given.
                if card.exact is not None and card.min is None and card.max is None:
                    edge.cardinality(card.exact, card.exact)
                else:
                    edge.cardinality(card.min, card.max)

            try:
                self.graph.add_edge(prop.domain, prop.range, edge.build())
            except UnknownNode as e:
                raise UnresolvedEndpoint(prop.id, e.node_id) from e

    @staticmethod
    def map_node_type(class_type: str) -> NodeType:
        """Map an ontology class type string onto a node type."""
        if class_type in CLASS_TYPES:
            return NodeType.CLASS
        if class_type in DATATYPE_TYPES:
            return NodeType.DATATYPE
        return NodeType.special(class_type)

    @staticmethod
    def map_edge_type(property_type: PropertyType) -> EdgeType:
        """Map an ontology property type onto an edge type."""
        if property_type.kind is PropertyKind.OBJECT:
            return EdgeType.OBJECT_PROPERTY
        if property_type.kind is PropertyKind.DATATYPE:
            return EdgeType.DATATYPE_PROPERTY
        if property_type.kind is PropertyKind.ANNOTATION:
            return EdgeType.special("annotation")
        if "subclass" in property_type.name:
            return EdgeType.SUBCLASS
        return EdgeType.special(property_type.name)

    def build(self) -> OntologyGraph:
        return self.graph
