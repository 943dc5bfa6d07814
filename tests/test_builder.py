"""
Unit tests for ontology-to-graph construction.
"""

import unittest

from vowl_layout.errors import (
    ConstructionError, DuplicateClass, DuplicateNodeId, UnknownNode, UnresolvedEndpoint
)
from vowl_layout.graph import GraphBuilder, NodeType, EdgeType
from vowl_layout.ontology import (
    OntologyData, OntologyMetadata, ClassNode, ClassAttributes, Property,
    PropertyType, PropertyCharacteristics, Cardinality
)


def make_class(class_id, class_type="owl:Class", **attrs):
    return ClassNode(
        id=class_id,
        iri=f"http://test.org/{class_id}",
        label=class_id.title(),
        class_type=class_type,
        attributes=ClassAttributes(**attrs),
    )


def make_property(prop_id, domain, range_, property_type=PropertyType.OBJECT, **chars):
    return Property(
        id=prop_id,
        iri=f"http://test.org/{prop_id}",
        label=prop_id,
        property_type=property_type,
        domain=domain,
        range=range_,
        characteristics=PropertyCharacteristics(**chars),
    )


class TestGraphBuilder(unittest.TestCase):
    """Test cases for GraphBuilder.from_ontology."""

    def setUp(self):
        """Set up a two-class ontology with one functional property."""
        self.ontology = OntologyData(
            metadata=OntologyMetadata(iri="http://test.org/onto"),
            classes=[make_class("class1"), make_class("class2")],
            properties=[make_property("prop1", "class1", "class2", functional=True)],
        )

    def test_build_from_ontology(self):
        """Each class becomes a node and each property an edge."""
        graph = GraphBuilder.from_ontology(self.ontology)

        self.assertEqual(graph.node_count(), 2)
        self.assertEqual(graph.edge_count(), 1)
        self.assertEqual([n.id for n in graph.neighbors("class1")], ["class2"])

    def test_node_mapping(self):
        """Labels and semantic attributes are carried onto the node."""
        self.ontology.classes[0].attributes.external = True
        self.ontology.classes[0].attributes.individuals = 4
        self.ontology.classes[0].equivalent = ["class2"]

        node = GraphBuilder.from_ontology(self.ontology).get_node("class1")

        self.assertEqual(node.label, "Class1")
        self.assertEqual(node.semantic.iri, "http://test.org/class1")
        self.assertTrue(node.semantic.external)
        self.assertEqual(node.semantic.individuals, 4)
        self.assertEqual(node.semantic.equivalent, ["class2"])

    def test_edge_characteristics(self):
        """Flags and cardinality bounds are propagated unchanged."""
        self.ontology.properties[0].characteristics.symmetric = True
        self.ontology.properties[0].characteristics.cardinality = Cardinality(min=1, max=3)

        edge = GraphBuilder.from_ontology(self.ontology).edges()[0]

        self.assertTrue(edge.characteristics.functional)
        self.assertTrue(edge.characteristics.symmetric)
        self.assertFalse(edge.characteristics.transitive)
        self.assertFalse(edge.characteristics.inverse_functional)
        self.assertEqual(edge.characteristics.cardinality, (1, 3))

    def test_exact_cardinality_bounds_both_ends(self):
        """An exact count without min/max becomes (exact, exact)."""
        self.ontology.properties[0].characteristics.cardinality = Cardinality(exact=2)

        edge = GraphBuilder.from_ontology(self.ontology).edges()[0]

        self.assertEqual(edge.characteristics.cardinality, (2, 2))

    def test_explicit_bounds_win_over_exact(self):
        self.ontology.properties[0].characteristics.cardinality = Cardinality(min=1, exact=2)

        edge = GraphBuilder.from_ontology(self.ontology).edges()[0]

        self.assertEqual(edge.characteristics.cardinality, (1, None))

    def test_metadata_is_computed(self):
        """The built graph already has fresh metadata."""
        graph = GraphBuilder.from_ontology(self.ontology)

        self.assertEqual(graph.metadata().class_count, 2)
        self.assertEqual(graph.metadata().property_count, 1)
        self.assertEqual(graph.metadata().max_degree, 1)

    def test_unknown_domain_fails_whole_build(self):
        """A dangling domain aborts construction with UnknownNode."""
        self.ontology.properties.append(make_property("bad", "missing", "class2"))

        with self.assertRaises(UnknownNode) as ctx:
            GraphBuilder.from_ontology(self.ontology)

        error = ctx.exception
        self.assertIsInstance(error, ConstructionError)
        self.assertIsInstance(error, UnresolvedEndpoint)
        self.assertEqual(error.node_id, "missing")
        self.assertEqual(error.element_id, "bad")
        self.assertIsInstance(error.__cause__, UnknownNode)

    def test_unknown_range_fails_whole_build(self):
        self.ontology.properties.insert(0, make_property("bad", "class1", "nowhere"))

        with self.assertRaises(ConstructionError):
            GraphBuilder.from_ontology(self.ontology)

    def test_duplicate_class_fails_build(self):
        """Repeated class ids surface as both construction and duplicate errors."""
        self.ontology.classes.append(make_class("class1"))

        with self.assertRaises(DuplicateNodeId) as ctx:
            GraphBuilder.from_ontology(self.ontology)

        self.assertIsInstance(ctx.exception, DuplicateClass)
        self.assertIsInstance(ctx.exception, ConstructionError)
        self.assertEqual(ctx.exception.node_id, "class1")


class TestTypeMapping(unittest.TestCase):
    """Test cases for class/property type vocabularies."""

    def test_node_types(self):
        self.assertEqual(GraphBuilder.map_node_type("owl:Class"), NodeType.CLASS)
        self.assertEqual(GraphBuilder.map_node_type("rdfs:Class"), NodeType.CLASS)
        self.assertEqual(GraphBuilder.map_node_type("rdfs:Datatype"), NodeType.DATATYPE)
        self.assertEqual(GraphBuilder.map_node_type("xsd:*"), NodeType.DATATYPE)
        self.assertEqual(GraphBuilder.map_node_type("owl:Thing"), NodeType.special("owl:Thing"))

    def test_edge_types(self):
        self.assertEqual(GraphBuilder.map_edge_type(PropertyType.OBJECT), EdgeType.OBJECT_PROPERTY)
        self.assertEqual(GraphBuilder.map_edge_type(PropertyType.DATATYPE), EdgeType.DATATYPE_PROPERTY)
        self.assertEqual(GraphBuilder.map_edge_type(PropertyType.ANNOTATION),
                         EdgeType.special("annotation"))
        self.assertEqual(GraphBuilder.map_edge_type(PropertyType.special("subclassof")),
                         EdgeType.SUBCLASS)
        self.assertEqual(GraphBuilder.map_edge_type(PropertyType.special("owl:disjointWith")),
                         EdgeType.special("owl:disjointWith"))

    def test_mixed_ontology(self):
        """Datatype and special nodes are built alongside classes."""
        ontology = OntologyData(
            metadata=OntologyMetadata(iri="http://test.org/mixed"),
            classes=[
                make_class("person"),
                make_class("string", class_type="rdfs:Datatype"),
                make_class("thing", class_type="owl:Thing"),
            ],
            properties=[
                make_property("name", "person", "string", PropertyType.DATATYPE),
                make_property("isA", "person", "thing", PropertyType.special("subclass")),
            ],
        )

        graph = GraphBuilder.from_ontology(ontology)

        self.assertEqual(graph.get_node("string").node_type, NodeType.DATATYPE)
        self.assertEqual(graph.get_node("thing").node_type, NodeType.special("owl:Thing"))
        self.assertEqual([e.edge_type for e in graph.edges()],
                         [EdgeType.DATATYPE_PROPERTY, EdgeType.SUBCLASS])
        self.assertEqual(graph.metadata().class_count, 1)


if __name__ == '__main__':
    unittest.main()
