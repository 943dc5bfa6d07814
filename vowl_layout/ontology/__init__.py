"""Validated ontology input model."""

from .model import (
    OntologyData, OntologyMetadata, ClassNode, ClassAttributes, Property,
    PropertyType, PropertyKind, PropertyCharacteristics, Cardinality, Namespace
)

__all__ = [
    'OntologyData',
    'OntologyMetadata',
    'ClassNode',
    'ClassAttributes',
    'Property',
    'PropertyType',
    'PropertyKind',
    'PropertyCharacteristics',
    'Cardinality',
    'Namespace'
]
