"""
Validated ontology data consumed by the graph builder.

These dataclasses mirror the object handed over by the parsing layer:
metadata, classes, properties and namespace declarations. Validation
happens upstream; ``OntologyData.from_dict`` only maps an already
validated dictionary of the same shape onto the dataclasses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any


@dataclass
class OntologyMetadata:
    """Ontology header."""
    iri: str
    version: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass
class ClassAttributes:
    """Visual and semantic attributes for a class."""
    external: bool = False
    individuals: Optional[int] = None
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class ClassNode:
    """An OWL/RDFS class or datatype."""
    id: str
    iri: str
    label: str
    class_type: str = "owl:Class"
    equivalent: List[str] = field(default_factory=list)
    attributes: ClassAttributes = field(default_factory=ClassAttributes)


class PropertyKind(Enum):
    OBJECT = "ObjectProperty"
    DATATYPE = "DatatypeProperty"
    ANNOTATION = "AnnotationProperty"
    SPECIAL = "SpecialProperty"


@dataclass(frozen=True)
class PropertyType:
    """
    Closed set of property types.

    ``name`` is only set for the special variant and carries the original
    type string (e.g. ``"rdfs:subClassOf"``, ``"owl:disjointWith"``).
    """
    kind: PropertyKind
    name: Optional[str] = None

    @classmethod
    def special(cls, name: str) -> "PropertyType":
        return cls(PropertyKind.SPECIAL, name)

    @classmethod
    def parse(cls, value: str) -> "PropertyType":
        """Map a type string such as ``owl:ObjectProperty`` onto a variant."""
        local_name = value.split(":", 1)[-1]
        for kind in (PropertyKind.OBJECT, PropertyKind.DATATYPE, PropertyKind.ANNOTATION):
            if local_name == kind.value:
                return cls(kind)
        return cls.special(value)

    def __str__(self) -> str:
        if self.kind is PropertyKind.SPECIAL:
            return f"Special({self.name})"
        return self.kind.value


PropertyType.OBJECT = PropertyType(PropertyKind.OBJECT)
PropertyType.DATATYPE = PropertyType(PropertyKind.DATATYPE)
PropertyType.ANNOTATION = PropertyType(PropertyKind.ANNOTATION)


@dataclass
class Cardinality:
    """Cardinality constraint on a property."""
    min: Optional[int] = None
    max: Optional[int] = None
    exact: Optional[int] = None


@dataclass
class PropertyCharacteristics:
    functional: bool = False
    inverse_functional: bool = False
    transitive: bool = False
    symmetric: bool = False
    cardinality: Optional[Cardinality] = None


@dataclass
class Property:
    """An OWL property connecting a domain class to a range class or datatype."""
    id: str
    iri: str
    label: str
    property_type: PropertyType
    domain: str
    range: str
    characteristics: PropertyCharacteristics = field(default_factory=PropertyCharacteristics)


@dataclass
class Namespace:
    prefix: str
    iri: str


@dataclass
class OntologyData:
    """Complete validated ontology."""
    metadata: OntologyMetadata
    classes: List[ClassNode] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)
    namespaces: List[Namespace] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OntologyData":
        """
        Build ontology data from a validated dictionary.

        Args:
            data: Mapping with ``metadata``, ``classes``, ``properties`` and
                ``namespaces`` keys. Missing optional fields take their
                dataclass defaults; ``iri`` and ``label`` default to ``id``.

        Returns:
            OntologyData instance
        """
        metadata = OntologyMetadata(**data.get("metadata", {"iri": ""}))

        classes = []
        for entry in data.get("classes", []):
            attrs = entry.get("attributes", {})
            classes.append(ClassNode(
                id=entry["id"],
                iri=entry.get("iri", entry["id"]),
                label=entry.get("label", entry["id"]),
                class_type=entry.get("class_type", "owl:Class"),
                equivalent=list(entry.get("equivalent", [])),
                attributes=ClassAttributes(
                    external=attrs.get("external", False),
                    individuals=attrs.get("individuals"),
                    properties=dict(attrs.get("properties", {})),
                ),
            ))

        properties = []
        for entry in data.get("properties", []):
            chars = dict(entry.get("characteristics", {}))
            # Accept the camelCase spelling used on the wire.
            if "inverseFunctional" in chars:
                chars["inverse_functional"] = chars.pop("inverseFunctional")
            card = chars.pop("cardinality", None)
            properties.append(Property(
                id=entry["id"],
                iri=entry.get("iri", entry["id"]),
                label=entry.get("label", entry["id"]),
                property_type=PropertyType.parse(entry.get("property_type", "ObjectProperty")),
                domain=entry["domain"],
                range=entry["range"],
                characteristics=PropertyCharacteristics(
                    cardinality=Cardinality(**card) if card is not None else None,
                    **chars
                ),
            ))

        namespaces = [Namespace(**ns) for ns in data.get("namespaces", [])]

        return cls(
            metadata=metadata,
            classes=classes,
            properties=properties,
            namespaces=namespaces,
        )
