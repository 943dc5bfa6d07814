"""
Exception hierarchy for graph construction and layout.

Every expected domain violation is an ordinary exception rooted at
``VowlError`` so callers can recover with a single ``except`` clause.
Builder-level errors inherit from both ``ConstructionError`` and the
graph-level error they wrap, so either can be caught.
"""

from typing import Optional


class VowlError(Exception):
    """Base class for all errors raised by vowl_layout."""


class DuplicateNodeId(VowlError, ValueError):
    """A node with the same id is already present in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node with id '{node_id}' already exists")


class UnknownNode(VowlError, LookupError):
    """An operation referenced a node id that is not in the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")


class ConstructionError(VowlError):
    """Translating an ontology into a graph failed; nothing was built."""

    def __init__(self, message: str, element_id: Optional[str] = None):
        self.element_id = element_id
        # Skip the cooperative chain: mixed-in graph errors expect a node id.
        Exception.__init__(self, message)


class DuplicateClass(ConstructionError, DuplicateNodeId):
    """Two ontology classes share the same id."""

    def __init__(self, class_id: str):
        self.node_id = class_id
        ConstructionError.__init__(
            self,
            f"Failed to build graph: class id '{class_id}' is defined twice",
            element_id=class_id,
        )


class UnresolvedEndpoint(ConstructionError, UnknownNode):
    """A property's domain or range does not name any inserted class."""

    def __init__(self, property_id: str, node_id: str):
        self.node_id = node_id
        ConstructionError.__init__(
            self,
            f"Failed to build graph: property '{property_id}' references "
            f"unknown node '{node_id}'",
            element_id=property_id,
        )
