"""Custom exceptions for eulerian-graph-lib."""


class EulerianGraphError(Exception):
    """Base exception for graph analysis and editing operations."""


class InvalidGraphInputError(EulerianGraphError):
    """Raised when a node or edge record is missing required fields."""


class DuplicateLabelError(EulerianGraphError):
    """Raised when a node label is already taken by another node."""


class DuplicateNodeError(EulerianGraphError):
    """Raised when a node id is already used by another node."""


class NodeNotFoundError(EulerianGraphError):
    """Raised when a node id cannot be found in a graph document."""


class EdgeNotFoundError(EulerianGraphError):
    """Raised when an edge id cannot be found in a graph document."""
