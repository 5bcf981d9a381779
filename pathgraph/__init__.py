# pathgraph/__init__.py

from .errors import (
    CapacityError,
    DuplicateEdgeError,
    DuplicateVertexError,
    GraphError,
    IdentityEdgeError,
    InvalidVertexError,
    PathNotFoundError,
    UnknownVertexError,
)
from .graph import Edge, Graph, Path

__version__ = "0.1.0"

__all__ = [
    "CapacityError",
    "DuplicateEdgeError",
    "DuplicateVertexError",
    "Edge",
    "Graph",
    "GraphError",
    "IdentityEdgeError",
    "InvalidVertexError",
    "Path",
    "PathNotFoundError",
    "UnknownVertexError",
]
