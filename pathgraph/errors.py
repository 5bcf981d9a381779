# pathgraph/errors.py

from __future__ import annotations
from typing import Any
import re

_ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_CTRL_RE = re.compile(r"[\x00-\x1f\x7f]")  # non-printable/control chars


def safe_str(x: object, max_len: int = 120) -> str:
    """
    Best-effort safe string for error messages and logs:
    - uses str() then strips ANSI escapes and control chars
    - truncates long values to avoid log spam
    """
    s = str(x)
    s = _ANSI_RE.sub("", s)
    s = _CTRL_RE.sub("", s)
    if len(s) > max_len:
        s = s[: max_len - 1] + "…"
    return s


class GraphError(Exception):
    """Base class for every rejected graph operation."""


class InvalidVertexError(GraphError, TypeError):
    """A vertex argument is missing (None), unhashable or fails validation."""

    def __init__(self, message: str, vertex: Any = None):
        super().__init__(message)
        self.vertex = vertex


class DuplicateVertexError(GraphError, ValueError):
    def __init__(self, vertex: Any):
        super().__init__(f"Vertex is already in graph: {safe_str(vertex)}")
        self.vertex = vertex


class IdentityEdgeError(GraphError, ValueError):
    def __init__(self, vertex: Any):
        super().__init__(
            f"Identity edges are not permitted: {safe_str(vertex)} -> {safe_str(vertex)}"
        )
        self.vertex = vertex


class UnknownVertexError(GraphError, LookupError):
    def __init__(self, vertex: Any):
        super().__init__(f"Vertex does not belong to graph: {safe_str(vertex)}")
        self.vertex = vertex


class DuplicateEdgeError(GraphError, ValueError):
    def __init__(self, src: Any, dest: Any):
        super().__init__(f"Edge is already in graph: {safe_str(src)} -> {safe_str(dest)}")
        self.src = src
        self.dest = dest


class CapacityError(GraphError, OverflowError):
    """A configured max_vertices / max_degree cap would be exceeded."""


class PathNotFoundError(GraphError, LookupError):
    """Raised only when reading the edges of a path that does not exist."""
