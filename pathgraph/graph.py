# pathgraph/graph.py


from __future__ import annotations
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple, Type, TypeVar
import logging

from .errors import (
    CapacityError,
    DuplicateEdgeError,
    DuplicateVertexError,
    IdentityEdgeError,
    InvalidVertexError,
    PathNotFoundError,
    UnknownVertexError,
    safe_str,
)

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """Read-only (src, dest) pair; only materialized for output."""

    src: Hashable
    dest: Hashable

    def __str__(self) -> str:
        return f"{safe_str(self.src)} -> {safe_str(self.dest)}"


class Path(Generic[T]):
    """
    Result of Graph.get_path():
    - exists with an ordered tuple of edges from start to end (possibly empty
      when start == end)
    - or does not exist; the value is then falsy and reading edges raises
      PathNotFoundError
    """

    __slots__ = ("_start", "_end", "_edges")

    def __init__(self, start: T, end: T, edges: Optional[Iterable[Edge]] = None):
        self._start = start
        self._end = end
        self._edges: Optional[Tuple[Edge, ...]] = None if edges is None else tuple(edges)

    @classmethod
    def not_found(cls, start: T, end: T) -> "Path[T]":
        return cls(start, end, None)

    @property
    def start(self) -> T:
        return self._start

    @property
    def end(self) -> T:
        return self._end

    @property
    def exists(self) -> bool:
        return self._edges is not None

    @property
    def edges(self) -> Tuple[Edge, ...]:
        if self._edges is None:
            raise PathNotFoundError(f"No path from {safe_str(self._start)} to {safe_str(self._end)}")
        return self._edges

    def vertices(self) -> Tuple[T, ...]:
        """Vertices visited along the path, start and end included."""
        edges = self.edges
        return (self._start,) + tuple(e.dest for e in edges)  # type: ignore[return-value]

    # ---------- dunder ----------

    def __bool__(self) -> bool:
        return self.exists

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (self._start, self._end, self._edges) == (other._start, other._end, other._edges)

    def __hash__(self) -> int:
        return hash((self._start, self._end, self._edges))

    def __repr__(self) -> str:
        if self._edges is None:
            return f"Path({safe_str(self._start)} -> {safe_str(self._end)}: not found)"
        return "Path([" + ", ".join(str(e) for e in self._edges) + "])"


class Graph(Generic[T]):
    """
    Simple in-memory graph with strict mutation rules:
    - vertices must be added before any edge references them
    - no self-loops, no duplicate edges (undirected mirrors count as duplicates)
    - adjacency stored as sets, only tuple snapshots leave the graph
    - optional validation hooks and capacity caps for untrusted data
    - rejected operations leave the graph unchanged
    """

    def __init__(
        self,
        directed: bool = False,
        *,
        # Validation knobs (all optional; defaults are permissive)
        restrict_vertex_types: Optional[Tuple[Type, ...]] = None,
        vertex_validator: Optional[Callable[[T], bool]] = None,
        # Capacity guards
        max_vertices: Optional[int] = None,
        max_degree: Optional[int] = None,
    ):
        self._g: Dict[T, Set[T]] = {}
        self._directed = bool(directed)
        self._restrict_vertex_types = restrict_vertex_types
        self._vertex_validator = vertex_validator
        self._max_vertices = max_vertices
        self._max_degree = max_degree

    @classmethod
    def new_directed(cls, **options: Any) -> "Graph[T]":
        return cls(True, **options)

    @classmethod
    def new_undirected(cls, **options: Any) -> "Graph[T]":
        return cls(False, **options)

    @property
    def directed(self) -> bool:
        return self._directed

    # ---------- internal helpers ----------

    def _check_argument(self, v: T) -> None:
        if v is None:
            raise InvalidVertexError("Missing vertex")
        # Hashability is required (enforced by TypeVar at type-check time, but we also gate at runtime)
        try:
            hash(v)
        except TypeError as e:
            raise InvalidVertexError(f"Vertex must be hashable; got {type(v).__name__}", v) from e

    def _validate_vertex(self, v: T) -> None:
        self._check_argument(v)
        if self._restrict_vertex_types is not None and not isinstance(v, self._restrict_vertex_types):
            allowed = ", ".join(t.__name__ for t in self._restrict_vertex_types)
            raise InvalidVertexError(f"Vertex type {type(v).__name__} not allowed (allowed: {allowed})", v)

        if self._vertex_validator is not None and not self._vertex_validator(v):
            raise InvalidVertexError(f"Vertex failed custom validation: {safe_str(v)}", v)

    def _require_vertex(self, v: T) -> Set[T]:
        try:
            return self._g[v]
        except KeyError:
            raise UnknownVertexError(v) from None

    def _check_capacity_before_add_vertex(self) -> None:
        if self._max_vertices is not None and len(self._g) >= self._max_vertices:
            raise CapacityError(f"Vertex cap exceeded (max_vertices={self._max_vertices})")

    def _check_degree_before_add_edge(self, src: T, dest: T) -> None:
        # Degree guard applies to outgoing degree (and symmetric for undirected)
        if self._max_degree is None:
            return
        if len(self._g[src]) >= self._max_degree:
            raise CapacityError(f"Degree cap exceeded for {safe_str(src)} (max_degree={self._max_degree})")
        if not self._directed and len(self._g[dest]) >= self._max_degree:
            raise CapacityError(f"Degree cap exceeded for {safe_str(dest)} (max_degree={self._max_degree})")

    def _edge_count(self) -> int:
        n = sum(len(nbrs) for nbrs in self._g.values())
        return n if self._directed else n // 2

    # ---------- mutation ----------

    def add_vertex(self, v: T) -> None:
        self._validate_vertex(v)
        if v in self._g:
            raise DuplicateVertexError(v)
        self._check_capacity_before_add_vertex()
        self._g[v] = set()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Added vertex %s", safe_str(v))

    def add_edge(self, src: T, dest: T) -> None:
        self._validate_vertex(src)
        self._validate_vertex(dest)

        if src == dest:
            raise IdentityEdgeError(src)
        src_nbrs = self._require_vertex(src)
        dest_nbrs = self._require_vertex(dest)
        # undirected adjacency is symmetric, so this also catches the mirror edge
        if dest in src_nbrs:
            raise DuplicateEdgeError(src, dest)
        self._check_degree_before_add_edge(src, dest)

        src_nbrs.add(dest)
        if not self._directed:
            dest_nbrs.add(src)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Added edge %s -> %s", safe_str(src), safe_str(dest))

    # ---------- path search ----------

    def get_path(self, src: T, dest: T) -> Path[T]:
        """
        Return a path of edges from src to dest, or a path that does not exist.

        Depth-first search over the current adjacency; each vertex is entered at
        most once, so cycles terminate. Neighbors are visited in set iteration
        order, so when several paths exist any one of them may be returned.
        """
        # knobs are not re-run here: a vertex that fails them was never added
        self._check_argument(src)
        self._check_argument(dest)
        self._require_vertex(src)
        self._require_vertex(dest)

        if src == dest:
            return Path(src, dest, ())

        visited: Set[T] = {src}
        edges = self._search(src, dest, visited)
        if edges is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "No path %s -> %s (explored %d vertices)", safe_str(src), safe_str(dest), len(visited)
                )
            return Path.not_found(src, dest)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Found path %s -> %s with %d edges (explored %d vertices)",
                safe_str(src), safe_str(dest), len(edges), len(visited),
            )
        return Path(src, dest, edges)

    def _search(self, src: T, dest: T, visited: Set[T]) -> Optional[List[Edge]]:
        # explicit stack of (vertex, neighbor iterator) instead of recursion
        path: List[Edge] = []
        stack: List[Tuple[T, Iterator[T]]] = [(src, iter(self._g[src]))]
        while stack:
            cur, nbrs = stack[-1]
            for v in nbrs:
                path.append(Edge(cur, v))
                if v == dest:
                    return path
                if v not in visited:
                    visited.add(v)
                    stack.append((v, iter(self._g[v])))
                    break
                path.pop()
            else:
                # exhausted: backtrack over the edge that led here
                stack.pop()
                if path:
                    path.pop()
        return None

    def has_path(self, src: T, dest: T) -> bool:
        return self.get_path(src, dest).exists

    # ---------- queries ----------

    def has_vertex(self, v: T) -> bool:
        return v in self._g

    def has_edge(self, src: T, dest: T) -> bool:
        return src in self._g and dest in self._g[src]

    def neighbors(self, v: T) -> Tuple[T, ...]:
        return tuple(self._require_vertex(v))

    def vertices(self) -> Tuple[T, ...]:
        return tuple(self._g.keys())

    def edges(self) -> Tuple[Edge, ...]:
        if self._directed:
            return tuple(Edge(u, v) for u, nbrs in self._g.items() for v in nbrs)
        # undirected: emit each edge once, earlier-inserted vertex first
        order = {v: i for i, v in enumerate(self._g)}
        return tuple(
            Edge(u, v) for u, nbrs in self._g.items() for v in nbrs if order[u] < order[v]
        )

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._g)

    def __contains__(self, v: object) -> bool:
        try:
            return v in self._g
        except TypeError:
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._g))

    def __repr__(self) -> str:
        return f"<Graph directed={self._directed} vertices={len(self._g)} edges={self._edge_count()}>"

    def __str__(self) -> str:
        kind = "Directed" if self._directed else "Undirected"
        if not self._g:
            return f"{kind}Graph {{}}"
        lines = []
        for u in self.vertices():
            nbrs = ", ".join(safe_str(x) for x in sorted(self._g[u], key=safe_str))
            lines.append(f"{safe_str(u)}: [{nbrs}]")
        return f"{kind}Graph {{\n  " + "\n  ".join(lines) + "\n}"
