from typing import Any, Iterable, Tuple

from pathgraph import Graph, Path


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def build_graph(
    directed: bool,
    vertices: Iterable[Any],
    edges: Iterable[Tuple[Any, Any]] = (),
    **options: Any,
) -> "Graph[Any]":
    g: Graph[Any] = Graph(directed=directed, **options)
    for v in vertices:
        g.add_vertex(v)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def assert_path_connects(g: "Graph[Any]", path: "Path[Any]", src: Any, dest: Any) -> None:
    """Structural check for a found path: it starts at src, ends at dest, each edge chains and exists in g."""
    assert path.exists, f"expected a path {src!r} -> {dest!r}"
    edges = path.edges
    if src == dest:
        assert edges == ()
        return
    assert edges, "non-trivial path must have edges"
    assert edges[0].src == src
    assert edges[-1].dest == dest
    for a, b in zip(edges, edges[1:]):
        assert a.dest == b.src, f"broken chain between {a} and {b}"
    for e in edges:
        assert g.has_edge(e.src, e.dest), f"{e} is not an edge of the graph"
    # a DFS path never revisits a vertex
    verts = path.vertices()
    assert len(set(verts)) == len(verts)
