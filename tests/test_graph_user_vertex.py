from typing import Any
import pytest

from pathgraph import DuplicateVertexError, Edge, Graph, UnknownVertexError
from helpers import build_graph


class City:
    """Vertex type with value equality on name only."""

    def __init__(self, name: str, population: int = 0):
        self.name = name
        self.population = population

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, City) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"City({self.name!r})"

    def __str__(self) -> str:
        return self.name


def test_string_vertices():
    g = build_graph(True, ["a", "b"], [("a", "b")])
    path = g.get_path("a", "b").edges
    assert len(path) == 1
    assert path[0].src == "a" and path[0].dest == "b"


def test_equal_instances_are_the_same_vertex():
    g = Graph[City].new_directed()
    g.add_vertex(City("Oslo", 700_000))
    with pytest.raises(DuplicateVertexError) as ei:
        g.add_vertex(City("Oslo"))
    assert "Oslo" in str(ei.value)
    g.add_vertex(City("Bergen"))
    g.add_edge(City("Oslo"), City("Bergen"))
    path = g.get_path(City("Oslo"), City("Bergen"))
    assert path.edges == (Edge(City("Oslo"), City("Bergen")),)
    # the first-inserted instance is the one the graph keeps
    assert g.vertices()[0].population == 700_000
    with pytest.raises(UnknownVertexError):
        g.get_path(City("Oslo"), City("Trondheim"))


def test_tuple_vertices():
    g = build_graph(False, [("x", 1), ("y", 2), ("z", 3)], [(("x", 1), ("y", 2)), (("y", 2), ("z", 3))])
    assert g.get_path(("z", 3), ("x", 1)).vertices() == (("z", 3), ("y", 2), ("x", 1))
