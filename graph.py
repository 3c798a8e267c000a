from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Iterable, List, Mapping, Tuple, TypeVar

from errors import InvalidArgumentError


T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Vertex(Generic[T]):
    data: T

    def __str__(self) -> str:
        return str(self.data)


@dataclass(frozen=True)
class Edge(Generic[T]):
    """Directed weighted arc from ``u`` to ``v``.

    Undirected graphs store every edge twice, as ``(u, v, w)`` and ``(v, u, w)``.
    """

    u: Vertex[T]
    v: Vertex[T]
    weight: float

    def reversed(self) -> Edge[T]:
        return Edge(self.v, self.u, self.weight)

    def __str__(self) -> str:
        return f"({self.u}, {self.v}, {self.weight})"


class Graph(Generic[T]):
    """Immutable weighted graph with an adjacency mapping derived from its edges.

    Neighbour lists keep the order in which edges were supplied; traversals
    rely on that order.
    """

    def __init__(self, vertices: Iterable[Vertex[T]], edges: Iterable[Edge[T]]) -> None:
        # dict.fromkeys drops duplicates but keeps first-seen order
        self._vertices: Tuple[Vertex[T], ...] = tuple(dict.fromkeys(vertices))
        self._vertex_set = frozenset(self._vertices)
        self._edges: Tuple[Edge[T], ...] = tuple(dict.fromkeys(edges))

        adjacency: Dict[Vertex[T], List[Tuple[Vertex[T], float]]] = {
            vertex: [] for vertex in self._vertices
        }
        for edge in self._edges:
            if edge.u not in self._vertex_set or edge.v not in self._vertex_set:
                raise InvalidArgumentError(
                    f"Edge {edge} references a vertex outside the graph."
                )
            adjacency[edge.u].append((edge.v, edge.weight))

        self._adjacency: Dict[Vertex[T], Tuple[Tuple[Vertex[T], float], ...]] = {
            vertex: tuple(neighbors) for vertex, neighbors in adjacency.items()
        }
        self._by_data: Dict[T, Vertex[T]] = {vertex.data: vertex for vertex in self._vertices}

    @classmethod
    def undirected(
        cls,
        nodes: Iterable[T],
        edges: Iterable[Tuple[T, T, float]],
    ) -> Graph[T]:
        """Build a graph from raw data, storing each edge as a reciprocal pair."""
        vertices = [Vertex(node) for node in nodes]
        arcs: List[Edge[T]] = []
        for origin, target, weight in edges:
            edge = Edge(Vertex(origin), Vertex(target), weight)
            arcs.append(edge)
            arcs.append(edge.reversed())
        return cls(vertices, arcs)

    @classmethod
    def directed(
        cls,
        nodes: Iterable[T],
        edges: Iterable[Tuple[T, T, float]],
    ) -> Graph[T]:
        vertices = [Vertex(node) for node in nodes]
        arcs = [Edge(Vertex(origin), Vertex(target), weight) for origin, target, weight in edges]
        return cls(vertices, arcs)

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> Graph[Any]:
        """Build a graph from the ``graph`` section of a YAML instance."""
        for key in ("nodes", "edges"):
            if key not in section:
                raise ValueError(f"Missing key in graph configuration: {key}")

        nodes = section["nodes"] or []
        known = set(nodes)
        triples: List[Tuple[Any, Any, float]] = []
        for entry in section["edges"] or []:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                raise ValueError(f"Each edge must be a [origin, target, weight] triple; got {entry!r}")
            origin, target, weight = entry
            for node in (origin, target):
                if node not in known:
                    raise ValueError(f"Edge {entry!r} references unknown node {node!r}.")
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ValueError(f"Edge {entry!r} has a non-numeric weight {weight!r}.")
            triples.append((origin, target, weight))

        if section.get("directed", False):
            return cls.directed(nodes, triples)
        return cls.undirected(nodes, triples)

    @property
    def vertices(self) -> Tuple[Vertex[T], ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge[T], ...]:
        return self._edges

    @property
    def adjacency(self) -> Mapping[Vertex[T], Tuple[Tuple[Vertex[T], float], ...]]:
        return self._adjacency

    def neighbors(self, vertex: Vertex[T]) -> Tuple[Tuple[Vertex[T], float], ...]:
        return self._adjacency[vertex]

    def vertex(self, data: T) -> Vertex[T]:
        """Return the vertex wrapping ``data``."""
        try:
            return self._by_data[data]
        except KeyError:
            raise InvalidArgumentError(f"Vertex {data!r} does not exist in the graph.") from None

    def is_undirected(self) -> bool:
        """True when every edge is paired with its reversed twin."""
        edge_set = set(self._edges)
        return all(edge.reversed() in edge_set for edge in self._edges)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertex_set

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
