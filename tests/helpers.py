from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from graph import Graph, Vertex


Triple = Tuple[str, str, float]


def triangle() -> Graph[str]:
    return Graph.undirected(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])


def weighted_triples() -> List[Triple]:
    return [
        ("A", "B", 4),
        ("A", "C", 2),
        ("B", "C", 5),
        ("B", "D", 10),
        ("C", "E", 3),
        ("E", "D", 4),
        ("D", "F", 11),
        ("E", "F", 7),
    ]


def weighted_graph() -> Graph[str]:
    return Graph.undirected(["A", "B", "C", "D", "E", "F"], weighted_triples())


def v(data) -> Vertex:
    return Vertex(data)


def brute_force_distance(graph: Graph, start: Vertex, goal: Vertex) -> float:
    """Cheapest simple path by exhaustive enumeration."""
    best = float("inf")

    def walk(vertex: Vertex, seen: set, cost: float) -> None:
        nonlocal best
        if vertex == goal:
            best = min(best, cost)
            return
        for neighbor, weight in graph.neighbors(vertex):
            if neighbor not in seen:
                walk(neighbor, seen | {neighbor}, cost + weight)

    walk(start, {start}, 0)
    return best


def _spans(nodes: Sequence[str], chosen: Sequence[Triple]) -> bool:
    parent: Dict[str, str] = {node: node for node in nodes}

    def root(x: str) -> str:
        while parent[x] != x:
            x = parent[x]
        return x

    for a, b, _ in chosen:
        ra, rb = root(a), root(b)
        if ra == rb:
            return False
        parent[ra] = rb
    return len({root(node) for node in nodes}) == 1


def brute_force_mst_weight(nodes: Sequence[str], triples: Sequence[Triple]) -> Optional[float]:
    """Lightest acyclic subset of |V| - 1 undirected edges that spans every node."""
    best: Optional[float] = None
    for chosen in combinations(triples, len(nodes) - 1):
        if _spans(nodes, chosen):
            weight = sum(w for _, _, w in chosen)
            if best is None or weight < best:
                best = weight
    return best


def hop_counts(graph: Graph, start: Vertex) -> Dict[Vertex, int]:
    hops = {start: 0}
    frontier = [start]
    while frontier:
        nxt = []
        for vertex in frontier:
            for neighbor, _ in graph.neighbors(vertex):
                if neighbor not in hops:
                    hops[neighbor] = hops[vertex] + 1
                    nxt.append(neighbor)
        frontier = nxt
    return hops
