from __future__ import annotations

import math
from collections import deque
from heapq import heapify, heappop, heappush
from itertools import count
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from disjoint_set import DisjointSet
from errors import InvalidArgumentError
from graph import Edge, Graph, Vertex


T = TypeVar("T")

INFINITY = math.inf


def _check_start(start: Optional[Vertex[T]], graph: Optional[Graph[T]]) -> None:
    if start is None or graph is None or start not in graph:
        raise InvalidArgumentError("Input is None or start does not exist in the graph.")


def bfs(start: Vertex[T], graph: Graph[T]) -> List[Vertex[T]]:
    """Breadth-first visitation order from ``start``.

    Neighbours are explored in adjacency order; each reachable vertex appears
    exactly once, at the moment it is discovered.
    """
    _check_start(start, graph)

    order: List[Vertex[T]] = [start]
    visited: Set[Vertex[T]] = {start}
    queue: Deque[Vertex[T]] = deque([start])

    while queue:
        vertex = queue.popleft()
        for neighbor, _ in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                queue.append(neighbor)

    return order


def dfs(start: Vertex[T], graph: Graph[T]) -> List[Vertex[T]]:
    """Pre-order depth-first visitation order from ``start``.

    Descends into the first unvisited neighbour before backtracking, exactly
    like the recursive formulation, but keeps the frontier on an explicit
    stack of neighbour iterators so deep graphs cannot exhaust the call stack.
    """
    _check_start(start, graph)

    order: List[Vertex[T]] = [start]
    visited: Set[Vertex[T]] = {start}
    stack: List[Iterator[Tuple[Vertex[T], float]]] = [iter(graph.neighbors(start))]

    while stack:
        for neighbor, _ in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            # neighbours exhausted, backtrack
            stack.pop()

    return order


def shortest_path_tree(
    start: Vertex[T], graph: Graph[T]
) -> Tuple[Dict[Vertex[T], float], Dict[Vertex[T], Vertex[T]]]:
    """Run Dijkstra from ``start`` and also record each vertex's settling parent.

    Edge weights must be non-negative; negative weights give undefined results
    and are not checked.

    The queue may hold stale entries for a vertex; only the first pop settles
    it. The loop stops when the queue is empty or every vertex is settled,
    whichever happens first.
    """
    _check_start(start, graph)

    distances: Dict[Vertex[T], float] = {vertex: INFINITY for vertex in graph.vertices}
    predecessors: Dict[Vertex[T], Vertex[T]] = {}
    settled: Set[Vertex[T]] = set()
    total = len(graph)

    # (distance, insertion order, vertex, parent); insertion order breaks ties
    sequence = count()
    queue: List[Tuple[float, int, Vertex[T], Optional[Vertex[T]]]] = [
        (0, next(sequence), start, None)
    ]

    while queue and len(settled) != total:
        distance_u, _, u, parent = heappop(queue)
        if u in settled:
            continue

        settled.add(u)
        distances[u] = distance_u
        if parent is not None:
            predecessors[u] = parent

        for v, weight in graph.neighbors(u):
            if v not in settled:
                heappush(queue, (distance_u + weight, next(sequence), v, u))

    return distances, predecessors


def dijkstra(start: Vertex[T], graph: Graph[T]) -> Dict[Vertex[T], float]:
    """Shortest distance from ``start`` to every vertex; ``INFINITY`` if unreachable."""
    distances, _ = shortest_path_tree(start, graph)
    return distances


def shortest_path(
    start: Vertex[T], target: Vertex[T], graph: Graph[T]
) -> Tuple[float, List[Vertex[T]]]:
    """Recover both length and explicit path between start and target."""
    if target is None or graph is None or target not in graph:
        raise InvalidArgumentError("Target is None or does not exist in the graph.")

    distances, predecessors = shortest_path_tree(start, graph)
    cost = distances[target]
    if cost == INFINITY:
        raise ValueError(f"No path between {start} and {target}.")

    path: List[Vertex[T]] = [target]
    while path[-1] != start:
        path.append(predecessors[path[-1]])
    path.reverse()
    return cost, path


def kruskal(graph: Graph[T]) -> Optional[Set[Edge[T]]]:
    """Minimum spanning tree of an undirected graph, as a set of reciprocal edge pairs.

    The graph is expected to hold every edge in both directions. Each accepted
    edge is added together with its reverse, so a tree over ``n`` vertices has
    ``2 * (n - 1)`` edges. Returns None when the graph is disconnected; an
    empty set is a valid tree for a graph with at most one vertex.

    Edges whose endpoints are already joined in the disjoint set are rejected,
    which keeps self-loops and parallel edges out of the tree.
    """
    if graph is None:
        raise InvalidArgumentError("Graph cannot be None.")

    tree: Set[Edge[T]] = set()
    components: DisjointSet = DisjointSet()
    for vertex in graph.vertices:
        components.find(vertex.data)

    # edge order in the graph breaks weight ties
    queue = [(edge.weight, index, edge) for index, edge in enumerate(graph.edges)]
    heapify(queue)

    target = 2 * (len(graph) - 1)
    while queue and len(tree) < target:
        _, _, edge = heappop(queue)
        if components.union(edge.u.data, edge.v.data):
            tree.add(edge)
            tree.add(edge.reversed())

    if len(tree) < target:
        return None
    return tree


def tree_weight(edges: Iterable[Edge[T]]) -> float:
    """Total weight of a reciprocal edge set, counting each undirected edge once."""
    return sum(edge.weight for edge in edges) / 2
