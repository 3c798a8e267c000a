from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import yaml

from graph import Edge, Graph, Vertex
from graph_algorithms import INFINITY, bfs, dfs, dijkstra, kruskal, shortest_path, tree_weight


ALGORITHMS = ("bfs", "dfs", "dijkstra", "kruskal")


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def format_path(path: Iterable[Vertex]) -> str:
    return " -> ".join(str(vertex) for vertex in path)


def format_distance(distance: float) -> str:
    if distance == INFINITY:
        return "inf"
    return f"{distance:.2f}"


def undirected_edges(tree: Iterable[Edge]) -> List[Edge]:
    """Keep one edge of every reciprocal pair, lightest first."""
    seen = set()
    unique: List[Edge] = []
    for edge in sorted(tree, key=lambda e: (e.weight, str(e.u), str(e.v))):
        if edge.reversed() in seen:
            continue
        seen.add(edge)
        unique.append(edge)
    return unique


def run_algorithms(
    graph: Graph,
    names: Sequence[str],
    start: Optional[Vertex],
    target: Optional[Vertex] = None,
) -> Dict[str, Any]:
    results: Dict[str, Any] = {}
    for name in names:
        if name == "bfs":
            results["bfs"] = bfs(start, graph)
        elif name == "dfs":
            results["dfs"] = dfs(start, graph)
        elif name == "dijkstra":
            results["dijkstra"] = dijkstra(start, graph)
            if target is not None:
                try:
                    results["path"] = shortest_path(start, target, graph)
                except ValueError:
                    results["path"] = None
        elif name == "kruskal":
            results["kruskal"] = kruskal(graph)
        else:
            raise ValueError(f"Unknown algorithm: {name}")
    return results


def print_results(results: Dict[str, Any]) -> None:
    for name in ("bfs", "dfs"):
        if name in results:
            print(f"=== {name.upper()} Visitation Order ===")
            print(format_path(results[name]))
            print()

    if "dijkstra" in results:
        print("=== Dijkstra Shortest Distances ===")
        for vertex, distance in results["dijkstra"].items():
            print(f"  {vertex}: {format_distance(distance)}")
        if "path" in results:
            found = results["path"]
            if found is None:
                print("  Target is unreachable from the start vertex.")
            else:
                cost, path = found
                print(f"  Shortest path {format_path(path)} (cost {cost:.2f})")
        print()

    if "kruskal" in results:
        print("=== Kruskal Minimum Spanning Tree ===")
        tree = results["kruskal"]
        if tree is None:
            print("No spanning tree: graph is disconnected.")
        else:
            for edge in undirected_edges(tree):
                print(f"  {edge.u} - {edge.v} ({edge.weight})")
            print(f"Total weight: {tree_weight(tree):.2f}")
        print()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run classic graph algorithms on a YAML graph instance."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument(
        "--algorithm",
        action="append",
        choices=ALGORITHMS,
        help="Algorithm to run; repeat for several. Defaults to all.",
    )
    parser.add_argument("--start", help="Start vertex for bfs, dfs and dijkstra.")
    parser.add_argument("--target", help="Optional target for a Dijkstra shortest path.")
    parser.add_argument(
        "--visualize",
        type=Path,
        help="Save a static figure of the graph, its MST and distances to this path.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config) or {}
    algorithm_config = config.get("algorithms") or {}
    names = args.algorithm or list(ALGORITHMS)

    try:
        if "graph" not in config:
            raise ValueError("Missing key in configuration: graph")
        graph = Graph.from_config(config["graph"])

        start_data = args.start if args.start is not None else algorithm_config.get("start")
        target_data = args.target if args.target is not None else algorithm_config.get("target")
        needs_start = any(name != "kruskal" for name in names)
        if needs_start and start_data is None:
            raise ValueError("A start vertex is required (--start or algorithms.start).")
        start = graph.vertex(start_data) if start_data is not None else None
        target = graph.vertex(target_data) if target_data is not None else None
    except ValueError as exc:
        parser.error(str(exc))

    results = run_algorithms(graph, names, start, target)
    print_results(results)

    if args.visualize:
        from visualize import build_networkx_graph, compute_layout, draw_static_figure

        graph_nx = build_networkx_graph(graph)
        draw_static_figure(
            graph_nx=graph_nx,
            layout=compute_layout(graph_nx),
            mst=results.get("kruskal"),
            distances=results.get("dijkstra"),
            output=args.visualize,
            show=False,
        )
        print(f"Visualisation stored at: {args.visualize}")


if __name__ == "__main__":
    main()
