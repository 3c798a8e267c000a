from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Hashable, List, Optional, Sequence, Set, Tuple

import matplotlib.pyplot as plt
from matplotlib import animation
import networkx as nx

from graph import Edge, Graph, Vertex
from graph_algorithms import INFINITY, bfs, dfs, dijkstra, kruskal, tree_weight
from main import load_config


def build_networkx_graph(graph: Graph) -> nx.Graph:
    """Mirror ``graph`` in networkx, collapsing reciprocal pairs when undirected."""
    g = nx.Graph() if graph.is_undirected() else nx.DiGraph()
    g.add_nodes_from(vertex.data for vertex in graph.vertices)
    for edge in graph.edges:
        g.add_edge(edge.u.data, edge.v.data, weight=edge.weight)
    return g


def compute_layout(graph: nx.Graph) -> Dict[Hashable, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def tree_edges(mst: Optional[Set[Edge]]) -> List[Tuple[Hashable, Hashable]]:
    if not mst:
        return []
    return [(edge.u.data, edge.v.data) for edge in mst]


def distance_labels(
    graph: nx.Graph, distances: Optional[Dict[Vertex, float]]
) -> Dict[Hashable, str]:
    labels: Dict[Hashable, str] = {node: str(node) for node in graph.nodes}
    if distances:
        for vertex, distance in distances.items():
            shown = "inf" if distance == INFINITY else f"{distance:g}"
            labels[vertex.data] = f"{vertex.data}\nd={shown}"
    return labels


def draw_static_figure(
    graph_nx: nx.Graph,
    layout: Dict[Hashable, Tuple[float, float]],
    mst: Optional[Set[Edge]],
    distances: Optional[Dict[Vertex, float]],
    output: Path | None,
    show: bool,
) -> None:
    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    highlighted = tree_edges(mst)
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    nx.draw_networkx_nodes(graph_nx, layout, node_color="#9ecae1", node_size=700, ax=ax)
    nx.draw_networkx_labels(
        graph_nx, layout, labels=distance_labels(graph_nx, distances), font_size=9, ax=ax
    )

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    if mst is None:
        summary = "MST: none (graph is disconnected)"
    else:
        summary = f"MST weight: {tree_weight(mst):g}"
    ax.text(
        1.02,
        0.5,
        summary,
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Graph Overview – Minimum Spanning Tree and Distances")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def animate_traversal(
    graph_nx: nx.Graph,
    layout: Dict[Hashable, Tuple[float, float]],
    order: Sequence[Vertex],
    title: str,
    output: Path | None,
    show: bool,
) -> None:
    """Animate the visitation order, one frame per visited vertex."""
    if not order:
        return

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)
    nx.draw_networkx_nodes(graph_nx, layout, node_color="lightgray", node_size=500, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    visited_marker = ax.scatter([], [], s=500, c="#2ca02c", zorder=3)
    current_marker = ax.scatter([], [], s=650, c="#ff7f0e", zorder=4)
    status_text = ax.text(
        0.02,
        0.98,
        "",
        transform=ax.transAxes,
        va="top",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(title)

    nodes = [vertex.data for vertex in order]

    def init():
        visited_marker.set_offsets([[float("nan"), float("nan")]])
        current_marker.set_offsets([[float("nan"), float("nan")]])
        status_text.set_text("")
        return visited_marker, current_marker, status_text

    def update(frame: int):
        node = nodes[frame]
        visited_marker.set_offsets([layout[n] for n in nodes[: frame + 1]])
        current_marker.set_offsets([layout[node]])
        status_text.set_text(
            "\n".join(
                [
                    f"Step {frame + 1}/{len(nodes)}",
                    f"Visiting: {node}",
                    f"Order: {' -> '.join(str(n) for n in nodes[: frame + 1])}",
                ]
            )
        )
        return visited_marker, current_marker, status_text

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(nodes),
        init_func=init,
        interval=800,
        blit=False,
    )

    if output:
        output_path = Path(output)
        suffix = output_path.suffix.lower()
        if suffix == ".gif":
            writer = animation.PillowWriter(fps=1)
            anim.save(output_path, writer=writer)
        elif suffix in {".mp4", ".m4v"}:
            writer = animation.FFMpegWriter(fps=1)
            anim.save(output_path, writer=writer)
        else:
            anim.save(output_path)

    if show:
        plt.show()
    else:
        plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Visualise a graph instance, its MST, distances and traversal order."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument("--start", help="Start vertex for the traversal and distances.")
    parser.add_argument(
        "--traversal",
        choices=("bfs", "dfs"),
        default="bfs",
        help="Traversal to animate.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and MST.",
    )
    parser.add_argument(
        "--animation-out",
        type=Path,
        help="Optional path to save an animation (GIF/MP4) of the traversal.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config) or {}
    algorithm_config = config.get("algorithms") or {}
    try:
        if "graph" not in config:
            raise ValueError("Missing key in configuration: graph")
        graph = Graph.from_config(config["graph"])
        start_data = args.start if args.start is not None else algorithm_config.get("start")
        if start_data is None:
            raise ValueError("A start vertex is required (--start or algorithms.start).")
        start = graph.vertex(start_data)
    except ValueError as exc:
        parser.error(str(exc))

    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)
    show = not args.no_show

    draw_static_figure(
        graph_nx=graph_nx,
        layout=layout,
        mst=kruskal(graph),
        distances=dijkstra(start, graph),
        output=args.static_out,
        show=show,
    )

    traverse = bfs if args.traversal == "bfs" else dfs
    animate_traversal(
        graph_nx=graph_nx,
        layout=layout,
        order=traverse(start, graph),
        title=f"{args.traversal.upper()} Traversal from {start}",
        output=args.animation_out,
        show=show,
    )


if __name__ == "__main__":
    main()
