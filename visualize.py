from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from flight_graph import FlightGraph
from shortest_paths import RouteTable


def build_networkx_graph(graph: FlightGraph) -> nx.MultiGraph:
    g = nx.MultiGraph()
    for city in graph.cities():
        g.add_node(city.name)
    for index in range(len(graph)):
        origin = graph.name_of(index)
        for flight in graph.neighbors(index):
            # Each flight appears in both adjacency lists; keep one copy.
            # Self-loops never shorten a route and are left out.
            if flight.destination <= index:
                continue
            target = graph.name_of(flight.destination)
            if origin is None or target is None:
                continue
            g.add_edge(
                origin,
                target,
                cost=flight.cost,
                distance=flight.distance,
                duration=flight.duration,
            )
    return g


def cheapest_simple_graph(multi: nx.MultiGraph) -> nx.Graph:
    """Collapse parallel flights, keeping the cheapest one for display."""
    g = nx.Graph()
    g.add_nodes_from(multi.nodes)
    for u, v, data in multi.edges(data=True):
        if g.has_edge(u, v) and g[u][v]["cost"] <= data["cost"]:
            continue
        g.add_edge(u, v, **data)
    return g


def compute_layout(graph: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def node_labels(graph: FlightGraph, cost_table: RouteTable) -> Dict[str, str]:
    labels: Dict[str, str] = {}
    for city in graph.cities():
        cost = (
            str(cost_table[city.index])
            if cost_table.is_reachable(city.index)
            else "n/a"
        )
        labels[city.name] = f"{city.name}\n{cost}"
    return labels


def draw_routes(
    graph: FlightGraph,
    cost_table: RouteTable,
    distance_table: RouteTable,
    output: Path | None = None,
    show: bool = True,
) -> None:
    graph_nx = cheapest_simple_graph(build_networkx_graph(graph))
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    reachable = [
        name for name in graph_nx.nodes if cost_table.is_reachable(graph.index_of(name))
    ]
    unreachable = [name for name in graph_nx.nodes if name not in reachable]

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    if reachable:
        nx.draw_networkx_nodes(
            graph_nx,
            layout,
            nodelist=reachable,
            node_color=[cost_table[graph.index_of(name)] for name in reachable],
            cmap=plt.cm.YlOrRd,
            node_size=600,
            ax=ax,
        )
    if unreachable:
        nx.draw_networkx_nodes(
            graph_nx,
            layout,
            nodelist=unreachable,
            node_color="lightgray",
            node_size=600,
            ax=ax,
        )
    nx.draw_networkx_nodes(
        graph_nx,
        layout,
        nodelist=[cost_table.source],
        node_color="none",
        edgecolors="#1f77b4",
        linewidths=2.5,
        node_size=750,
        ax=ax,
    )

    nx.draw_networkx_labels(
        graph_nx, layout, labels=node_labels(graph, cost_table), font_size=9, ax=ax
    )

    edge_labels = {(u, v): data["cost"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    reached = cost_table.reachable_count
    summary_lines = [
        f"Source: {cost_table.source}",
        f"Reachable cities: {reached - 1} of {len(cost_table) - 1}",
    ]
    finite_distances = [
        distance_table[i] for i in range(len(distance_table)) if distance_table.is_reachable(i)
    ]
    summary_lines.append(f"Farthest reachable: {max(finite_distances):.2f} km")
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Flight Network: Cheapest Cost from Source")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
