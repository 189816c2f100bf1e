import logging
import os

import matplotlib.pyplot as plt
import networkx as nx

from graphpaths.config import DEFAULT_PLOT_PATH

logger = logging.getLogger(__name__)

LAYOUTS = {
    "shell": nx.shell_layout,
    "circular": nx.circular_layout,
}


def _layout(G, layout):
    if layout in LAYOUTS:
        return LAYOUTS[layout](G)
    return nx.spring_layout(G, seed=42, k=2.0)  # larger k spreads the nodes


def _path_title(graph, path):
    if not path:
        return "Graph"
    names = " -> ".join(str(graph.label(v)) for v in path)
    return f"Shortest path {path[0]} to {path[-1]}: {names}"


def _draw_path(graph, G, pos, path):
    """Overlay the hops of ``path`` and their weights, path vertices in orange."""
    hops = list(zip(path, path[1:]))
    nx.draw_networkx_nodes(G, pos, nodelist=path, node_color="#FFB347", node_size=600)
    nx.draw_networkx_edges(G, pos, edgelist=hops, width=3.0, edge_color="red",
                           arrows=True, arrowstyle="->", arrowsize=16)
    weights = {(a, b): graph.find_edge(a, b).weight for a, b in hops}
    nx.draw_networkx_edge_labels(G, pos, edge_labels=weights, font_color="red", font_size=10,
                                 bbox=dict(facecolor="white", edgecolor="none", alpha=0.8))


def draw_graph_with_path(graph, path=None, output_path=DEFAULT_PLOT_PATH, layout="spring"):
    """Save a picture of ``graph`` with ``path`` (a list of vertex ids) in red."""
    G = graph.to_networkx()
    pos = _layout(G, layout)

    fig, ax = plt.subplots(figsize=(10, 8))
    nx.draw_networkx(G, pos, ax=ax, node_color="#A0CBE2", node_size=500, font_size=9,
                     labels={v: f"{v}\n{graph.label(v)}" for v in graph.vertices()},
                     arrows=True, arrowstyle="->", arrowsize=12)
    nx.draw_networkx_edge_labels(G, pos, ax=ax, font_size=8,
                                 edge_labels=nx.get_edge_attributes(G, "weight"))
    if path and len(path) > 1:
        _draw_path(graph, G, pos, path)

    ax.set_title(_path_title(graph, path), fontsize=12)
    ax.set_axis_off()
    fig.tight_layout()

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(output_path)
    plt.close(fig)
    logger.info("saved %s", output_path)
    return output_path
