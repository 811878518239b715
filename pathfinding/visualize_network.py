import logging
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import networkx as nx  # noqa: E402

from pathfinding import config  # noqa: E402

logger = logging.getLogger(__name__)


def format_path(path, separator=config.PATH_SEPARATOR):
    """Human readable result line for a path, or for a missing one."""
    if path is None:
        return "No path was found"
    return f"Path found: {separator.join(str(node) for node in path)}"


def draw_graph_with_path(G, path=None, output_link=None, layout="spring"):
    """
    Draw G to a PNG file with `path` highlighted in red.

    Returns the file that was written.
    """
    if output_link is None:
        output_link = os.path.join(config.PLOTS_DIR, "shortest_path.png")

    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    elif layout == "circular":
        pos = nx.circular_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0)

    plt.figure(figsize=(10, 8))

    path_nodes = set(path or [])
    node_colors = [
        '#FF6F61' if n in path_nodes else '#A0CBE2'
        for n in G.nodes()
    ]

    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=500)
    nx.draw_networkx_labels(G, pos, font_size=9)
    nx.draw_networkx_edges(G, pos, arrows=True, arrowstyle='->', width=1.0, arrowsize=12)
    edge_labels = nx.get_edge_attributes(G, 'weight')
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

    if path and len(path) > 1:
        path_edges = list(zip(path, path[1:]))
        nx.draw_networkx_edges(
            G, pos, edgelist=path_edges,
            width=3.0, edge_color='red',
            arrows=True, arrowstyle='->', arrowsize=16
        )
        path_labels = {
            edge: edge_labels[edge]
            for edge in path_edges if edge in edge_labels
        }
        nx.draw_networkx_edge_labels(
            G, pos,
            edge_labels=path_labels,
            font_color='red',
            font_size=10,
            bbox=dict(facecolor='white', edgecolor='none', alpha=0.8)
        )

    plt.title(format_path(path), fontsize=12)
    plt.tight_layout()
    directory = os.path.dirname(str(output_link))
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(output_link)
    plt.close()
    logger.info(f"Saved {output_link}")
    return output_link
