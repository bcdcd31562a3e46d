import networkx as nx
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .graph import WeightedGraph


def to_networkx(graph: WeightedGraph) -> nx.DiGraph:
    """Converts a WeightedGraph to a networkx DiGraph with 'weight' edge attributes."""
    G = nx.DiGraph()
    G.add_nodes_from(graph.get_all_nodes())
    for u, v, weight in graph.get_all_edges():
        G.add_edge(u, v, weight=weight)
    return G


def draw(graph: WeightedGraph, show: bool = True) -> Figure:
    """
    Draws the graph with a circular layout, labelling each edge with its weight.

    Args:
        graph: The graph to draw.
        show: Whether to open the matplotlib window before returning.

    Returns:
        The matplotlib Figure holding the drawing.
    """
    G = to_networkx(graph)
    pos = nx.circular_layout(G)

    fig, ax = plt.subplots(figsize=(6, 6))
    nx.draw_networkx(
        G,
        pos,
        ax=ax,
        with_labels=True,
        node_color="lightblue",
        edge_color="gray",
        node_size=800,
        font_size=10,
        font_weight="bold",
        arrows=True,
    )
    nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"), ax=ax)
    ax.set_title("Weighted Graph")
    ax.set_axis_off()
    fig.tight_layout()
    if show:
        plt.show()
    return fig


if __name__ == '__main__':
    # Build a small graph and draw it
    g = WeightedGraph()
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 2)
    g.add_edge(1, 3, 10)
    g.add_edge(3, 4, 4)
    g.add_node(9)
    draw(g)
