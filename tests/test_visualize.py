import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402
from weighted_graph.graph import WeightedGraph  # noqa: E402
from weighted_graph.visualize import draw, to_networkx  # noqa: E402


class TestToNetworkx:
    def test_nodes_and_weights(self):
        g = WeightedGraph()
        g.add_edge(1, 2, 4)
        g.add_edge(2, 1, 9)
        g.add_node(7)
        G = to_networkx(g)
        assert G.is_directed()
        assert list(G.nodes) == [1, 2, 7]
        assert G[1][2]["weight"] == 4
        assert G[2][1]["weight"] == 9
        assert G.number_of_edges() == 2

    def test_self_loop(self):
        g = WeightedGraph()
        g.add_edge(3, 3, 1)
        G = to_networkx(g)
        assert G.has_edge(3, 3)

    def test_empty_graph(self):
        assert to_networkx(WeightedGraph()).number_of_nodes() == 0


class TestDraw:
    def test_draw_returns_figure(self):
        g = WeightedGraph()
        g.add_edge(1, 2, 1)
        g.add_edge(2, 3, 2)
        fig = draw(g, show=False)
        try:
            assert isinstance(fig, Figure)
            assert fig.axes[0].get_title() == "Weighted Graph"
        finally:
            plt.close(fig)
