import logging

import pytest
from weighted_graph.graph import WeightedGraph
from weighted_graph.menu import GraphMenu, InvalidIntegerInput, MENU_TEXT, main


def make_menu(answers, graph=None):
    """Builds a menu fed from a list of answers, capturing everything it prints."""
    replies = iter(answers)
    printed = []

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    menu = GraphMenu(graph if graph is not None else WeightedGraph(), fake_input, printed.append)
    return menu, printed


class TestGraphMenu:
    def test_add_node_and_edge(self):
        menu, _ = make_menu(["1", "4", "2", "1", "2", "7", "5"])
        menu.run()
        assert list(menu.graph.get_all_nodes()) == [4, 1, 2]
        assert menu.graph.get_edge_weight(1, 2) == 7

    def test_show_matrix(self):
        g = WeightedGraph()
        g.add_edge(1, 2, 4)
        menu, printed = make_menu(["3", "5"], g)
        menu.run()
        assert "  1 2\n1 0 4\n2 0 0" in printed

    def test_show_matrix_empty_graph(self):
        menu, printed = make_menu(["3", "5"])
        menu.run()
        assert "Graph is empty." in printed

    def test_dijkstra_output(self):
        g = WeightedGraph()
        g.add_edge(1, 2, 1)
        g.add_edge(2, 3, 2)
        g.add_edge(1, 3, 10)
        g.add_node(9)
        menu, printed = make_menu(["4", "1", "5"], g)
        menu.run()
        start = printed.index("Distances from node 1:")
        assert printed[start + 1:start + 5] == [
            "Node 1: 0",
            "Node 2: 1",
            "Node 3: 3",
            "Node 9: unreachable",
        ]

    def test_dijkstra_unknown_start_node(self):
        menu, printed = make_menu(["4", "3", "5"])
        menu.run()
        assert "Error: Start node 3 not found in the graph." in printed

    def test_negative_weight_reported(self):
        menu, printed = make_menu(["2", "1", "2", "-5", "5"])
        menu.run()
        assert "Error: Edge weight must be non-negative, got -5." in printed
        assert len(menu.graph) == 0

    def test_non_integer_option(self):
        menu, printed = make_menu(["abc", "5"])
        menu.run()
        assert "Invalid input: please enter an integer." in printed

    def test_non_integer_value(self):
        menu, printed = make_menu(["1", "x", "5"])
        menu.run()
        assert "Invalid input: please enter an integer." in printed
        assert len(menu.graph) == 0

    def test_unknown_option(self):
        menu, printed = make_menu(["8", "5"])
        menu.run()
        assert "Invalid option." in printed

    def test_exit_stops_loop(self):
        menu, printed = make_menu(["5", "1", "3"])
        menu.run()
        assert printed == [MENU_TEXT]
        assert len(menu.graph) == 0

    def test_end_of_input_stops_loop(self):
        menu, printed = make_menu(["1", "2"])
        menu.run()
        assert list(menu.graph.get_all_nodes()) == [2]
        assert printed.count(MENU_TEXT) == 2

    def test_run_once_return_value(self):
        menu, _ = make_menu(["1", "3", "5"])
        assert menu.run_once() is True
        assert menu.run_once() is False

    def test_read_int_strips_whitespace(self):
        menu, _ = make_menu(["  12 "])
        assert menu.read_int("> ") == 12

    def test_read_int_rejects_text(self):
        menu, _ = make_menu(["1.5"])
        with pytest.raises(InvalidIntegerInput):
            menu.read_int("> ")


class TestMain:
    def test_main_runs_menu_on_fresh_graph(self, monkeypatch, capsys):
        answers = iter(["1", "3", "3", "5"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        main()
        out = capsys.readouterr().out
        assert "Menu:" in out
        assert "  3\n3 0" in out

    def test_main_reads_log_level(self, monkeypatch):
        monkeypatch.setenv("WEIGHTED_GRAPH_LOG_LEVEL", "debug")
        captured = {}
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: captured.update(kwargs))
        monkeypatch.setattr("builtins.input", lambda prompt="": "5")
        main()
        assert captured["level"] == logging.DEBUG
