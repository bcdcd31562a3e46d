"""
Interactive menu for weighted_graph

Reads integers from the user and dispatches them to a WeightedGraph:

1. Add node
2. Add edge
3. Show adjacency matrix
4. Dijkstra
5. Exit

Execution (from the project root directory):
  `python -m weighted_graph.menu`

or, once installed, `weighted-graph`. Set WEIGHTED_GRAPH_LOG_LEVEL (e.g. DEBUG)
to see the graph operations being logged to stderr.
"""

import logging
import os
from typing import Callable, Dict, Optional

from .graph import WeightedGraph

logger = logging.getLogger(__name__)

MENU_TEXT = (
    "\nMenu:\n"
    "1. Add node\n"
    "2. Add edge\n"
    "3. Show adjacency matrix\n"
    "4. Dijkstra\n"
    "5. Exit"
)

EXIT_OPTION = 5


class InvalidIntegerInput(ValueError):
    """Raised when the user types something that is not an integer."""


class GraphMenu:
    """Text menu driving a single WeightedGraph owned by the caller."""

    def __init__(
        self,
        graph: WeightedGraph,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.graph = graph
        self._input = input_func or input
        self._output = output_func or print
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_node,
            2: self.add_edge,
            3: self.show_matrix,
            4: self.show_distances,
        }

    def read_int(self, prompt: str) -> int:
        """Prompts once and parses the answer as an integer."""
        raw = self._input(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidIntegerInput(f"{raw!r} is not an integer.") from None

    def add_node(self) -> None:
        self.graph.add_node(self.read_int("Enter the node value: "))

    def add_edge(self) -> None:
        origin = self.read_int("Enter the origin node: ")
        destination = self.read_int("Enter the destination node: ")
        weight = self.read_int("Enter the edge weight: ")
        self.graph.add_edge(origin, destination, weight)

    def show_matrix(self) -> None:
        matrix = self.graph.render_adjacency_matrix()
        self._output(matrix if matrix else "Graph is empty.")

    def show_distances(self) -> None:
        source = self.read_int("Enter the start node for Dijkstra: ")
        distances = self.graph.shortest_paths_from(source)
        self._output(f"Distances from node {source}:")
        for node, distance in distances.items():
            shown = "unreachable" if distance is None else distance
            self._output(f"Node {node}: {shown}")

    def run_once(self) -> bool:
        """
        Shows the menu and handles one selection.

        Returns:
            False once the user chose to exit, True otherwise.

        Raises:
            EOFError: If the input stream is exhausted.
        """
        self._output(MENU_TEXT)
        try:
            option = self.read_int("Select an option: ")
        except InvalidIntegerInput:
            self._output("Invalid input: please enter an integer.")
            return True

        if option == EXIT_OPTION:
            return False

        action: Optional[Callable[[], None]] = self._actions.get(option)
        if action is None:
            self._output("Invalid option.")
            return True

        try:
            action()
        except InvalidIntegerInput:
            self._output("Invalid input: please enter an integer.")
        except ValueError as e:
            # Negative weight, unknown start node
            logger.debug("Graph operation %d rejected: %s", option, e)
            self._output(f"Error: {e}")
        return True

    def run(self) -> None:
        """Loops until the user exits or input runs out."""
        logger.info("Menu session started")
        try:
            while self.run_once():
                pass
        except EOFError:
            logger.info("Input closed, leaving menu")
        logger.info("Menu session ended: %r", self.graph)


def main() -> None:
    level_name = os.environ.get("WEIGHTED_GRAPH_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    GraphMenu(WeightedGraph()).run()


if __name__ == '__main__':
    main()
