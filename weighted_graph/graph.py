import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .algorithms import dijkstra, shortest_path

logger = logging.getLogger(__name__)


class WeightedGraph:
    """
    A directed graph with integer node IDs and non-negative integer edge weights.

    Nodes are kept in insertion order, which is also the row and column order
    of the adjacency matrix.
    """

    def __init__(self) -> None:
        self._adjacency_list: Dict[int, Dict[int, int]] = {}  # Stores node -> {neighbor: weight}

    def add_node(self, node_id: int) -> None:
        """
        Adds a node to the graph. Adding an existing node is a no-op.

        Args:
            node_id: The unique identifier for the node.
        """
        if node_id in self._adjacency_list:
            return
        self._adjacency_list[node_id] = {}
        logger.debug("Added node %s", node_id)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """
        Adds a directed edge from node u to node v with a given weight.
        Missing endpoints are added to the graph, and an existing u -> v
        edge has its weight replaced.

        Args:
            u: The starting node of the edge.
            v: The ending node of the edge (may equal u).
            weight: The weight of the edge.

        Raises:
            ValueError: If the weight is negative.
        """
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}.")
        self.add_node(u)
        self.add_node(v)

        self._adjacency_list[u][v] = weight
        logger.debug("Set edge %s -> %s with weight %s", u, v, weight)

    def get_edge_weight(self, u: int, v: int) -> Optional[int]:
        """
        Gets the weight of the edge between u and v.

        Returns:
            The weight of the edge if it exists, otherwise None.
        """
        return self._adjacency_list.get(u, {}).get(v)

    def has_edge(self, u: int, v: int) -> bool:
        """Checks if a directed edge u -> v exists."""
        return v in self._adjacency_list.get(u, {})

    def neighbors(self, node_id: int) -> Iterator[int]:
        """
        Returns an iterator over the successors of a given node.

        Raises:
            ValueError: If the node does not exist.
        """
        if node_id not in self._adjacency_list:
            raise ValueError(f"Node {node_id} does not exist.")
        return iter(self._adjacency_list[node_id])

    def get_all_nodes(self) -> Iterator[int]:
        """Returns an iterator over all node IDs in insertion order."""
        return iter(self._adjacency_list)

    def get_all_edges(self) -> Iterator[Tuple[int, int, int]]:
        """Returns an iterator over (u, v, weight) for every edge."""
        for u, targets in self._adjacency_list.items():
            for v, weight in targets.items():
                yield u, v, weight

    def __contains__(self, node_id: int) -> bool:
        """Checks if a node exists in the graph."""
        return node_id in self._adjacency_list

    def __len__(self) -> int:
        """Returns the number of nodes in the graph."""
        return len(self._adjacency_list)

    def get_nodes_count(self) -> int:
        """Returns the number of nodes in the graph."""
        return len(self._adjacency_list)

    def get_edges_count(self) -> int:
        """Returns the number of edges in the graph."""
        return sum(len(targets) for targets in self._adjacency_list.values())

    def shortest_paths_from(self, source: int) -> Dict[int, Optional[int]]:
        """
        Computes the minimum distance from source to every node with Dijkstra's algorithm.

        Args:
            source: The node to measure distances from.

        Returns:
            A dictionary mapping every node to its distance from source, or to
            None if the node cannot be reached.

        Raises:
            ValueError: If source does not exist in the graph.
        """
        return dijkstra(self, source)

    def shortest_path(self, source: int, target: int) -> Tuple[Optional[int], List[int]]:
        """
        Finds the cheapest path from source to target.

        Returns:
            A tuple (distance, path). Both are (None, []) if target is unreachable.

        Raises:
            ValueError: If either node does not exist in the graph.
        """
        return shortest_path(self, source, target)

    def adjacency_matrix(self) -> Tuple[List[int], List[List[int]]]:
        """
        Projects the graph onto a square matrix.

        Returns:
            A tuple (nodes, rows) where nodes is the insertion-ordered list of
            node IDs and rows[i][j] is the weight of the edge nodes[i] -> nodes[j],
            or 0 if there is no such edge.
        """
        nodes = list(self._adjacency_list)
        rows = [
            [self._adjacency_list[u].get(v, 0) for v in nodes]
            for u in nodes
        ]
        return nodes, rows

    def render_adjacency_matrix(self) -> str:
        """
        Renders the adjacency matrix as a text grid.

        The first line holds the node IDs, each following line starts with a
        node ID followed by its row. Cells are right-aligned to the widest value.
        An empty graph renders as an empty string.
        """
        nodes, rows = self.adjacency_matrix()
        if not nodes:
            return ""

        header = [""] + [str(node) for node in nodes]
        body = [[str(node)] + [str(weight) for weight in row] for node, row in zip(nodes, rows)]
        width = max(len(cell) for line in [header] + body for cell in line)
        return "\n".join(
            " ".join(cell.rjust(width) for cell in line)
            for line in [header] + body
        )

    def __repr__(self) -> str:
        return f"WeightedGraph(nodes={self.get_nodes_count()}, edges={self.get_edges_count()})"
