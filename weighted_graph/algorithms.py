import heapq
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

if TYPE_CHECKING:
    from .graph import WeightedGraph

logger = logging.getLogger(__name__)

# Distance reported for nodes that cannot be reached from the start node
UNREACHABLE = None


def _relax_from(
    graph: "WeightedGraph",
    start_node: int,
    end_node: Optional[int] = None
) -> Tuple[Dict[int, Optional[int]], Dict[int, Optional[int]]]:
    """
    Runs Dijkstra's main loop from start_node.

    The frontier is a binary heap that may hold several entries for the same
    node; entries for already finalized nodes are discarded when popped.
    If end_node is given the loop stops as soon as it is finalized.

    Returns:
        A tuple (distances, predecessors). Every node of the graph is a key of
        distances, unreached nodes map to UNREACHABLE.
    """
    distances: Dict[int, Optional[int]] = {node: UNREACHABLE for node in graph.get_all_nodes()}
    predecessors: Dict[int, Optional[int]] = {start_node: None}
    distances[start_node] = 0

    visited: Set[int] = set()
    # Priority queue stores (distance, node_id)
    priority_queue: List[Tuple[int, int]] = [(0, start_node)]

    while priority_queue:
        current_distance, current_node = heapq.heappop(priority_queue)

        # Stale entry
        if current_node in visited:
            continue
        visited.add(current_node)

        if end_node is not None and current_node == end_node:
            break

        for neighbor in graph.neighbors(current_node):
            distance = current_distance + graph.get_edge_weight(current_node, neighbor)
            known = distances[neighbor]
            if known is UNREACHABLE or distance < known:
                distances[neighbor] = distance
                predecessors[neighbor] = current_node
                heapq.heappush(priority_queue, (distance, neighbor))

    logger.debug("Dijkstra from %s finalized %d of %d nodes", start_node, len(visited), len(distances))
    return distances, predecessors


def dijkstra(graph: "WeightedGraph", start_node: int) -> Dict[int, Optional[int]]:
    """
    Calculates the shortest distance from start_node to every node of the graph.

    Args:
        graph: The graph on which to perform the algorithm. Edge weights are
               non-negative, which the graph enforces on insertion.
        start_node: The starting node.

    Returns:
        A dictionary mapping each node, in graph order, to its shortest distance
        from start_node. Unreachable nodes map to UNREACHABLE (None).

    Raises:
        ValueError: If the start_node does not exist in the graph.
    """
    if start_node not in graph:
        raise ValueError(f"Start node {start_node} not found in the graph.")

    distances, _ = _relax_from(graph, start_node)
    return distances


def shortest_path(
    graph: "WeightedGraph",
    start_node: int,
    end_node: int
) -> Tuple[Optional[int], List[int]]:
    """
    Calculates the shortest path from start_node to end_node.

    Returns:
        A tuple containing:
        - distance: The shortest distance to end_node, or None if not reachable.
        - path: The nodes from start_node to end_node inclusive. Empty if not
                reachable, [start_node] if start_node is end_node.

    Raises:
        ValueError: If the start_node does not exist in the graph.
        ValueError: If the end_node does not exist in the graph.
    """
    if start_node not in graph:
        raise ValueError(f"Start node {start_node} not found in the graph.")
    if end_node not in graph:
        raise ValueError(f"End node {end_node} not found in the graph.")

    distances, predecessors = _relax_from(graph, start_node, end_node)
    if distances[end_node] is UNREACHABLE:
        return None, []

    path: List[int] = []
    curr: Optional[int] = end_node
    while curr is not None:
        path.append(curr)
        curr = predecessors[curr]
    path.reverse()
    return distances[end_node], path
