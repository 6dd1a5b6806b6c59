"""Shortest-path computation using Dijkstra's algorithm.

The functions here operate purely on integer node ids and an adjacency
list, so they know nothing about location names. ``LocationGraph``
translates names to ids before calling them and back afterwards.

The frontier is a binary heap of ``(distance, node_id)`` pairs. Instead
of a decrease-key operation a relaxed node is pushed again, and stale
entries are skipped when popped because the node is already visited.
"""

import heapq
from typing import List, Optional, Sequence, Tuple

# Adjacency list: index -> list of (neighbor_id, weight)
Adjacency = Sequence[Sequence[Tuple[int, int]]]

INF = float("inf")


def single_source(
    adjacency: Adjacency, source: int
) -> Tuple[List[Optional[int]], List[Optional[int]]]:
    """Run Dijkstra from ``source`` over the whole graph.

    Parameters
    ----------
    adjacency:
        Adjacency list indexed by node id.
    source:
        Id of the start node.

    Returns
    -------
    list[int | None], list[int | None]
        ``dist`` and ``parent`` lists indexed by node id. ``dist[i]`` is
        None when ``i`` is unreachable; ``parent[i]`` is None for the
        source and for unreachable nodes.
    """
    n = len(adjacency)
    distances: List[float] = [INF] * n
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n
    distances[source] = 0

    heap: List[Tuple[float, int]] = [(0, source)]

    while heap:
        _, u = heapq.heappop(heap)

        if visited[u]:
            continue

        visited[u] = True

        for v, weight in adjacency[u]:
            new_distance = distances[u] + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                parent[v] = u
                heapq.heappush(heap, (new_distance, v))

    dist: List[Optional[int]] = [
        None if d == INF else int(d) for d in distances
    ]
    return dist, parent


def reconstruct_path(
    parent: Sequence[Optional[int]], source: int, target: int
) -> List[int]:
    """Walk parent pointers back from ``target`` and return ids in travel order.

    The caller must only ask for targets that were reached from ``source``.
    """
    path: List[int] = []
    current: Optional[int] = target
    while current is not None:
        path.append(current)
        if current == source:
            break
        current = parent[current]

    path.reverse()
    return path


def dijkstra(
    adjacency: Adjacency, source: int, target: int
) -> Tuple[List[int], Optional[int]]:
    """Compute the shortest path between two node ids.

    Returns
    -------
    list[int], int | None
        The node ids from ``source`` to ``target`` (inclusive) and the
        total distance. If no path exists, returns ``([], None)``.
    """
    dist, parent = single_source(adjacency, source)

    if dist[target] is None:
        return [], None

    return reconstruct_path(parent, source, target), dist[target]
