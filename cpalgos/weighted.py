"""Weighted graph problems: negative cycles, shortest-route statistics, spanning trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from .dp import MOD
from .introductory import NoSolutionError

WeightedEdge = tuple[int, int, int]


def _weighted(
    n: int, edges: Iterable[WeightedEdge], *, directed: bool
) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("vertices must lie between 1 and n")
        adjacency[a].append((b, w))
        if not directed:
            adjacency[b].append((a, w))
    return adjacency


def negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Return a directed cycle of negative total weight, or None if there is none.

    The cycle starts and ends at the same vertex.
    """
    adjacency = _weighted(n, edges, directed=True)
    distance = [0] * (n + 1)
    predecessor = [0] * (n + 1)
    last: int | None = None
    for _ in range(n):
        last = None
        for u in range(1, n + 1):
            for v, w in adjacency[u]:
                if distance[u] + w < distance[v]:
                    distance[v] = distance[u] + w
                    predecessor[v] = u
                    last = v
    if last is None:
        return None
    x = last
    for _ in range(n):
        x = predecessor[x]
    cycle = [x]
    v = predecessor[x]
    while v != x:
        cycle.append(v)
        v = predecessor[v]
    cycle.append(x)
    cycle.reverse()
    return cycle


def investigation(n: int, flights: Iterable[WeightedEdge]) -> tuple[int, int, int, int]:
    """Study cheapest routes from city 1 to city n.

    Returns (cheapest price, number of cheapest routes modulo 10**9+7,
    fewest flights on a cheapest route, most flights on a cheapest route).
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacency = _weighted(n, flights, directed=True)
    if any(w <= 0 for targets in adjacency for _, w in targets):
        raise ValueError("prices must be positive")
    inf = float("inf")
    price: list[float] = [inf] * (n + 1)
    ways = [0] * (n + 1)
    fewest = [0] * (n + 1)
    most = [0] * (n + 1)
    price[1] = 0
    ways[1] = 1
    heap: list[tuple[int, int]] = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > price[u]:
            continue
        for v, w in adjacency[u]:
            cost = d + w
            if cost < price[v]:
                price[v] = cost
                ways[v] = ways[u]
                fewest[v] = fewest[u] + 1
                most[v] = most[u] + 1
                heapq.heappush(heap, (cost, v))
            elif cost == price[v]:
                ways[v] = (ways[v] + ways[u]) % MOD
                fewest[v] = min(fewest[v], fewest[u] + 1)
                most[v] = max(most[v], most[u] + 1)
    if price[n] == inf:
        raise NoSolutionError("city n cannot be reached")
    return int(price[n]), ways[n] % MOD, fewest[n], most[n]


def road_reparation(n: int, roads: Iterable[WeightedEdge]) -> int:
    """Return the least total cost of repairs that connects all n cities."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacency = _weighted(n, roads, directed=False)
    visited = [False] * (n + 1)
    heap: list[tuple[int, int]] = [(0, 1)]
    total = 0
    reached = 0
    while heap:
        cost, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += cost
        reached += 1
        for v, w in adjacency[u]:
            if not visited[v]:
                heapq.heappush(heap, (w, v))
    if reached < n:
        raise NoSolutionError("IMPOSSIBLE")
    return total


__all__: Sequence[str] = ("negative_cycle", "investigation", "road_reparation")