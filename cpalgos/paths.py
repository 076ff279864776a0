"""Shortest and longest routes in weighted directed and undirected graphs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from .introductory import NoSolutionError

WeightedEdge = tuple[int, int, int]
Adjacency = list[list[tuple[int, int]]]


def _directed(n: int, edges: Iterable[WeightedEdge]) -> tuple[Adjacency, Adjacency]:
    """Build forward and reverse adjacency lists over vertices 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    forward: Adjacency = [[] for _ in range(n + 1)]
    backward: Adjacency = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("vertices must lie between 1 and n")
        forward[a].append((b, w))
        backward[b].append((a, w))
    return forward, backward


def _require_non_negative(adjacency: Adjacency) -> None:
    if any(w < 0 for targets in adjacency for _, w in targets):
        raise ValueError("weights must not be negative")


def _dijkstra(adjacency: Adjacency, source: int) -> list[int | None]:
    """Cheapest distance from source to every vertex; None where unreachable."""
    distance: list[int | None] = [None] * len(adjacency)
    distance[source] = 0
    heap: list[tuple[int, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if distance[u] is not None and d > distance[u]:
            continue
        for v, w in adjacency[u]:
            candidate = d + w
            current = distance[v]
            if current is None or candidate < current:
                distance[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distance


def _reachable(adjacency: Adjacency, start: int) -> list[bool]:
    seen = [False] * len(adjacency)
    seen[start] = True
    stack = [start]
    while stack:
        u = stack.pop()
        for v, _ in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                stack.append(v)
    return seen


def shortest_routes(n: int, flights: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the cheapest price from city 1 to each city 1..n; None where unreachable."""
    forward, _ = _directed(n, flights)
    _require_non_negative(forward)
    return _dijkstra(forward, 1)[1:]


def all_pairs_shortest_routes(
    n: int, roads: Iterable[WeightedEdge], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer (a, b) queries with the shortest two-way road distance, or -1 if none."""
    if n < 1:
        raise ValueError("n must be at least 1")
    inf = float("inf")
    dist: list[list[float]] = [[inf] * n for _ in range(n)]
    for a, b, c in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("cities must lie between 1 and n")
        best = min(c, dist[a - 1][b - 1])
        dist[a - 1][b - 1] = dist[b - 1][a - 1] = best
    for i in range(n):
        dist[i][i] = 0
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == inf:
                continue
            for j, d in enumerate(through):
                if via + d < row[j]:
                    row[j] = via + d
    answers: list[int] = []
    for a, b in queries:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("cities must lie between 1 and n")
        d = dist[a - 1][b - 1]
        answers.append(-1 if d == inf else int(d))
    return answers


def flight_discount(n: int, flights: Iterable[WeightedEdge]) -> int:
    """Return the cheapest route from 1 to n when one flight may be taken at half price.

    The halved price is rounded down. Raises NoSolutionError if no route exists.
    """
    edges = list(flights)
    forward, backward = _directed(n, edges)
    _require_non_negative(forward)
    from_start = _dijkstra(forward, 1)
    to_end = _dijkstra(backward, n)
    best: int | None = None
    for a, b, c in edges:
        head, tail = from_start[a], to_end[b]
        if head is None or tail is None:
            continue
        total = head + tail + c // 2
        if best is None or total < best:
            best = total
    if best is None:
        raise NoSolutionError("no route from city 1 to city n")
    return best


def k_shortest_routes(n: int, flights: Iterable[WeightedEdge], k: int) -> list[int]:
    """Return the prices of the k cheapest routes from 1 to n, in increasing order.

    Routes may repeat cities. Fewer than k prices are returned when fewer routes exist.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    forward, _ = _directed(n, flights)
    _require_non_negative(forward)
    popped = [0] * (n + 1)
    prices: list[int] = []
    heap: list[tuple[int, int]] = [(0, 1)]
    while heap and popped[n] < k:
        d, u = heapq.heappop(heap)
        if popped[u] == k:
            continue
        popped[u] += 1
        if u == n:
            prices.append(d)
        for v, w in forward[u]:
            heapq.heappush(heap, (d + w, v))
    return prices


def high_score(n: int, tunnels: Iterable[WeightedEdge]) -> int | None:
    """Return the largest score of a route from room 1 to room n.

    Returns None when the score can grow without bound; raises NoSolutionError
    when room n cannot be reached.
    """
    forward, backward = _directed(n, tunnels)
    from_start = _reachable(forward, 1)
    to_end = _reachable(backward, n)
    if not from_start[n]:
        raise NoSolutionError("room n cannot be reached")
    score: list[int | None] = [None] * (n + 1)
    score[1] = 0
    for round_number in range(n + 1):
        for u in range(1, n + 1):
            base = score[u]
            if base is None:
                continue
            for v, w in forward[u]:
                current = score[v]
                if current is None or base + w > current:
                    if round_number >= n and from_start[v] and to_end[v]:
                        return None
                    score[v] = base + w
    result = score[n]
    assert result is not None
    return result


__all__: Sequence[str] = (
    "shortest_routes",
    "all_pairs_shortest_routes",
    "flight_discount",
    "k_shortest_routes",
    "high_score",
)