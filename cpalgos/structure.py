"""Graph structure: connectivity, orderings, strong components and successor jumps."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .dp import MOD
from .introductory import NoSolutionError

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge], *, reverse: bool = False) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("cities must lie between 1 and n")
        if reverse:
            adjacency[v].append(u)
        else:
            adjacency[u].append(v)
    return adjacency


def _postorder(n: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first finishing order, starting searches from 1..n in turn."""
    seen = [False] * (n + 1)
    order: list[int] = []
    for source in range(1, n + 1):
        if seen[source]:
            continue
        seen[source] = True
        stack = [(source, iter(adjacency[source]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not seen[v]:
                    seen[v] = True
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                stack.pop()
                order.append(u)
    return order


def _reachable(adjacency: Sequence[Sequence[int]], start: int) -> list[bool]:
    seen = [False] * len(adjacency)
    seen[start] = True
    stack = [start]
    while stack:
        u = stack.pop()
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                stack.append(v)
    return seen


def building_roads(n: int, roads: Iterable[Edge]) -> list[Edge]:
    """Return the fewest new roads that connect all n cities."""
    parent = list(range(n))

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    for a, b in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("cities must lie between 1 and n")
        x, y = find(a - 1), find(b - 1)
        if x != y:
            parent[x] = y
    roots = sorted({find(i) for i in range(n)})
    if not roots:
        return []
    first = roots[0]
    return [(first + 1, root + 1) for root in roots[1:]]


def course_schedule(n: int, requirements: Iterable[Edge]) -> list[int]:
    """Return an order of courses 1..n honouring every (before, after) requirement."""
    adjacency = _adjacency(n, requirements)
    indegree = [0] * (n + 1)
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1
    queue = deque(v for v in range(1, n + 1) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != n:
        raise NoSolutionError("IMPOSSIBLE")
    return order


def flight_route_check(n: int, flights: Iterable[Edge]) -> Edge | None:
    """Return a pair (a, b) with no route from a to b, or None if every route exists."""
    if n < 1:
        raise ValueError("n must be at least 1")
    edges = list(flights)
    forward = _reachable(_adjacency(n, edges), 1)
    missing = next((i for i in range(1, n + 1) if not forward[i]), None)
    if missing is not None:
        return 1, missing
    backward = _reachable(_adjacency(n, edges, reverse=True), 1)
    missing = next((i for i in range(1, n + 1) if not backward[i]), None)
    if missing is not None:
        return missing, 1
    return None


def planets_and_kingdoms(n: int, teleporters: Iterable[Edge]) -> tuple[int, list[int]]:
    """Return the number of strongly connected kingdoms and each planet's kingdom label."""
    edges = list(teleporters)
    order = _postorder(n, _adjacency(n, edges))
    reverse = _adjacency(n, edges, reverse=True)
    label = [0] * (n + 1)
    count = 0
    for source in reversed(order):
        if label[source]:
            continue
        count += 1
        label[source] = count
        stack = [source]
        while stack:
            u = stack.pop()
            for v in reverse[u]:
                if not label[v]:
                    label[v] = count
                    stack.append(v)
    return count, label[1:]


def road_construction(n: int, roads: Iterable[Edge]) -> list[tuple[int, int]]:
    """After each new road, report (number of components, size of the largest one)."""
    parent = list(range(n))
    size = [1] * n
    components, largest = n, 1

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    report: list[tuple[int, int]] = []
    for a, b in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("cities must lie between 1 and n")
        u, v = find(a - 1), find(b - 1)
        if u != v:
            if size[u] < size[v]:
                u, v = v, u
            parent[v] = u
            size[u] += size[v]
            components -= 1
            largest = max(largest, size[u])
        report.append((components, largest))
    return report


def game_routes(n: int, teleporters: Iterable[Edge]) -> int:
    """Count routes from level 1 to level n in an acyclic game, modulo 10**9+7."""
    adjacency = _adjacency(n, teleporters)
    ways = [0] * (n + 1)
    ways[1] = 1
    for u in reversed(_postorder(n, adjacency)):
        for v in adjacency[u]:
            ways[v] = (ways[v] + ways[u]) % MOD
    return ways[n] % MOD


def longest_flight_route(n: int, flights: Iterable[Edge]) -> list[int]:
    """Return a route from city 1 to city n through the most cities, in an acyclic graph."""
    adjacency = _adjacency(n, flights)
    distance = [-1] * (n + 1)
    previous = [-1] * (n + 1)
    distance[1] = 0
    previous[1] = 0
    for u in reversed(_postorder(n, adjacency)):
        if distance[u] == -1:
            continue
        for v in adjacency[u]:
            if distance[v] < distance[u] + 1:
                distance[v] = distance[u] + 1
                previous[v] = u
    if distance[n] == -1:
        raise NoSolutionError("IMPOSSIBLE")
    path: list[int] = []
    city = n
    while city != 0:
        path.append(city)
        city = previous[city]
    path.reverse()
    return path


def planet_queries(successors: Sequence[int], queries: Iterable[Edge]) -> list[int]:
    """Answer (planet, k) queries with the planet reached after k teleports."""
    n = len(successors)
    if any(not 1 <= s <= n for s in successors):
        raise ValueError("successors must lie between 1 and n")
    asked = list(queries)
    if any(not 1 <= u <= n or k < 0 for u, k in asked):
        raise ValueError("queries need a planet in 1..n and a non-negative count")
    jumps = [[0, *successors]]
    longest = max((k for _, k in asked), default=0)
    while (1 << len(jumps)) <= longest:
        last = jumps[-1]
        jumps.append([last[v] for v in last])
    answers: list[int] = []
    for u, k in asked:
        for bit, table in enumerate(jumps):
            if k >> bit & 1:
                u = table[u]
        answers.append(u)
    return answers


__all__: Sequence[str] = (
    "building_roads",
    "course_schedule",
    "flight_route_check",
    "planets_and_kingdoms",
    "road_construction",
    "game_routes",
    "longest_flight_route",
    "planet_queries",
)