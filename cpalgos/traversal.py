"""Unweighted graph traversals: two-colouring, shortest hops and cycle finding."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .introductory import NoSolutionError

Edge = tuple[int, int]


def _neighbours(n: int, edges: Iterable[Edge], *, directed: bool) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("vertices must lie between 1 and n")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def building_teams(n: int, friendships: Iterable[Edge]) -> list[int]:
    """Assign team 1 or 2 to pupils 1..n so that no two friends share a team.

    Raises NoSolutionError when the friendship graph is not bipartite.
    """
    adjacency = _neighbours(n, friendships, directed=False)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if team[v] == 0:
                    team[v] = 3 - team[u]
                    queue.append(v)
                elif team[v] == team[u]:
                    raise NoSolutionError("IMPOSSIBLE")
    return team[1:]


def message_route(n: int, links: Iterable[Edge]) -> list[int]:
    """Return a route from computer 1 to computer n through the fewest computers."""
    if n < 1:
        raise ValueError("n must be at least 1")
    adjacency = _neighbours(n, links, directed=False)
    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            route = [n]
            while node != 1:
                node = parent[node]
                route.append(node)
            route.reverse()
            return route
        for x in adjacency[node]:
            if not seen[x]:
                seen[x] = True
                parent[x] = node
                queue.append(x)
    raise NoSolutionError("IMPOSSIBLE")


def round_trip(n: int, roads: Iterable[Edge]) -> list[int]:
    """Return a cycle in an undirected simple graph, starting and ending at one city."""
    adjacency = _neighbours(n, roads, directed=False)
    visited = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        path = [start]
        depth = {start: 0}
        stack = [(start, 0, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for x in neighbours:
                if x == parent:
                    continue
                if visited[x]:
                    if x not in depth:
                        raise ValueError("graph must not contain repeated roads")
                    return path[depth[x]:][::-1] + [node]
                visited[x] = True
                depth[x] = len(path)
                path.append(x)
                stack.append((x, node, iter(adjacency[x])))
                break
            else:
                stack.pop()
                del depth[path.pop()]
    raise NoSolutionError("IMPOSSIBLE")


def directed_round_trip(n: int, flights: Iterable[Edge]) -> list[int]:
    """Return a directed cycle, starting and ending at one city."""
    adjacency = _neighbours(n, flights, directed=True)
    state = [0] * (n + 1)  # 0 unseen, 1 on the current path, 2 finished
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(adjacency[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if state[v] == 1:
                    cycle = [v]
                    cur = u
                    while cur != v:
                        cycle.append(cur)
                        cur = parent[cur]
                    cycle.append(v)
                    cycle.reverse()
                    return cycle
                if state[v] == 0:
                    state[v] = 1
                    parent[v] = u
                    stack.append((v, iter(adjacency[v])))
                    break
            else:
                state[u] = 2
                stack.pop()
    raise NoSolutionError("IMPOSSIBLE")


__all__: Sequence[str] = (
    "building_teams",
    "message_route",
    "round_trip",
    "directed_round_trip",
)