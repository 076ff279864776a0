"""Tree problems: Prüfer decoding, traversal reconstruction, nearest shops."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def prufer_decode(n: int, code: Iterable[int]) -> list[tuple[int, int]]:
    """Return the edges of the tree on vertices 1..n with the given Prüfer code."""
    sequence = list(code)
    if n < 2:
        raise ValueError("a tree needs at least two vertices")
    if len(sequence) != n - 2:
        raise ValueError(f"code must have {n - 2} entries")
    if any(not 1 <= x <= n for x in sequence):
        raise ValueError("code entries must lie between 1 and n")
    degree = [0] + [1] * n
    for x in sequence:
        degree[x] += 1
    leaves = [v for v in range(1, n + 1) if degree[v] == 1]
    heapq.heapify(leaves)
    edges: list[tuple[int, int]] = []
    for x in sequence:
        edges.append((heapq.heappop(leaves), x))
        degree[x] -= 1
        if degree[x] == 1:
            heapq.heappush(leaves, x)
    edges.append((heapq.heappop(leaves), n))
    return edges


def postorder_from_pre_in(preorder: Sequence[int], inorder: Sequence[int]) -> list[int]:
    """Return the postorder of the binary tree with the given preorder and inorder."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    position = {value: i for i, value in enumerate(inorder)}
    if len(position) != len(inorder):
        raise ValueError("node labels must be distinct")
    reversed_post: list[int] = []
    stack = [(0, 0, len(inorder))]
    while stack:
        pre_start, in_start, in_end = stack.pop()
        if in_start >= in_end:
            continue
        root = preorder[pre_start]
        pos = position.get(root)
        if pos is None or not in_start <= pos < in_end:
            raise ValueError("traversals do not describe the same tree")
        reversed_post.append(root)
        left_size = pos - in_start
        stack.append((pre_start + 1, in_start, pos))
        stack.append((pre_start + 1 + left_size, pos + 1, in_end))
    return reversed_post[::-1]


def nearest_shops(
    n: int, roads: Iterable[tuple[int, int]], shops: Iterable[int]
) -> list[int]:
    """For each city 1..n, return the distance to the nearest shop in another city.

    A city without such a reachable shop gets -1.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in roads:
        adjacency[u].append(v)
        adjacency[v].append(u)
    shop_cities = list(dict.fromkeys(shops))
    if any(not 1 <= s <= n for s in shop_cities):
        raise ValueError("shop cities must lie between 1 and n")
    labels: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    queue: deque[tuple[int, int, int]] = deque()
    for s in shop_cities:
        labels[s].append((s, 0))
        queue.append((s, s, 0))
    while queue:
        u, source, distance = queue.popleft()
        for v in adjacency[u]:
            found = labels[v]
            if len(found) < 2 and all(source != other for other, _ in found):
                found.append((source, distance + 1))
                queue.append((v, source, distance + 1))
    has_shop = set(shop_cities)
    result: list[int] = []
    for city in range(1, n + 1):
        rank = 1 if city in has_shop else 0
        found = labels[city]
        result.append(found[rank][1] if len(found) > rank else -1)
    return result


__all__: Sequence[str] = ("prufer_decode", "postorder_from_pre_in", "nearest_shops")