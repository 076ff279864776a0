from collections import Counter

import pytest

from cpalgos.trees import nearest_shops, postorder_from_pre_in, prufer_decode


def _encode(n, edges):
    neighbours = {v: set() for v in range(1, n + 1)}
    for u, v in edges:
        neighbours[u].add(v)
        neighbours[v].add(u)
    code = []
    for _ in range(n - 2):
        leaf = min(v for v, adj in neighbours.items() if len(adj) == 1)
        (parent,) = neighbours.pop(leaf)
        neighbours[parent].discard(leaf)
        code.append(parent)
    return code


def _connected(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        parent[find(u)] = find(v)
    return len({find(v) for v in range(1, n + 1)}) == 1


@pytest.mark.parametrize(
    "n,code",
    [(5, [2, 2, 4]), (6, [4, 4, 4, 5]), (4, [1, 1]), (7, [7, 6, 5, 4, 3]), (3, [3])],
)
def test_prufer_decode_round_trip(n, code):
    edges = prufer_decode(n, code)
    assert len(edges) == n - 1
    assert _connected(n, edges)
    assert _encode(n, edges) == code


def test_prufer_decode_degrees():
    n, code = 8, [3, 3, 5, 5, 5, 1]
    edges = prufer_decode(n, code)
    degree = Counter(v for edge in edges for v in edge)
    counts = Counter(code)
    for v in range(1, n + 1):
        assert degree[v] == counts[v] + 1


def test_prufer_decode_two_vertices():
    assert prufer_decode(2, []) == [(1, 2)]


def test_prufer_decode_rejects_bad_code():
    with pytest.raises(ValueError):
        prufer_decode(5, [2, 2])
    with pytest.raises(ValueError):
        prufer_decode(4, [1, 9])


def _traversals(tree):
    pre, ino, post = [], [], []

    def walk(node):
        if node is None:
            return
        value, left, right = node
        pre.append(value)
        walk(left)
        ino.append(value)
        walk(right)
        post.append(value)

    walk(tree)
    return pre, ino, post


TREES = [
    (1, (2, (4, None, None), (5, None, None)), (3, None, (6, (7, None, None), None))),
    (1, (2, (3, (4, None, None), None), None), None),
    (1, None, (2, None, (3, None, None))),
    (9, None, None),
]


@pytest.mark.parametrize("tree", TREES)
def test_postorder_from_pre_in(tree):
    pre, ino, post = _traversals(tree)
    assert postorder_from_pre_in(pre, ino) == post


def test_postorder_long_chain():
    n = 5000
    preorder = list(range(1, n + 1))
    inorder = preorder[::-1]
    assert postorder_from_pre_in(preorder, inorder) == inorder


def test_postorder_inconsistent():
    with pytest.raises(ValueError):
        postorder_from_pre_in([1, 2], [3, 1])
    with pytest.raises(ValueError):
        postorder_from_pre_in([1, 2, 3], [1, 2])


def test_nearest_shops_path_single_shop():
    n = 6
    roads = [(i, i + 1) for i in range(1, n)]
    result = nearest_shops(n, roads, [1])
    assert result[0] == -1
    assert result[1:] == list(range(1, n))


def test_nearest_shops_path_two_end_shops():
    n = 7
    roads = [(i, i + 1) for i in range(1, n)]
    result = nearest_shops(n, roads, [1, n])
    assert result[0] == n - 1
    assert result[-1] == n - 1
    assert result[1:-1] == [min(c - 1, n - c) for c in range(2, n)]


def test_nearest_shops_no_roads():
    assert nearest_shops(3, [], [1, 2]) == [-1, -1, -1]


def test_nearest_shops_star_symmetry():
    roads = [(1, leaf) for leaf in range(2, 6)]
    result = nearest_shops(5, roads, [2, 3, 4, 5])
    assert len(set(result[1:])) == 1
    assert result[1] == 2 * result[0]


def test_nearest_shops_rejects_bad_shop():
    with pytest.raises(ValueError):
        nearest_shops(3, [(1, 2)], [4])