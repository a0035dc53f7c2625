"""Breadth-first search, cycle detection, topological order and shortest paths.

Adjacency lists are sequences indexed by node number, each holding the
node's successors.
"""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Callable, Iterable, Sequence

Adjacency = Sequence[Sequence[int]]

_UNSEEN, _ACTIVE, _DONE = 0, 1, 2


def _topological_order(count: int, successors: Callable[[int], Iterable[int]]) -> list[int]:
    """Reverse post-order of a depth-first walk over nodes ``0..count-1``.

    Raises ValueError if a cycle is found.
    """
    state = [_UNSEEN] * count
    postorder: list[int] = []
    for root in range(count):
        if state[root] != _UNSEEN:
            continue
        state[root] = _ACTIVE
        stack = [(root, iter(successors(root)))]
        while stack:
            node, pending = stack[-1]
            for following in pending:
                if state[following] == _ACTIVE:
                    raise ValueError("graph has a cycle")
                if state[following] == _UNSEEN:
                    state[following] = _ACTIVE
                    stack.append((following, iter(successors(following))))
                    break
            else:
                stack.pop()
                state[node] = _DONE
                postorder.append(node)
    postorder.reverse()
    return postorder


def bfs(adjacency: Adjacency) -> list[int]:
    """Nodes reachable from node 0, in breadth-first order."""
    if not adjacency:
        return []
    order: list[int] = []
    visited = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def is_cyclic(adjacency: Adjacency) -> bool:
    """True if the directed graph has a cycle (Kahn's algorithm)."""
    indegree = [0] * len(adjacency)
    for successors in adjacency:
        for node in successors:
            indegree[node] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    processed = 0
    while queue:
        node = queue.popleft()
        processed += 1
        for following in adjacency[node]:
            indegree[following] -= 1
            if indegree[following] == 0:
                queue.append(following)
    return processed != len(adjacency)


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Weight of a minimum spanning tree over the points under Manhattan
    distance (Prim's algorithm)."""
    count = len(points)
    if count == 0:
        return 0
    weights: list[float] = [math.inf] * count
    weights[0] = 0
    in_tree = [False] * count
    total = 0
    for _ in range(count):
        current = min((i for i in range(count) if not in_tree[i]), key=lambda i: weights[i])
        in_tree[current] = True
        total += int(weights[current])
        cx, cy = points[current][0], points[current][1]
        for index, point in enumerate(points):
            if in_tree[index]:
                continue
            distance = abs(cx - point[0]) + abs(cy - point[1])
            if distance < weights[index]:
                weights[index] = distance
    return total


def shortest_path_dag(node_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Shortest distances from node 0 in a weighted DAG.

    ``edges`` holds ``(source, target, weight)`` triples. Unreachable nodes
    get -1. Raises ValueError if the graph has a cycle.
    """
    if node_count == 0:
        return []
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, weight in edges:
        adjacency[source].append((target, weight))
    order = _topological_order(node_count, lambda node: (t for t, _ in adjacency[node]))
    distance: list[int | None] = [None] * node_count
    distance[0] = 0
    for node in order:
        here = distance[node]
        if here is None:
            continue
        for target, weight in adjacency[node]:
            candidate = here + weight
            if distance[target] is None or candidate < distance[target]:
                distance[target] = candidate
    return [-1 if d is None else d for d in distance]


def shortest_path_undirected(
    edges: Iterable[Sequence[int]], node_count: int, source: int
) -> list[int]:
    """Hop counts from ``source`` in an undirected unweighted graph; -1 if
    a node cannot be reached."""
    neighbours: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        neighbours[a].append(b)
        neighbours[b].append(a)
    distance = [-1] * node_count
    distance[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for other in neighbours[node]:
            if distance[other] == -1:
                distance[other] = distance[node] + 1
                queue.append(other)
    return distance


def topological_sort(adjacency: Adjacency) -> list[int]:
    """All nodes ordered so every edge goes from an earlier to a later node.

    Raises ValueError if the graph has a cycle.
    """
    return _topological_order(len(adjacency), lambda node: adjacency[node])