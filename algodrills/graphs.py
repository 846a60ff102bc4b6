"""Graph traversal drills: adjacency searches, reachability and grid flood fills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build sorted undirected neighbour lists for vertices numbered 1..n."""
    if n < 0:
        raise ValueError("vertex count must not be negative")
    neighbours: list[set[int]] = [set() for _ in range(n + 1)]
    for a, b in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} outside 1..{n}")
        neighbours[a].add(b)
        neighbours[b].add(a)
    return [sorted(found) for found in neighbours]


def _check_vertex(n: int, vertex: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def _depth_first(adjacency: list[list[int]], start: int) -> list[int]:
    """Visit order of a depth-first search taking neighbours in ascending order."""
    seen = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()
    return order


def _breadth_first(adjacency: list[list[int]], start: int) -> list[int]:
    """Visit order of a breadth-first search taking neighbours in ascending order."""
    seen = {start}
    order = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nxt in adjacency[vertex]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return order


def dfs_bfs_order(n: int, edges: Iterable[Edge], start: int) -> tuple[list[int], list[int]]:
    """Return the depth-first and breadth-first visit orders from ``start``.

    Vertices are numbered from 1; smaller neighbours are visited first.
    """
    adjacency = _adjacency(n, edges)
    _check_vertex(n, start)
    return _depth_first(adjacency, start), _breadth_first(adjacency, start)


def count_reachable(n: int, edges: Iterable[Edge], start: int = 1) -> int:
    """Count the vertices reachable from ``start``, not counting ``start`` itself."""
    adjacency = _adjacency(n, edges)
    _check_vertex(n, start)
    return len(_depth_first(adjacency, start)) - 1


def count_components(n: int, edges: Iterable[Edge]) -> int:
    """Count the connected components of an undirected graph on vertices 1..n."""
    adjacency = _adjacency(n, edges)
    seen: set[int] = set()
    components = 0
    for vertex in range(1, n + 1):
        if vertex in seen:
            continue
        components += 1
        seen.update(_breadth_first(adjacency, vertex))
    return components


def reachability_matrix(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a matrix whose cell (i, j) is 1 when a path i -> j of length >= 1 exists.

    ``graph`` is a square directed adjacency matrix. Self-loops are not followed,
    so a vertex reaches itself only through a cycle over other vertices.
    """
    rows = [list(row) for row in graph]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")

    successors = [
        [j for j, cell in enumerate(row) if cell == 1 and j != i]
        for i, row in enumerate(rows)
    ]
    result = [[0] * size for _ in range(size)]
    for source in range(size):
        seen: set[int] = set(successors[source])
        queue = deque(successors[source])
        while queue:
            vertex = queue.popleft()
            for nxt in successors[vertex]:
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        for target in seen:
            result[source][target] = 1
    return result


def _region_sizes(grid: Iterable[Iterable[int | str]]) -> list[int]:
    """Sizes of 4-connected regions of cells equal to 1, in row-major discovery order."""
    cells = [[int(cell) for cell in row] for row in grid]
    filled = {(r, c) for r, row in enumerate(cells) for c, cell in enumerate(row) if cell == 1}
    sizes = []
    for origin in sorted(filled):
        if origin not in filled:
            continue
        filled.discard(origin)
        size = 0
        stack = [origin]
        while stack:
            r, c = stack.pop()
            size += 1
            for cell in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if cell in filled:
                    filled.discard(cell)
                    stack.append(cell)
        sizes.append(size)
    return sizes


def paintings(grid: Iterable[Iterable[int | str]]) -> tuple[int, int]:
    """Return the number of pictures (regions of 1s) and the largest one's area.

    The area is 0 when the grid holds no picture.
    """
    sizes = _region_sizes(grid)
    return len(sizes), max(sizes, default=0)


def housing_complexes(grid: Iterable[Iterable[int | str]]) -> list[int]:
    """Return the sizes of all complexes (regions of 1s) in ascending order.

    Rows may be strings of digits such as ``"0110"`` or sequences of ints.
    The number of complexes is the length of the result.
    """
    return sorted(_region_sizes(grid))


def can_escape(k: int, lanes: Sequence[str]) -> bool:
    """Decide whether the jump game on two lanes can be won.

    ``lanes`` holds two equal-length strings of ``'1'`` (safe) and ``'0'`` (unsafe).
    Each second the player moves one cell forward, one cell back, or jumps to the
    other lane ``k`` cells ahead; after the t-th move cells before index t collapse.
    Moving past the last cell wins.
    """
    if len(lanes) != 2:
        raise ValueError("exactly two lanes are required")
    top, bottom = lanes
    if len(top) != len(bottom):
        raise ValueError("lanes must have the same length")
    length = len(top)
    safe = [[cell == "1" for cell in lane] for lane in (top, bottom)]

    visited = {(0, 0)}
    frontier = [(0, 0)]
    time = 0
    while frontier:
        following = []
        for lane, pos in frontier:
            if pos < time:
                continue
            for new_lane, new_pos in ((lane, pos - 1), (lane, pos + 1), (1 - lane, pos + k)):
                if new_pos >= length:
                    return True
                if new_pos >= 0 and safe[new_lane][new_pos] and (new_lane, new_pos) not in visited:
                    visited.add((new_lane, new_pos))
                    following.append((new_lane, new_pos))
        frontier = following
        time += 1
    return False