from __future__ import annotations

from extensor_coding.adjacency import AdjacencyMatrix


def count_paths_exact(adj: AdjacencyMatrix, k: int) -> int:
    """Count directed walks through k distinct vertices by brute force.

    Exponential in k; only meant as ground truth for small graphs.  An
    undirected path is counted once per direction.
    """
    if k < 1:
        return 0
    n = adj.num_vertices
    neighbors = [adj.out_neighbors(u) for u in range(adj.num_rows)]

    def extend(u: int, visited: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        total = 0
        for v in neighbors[u]:
            if visited >> v & 1:
                continue
            total += extend(v, visited | (1 << v), remaining - 1)
        return total

    return sum(extend(u, 1 << u, k - 1) for u in range(min(n, adj.num_rows)))
