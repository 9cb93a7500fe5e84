from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import networkx as nx

from extensor_coding.errors import ShapeMismatchError


@dataclass(frozen=True)
class AdjacencyMatrix:
    """
    Dense row-major 0/1 adjacency of a (possibly directed) graph.

    data[i * num_cols + j] == 1 iff there is an edge i -> j.
    This is the only form in which a graph reaches the estimator.
    """

    num_rows: int
    num_cols: int
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != self.num_rows * self.num_cols:
            raise ShapeMismatchError(
                f"adjacency has {len(self.data)} entries, expected "
                f"{self.num_rows} * {self.num_cols}"
            )

    @property
    def num_vertices(self) -> int:
        return self.num_cols

    def has_edge(self, u: int, v: int) -> bool:
        return self.data[u * self.num_cols + v] != 0

    def out_neighbors(self, u: int) -> list[int]:
        row = self.data[u * self.num_cols : (u + 1) * self.num_cols]
        return [v for v, x in enumerate(row) if x]

    def edges(self) -> list[Tuple[int, int]]:
        """Directed edges (u, v) in row-major order."""
        n = self.num_cols
        return [(i // n, i % n) for i, x in enumerate(self.data) if x]

    @classmethod
    def from_dense(cls, num_rows: int, num_cols: int, values: Sequence[int]) -> "AdjacencyMatrix":
        return cls(num_rows, num_cols, bytes(1 if v else 0 for v in values))

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Tuple[int, int]],
        *,
        directed: bool = False,
    ) -> "AdjacencyMatrix":
        """Square adjacency on vertices 0..n-1; undirected edges set both directions."""
        buf = bytearray(n * n)
        for u, v in edges:
            buf[u * n + v] = 1
            if not directed:
                buf[v * n + u] = 1
        return cls(n, n, bytes(buf))

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "AdjacencyMatrix":
        """
        Adjacency of a NetworkX graph, vertices numbered in G.nodes() order.
        Directed graphs keep their orientation.
        """
        index = {v: i for i, v in enumerate(G.nodes())}
        edges = [(index[u], index[v]) for u, v in G.edges()]
        return cls.from_edges(len(index), edges, directed=G.is_directed())

    def to_networkx(self) -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(range(max(self.num_rows, self.num_cols)))
        G.add_edges_from(self.edges())
        return G
