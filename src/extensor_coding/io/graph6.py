from __future__ import annotations

from pathlib import Path

import networkx as nx

from extensor_coding.adjacency import AdjacencyMatrix
from extensor_coding.errors import GraphFormatError


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph.
    """
    s = strip_graph6_header(g6)
    try:
        G = nx.from_graph6_bytes(s.encode("ascii"))
    except (ValueError, UnicodeEncodeError, nx.NetworkXError) as exc:
        raise GraphFormatError(f"invalid graph6 string {s!r}: {exc}") from exc
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def graph6_to_adjacency(g6: str) -> AdjacencyMatrix:
    """Symmetric adjacency of a graph6 string, vertices 0..n-1."""
    G = g6_to_nx(g6)
    n = G.number_of_nodes()
    return AdjacencyMatrix.from_edges(n, G.edges())


def read_graph6(path: str | Path) -> AdjacencyMatrix:
    """Read the first graph of a .g6 file (header optional)."""
    try:
        text = Path(path).read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphFormatError(f"cannot read graph6 file {path}: {exc}") from exc
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise GraphFormatError(f"graph6 file {path} is empty")
    return graph6_to_adjacency(lines[0])
