from .graph6 import g6_to_nx, graph6_to_adjacency, read_graph6, strip_graph6_header
from .tsv import parse_tsv, read_tsv

__all__ = [
    "g6_to_nx",
    "graph6_to_adjacency",
    "read_graph6",
    "strip_graph6_header",
    "parse_tsv",
    "read_tsv",
]
