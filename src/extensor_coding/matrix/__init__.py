from .sparse_coded import Entry, SparseCodedMatrix

__all__ = [
    "Entry",
    "SparseCodedMatrix",
]
