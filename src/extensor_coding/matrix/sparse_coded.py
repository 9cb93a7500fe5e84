"""Triplet-list sparse matrices with extensor entries."""
from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from extensor_coding.algebra.extensor import Extensor
from extensor_coding.errors import ShapeMismatchError


class Entry(NamedTuple):
    row: int
    col: int
    value: Extensor


class SparseCodedMatrix:
    """
    R x C matrix of extensors, stored as (row, col, value) for non-zero values.

    Built once per trial: the coding is random, so the matrix is too.
    """

    __slots__ = ("num_rows", "num_cols", "entries")

    def __init__(self, num_rows: int, num_cols: int, entries: Sequence[Entry]):
        for r, c, _ in entries:
            if not (0 <= r < num_rows and 0 <= c < num_cols):
                raise ShapeMismatchError(
                    f"entry ({r}, {c}) outside a {num_rows}x{num_cols} matrix"
                )
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.entries: Tuple[Entry, ...] = tuple(entries)

    @classmethod
    def build(
        cls,
        num_rows: int,
        num_cols: int,
        adjacency: Sequence[int],
        coding: Sequence[Extensor],
    ) -> "SparseCodedMatrix":
        """
        Substitute coding[i] for every edge leaving row i.

        All entries of a row share the same Extensor instance; extensors are
        immutable, so that sharing is harmless.
        """
        if len(adjacency) != num_rows * num_cols:
            raise ShapeMismatchError(
                f"adjacency has {len(adjacency)} entries, expected {num_rows * num_cols}"
            )
        if len(coding) < num_rows:
            raise ShapeMismatchError(
                f"coding has {len(coding)} extensors, need one per row ({num_rows})"
            )

        entries: List[Entry] = []
        for i, a in enumerate(adjacency):
            if not a:
                continue
            row = i // num_cols
            value = coding[row]
            if value.is_zero():
                continue
            entries.append(Entry(row, i % num_cols, value))
        return cls(num_rows, num_cols, entries)

    @classmethod
    def from_values(
        cls,
        num_rows: int,
        num_cols: int,
        values: Sequence[Extensor],
    ) -> "SparseCodedMatrix":
        """Sparse copy of a dense row-major list of extensors."""
        if len(values) != num_rows * num_cols:
            raise ShapeMismatchError(
                f"got {len(values)} values for a {num_rows}x{num_cols} matrix"
            )
        entries = [
            Entry(i // num_cols, i % num_cols, v)
            for i, v in enumerate(values)
            if not v.is_zero()
        ]
        return cls(num_rows, num_cols, entries)

    def get(self, i: int, j: int) -> Extensor:
        for r, c, v in self.entries:
            if r == i and c == j:
                return v
        return Extensor.zero()

    def multiply(self, vector: Sequence[Extensor]) -> List[Extensor]:
        """result[row] = sum over entries (row, col, v) of v ∧ vector[col]."""
        if len(vector) != self.num_cols:
            raise ShapeMismatchError(
                f"vector of length {len(vector)} does not fit a "
                f"{self.num_rows}x{self.num_cols} matrix"
            )
        out = [Extensor.zero() for _ in range(self.num_rows)]
        for r, c, v in self.entries:
            out[r] = out[r].add(v.multiply(vector[c]))
        return out

    def __mul__(self, vector):
        if isinstance(vector, (list, tuple)):
            return self.multiply(vector)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"SparseCodedMatrix({self.num_rows}x{self.num_cols}, nnz={len(self.entries)})"
