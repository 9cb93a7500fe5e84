"""Sparse elements of the exterior algebra.

An Extensor maps basis monomials (bitmasks, see monomial.py) to integer
coefficients:

  Extensor.from_coefficients_and_bases([2, 5], [[1, 3], [3, 9]])
    == 2 e_1∧e_3 + 5 e_3∧e_9

Extensors are values.  Every operation builds a new instance and never
touches its operands, so one instance may be shared freely (e.g. by every
matrix entry of the same row).
"""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Sequence, Tuple

from extensor_coding.errors import ShapeMismatchError
from .monomial import Monomial, compute_sign, from_indices, ordered_indices, shift


class Extensor:
    """
    Immutable sparse polynomial Monomial -> int.

    Stored coefficients may be zero (add and multiply never prune), but an
    extensor whose coefficients are all zero is the additive identity:
    is_zero() is True and it compares equal to Extensor.zero().
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Monomial, int] | None = None):
        self._data: Dict[Monomial, int] = dict(data) if data else {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_coefficients_and_bases(
        cls,
        coeffs: Sequence[int],
        bases: Sequence[Iterable[int]],
    ) -> "Extensor":
        """Pair coeffs[i] with the monomial spanned by bases[i]."""
        if len(coeffs) != len(bases):
            raise ShapeMismatchError(
                f"coefficients and bases must match: {len(coeffs)} != {len(bases)}"
            )
        return cls({from_indices(b): int(c) for c, b in zip(coeffs, bases)})

    @classmethod
    def zero(cls) -> "Extensor":
        return cls()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return all(c == 0 for c in self._data.values())

    def coefficients(self) -> Tuple[int, ...]:
        return tuple(self._data.values())

    def terms(self) -> Iterator[Tuple[Monomial, int]]:
        return iter(self._data.items())

    def coefficient(self, monomial: Monomial) -> int:
        return self._data.get(monomial, 0)

    def __len__(self) -> int:
        return len(self._data)

    def _nonzero(self) -> Dict[Monomial, int]:
        return {m: c for m, c in self._data.items() if c != 0}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extensor):
            return NotImplemented
        return self._nonzero() == other._nonzero()

    def __hash__(self) -> int:
        return hash(frozenset(self._nonzero().items()))

    def __repr__(self) -> str:
        if self.is_zero():
            return "Extensor(0)"
        parts = []
        for m, c in sorted(self._nonzero().items()):
            blade = "∧".join(f"e_{i}" for i in ordered_indices(m)) or "1"
            parts.append(f"{c} {blade}")
        return f"Extensor({' + '.join(parts)})"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Extensor") -> "Extensor":
        data = dict(self._data)
        for m, c in other._data.items():
            data[m] = data.get(m, 0) + c
        return Extensor(data)

    def scale(self, c: int) -> "Extensor":
        return Extensor({m: c * v for m, v in self._data.items()})

    def multiply(self, other: "Extensor") -> "Extensor":
        """Wedge product.

        Terms sharing a generator vanish (e_i∧e_i = 0); the rest pick up the
        sign of the permutation that sorts their concatenated generators.
        """
        data: Dict[Monomial, int] = {}
        for ma, ca in self._data.items():
            for mb, cb in other._data.items():
                if ma & mb:
                    continue
                m = ma | mb
                data[m] = data.get(m, 0) + compute_sign(ma, mb) * ca * cb
        return Extensor(data)

    def lift(self, k: int) -> "Extensor":
        """Return self ∧ self', where self' has every generator moved up by k."""
        shifted = Extensor({shift(m, k): c for m, c in self._data.items()})
        return self.multiply(shifted)

    def __add__(self, other: "Extensor") -> "Extensor":
        if not isinstance(other, Extensor):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> "Extensor":
        return self.scale(-1)

    def __sub__(self, other: "Extensor") -> "Extensor":
        if not isinstance(other, Extensor):
            return NotImplemented
        return self.add(-other)

    def __mul__(self, other):
        if isinstance(other, Extensor):
            return self.multiply(other)
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    # e_1 ^ e_2 reads like the math notation
    __xor__ = multiply


def sum_extensors(values: Iterable[Extensor]) -> Extensor:
    """Fold values with add, starting from zero."""
    acc = Extensor.zero()
    for v in values:
        acc = acc.add(v)
    return acc
