"""Loader for MatrixMarket/KONECT style edge lists.

  line 1   banner, ignored            (e.g. "% bip unweighted")
  line 2   "% ... <rows> <cols>"      (the last two integers are used)
  rest     "<from> <to> [...]"        1-indexed, lines starting with % skipped
"""
from __future__ import annotations

import logging
from pathlib import Path

from extensor_coding.adjacency import AdjacencyMatrix
from extensor_coding.errors import GraphFormatError

logger = logging.getLogger(__name__)


def _parse_header(line: str) -> tuple[int, int]:
    if not line.startswith("%"):
        raise GraphFormatError(f"expected '% <rows> <cols>' on line 2, got {line!r}")
    fields = line[1:].split()
    if len(fields) < 2:
        raise GraphFormatError(f"header needs row and column counts: {line!r}")
    try:
        rows, cols = int(fields[-2]), int(fields[-1])
    except ValueError:
        raise GraphFormatError(f"non-integer dimensions in header: {line!r}") from None
    if rows < 0 or cols < 0:
        raise GraphFormatError(f"negative dimensions in header: {line!r}")
    return rows, cols


def parse_tsv(text: str) -> AdjacencyMatrix:
    """Parse the file contents; raises GraphFormatError on any malformed line."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise GraphFormatError("missing header: need a banner line and a '% <rows> <cols>' line")

    num_rows, num_cols = _parse_header(lines[1].strip())
    buf = bytearray(num_rows * num_cols)

    for lineno, raw in enumerate(lines[2:], start=3):
        line = raw.strip()
        if not line or line.startswith("%"):
            continue
        fields = line.split()
        if len(fields) < 2:
            raise GraphFormatError(f"line {lineno}: expected '<from> <to>', got {raw!r}")
        try:
            src, dst = int(fields[0]), int(fields[1])
        except ValueError:
            raise GraphFormatError(f"line {lineno}: non-integer vertex in {raw!r}") from None
        if not (1 <= src <= num_rows and 1 <= dst <= num_cols):
            raise GraphFormatError(
                f"line {lineno}: edge {src} -> {dst} outside {num_rows}x{num_cols}"
            )
        buf[(src - 1) * num_cols + (dst - 1)] = 1

    adj = AdjacencyMatrix(num_rows, num_cols, bytes(buf))
    logger.debug("parsed %dx%d adjacency with %d edges", num_rows, num_cols, sum(buf))
    return adj


def read_tsv(path: str | Path) -> AdjacencyMatrix:
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphFormatError(f"cannot read adjacency file {path}: {exc}") from exc
    return parse_tsv(text)
