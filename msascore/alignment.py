"""Column and gap views of a multiple sequence alignment."""

from __future__ import annotations

import re
from typing import Iterable, List

import numpy as np

from msascore.errors import EmptyAlignment, UnequalLengthError


GAP_CHARS = frozenset("-.")

_WHITESPACE_RE = re.compile(r"\s+")


def is_gap(char: str) -> bool:
    """Return True if *char* is an alignment gap (``-`` or ``.``)."""
    return char in GAP_CHARS


def normalize_sequences(seqs: Iterable[str]) -> List[str]:
    """Strip all whitespace from each sequence and check lengths agree.

    Raises ``EmptyAlignment`` for an empty collection and
    ``UnequalLengthError`` when the cleaned sequences differ in length.
    """
    cleaned = [_WHITESPACE_RE.sub("", seq) for seq in seqs]
    if not cleaned:
        raise EmptyAlignment()

    lengths = {len(seq) for seq in cleaned}
    if len(lengths) > 1:
        raise UnequalLengthError(lengths)

    return cleaned


def alignment_columns(seqs: Iterable[str]) -> List[List[str]]:
    """Transpose aligned sequences into columns.

    Column *i* holds the *i*-th character of every sequence, in input
    order.

    >>> alignment_columns(["AA-", "A-A"])
    [['A', 'A'], ['A', '-'], ['-', 'A']]
    """
    rows = normalize_sequences(seqs)
    return [list(column) for column in zip(*rows)]


def gap_matrix(seqs: Iterable[str]) -> np.ndarray:
    """Binary gap matrix, rows = sequences and columns = positions.

    Gaps are 1, residues are 0.
    """
    rows = normalize_sequences(seqs)
    return np.array(
        [[1 if is_gap(char) else 0 for char in row] for row in rows],
        dtype=np.uint8,
    ).reshape(len(rows), len(rows[0]))
