"""Geometric homogeneity of an alignment's gap pattern.

The alignment is reduced to a binary matrix (gap = 1, residue = 0).
Rows of that matrix are compared pairwise with XOR, once with rows as
sequences and once with rows as alignment columns.  Each comparison is
scaled by the row length, summed over *ordered* row pairs, and averaged
first over the ``n - 1`` partners of a row and then over the ``n`` rows.

Cost is quadratic in the number of rows: O(N^2 L) for the sequence pass
and O(L^2 N) for the column pass.
"""

from __future__ import annotations

import logging
from itertools import permutations
from typing import Sequence, Tuple

import numpy as np

from msascore.alignment import gap_matrix
from msascore.errors import EmptyAlignment, InsufficientSequencesError

logger = logging.getLogger(__name__)


def _pairwise_difference(matrix: np.ndarray, max_len: int) -> float:
    """Mean normalized XOR distance between the rows of *matrix*."""
    num_rows = matrix.shape[0]
    if num_rows < 2:
        # a lone row has nothing to differ from
        return 0.0

    total = 0.0
    for i, j in permutations(range(num_rows), 2):
        total += np.count_nonzero(matrix[i] ^ matrix[j]) / max_len

    return total / (num_rows - 1) / num_rows


def homogeneity_components(seqs: Sequence[str]) -> Tuple[float, float]:
    """Return ``(by_sequence_diff, by_residue_diff)`` for an alignment."""
    binary = gap_matrix(seqs)
    num_seqs, num_cols = binary.shape

    if num_seqs < 2:
        raise InsufficientSequencesError(num_seqs)
    if num_cols == 0:
        raise EmptyAlignment("Alignment contains no columns")

    logger.debug("Scoring gap homogeneity of %d sequences x %d columns", num_seqs, num_cols)

    by_sequence_diff = _pairwise_difference(binary, num_cols)
    by_residue_diff = _pairwise_difference(binary.T, num_seqs)

    return by_sequence_diff, by_residue_diff


def geometric_index(seqs: Sequence[str]) -> float:
    """Gap-pattern homogeneity in ``[0, 1]``; 1 means perfectly uniform.

    >>> round(geometric_index(["A-N--", "AR-D-", "AR-D-", "A--D-"]), 6)
    0.533333
    """
    by_sequence_diff, by_residue_diff = homogeneity_components(seqs)
    return 1 - (by_sequence_diff + by_residue_diff) / 2
