"""Substitution-matrix similarity of an alignment."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, Mapping, Optional, Sequence

from msascore.alignment import alignment_columns, is_gap
from msascore.errors import EmptyAlignment, NoComparisonsError, UnknownResidueError
from msascore.matrix import blosum62

logger = logging.getLogger(__name__)


def similarity_score(
    seqs: Sequence[str],
    matrix: Optional[Mapping[str, Mapping[str, int]]] = None,
) -> float:
    """Score how well conserved the residues of an alignment are.

    Every unordered pair of residues within a column contributes its
    matrix score to the numerator, and the larger of the two residues'
    best achievable scores to the denominator.  Pairs involving a gap
    are skipped, so adding gap-only sequences leaves the score alone.

    The score is at most 1.0 and may be negative when the matrix has
    negative entries; use ``adjust_scoring_matrix`` first for a
    non-negative score.

    Parameters
    ----------
    seqs : sequence of str
        Aligned sequences, all the same length once whitespace is removed.
    matrix : mapping, optional
        Scoring matrix keyed by uppercase residues.  Defaults to BLOSUM62.

    Returns
    -------
    float
        ``actual_points / max_points``.  A single sequence scores 1.0.
    """
    if len(seqs) == 0:
        raise EmptyAlignment()
    if len(seqs) == 1:
        return 1.0

    if matrix is None:
        matrix = blosum62()

    best_scores: Dict[str, int] = {}

    def best_score(residue: str) -> int:
        if residue not in best_scores:
            best_scores[residue] = max(matrix[residue].values())
        return best_scores[residue]

    actual_points = 0
    max_points = 0

    columns = alignment_columns(seqs)
    logger.debug("Scoring similarity of %d sequences x %d columns", len(seqs), len(columns))

    for column in columns:
        residues = [char.upper() for char in column]
        for r1, r2 in combinations(residues, 2):
            if is_gap(r1) or is_gap(r2):
                continue

            # a residue with an empty row has no usable scores
            if r1 not in matrix or not matrix[r1]:
                raise UnknownResidueError(r1)
            if r2 not in matrix or not matrix[r2] or r2 not in matrix[r1]:
                raise UnknownResidueError(r2)

            actual_points += matrix[r1][r2]
            max_points += max(best_score(r1), best_score(r2))

    if max_points == 0:
        raise NoComparisonsError()

    return actual_points / max_points
