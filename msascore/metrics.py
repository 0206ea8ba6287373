"""Consolidated alignment scores and reporting."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from msascore.alignment import normalize_sequences
from msascore.homogeneity import homogeneity_components
from msascore.matrix import adjust_scoring_matrix, blosum62
from msascore.similarity import similarity_score

logger = logging.getLogger(__name__)


@dataclass
class AlignmentScores:
    """Similarity and gap homogeneity scores for a single alignment."""

    num_sequences: int = 0
    alignment_length: int = 0

    similarity: float = 0.0

    by_sequence_difference: float = 0.0
    by_residue_difference: float = 0.0
    geometric_index: float = 0.0

    def to_dict(self) -> Dict:
        """Convert scores to dictionary."""
        return {
            "num_sequences": self.num_sequences,
            "alignment_length": self.alignment_length,
            "similarity": self.similarity,
            "by_sequence_difference": self.by_sequence_difference,
            "by_residue_difference": self.by_residue_difference,
            "geometric_index": self.geometric_index,
        }

    def to_json(self, filepath: Optional[str] = None) -> str:
        """Export scores to JSON."""
        json_str = json.dumps(self.to_dict(), indent=2)
        if filepath:
            Path(filepath).write_text(json_str)
        return json_str

    @classmethod
    def from_dict(cls, data: Dict) -> "AlignmentScores":
        """Create from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


def compute_scores(
    seqs: Sequence[str],
    matrix: Optional[Mapping[str, Mapping[str, int]]] = None,
    rescale: bool = False,
) -> AlignmentScores:
    """Compute similarity and geometric homogeneity for an alignment.

    Parameters
    ----------
    seqs : sequence of str
        Aligned sequences.
    matrix : mapping, optional
        Scoring matrix for the similarity score.  Defaults to BLOSUM62.
    rescale : bool
        Shift the matrix so its minimum is zero before scoring.

    Returns
    -------
    AlignmentScores
    """
    rows = normalize_sequences(seqs)

    if matrix is None:
        matrix = blosum62()
    if rescale:
        matrix = adjust_scoring_matrix(matrix)

    similarity = similarity_score(rows, matrix)
    by_seq, by_res = homogeneity_components(rows)

    scores = AlignmentScores(
        num_sequences=len(rows),
        alignment_length=len(rows[0]),
        similarity=similarity,
        by_sequence_difference=by_seq,
        by_residue_difference=by_res,
        geometric_index=1 - (by_seq + by_res) / 2,
    )
    logger.debug("Scores: %s", scores)
    return scores
