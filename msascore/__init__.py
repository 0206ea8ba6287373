"""
msascore: quality scores for multiple sequence alignments.

Two scores are provided: a substitution-matrix similarity score over
every residue pair of each column, and a geometric homogeneity index of
the alignment's gap pattern.
"""

__version__ = "0.1.0"

from msascore.errors import (
    MsaScoreError,
    EmptyAlignment,
    UnequalLengthError,
    UnknownResidueError,
    NoComparisonsError,
    InsufficientSequencesError,
    EmptyScoringMatrix,
    ParseError,
)
from msascore.alignment import alignment_columns, gap_matrix, normalize_sequences
from msascore.matrix import adjust_scoring_matrix, blosum62, read_scoring_matrix
from msascore.similarity import similarity_score
from msascore.homogeneity import geometric_index
from msascore.io import read_fasta, read_alignment, read_refs, read_queries
from msascore.oligo import get_oligo, get_type, pos_to_gapped_pos, spans_end, spans_start
from msascore.timing import time_it
from msascore.metrics import compute_scores, AlignmentScores

__all__ = [
    "MsaScoreError",
    "EmptyAlignment",
    "UnequalLengthError",
    "UnknownResidueError",
    "NoComparisonsError",
    "InsufficientSequencesError",
    "EmptyScoringMatrix",
    "ParseError",
    "alignment_columns",
    "gap_matrix",
    "normalize_sequences",
    "adjust_scoring_matrix",
    "blosum62",
    "read_scoring_matrix",
    "similarity_score",
    "geometric_index",
    "read_fasta",
    "read_alignment",
    "read_refs",
    "read_queries",
    "spans_start",
    "spans_end",
    "pos_to_gapped_pos",
    "get_oligo",
    "get_type",
    "time_it",
    "compute_scores",
    "AlignmentScores",
]
