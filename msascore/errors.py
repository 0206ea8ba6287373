"""Exceptions raised while validating and scoring alignments."""

from __future__ import annotations

from typing import Iterable, List


class MsaScoreError(ValueError):
    """Base class for all msascore errors."""


class EmptyAlignment(MsaScoreError):
    """The alignment has no sequences (or no columns to score)."""

    def __init__(self, message: str = "Alignment contains no sequences"):
        super().__init__(message)


class UnequalLengthError(MsaScoreError):
    """Aligned sequences do not all share one length."""

    def __init__(self, lengths: Iterable[int]):
        self.lengths: List[int] = sorted(set(lengths))
        super().__init__(
            "Aligned sequences must all be the same length, got lengths "
            + ", ".join(str(n) for n in self.lengths)
        )


class UnknownResidueError(MsaScoreError):
    """A residue has no entry in the scoring matrix."""

    def __init__(self, residue: str):
        self.residue = residue
        super().__init__(f"Residue '{residue}' is not in the scoring matrix")


class NoComparisonsError(MsaScoreError):
    """Every residue pair in the alignment involved a gap."""

    def __init__(self, message: str = "No residue pairs to compare; every pair contained a gap"):
        super().__init__(message)


class InsufficientSequencesError(MsaScoreError):
    """Fewer sequences than the computation needs."""

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Need at least {minimum} sequences, got {count}"
        )


class EmptyScoringMatrix(MsaScoreError):
    """The scoring matrix has no scores."""

    def __init__(self, message: str = "Scoring matrix contains no scores"):
        super().__init__(message)


class ParseError(MsaScoreError):
    """Input text could not be read as the expected format."""
