"""Residue-pair scoring matrices.

A scoring matrix is a mapping of mappings, ``matrix[r1][r2] -> int``,
keyed by uppercase single-character residue symbols.  Matrices are read
from NCBI format text::

    #  comment lines are ignored
       A  R  N
    A  4 -1 -2
    R -1  5  0
    N -2  0  6

Symbols of the first dimension are taken from the row labels, symbols of
the second dimension from the header row.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Dict, Mapping, Union

from msascore.errors import EmptyScoringMatrix, ParseError

logger = logging.getLogger(__name__)

ScoringMatrix = Dict[str, Dict[str, int]]


# BLOSUM62 as distributed by NCBI
_BLOSUM62 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V  B  Z  X  *
A  4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0 -2 -1  0 -4
R -1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3 -1  0 -1 -4
N -2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3  3  0 -1 -4
D -2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3  4  1 -1 -4
C  0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1 -3 -3 -2 -4
Q -1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2  0  3 -1 -4
E -1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
G  0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3 -1 -2 -1 -4
H -2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3  0  0 -1 -4
I -1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3 -3 -3 -1 -4
L -1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1 -4 -3 -1 -4
K -1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2  0  1 -1 -4
M -1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1 -3 -1 -1 -4
F -2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1 -3 -3 -1 -4
P -1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2 -2 -1 -2 -4
S  1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2  0  0  0 -4
T  0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0 -1 -1  0 -4
W -3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3 -4 -3 -2 -4
Y -2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1 -3 -2 -1 -4
V  0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4 -3 -2 -1 -4
B -2 -1  3  4 -3  0  1 -1  0 -3 -4  0 -3 -3 -2  0 -1 -4 -3 -3  4  1 -1 -4
Z -1  0  0  1 -3  3  4 -2  0 -3 -3  1 -1 -3 -1  0 -1 -3 -2 -2  1  4 -1 -4
X  0 -1 -1 -1 -2 -1 -1 -1 -1 -1 -1 -1 -1 -1 -2  0  0 -2 -1 -1 -1 -1 -1 -4
* -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4 -4  1
"""


def parse_scoring_matrix(text: str) -> ScoringMatrix:
    """Parse an NCBI format matrix into a mapping of mappings.

    Raises ``ParseError`` for rows whose field count does not match the
    header or whose scores are not integers.
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    if not lines:
        raise ParseError("Scoring matrix text has no header row")

    col_symbols = [sym.upper() for sym in lines[0].split()]
    matrix: ScoringMatrix = {}

    for lineno, line in enumerate(lines[1:], start=2):
        fields = line.split()
        if len(fields) != len(col_symbols) + 1:
            raise ParseError(
                f"Matrix row {lineno} has {len(fields) - 1} scores, "
                f"expected {len(col_symbols)}: {line!r}"
            )
        row_symbol = fields[0].upper()
        try:
            scores = [int(v) for v in fields[1:]]
        except ValueError as exc:
            raise ParseError(f"Non-integer score in matrix row {lineno}: {line!r}") from exc
        matrix[row_symbol] = dict(zip(col_symbols, scores))

    return matrix


def read_scoring_matrix(filepath: Union[str, Path]) -> ScoringMatrix:
    """Read an NCBI format matrix file."""
    return parse_scoring_matrix(Path(filepath).read_text())


_BLOSUM62_MATRIX = parse_scoring_matrix(_BLOSUM62)


def blosum62() -> ScoringMatrix:
    """Return a fresh copy of the BLOSUM62 matrix."""
    return copy.deepcopy(_BLOSUM62_MATRIX)


def adjust_scoring_matrix(matrix: Mapping[str, Mapping[str, int]]) -> ScoringMatrix:
    """Shift every score so the smallest one becomes zero.

    Matrices with no negative scores come back unchanged.  The result is
    always a new matrix sharing nothing with *matrix*.

    >>> adjust_scoring_matrix({"A": {"A": 4, "C": -3}, "C": {"A": -3, "C": 9}})
    {'A': {'A': 7, 'C': 0}, 'C': {'A': 0, 'C': 12}}
    """
    scores = [score for row in matrix.values() for score in row.values()]
    if not scores:
        raise EmptyScoringMatrix()

    global_min = min(scores)
    if global_min >= 0:
        return {r1: dict(row) for r1, row in matrix.items()}

    shift = abs(global_min)
    logger.debug("Shifting scoring matrix by %s", shift)

    return {
        r1: {r2: score + shift for r2, score in row.items()}
        for r1, row in matrix.items()
    }
