"""Coordinate helpers for pulling key-position oligos out of alignments.

All positions are 1-based.  "Gapped" positions index into an aligned
sequence; ungapped positions count residues of the key sequence only.
"""

from __future__ import annotations

from typing import Dict, Iterable


def _strip_gaps(seq: str) -> str:
    return seq.replace("-", "")


def spans_start(query_seq: str, gapped_start: int) -> bool:
    """True if the query has a residue at or before *gapped_start*."""
    return _strip_gaps(query_seq[:gapped_start]) != ""


def spans_end(query_seq: str, gapped_end: int) -> bool:
    """True if the query has a residue at or after *gapped_end*."""
    return _strip_gaps(query_seq[gapped_end - 1 :]) != ""


def pos_to_gapped_pos(gapped_key_seq: str) -> Dict[int, int]:
    """Map each ungapped position of the key sequence to its gapped position.

    >>> pos_to_gapped_pos("A-C-T-G")
    {1: 1, 2: 3, 3: 5, 4: 7}
    """
    mapping: Dict[int, int] = {}
    nongap_idx = 0

    for gapped_idx, char in enumerate(gapped_key_seq):
        if char != "-":
            mapping[nongap_idx + 1] = gapped_idx + 1
            nongap_idx += 1

    return mapping


def get_oligo(
    gapped_query_seq: str,
    key_posns: Iterable[int],
    pos_map: Dict[int, int],
) -> str:
    """Residues of the query at the key positions, uppercased."""
    return "".join(gapped_query_seq[pos_map[pos] - 1] for pos in key_posns).upper()


def get_type(oligo: str, spans: str) -> str:
    if spans == "NA":
        return oligo
    return f"{oligo}_{spans}"
