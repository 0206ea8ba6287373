"""Shared test fixtures for msascore tests."""

import pytest


@pytest.fixture
def gapped_alignment():
    """Four short protein sequences with an uneven gap pattern."""
    return ["A-N--", "AR-D-", "AR-D-", "A--D-"]


@pytest.fixture
def column_alignment():
    """Each column has exactly one gap, in a different row."""
    return ["ABC-", "AB-D", "A-CD", "-BCD"]


@pytest.fixture
def small_matrix():
    """Two-residue matrix with a negative off-diagonal score."""
    return {
        "A": {"A": 4, "C": -3},
        "C": {"A": -3, "C": 9},
    }


@pytest.fixture
def nonnegative_matrix():
    """Two-residue matrix with no negative scores."""
    return {
        "A": {"A": 5, "C": 0},
        "C": {"A": 0, "C": 7},
    }


@pytest.fixture
def aligned_fasta(tmp_path, gapped_alignment):
    """Aligned FASTA file holding the gapped alignment."""
    p = tmp_path / "aln.fa"
    lines = []
    for i, seq in enumerate(gapped_alignment, start=1):
        lines.append(f">seq{i} description {i}")
        lines.append(seq)
    p.write_text("\n".join(lines) + "\n")
    return p


@pytest.fixture
def ragged_fasta(tmp_path):
    """Aligned FASTA file whose sequences differ in length."""
    p = tmp_path / "ragged.fa"
    p.write_text(">a\nAC-D\n>b\nAC-\n")
    return p
