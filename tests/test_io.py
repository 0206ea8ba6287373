"""Tests for I/O module."""

import gzip
import pytest

from msascore.errors import ParseError
from msascore.io import (
    read_alignment,
    read_fasta,
    read_fasta_records,
    read_queries,
    read_refs,
)


@pytest.fixture
def fasta_file(tmp_path):
    p = tmp_path / "test.fa"
    p.write_text(">seq1\nACGTACGT\n>seq2\nGGGGAAAA\n")
    return p


@pytest.fixture
def fasta_gz_file(tmp_path):
    p = tmp_path / "test.fa.gz"
    with gzip.open(p, "wt") as f:
        f.write(">seq1\nACGTACGT\n>seq2\nGGGGAAAA\n")
    return p


@pytest.fixture
def refs_file(tmp_path):
    p = tmp_path / "refs.fa"
    p.write_text(">ref1 first one\nMKVLA\n>ref2 second\nMKILA\n>ref3\nMRVLA\n")
    return p


class TestReadFasta:
    """Tests for FASTA record reading."""

    def test_read_plain(self, fasta_file):
        """Plain FASTA yields (name, sequence) pairs in order."""
        records = list(read_fasta(fasta_file))
        assert len(records) == 2
        assert records[0] == ("seq1", "ACGTACGT")
        assert records[1] == ("seq2", "GGGGAAAA")

    def test_read_gzipped(self, fasta_gz_file):
        """Gzipped FASTA is read transparently."""
        records = list(read_fasta(fasta_gz_file))
        assert len(records) == 2
        assert records[0][1] == "ACGTACGT"

    def test_multiline_sequence(self, tmp_path):
        """Wrapped sequence lines are joined."""
        p = tmp_path / "multi.fa"
        p.write_text(">seq1\nACGT\nACGT\n")
        records = list(read_fasta(p))
        assert records[0] == ("seq1", "ACGTACGT")

    def test_name_is_first_word(self, aligned_fasta):
        """Descriptions after the first word are dropped from the name."""
        names = [name for name, _ in read_fasta(aligned_fasta)]
        assert names == ["seq1", "seq2", "seq3", "seq4"]

    def test_full_header_records(self, aligned_fasta):
        """Record reading keeps the whole header line."""
        headers = [header for header, _ in read_fasta_records(aligned_fasta)]
        assert headers[0] == "seq1 description 1"

    def test_comment_lines_skipped(self, tmp_path):
        """Lines starting with ';' are not sequence."""
        p = tmp_path / "comment.fa"
        p.write_text(">s1\n;note\nAC\n")
        assert list(read_fasta(p)) == [("s1", "AC")]


class TestReadAlignment:
    """Tests for reading aligned sequences."""

    def test_sequences_in_order(self, aligned_fasta, gapped_alignment):
        """Sequences come back in file order."""
        assert read_alignment(aligned_fasta) == gapped_alignment

    def test_wrapped_alignment(self, tmp_path):
        """Wrapped aligned records keep their gaps."""
        p = tmp_path / "wrapped.fa"
        p.write_text(">a\nAC-\nDE\n>b\n-C-\nD-\n")
        assert read_alignment(p) == ["AC-DE", "-C-D-"]


class TestReadRefsAndQueries:
    """Tests for unaligned reference and query readers."""

    def test_ref_keys(self, refs_file):
        """The first reference is special, later ones use their id."""
        refs = read_refs(refs_file)
        assert list(refs) == ["first_pasv_ref", "pasv_ref___ref2", "pasv_ref___ref3"]
        assert refs["first_pasv_ref"] == "MKVLA"

    def test_query_keys_use_full_header(self, refs_file):
        """Query keys carry the whole header."""
        queries = read_queries(refs_file)
        assert list(queries) == [
            "pasv_query___ref1 first one",
            "pasv_query___ref2 second",
            "pasv_query___ref3",
        ]

    @pytest.mark.parametrize("reader", [read_refs, read_queries])
    @pytest.mark.parametrize("seq", ["MK-LA", "MK.LA"])
    def test_gaps_rejected(self, tmp_path, reader, seq):
        """Gapped records are refused, naming the record."""
        p = tmp_path / "gapped.fa"
        p.write_text(f">bad record\n{seq}\n")
        with pytest.raises(ParseError, match="bad record"):
            reader(p)
