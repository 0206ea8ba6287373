"""Sequence I/O – FASTA reading (plain and gzipped)."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Dict, Generator, List, Tuple, Union

from msascore.alignment import GAP_CHARS
from msascore.errors import ParseError


def _open(filepath: Path, mode: str):
    opener = gzip.open if filepath.suffix == ".gz" else open
    return opener(filepath, mode, encoding="utf-8")  # type: ignore[operator]


def read_fasta_records(filepath: Union[str, Path]) -> Generator[Tuple[str, str], None, None]:
    """Yield (header, sequence) tuples with the full header line."""
    filepath = Path(filepath)

    header: str | None = None
    parts: list[str] = []

    with _open(filepath, "rt") as fh:
        for line in fh:
            line = line.rstrip("\n").rstrip("\r")
            if line.startswith(">"):
                if header is not None:
                    yield header, "".join(parts)
                header = line[1:].strip()
                parts = []
            elif line.startswith(";"):
                continue
            else:
                parts.append(line)
        if header is not None:
            yield header, "".join(parts)


def read_fasta(filepath: Union[str, Path]) -> Generator[Tuple[str, str], None, None]:
    """Yield (name, sequence) tuples from a FASTA file.

    The name is the first word of the header.  Supports plain-text and
    gzip-compressed files (.gz).
    """
    for header, seq in read_fasta_records(filepath):
        name = header.split()[0] if header else ""
        yield name, seq


def read_alignment(filepath: Union[str, Path]) -> List[str]:
    """Return the aligned sequences of a FASTA file, in file order."""
    return [seq for _, seq in read_fasta(filepath)]


def _has_gaps(seq: str) -> bool:
    return any(char in GAP_CHARS for char in seq)


def _check_unaligned(header: str, seq: str) -> None:
    if _has_gaps(seq):
        raise ParseError(
            f"Record '{header}' had gaps!  Did you accidentally "
            "provide aligned sequences?"
        )


def read_refs(filepath: Union[str, Path]) -> Dict[str, str]:
    """Read unaligned reference sequences.

    The first record is keyed ``first_pasv_ref``, later ones
    ``pasv_ref___<id>``.  Raises ``ParseError`` if any record has gaps.
    """
    refs: Dict[str, str] = {}

    for header, seq in read_fasta_records(filepath):
        _check_unaligned(header, seq)

        if not refs:
            key = "first_pasv_ref"
        else:
            key = f"pasv_ref___{header.split()[0]}"

        refs[key] = seq

    return refs


def read_queries(filepath: Union[str, Path]) -> Dict[str, str]:
    """Read unaligned query sequences keyed ``pasv_query___<header>``."""
    queries: Dict[str, str] = {}

    for header, seq in read_fasta_records(filepath):
        _check_unaligned(header, seq)
        queries[f"pasv_query___{header}"] = seq

    return queries
