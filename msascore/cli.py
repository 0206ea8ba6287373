"""CLI entry point for msascore."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from msascore.errors import MsaScoreError
from msascore.io import read_alignment
from msascore.matrix import read_scoring_matrix
from msascore.metrics import compute_scores
from msascore.timing import time_it

logger = logging.getLogger("msascore")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msascore",
        description="msascore – similarity and gap homogeneity scores for multiple sequence alignments",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    # score sub-command
    score_p = sub.add_parser("score", help="Score one or more aligned FASTA files")
    score_p.add_argument("alignments", nargs="+", help="Aligned FASTA file(s)")
    score_p.add_argument("--matrix", type=str, help="Scoring matrix in NCBI format (default: BLOSUM62)")
    score_p.add_argument("--rescale", action="store_true",
                         help="Shift the scoring matrix so its minimum score is zero")
    score_p.add_argument("--json", action="store_true", help="Output as JSON")
    score_p.add_argument("--output", type=str, help="Output file for the report")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "score":
            _cmd_score(args)
    except (MsaScoreError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_score(args) -> None:
    matrix = read_scoring_matrix(args.matrix) if args.matrix else None

    all_scores = []
    with time_it("Scoring", logger):
        for path in args.alignments:
            seqs = read_alignment(path)
            logger.info("Read %d sequences from %s", len(seqs), path)
            scores = compute_scores(seqs, matrix, rescale=args.rescale)
            all_scores.append({"alignment": path, "scores": scores.to_dict()})

    if args.json:
        output = json.dumps(all_scores, indent=2)
    else:
        lines = []
        for item in all_scores:
            s = item["scores"]
            lines.extend([
                f"Alignment: {item['alignment']}",
                f"  Sequences:       {s['num_sequences']}",
                f"  Columns:         {s['alignment_length']}",
                f"  Similarity:      {s['similarity']:.4f}",
                f"  Geometric index: {s['geometric_index']:.4f}",
                "",
            ])
        output = "\n".join(lines)

    print(output)

    if args.output:
        Path(args.output).write_text(output)
        print(f"\nReport saved to: {args.output}")
