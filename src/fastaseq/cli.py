"""fastaseq CLI entrypoint."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from .alphabets import Alphabet
from .config import TABLE_FORMATS, ParserConfig, load_config
from .fasta import FastaParseError, FastaRecord, read_fasta, write_fasta
from .seq import SequenceType, classify

SUMMARY_COLUMNS = ["identifier", "description", "seq_type", "alphabet", "length"]

_SEQ_TYPES = {t.value.lower(): t for t in SequenceType}
_ALPHABETS = {a.value.lower(): a for a in Alphabet}


def records_to_frame(records: FastaRecord) -> pd.DataFrame:
    """One row per record, in file order."""
    rows = [
        {
            "identifier": rec.identifier,
            "description": rec.description,
            "seq_type": str(rec.seq_type),
            "alphabet": str(rec.alphabet),
            "length": len(rec),
        }
        for rec in records
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def _load_records(path: Path, args: argparse.Namespace, cfg: ParserConfig) -> FastaRecord:
    seq_type = _SEQ_TYPES[args.seq_type] if getattr(args, "seq_type", None) else None
    alphabet = _ALPHABETS[args.alphabet] if getattr(args, "alphabet", None) else None
    if (seq_type is None) != (alphabet is None):
        raise SystemExit("--seq-type and --alphabet must be given together.")
    if seq_type is None and not cfg.infer_types:
        seq_type, alphabet = SequenceType.default(), Alphabet.default()

    if not path.is_file():
        raise SystemExit(f"FASTA file not found: {path}")
    try:
        records = read_fasta(path, seq_type=seq_type, alphabet=alphabet)
    except FastaParseError as exc:
        raise SystemExit(f"[ERROR] Could not parse {path}: {exc}") from exc

    if cfg.uppercase:
        records = FastaRecord(
            tuple(dataclasses.replace(rec, sequence=rec.sequence.upper()) for rec in records)
        )
    return records


def cmd_summary(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    records = _load_records(Path(args.fasta), args, cfg)
    if len(records) == 0:
        sys.stderr.write(f"[WARN] No records found in {args.fasta}\n")

    df = records_to_frame(records)
    table_format = args.format or cfg.table_format
    sep = "\t" if table_format == "tsv" else ","

    if args.out is None:
        sys.stdout.write(df.to_csv(sep=sep, index=False))
        return
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, sep=sep, index=False)
    print(f"[INFO] Wrote summary of {len(df)} records to {out}")


def cmd_classify(args: argparse.Namespace) -> None:
    seq_type, alphabet = classify(args.sequence)
    print(f"{seq_type}\t{alphabet}")


def cmd_reformat(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    records = _load_records(Path(args.fasta), args, cfg)
    width = args.width if args.width is not None else cfg.line_width

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    write_fasta(out, records, width=width)
    print(f"[INFO] Wrote {len(records)} records to {out} (width={width})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fastaseq", description="FASTA parsing and sequence typing")
    sub = parser.add_subparsers(dest="command")

    summary = sub.add_parser("summary", help="Tabulate records in a FASTA file")
    summary.add_argument("fasta")
    summary.add_argument("--out", default=None)
    summary.add_argument("--format", choices=TABLE_FORMATS, default=None)
    summary.add_argument("--seq-type", choices=sorted(_SEQ_TYPES), default=None)
    summary.add_argument("--alphabet", choices=sorted(_ALPHABETS), default=None)
    summary.add_argument("--config", default=None)
    summary.set_defaults(func=cmd_summary)

    cls = sub.add_parser("classify", help="Infer the type of a raw sequence string")
    cls.add_argument("sequence")
    cls.set_defaults(func=cmd_classify)

    reformat = sub.add_parser("reformat", help="Rewrite a FASTA file with fixed line width")
    reformat.add_argument("fasta")
    reformat.add_argument("out")
    reformat.add_argument("--width", type=int, default=None)
    reformat.add_argument("--seq-type", choices=sorted(_SEQ_TYPES), default=None)
    reformat.add_argument("--alphabet", choices=sorted(_ALPHABETS), default=None)
    reformat.add_argument("--config", default=None)
    reformat.set_defaults(func=cmd_reformat)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        raise SystemExit(1)
    args.func(args)


if __name__ == "__main__":
    main()
