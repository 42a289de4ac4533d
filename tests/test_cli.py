"""Tests for the fastaseq command-line interface."""

import io
from pathlib import Path

import pandas as pd
import pytest

from fastaseq.cli import SUMMARY_COLUMNS, main, records_to_frame
from fastaseq.fasta import parse_fasta_records


def test_records_to_frame(multi_fasta_text: str) -> None:
    df = records_to_frame(parse_fasta_records(multi_fasta_text))
    assert list(df.columns) == SUMMARY_COLUMNS
    assert df["seq_type"].tolist() == ["DNA", "RNA", "Protein"]
    assert df["alphabet"].tolist() == ["NucleicAcid", "NucleicAcid", "Protein"]
    assert df["length"].tolist() == [12, 8, 15]


def test_summary_to_file(tmp_path: Path, multi_fasta_path: Path) -> None:
    out = tmp_path / "summary.csv"
    main(["summary", str(multi_fasta_path), "--out", str(out), "--format", "csv"])
    df = pd.read_csv(out)
    assert df["identifier"].tolist() == ["seq_dna", "seq_rna", "seq_prot"]
    assert df["length"].tolist() == [12, 8, 15]


def test_summary_to_stdout(multi_fasta_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["summary", str(multi_fasta_path)])
    out = capsys.readouterr().out
    df = pd.read_csv(io.StringIO(out), sep="\t")
    assert df["seq_type"].tolist() == ["DNA", "RNA", "Protein"]


def test_summary_explicit_types(multi_fasta_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["summary", str(multi_fasta_path), "--seq-type", "protein", "--alphabet", "protein"])
    df = pd.read_csv(io.StringIO(capsys.readouterr().out), sep="\t")
    assert set(df["seq_type"]) == {"Protein"}


def test_summary_without_inference(
    tmp_path: Path, multi_fasta_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("parser:\n  infer_types: false\n")
    main(["summary", str(multi_fasta_path), "--config", str(cfg)])
    df = pd.read_csv(io.StringIO(capsys.readouterr().out), sep="\t")
    assert set(df["seq_type"]) == {"DNA"}


def test_summary_malformed_file_exits(tmp_path: Path) -> None:
    bad = tmp_path / "bad.fa"
    bad.write_text("ACGT\n")
    with pytest.raises(SystemExit):
        main(["summary", str(bad)])


def test_summary_empty_file_warns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    empty = tmp_path / "empty.fa"
    empty.write_text("")
    main(["summary", str(empty)])
    captured = capsys.readouterr()
    assert "[WARN] No records found" in captured.err
    df = pd.read_csv(io.StringIO(captured.out), sep="\t")
    assert list(df.columns) == SUMMARY_COLUMNS
    assert len(df) == 0


def test_summary_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["summary", str(tmp_path / "missing.fa")])


def test_classify(capsys: pytest.CaptureFixture[str]) -> None:
    main(["classify", "acugcauu"])
    assert capsys.readouterr().out.strip() == "RNA\tNucleicAcid"


def test_reformat(tmp_path: Path, multi_fasta_path: Path) -> None:
    out = tmp_path / "wrapped.fa"
    main(["reformat", str(multi_fasta_path), str(out), "--width", "4"])
    lines = out.read_text().splitlines()
    assert lines[:5] == [">seq_dna Escherichia coli fragment", "ACGT", "ACGT", "ACGT", ">seq_rna"]


def test_reformat_uppercase_from_config(tmp_path: Path) -> None:
    src = tmp_path / "lower.fa"
    src.write_text(">a\nacgt\n")
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("uppercase: true\nline_width: 0\n")
    out = tmp_path / "upper.fa"
    main(["reformat", str(src), str(out), "--config", str(cfg)])
    assert out.read_text() == ">a\nACGT\n"


def test_no_command_exits() -> None:
    with pytest.raises(SystemExit):
        main([])
