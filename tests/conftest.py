# tests/conftest.py
"""Shared test fixtures for FASTA parsing tests."""

import sys
from pathlib import Path

import pytest

# Repo root = parent of this file's directory
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure src/ is on sys.path so `import fastaseq` works without installation
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def multi_fasta_text() -> str:
    """Three records: DNA, RNA and protein, with wrapped sequence lines."""
    return (
        ">seq_dna Escherichia coli fragment\n"
        "ACGTACGT\n"
        "ACGT\n"
        ">seq_rna\n"
        "ACUGCAUU\n"
        ">seq_prot  kinase domain \n"
        "MKTLLILAVV\n"
        "AAALA\n"
    )


@pytest.fixture
def multi_fasta_path(tmp_path: Path, multi_fasta_text: str) -> Path:
    """multi_fasta_text written to a temporary .fa file."""
    path = tmp_path / "records.fa"
    path.write_text(multi_fasta_text)
    return path
