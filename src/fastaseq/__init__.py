"""FASTA record parsing and sequence type inference."""

from .alphabets import (
    AMINO_ACID_EXCLUSIVE_SYMBOLS,
    AMINO_ACID_SYMBOLS,
    NUCLEIC_ACID_SYMBOLS,
    Alphabet,
)
from .fasta import (
    FastaParseError,
    FastaRecord,
    FastaSeq,
    MalformedInputError,
    MissingIdentifierError,
    format_fasta,
    parse_explicit,
    parse_fasta_records,
    parse_inferred,
    read_fasta,
    split_fasta_entries,
    write_fasta,
)
from .seq import SequenceType, classify

__all__ = [
    "Alphabet",
    "SequenceType",
    "NUCLEIC_ACID_SYMBOLS",
    "AMINO_ACID_SYMBOLS",
    "AMINO_ACID_EXCLUSIVE_SYMBOLS",
    "classify",
    "FastaParseError",
    "MalformedInputError",
    "MissingIdentifierError",
    "FastaSeq",
    "FastaRecord",
    "parse_explicit",
    "parse_inferred",
    "split_fasta_entries",
    "parse_fasta_records",
    "read_fasta",
    "format_fasta",
    "write_fasta",
]

__version__ = "0.1.0"
