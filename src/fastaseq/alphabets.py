"""
IUPAC symbol tables and the alphabet a sequence is drawn from.

The symbol sets are module-level frozensets: they are built once when the
module is first imported and are never mutated afterwards, so every parse
call shares the same read-only tables.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Alphabet",
    "NUCLEIC_ACID_SYMBOLS",
    "AMINO_ACID_SYMBOLS",
    "AMINO_ACID_EXCLUSIVE_SYMBOLS",
]


class Alphabet(Enum):
    """Symbol set a sequence is drawn from."""

    NUCLEIC_ACID = "NucleicAcid"
    PROTEIN = "Protein"

    @classmethod
    def default(cls) -> Alphabet:
        return cls.NUCLEIC_ACID

    def __str__(self) -> str:
        return self.value


# IUPAC nucleotide codes, including ambiguity codes (N = any base)
NUCLEIC_ACID_SYMBOLS = frozenset("ACGTUWSMKRYBDHVN")

# IUPAC amino-acid codes (X = any residue)
AMINO_ACID_SYMBOLS = frozenset("ARNDCQEGHILKMFPSTWYVX")

# Letters that can only be amino acids: E, F, I, L, P, Q, X
AMINO_ACID_EXCLUSIVE_SYMBOLS = AMINO_ACID_SYMBOLS - NUCLEIC_ACID_SYMBOLS
