"""
Biological sequence types and content-based type inference.

classify() decides the molecular type of a sequence from its letters alone:

- any U (uracil)                      -> RNA / nucleic acid
- any amino-acid-only letter          -> protein / protein
- otherwise (ambiguous, or empty)     -> DNA / nucleic acid (fallback)

The U check runs first, so "ACUWE" is reported as RNA even though E can only
be an amino acid. That ordering is kept as-is for compatibility.
"""

from __future__ import annotations

from enum import Enum

from .alphabets import AMINO_ACID_EXCLUSIVE_SYMBOLS, Alphabet

__all__ = [
    "SequenceType",
    "classify",
    "DEFAULT_CLASSIFICATION",
]


class SequenceType(Enum):
    """Biological category of a sequence."""

    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "Protein"

    @classmethod
    def default(cls) -> SequenceType:
        return cls.DNA

    def __str__(self) -> str:
        return self.value


# DNA and RNA share every letter except U, so letters alone cannot tell an
# ambiguity-coded nucleotide string from DNA.
DEFAULT_CLASSIFICATION: tuple[SequenceType, Alphabet] = (
    SequenceType.default(),
    Alphabet.default(),
)


def classify(sequence: str) -> tuple[SequenceType, Alphabet]:
    """Infer (SequenceType, Alphabet) from the letters of `sequence`.

    Case-insensitive. Never raises: every string, including "", maps to some
    classification.
    """
    letters = set(sequence.upper())

    if "U" in letters:
        return SequenceType.RNA, Alphabet.NUCLEIC_ACID

    if not letters.isdisjoint(AMINO_ACID_EXCLUSIVE_SYMBOLS):
        return SequenceType.PROTEIN, Alphabet.PROTEIN

    # Ambiguous fallback: only letters shared by both alphabets were seen.
    return DEFAULT_CLASSIFICATION
