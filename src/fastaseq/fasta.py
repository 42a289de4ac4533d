"""
FASTA parsing into immutable sequence records.

A single record looks like:

    [ignored leading text]>IDENTIFIER[ DESCRIPTION TEXT]
    SEQUENCE LINE 1
    SEQUENCE LINE 2
    ...

parse_explicit() keeps the caller's SequenceType/Alphabet; parse_inferred()
classifies the sequence letters instead. Multi-record text and files are
handled by splitting on header lines and parsing each chunk on its own.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .alphabets import Alphabet
from .seq import SequenceType, classify

__all__ = [
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

HEADER_MARKER = ">"
DEFAULT_LINE_WIDTH = 60


class FastaParseError(ValueError):
    """Base class for FASTA parse failures."""


class MalformedInputError(FastaParseError):
    """No '>' header marker, or the header is not followed by a newline."""


class MissingIdentifierError(FastaParseError):
    """The header has no identifier after trimming."""


def _preview(text: str, limit: int = 40) -> str:
    snippet = text if len(text) <= limit else text[:limit] + "..."
    return repr(snippet)


def _strip_line_breaks(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")


@dataclass(frozen=True)
class FastaSeq:
    """One parsed FASTA entry.

    Attributes:
        sequence: Residues with line breaks removed and outer whitespace trimmed
        identifier: First space-delimited token of the header
        description: Rest of the header, trimmed; None when there is none
        alphabet: Supplied or inferred symbol alphabet
        seq_type: Supplied or inferred sequence type
    """

    sequence: str
    identifier: str
    description: str | None = None
    alphabet: Alphabet = Alphabet.NUCLEIC_ACID
    seq_type: SequenceType = SequenceType.DNA

    def __post_init__(self) -> None:
        if not self.identifier.strip():
            raise MissingIdentifierError("FASTA record identifier must not be empty.")
        if "\n" in self.sequence or "\r" in self.sequence:
            raise MalformedInputError(
                f"Sequence for '{self.identifier}' must not contain line breaks."
            )

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def header(self) -> str:
        if self.description is None:
            return self.identifier
        return f"{self.identifier} {self.description}"

    @classmethod
    def from_fasta(
        cls,
        text: str,
        seq_type: SequenceType | None = None,
        alphabet: Alphabet | None = None,
    ) -> FastaSeq:
        """Parse `text`, inferring type/alphabet unless both are supplied."""
        if seq_type is None and alphabet is None:
            return parse_inferred(text)
        if seq_type is None or alphabet is None:
            raise ValueError("seq_type and alphabet must be given together, or both omitted.")
        return parse_explicit(text, seq_type, alphabet)


def parse_explicit(text: str, seq_type: SequenceType, alphabet: Alphabet) -> FastaSeq:
    """Parse a single FASTA record, keeping the supplied type and alphabet.

    Everything before the first '>' is ignored. The header runs up to the
    first newline; the identifier is the header text before the first space
    and the description is whatever follows it.

    Raises:
        MalformedInputError: No '>' in `text`, or no newline after the header.
        MissingIdentifierError: The identifier is empty after trimming.
    """
    start = text.find(HEADER_MARKER)
    if start < 0:
        raise MalformedInputError(f"No '>' header marker found in FASTA input {_preview(text)}")

    header, sep, body = text[start + 1 :].partition("\n")
    if not sep:
        raise MalformedInputError(
            f"FASTA header must be followed by a newline and sequence lines: {_preview(header)}"
        )

    identifier, _, description_raw = header.partition(" ")
    identifier = identifier.strip()
    if not identifier:
        raise MissingIdentifierError(f"FASTA header has no identifier: {_preview(header)}")

    description = description_raw.strip() or None
    sequence = _strip_line_breaks(body).strip()

    return FastaSeq(
        sequence=sequence,
        identifier=identifier,
        description=description,
        alphabet=alphabet,
        seq_type=seq_type,
    )


def parse_inferred(text: str) -> FastaSeq:
    """Parse a single FASTA record and classify its type from the residues."""
    provisional = parse_explicit(text, SequenceType.default(), Alphabet.default())
    seq_type, alphabet = classify(provisional.sequence)
    return dataclasses.replace(provisional, seq_type=seq_type, alphabet=alphabet)


# -------------------------------------------------------------
# Multi-record collections
# -------------------------------------------------------------


@dataclass(frozen=True)
class FastaRecord:
    """An ordered collection of parsed FASTA entries."""

    sequences: tuple[FastaSeq, ...] = ()

    def __len__(self) -> int:
        return len(self.sequences)

    def __iter__(self) -> Iterator[FastaSeq]:
        return iter(self.sequences)

    def __getitem__(self, index: int) -> FastaSeq:
        return self.sequences[index]

    def identifiers(self) -> list[str]:
        return [s.identifier for s in self.sequences]

    def get(self, identifier: str) -> FastaSeq | None:
        """Return the first entry with `identifier`, or None."""
        for s in self.sequences:
            if s.identifier == identifier:
                return s
        return None


def split_fasta_entries(text: str) -> list[str]:
    """
    Split multi-record FASTA text into single-record chunks.

    A record starts at every line whose first non-blank character is '>'.
    Lines before the first header are dropped. Each chunk ends with a newline
    so that a header-only record at the end of the text still parses (to an
    empty sequence). Empty or whitespace-only text has no records.
    """
    entries: list[str] = []
    current: list[str] | None = None

    if not text.strip():
        return entries

    for line in text.split("\n"):
        if line.lstrip().startswith(HEADER_MARKER):
            if current is not None:
                entries.append("\n".join(current) + "\n")
            current = [line]
        elif current is not None:
            current.append(line)

    if current is None:
        raise MalformedInputError(f"No FASTA header line found in input {_preview(text)}")
    entries.append("\n".join(current) + "\n")
    return entries


def parse_fasta_records(
    text: str,
    *,
    seq_type: SequenceType | None = None,
    alphabet: Alphabet | None = None,
) -> FastaRecord:
    """Parse every record in `text`.

    With no seq_type/alphabet each entry is classified on its own; with both
    given every entry gets the same explicit values.
    """
    return FastaRecord(
        tuple(
            FastaSeq.from_fasta(chunk, seq_type=seq_type, alphabet=alphabet)
            for chunk in split_fasta_entries(text)
        )
    )


def read_fasta(
    path: str | Path,
    *,
    seq_type: SequenceType | None = None,
    alphabet: Alphabet | None = None,
) -> FastaRecord:
    """Read a FASTA file and parse all of its records."""
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_fasta_records(text, seq_type=seq_type, alphabet=alphabet)


def _wrap(sequence: str, width: int) -> list[str]:
    if width <= 0 or len(sequence) <= width:
        return [sequence]
    return [sequence[i : i + width] for i in range(0, len(sequence), width)]


def format_fasta(records: FastaSeq | Iterable[FastaSeq], width: int = DEFAULT_LINE_WIDTH) -> str:
    """
    Render records as FASTA text, wrapping sequence lines at `width`
    characters (width <= 0 keeps each sequence on one line).
    """
    if not isinstance(width, int) or isinstance(width, bool):
        raise ValueError(f"width must be an integer, got {width!r}")
    if isinstance(records, FastaSeq):
        records = [records]

    lines: list[str] = []
    for rec in records:
        lines.append(f"{HEADER_MARKER}{rec.header}")
        lines.extend(_wrap(rec.sequence, width))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def write_fasta(
    path: str | Path,
    records: FastaSeq | Iterable[FastaSeq],
    width: int = DEFAULT_LINE_WIDTH,
) -> None:
    Path(path).write_text(format_fasta(records, width=width), encoding="utf-8")
