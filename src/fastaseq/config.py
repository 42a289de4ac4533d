"""Configuration utilities for fastaseq."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .fasta import DEFAULT_LINE_WIDTH

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "defaults.yaml"

TABLE_FORMATS = ("tsv", "csv")


@dataclass
class ParserConfig:
    """Options for the command-line front end."""

    line_width: int = DEFAULT_LINE_WIDTH
    infer_types: bool = True
    uppercase: bool = False
    table_format: str = "tsv"

    def __post_init__(self) -> None:
        if self.table_format not in TABLE_FORMATS:
            raise ValueError(
                f"table_format must be one of {', '.join(TABLE_FORMATS)}; got {self.table_format!r}"
            )


def load_config(path: str | Path | None) -> ParserConfig:
    """Load YAML config if provided; otherwise return defaults."""

    if path is None:
        if _DEFAULT_CONFIG_PATH.exists():
            path = _DEFAULT_CONFIG_PATH
        else:
            return ParserConfig()

    data: dict[str, Any] = {}
    with open(path) as fh:
        data = yaml.safe_load(fh) or {}

    section = data.get("parser", data) or {}
    known = {f.name for f in dataclasses.fields(ParserConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return ParserConfig(
        line_width=int(section.get("line_width", DEFAULT_LINE_WIDTH)),
        infer_types=bool(section.get("infer_types", True)),
        uppercase=bool(section.get("uppercase", False)),
        table_format=str(section.get("table_format", "tsv")),
    )
