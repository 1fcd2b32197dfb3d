"""Cheatsheet loading utilities for the class lookup table."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from core.cheatsheet.models import (
    BREAKPOINT_KEYS,
    AliasedDeclaration,
    CheatsheetDocument,
    DirectDeclaration,
    LookupRow,
    LookupTable,
)


def load_cheatsheet(path: Path | None = None) -> LookupTable:
    """Load and validate the class lookup table from YAML."""

    cheatsheet_path = path or Path(__file__).with_name("cheatsheet.yaml")

    try:
        raw = yaml.safe_load(cheatsheet_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Cheatsheet file not found: {cheatsheet_path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in cheatsheet file: {cheatsheet_path}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Cheatsheet file must contain a mapping: {cheatsheet_path}")

    try:
        document = CheatsheetDocument.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid cheatsheet schema: {cheatsheet_path}") from exc

    return _build_table(document)


@lru_cache(maxsize=1)
def default_cheatsheet() -> LookupTable:
    """Return the packaged lookup table, loaded once per process."""

    return load_cheatsheet()


def _build_table(document: CheatsheetDocument) -> LookupTable:
    rows: list[LookupRow] = []
    for section in document.sections:
        for block in section.content:
            rows.extend(_to_row(fields) for fields in block.table)

    breakpoints = {key: document.breakpoints[key] for key in BREAKPOINT_KEYS}
    return LookupTable(rows=tuple(rows), breakpoints=MappingProxyType(breakpoints))


def _to_row(fields: list[str]) -> LookupRow:
    if len(fields) == 3:
        return AliasedDeclaration(short_name=fields[0], alias=fields[1], css=fields[2])
    return DirectDeclaration(short_name=fields[0], css=fields[1])
