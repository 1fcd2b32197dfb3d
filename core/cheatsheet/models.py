"""Data models for the class lookup table and its YAML schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

BREAKPOINT_KEYS: tuple[str, ...] = ("sm", "md", "lg", "xl", "2xl")
PSEUDO_KEYS: tuple[str, ...] = ("hover", "disabled")
MODIFIER_KEYS: tuple[str, ...] = BREAKPOINT_KEYS + PSEUDO_KEYS
TEMPLATE_PLACEHOLDER = "..."


class CheatsheetBlock(BaseModel):
    """One titled table of rows inside a cheatsheet section."""

    model_config = ConfigDict(extra="forbid")

    title: str
    table: list[list[str]] = Field(default_factory=list)

    @field_validator("table")
    @classmethod
    def _check_row_width(cls, table: list[list[str]]) -> list[list[str]]:
        for index, row in enumerate(table):
            if len(row) not in (2, 3):
                raise ValueError(f"row {index} must have 2 or 3 fields, got {len(row)}")
        return table


class CheatsheetSection(BaseModel):
    """Top-level cheatsheet category (Layout, Spacing, ...)."""

    model_config = ConfigDict(extra="forbid")

    title: str
    content: list[CheatsheetBlock] = Field(default_factory=list)


class CheatsheetDocument(BaseModel):
    """Cheatsheet document loaded from YAML."""

    model_config = ConfigDict(extra="forbid")

    breakpoints: dict[str, str]
    sections: list[CheatsheetSection]

    @field_validator("breakpoints")
    @classmethod
    def _check_breakpoints(cls, breakpoints: dict[str, str]) -> dict[str, str]:
        if set(breakpoints) != set(BREAKPOINT_KEYS):
            raise ValueError(
                f"breakpoints must define exactly {list(BREAKPOINT_KEYS)}, "
                f"got {sorted(breakpoints)}"
            )
        for key, template in breakpoints.items():
            if TEMPLATE_PLACEHOLDER not in template:
                raise ValueError(f"breakpoint template '{key}' has no '...' placeholder")
        return breakpoints


@dataclass(frozen=True)
class DirectDeclaration:
    """Row whose second field is already a full CSS declaration line."""

    short_name: str
    css: str


@dataclass(frozen=True)
class AliasedDeclaration:
    """Row carrying a secondary class name that resolves to the same CSS."""

    short_name: str
    alias: str
    css: str


LookupRow = DirectDeclaration | AliasedDeclaration


@dataclass(frozen=True)
class LookupTable:
    """Immutable lookup data consumed by the resolver and assembler."""

    rows: tuple[LookupRow, ...] = ()
    breakpoints: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def breakpoint_template(self, key: str) -> str | None:
        return self.breakpoints.get(key)

    def __len__(self) -> int:
        return len(self.rows)
