"""Resolve one token group against the lookup table."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from core.cheatsheet.arbitrary import ARBITRARY_PROPERTIES
from core.cheatsheet.models import MODIFIER_KEYS, AliasedDeclaration, LookupTable

logger = logging.getLogger("twcss.convert")

CORE_TYPE = "core"

_BRACKET_VALUE_RE = re.compile(r"(?<=\[)[^\][]*(?=])")


@dataclass(frozen=True)
class ArbitraryMatch:
    """Bracketed token that maps onto a supported CSS property."""

    token: str
    property: str
    value: str

    @property
    def declaration(self) -> str:
        return f"{self.property}: {self.value};"


@dataclass(frozen=True)
class ArbitraryMiss:
    """Bracketed token that could not be turned into a declaration."""

    token: str
    reason: str


ArbitraryResult = ArbitraryMatch | ArbitraryMiss


@dataclass
class GroupResult:
    """CSS text and unmatched tokens for one modifier group."""

    css_code: str = ""
    not_found: list[str] = field(default_factory=list)
    type: str = CORE_TYPE


def parse_arbitrary(
    token: str,
    properties: Mapping[str, str] = ARBITRARY_PROPERTIES,
) -> ArbitraryResult:
    """Parse ``<alias>-[<value>]`` into a declaration.

    The alias is the text before the first ``-[`` (first ``.`` removed) and
    the value is the text strictly between ``[`` and the next ``]``.
    """

    if "-[" not in token:
        return ArbitraryMiss(token=token, reason="missing '-[' separator")

    alias = token.split("-[", 1)[0].replace(".", "", 1)
    match = _BRACKET_VALUE_RE.search(token)
    if match is None:
        return ArbitraryMiss(token=token, reason="no closed bracket value")

    css_property = properties.get(alias)
    if css_property is None:
        return ArbitraryMiss(token=token, reason=f"unsupported property alias '{alias}'")

    return ArbitraryMatch(token=token, property=css_property, value=match.group(0))


def resolve_group(tokens: list[str], table: LookupTable, type_: str = CORE_TYPE) -> GroupResult:
    """Resolve tokens of one group into CSS lines and not-found tokens.

    Rules:
    - Rows are visited in table order, so each matching row emits once even
      when the token repeats.
    - A row matching on its alias gets a trailing ``;`` when missing.
    - Bracketed tokens left unmatched are tried as arbitrary values.
    - Non-core groups report not-found tokens as ``<type>:<token>``.
    """

    wanted = set(tokens)
    found: set[str] = set()
    lines: list[str] = []

    for row in table.rows:
        if row.short_name in wanted:
            found.add(row.short_name)
            if isinstance(row, AliasedDeclaration):
                lines.append(_with_semicolon(row.css))
            else:
                lines.append(row.css)

        if isinstance(row, AliasedDeclaration) and row.alias in wanted:
            found.add(row.alias)
            lines.append(_with_semicolon(row.css))

    for token in dict.fromkeys(tokens):
        if "[" not in token or token in found:
            continue
        outcome = parse_arbitrary(token)
        if isinstance(outcome, ArbitraryMiss):
            logger.debug("arbitrary value unmatched: token=%s reason=%s", token, outcome.reason)
            continue
        found.add(token)
        lines.append(outcome.declaration)

    css_code = "".join(f"{line}\n" for line in lines)
    not_found = _not_found_tokens(tokens, found)
    if type_ != CORE_TYPE:
        not_found = [f"{type_}:{token}" for token in not_found]
    return GroupResult(css_code=css_code, not_found=not_found, type=type_)


def _with_semicolon(css: str) -> str:
    return css if css.endswith(";") else f"{css};"


def _not_found_tokens(tokens: list[str], found: set[str]) -> list[str]:
    # Approximate: drops any token that starts with a modifier key string,
    # including unrelated names such as "small" or "hover-card".
    return [
        token
        for token in tokens
        if token not in found and not any(token.startswith(key) for key in MODIFIER_KEYS)
    ]
