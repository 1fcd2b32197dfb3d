"""Whitespace tokenizer and modifier classification for utility classes.

A token belongs to at most one modifier group: the one whose ``<key>:``
prefix it starts with. Tokens such as ``hoverable`` carry no modifier and
stay in the base group.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from core.cheatsheet.models import BREAKPOINT_KEYS, PSEUDO_KEYS

GroupKind = Literal["base", "breakpoint", "pseudo"]

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ModifierGroup:
    """Modifier a token group is resolved under."""

    kind: GroupKind
    key: str | None = None

    @property
    def type_tag(self) -> str:
        """Resolver type tag: ``core`` for the base group, else the key."""

        return self.key if self.key is not None else "core"


BASE_GROUP = ModifierGroup(kind="base")

_MODIFIER_GROUPS: tuple[ModifierGroup, ...] = tuple(
    [ModifierGroup(kind="breakpoint", key=key) for key in BREAKPOINT_KEYS]
    + [ModifierGroup(kind="pseudo", key=key) for key in PSEUDO_KEYS]
)


@dataclass
class ClassifiedTokens:
    """Input tokens partitioned by modifier group.

    ``breakpoints`` and ``pseudo`` only hold non-empty groups, in the fixed
    key order of ``BREAKPOINT_KEYS`` and ``PSEUDO_KEYS``.
    """

    base: list[str] = field(default_factory=list)
    breakpoints: dict[str, list[str]] = field(default_factory=dict)
    pseudo: dict[str, list[str]] = field(default_factory=dict)

    def groups(self) -> list[tuple[ModifierGroup, list[str]]]:
        """Return (group, tokens) pairs in resolution order, base first."""

        ordered: list[tuple[ModifierGroup, list[str]]] = [(BASE_GROUP, self.base)]
        for key, tokens in self.breakpoints.items():
            ordered.append((ModifierGroup(kind="breakpoint", key=key), tokens))
        for key, tokens in self.pseudo.items():
            ordered.append((ModifierGroup(kind="pseudo", key=key), tokens))
        return ordered


def split_tokens(text: str) -> list[str]:
    """Split raw input on whitespace runs, dropping empty tokens."""

    return [token for token in _WHITESPACE_RE.split(text) if token]


def match_modifier(token: str) -> tuple[ModifierGroup, str]:
    """Return the modifier group of ``token`` and the token without its prefix."""

    for group in _MODIFIER_GROUPS:
        prefix = f"{group.key}:"
        if token.startswith(prefix):
            return group, token[len(prefix) :]
    return BASE_GROUP, token


def classify(tokens: list[str]) -> ClassifiedTokens:
    """Partition tokens into base, breakpoint and pseudo-class groups."""

    breakpoints: dict[str, list[str]] = {key: [] for key in BREAKPOINT_KEYS}
    pseudo: dict[str, list[str]] = {key: [] for key in PSEUDO_KEYS}
    base: list[str] = []

    for token in tokens:
        group, stripped = match_modifier(token)
        if group.kind == "breakpoint":
            breakpoints[group.type_tag].append(stripped)
        elif group.kind == "pseudo":
            pseudo[group.type_tag].append(stripped)
        else:
            base.append(token)

    return ClassifiedTokens(
        base=base,
        breakpoints={key: items for key, items in breakpoints.items() if items},
        pseudo={key: items for key, items in pseudo.items() if items},
    )
