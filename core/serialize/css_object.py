"""Render assembled CSS as a nested object literal (JSS style).

Top-level declarations, qualified rules and at-rules are all accepted, so
output of the converter (bare declarations plus ``:hover`` and ``@media``
blocks) parses without a wrapping selector.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator
from typing import Any

import tinycss2

from core.utils.errors import CssParseError

logger = logging.getLogger("twcss.serialize")

_DASH_RE = re.compile(r"-(\w|$)")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_END_MARKER = "twcss-end-of-input"
_BRACKETS = {"() block": ("(", ")"), "[] block": ("[", "]"), "{} block": ("{", "}")}

UNITLESS_PROPERTIES = frozenset(
    {
        "boxFlex",
        "boxFlexGroup",
        "columnCount",
        "flex",
        "flexGrow",
        "flexPositive",
        "flexShrink",
        "flexNegative",
        "fontWeight",
        "lineClamp",
        "lineHeight",
        "opacity",
        "order",
        "orphans",
        "tabSize",
        "widows",
        "zIndex",
        "zoom",
        "fillOpacity",
        "strokeDashoffset",
        "strokeOpacity",
        "strokeWidth",
    }
)


def css_to_object(css: str) -> dict[str, Any]:
    """Parse CSS text into a nested mapping.

    Rules:
    - Rules key by selector; repeated selectors merge.
    - At-rules key by ``@name params``; block-less at-rules map to ``True``.
    - Declarations key by camel-cased property, repeated keys become lists.
    - ``!important`` is appended to the value.
    - Values keep their source quotes; comments inside values are dropped.

    Raises:
        CssParseError: when the text has unclosed blocks, strings or
        comments, unmatched closing brackets, or any node fails to parse.
    """

    _check_tokens(css)
    source = _Source(css)
    nodes = tinycss2.parse_blocks_contents(css, skip_comments=True, skip_whitespace=True)
    return _objectify(nodes, source)


def css_to_object_literal(css: str) -> str | None:
    """Return the object rendering of ``css`` as JSON text, or None on parse failure."""

    try:
        payload = css_to_object(css)
    except CssParseError as exc:
        logger.warning("css re-parse failed: %s errors=%s", exc, exc.errors)
        return None
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def camel_case_property(name: str) -> str:
    """Convert a CSS property name to its JS style key."""

    if name.startswith("--"):
        return name
    lowered = name.lower()
    if lowered == "float":
        return "cssFloat"
    if lowered.startswith("-ms-"):
        lowered = lowered[1:]
    return _DASH_RE.sub(lambda match: match.group(1).upper(), lowered)


class _Source:
    """CSS text as tinycss2 sees it, addressable by token line and column."""

    def __init__(self, css: str) -> None:
        self.text = (
            css.replace("\0", "\uFFFD")
            .replace("\r\n", "\n")
            .replace("\r", "\n")
            .replace("\f", "\n")
        )
        self._line_starts = [0] + [match.end() for match in re.finditer("\n", self.text)]

    def char_at(self, node: Any) -> str:
        return self.text[self._line_starts[node.source_line - 1] + node.source_column - 1]


def _objectify(nodes: list[Any], source: _Source) -> dict[str, Any]:
    result: dict[str, Any] = {}
    errors = [node.message for node in nodes if node.type == "error"]
    if errors:
        raise CssParseError("Invalid CSS", errors=errors)

    for node in nodes:
        if node.type == "at-rule":
            name = f"@{node.at_keyword}"
            params = _component_text(node.prelude, source).strip()
            if params:
                name = f"{name} {params}"
            value: Any = (
                True if node.content is None else _objectify(_parse_block(node.content), source)
            )
            _append(result, name, value)
        elif node.type == "qualified-rule":
            selector = _component_text(node.prelude, source).strip()
            body = _objectify(_parse_block(node.content), source)
            existing = result.get(selector)
            if isinstance(existing, dict):
                existing.update(body)
            else:
                result[selector] = body
        elif node.type == "declaration":
            key = camel_case_property(node.name)
            _append(result, key, _declaration_value(key, node, source))
    return result


def _parse_block(content: list[Any]) -> list[Any]:
    return tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)


def _declaration_value(key: str, node: Any, source: _Source) -> Any:
    raw = _component_text(node.value, source).strip()
    value: Any = raw
    if key in UNITLESS_PROPERTIES and _NUMBER_RE.fullmatch(raw):
        number = float(raw)
        value = int(number) if number.is_integer() else number
    if node.important:
        value = f"{value} !important"
    return value


def _component_text(tokens: list[Any], source: _Source) -> str:
    parts: list[str] = []
    for token in tokens:
        if token.type == "string":
            parts.append(_string_text(token, source))
        elif token.type == "function":
            name = tinycss2.serialize_identifier(token.name)
            parts.append(f"{name}({_component_text(token.arguments, source)})")
        elif token.type in _BRACKETS:
            opener, closer = _BRACKETS[token.type]
            parts.append(f"{opener}{_component_text(token.content, source)}{closer}")
        else:
            parts.append(tinycss2.serialize([token]))
    return "".join(parts)


def _string_text(token: Any, source: _Source) -> str:
    # tinycss2 always re-quotes strings with '"'.
    quote = source.char_at(token)
    if quote == "'" and not {"'", "\\", "\n"}.intersection(token.value):
        return f"'{token.value}'"
    return token.representation


def _append(result: dict[str, Any], key: str, value: Any) -> None:
    if key not in result:
        result[key] = value
    elif isinstance(result[key], list):
        result[key].append(value)
    else:
        result[key] = [result[key], value]


def _check_tokens(css: str) -> None:
    # tinycss2 closes open blocks at EOF without an error; a trailing marker
    # stays at the top level only if every block, string and comment closed.
    tokens = tinycss2.parse_component_value_list(f"{css}\n{_END_MARKER}")
    errors = [token.message for token in _walk(tokens) if token.type == "error"]
    last = tokens[-1] if tokens else None
    if last is None or last.type != "ident" or last.value != _END_MARKER:
        errors.append("unclosed block or comment")
    if errors:
        raise CssParseError("Invalid CSS", errors=errors)


def _walk(tokens: list[Any]) -> Iterator[Any]:
    for token in tokens:
        yield token
        if token.type == "function":
            yield from _walk(token.arguments)
        elif token.type in _BRACKETS:
            yield from _walk(token.content)
