"""Merge per-group resolver output into one CSS text."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass, field

from core.cheatsheet.models import BREAKPOINT_KEYS, PSEUDO_KEYS, TEMPLATE_PLACEHOLDER, LookupTable
from core.convert.resolver import CORE_TYPE, GroupResult
from core.utils.errors import UnknownBreakpointError


@dataclass
class ConversionResult:
    """Aggregate conversion output for a whole input string."""

    result_css: str = ""
    not_found: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {"resultCss": self.result_css, "notFound": list(self.not_found)}


def assemble(results: list[GroupResult], table: LookupTable) -> ConversionResult:
    """Join group CSS in order, wrapping modifier groups.

    - ``core`` CSS is appended verbatim.
    - Pseudo-class CSS is wrapped in ``:<pseudo> { ... }``.
    - Breakpoint CSS replaces the ``...`` placeholder of its media template.
    """

    css_code = ""
    not_found: list[str] = []

    for result in results:
        not_found.extend(result.not_found)
        css_code += "\n"
        if result.type == CORE_TYPE:
            css_code += result.css_code
        elif result.type in PSEUDO_KEYS:
            css_code += f"\n:{result.type} {{\n {result.css_code}}}"
        else:
            css_code += wrap_breakpoint(result.css_code, result.type, table)

    return ConversionResult(result_css=css_code.rstrip(), not_found=not_found)


def wrap_breakpoint(css_code: str, breakpoint: str, table: LookupTable) -> str:
    """Substitute indented CSS into the media-query template of ``breakpoint``."""

    template = table.breakpoint_template(breakpoint) if breakpoint in BREAKPOINT_KEYS else None
    if template is None:
        raise UnknownBreakpointError(
            f"No media-query template for breakpoint: {breakpoint}",
            breakpoint=breakpoint,
        )
    return template.replace(TEMPLATE_PLACEHOLDER, "\n" + textwrap.indent(css_code, "  "), 1)
