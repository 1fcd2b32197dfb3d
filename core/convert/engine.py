"""Class-to-CSS conversion entry point."""

from __future__ import annotations

from urllib.parse import quote

from core.cheatsheet.loader import default_cheatsheet
from core.cheatsheet.models import LookupTable
from core.convert.assembler import ConversionResult, assemble
from core.convert.resolver import resolve_group
from core.convert.tokenizer import classify, split_tokens

DOCS_SEARCH_URL = "https://google.com/search?btnI=1&q=site:tailwindcss.com/docs%20"


def convert(text: str, table: LookupTable | None = None) -> ConversionResult:
    """Convert whitespace-separated utility classes into CSS.

    Groups are resolved base first, then breakpoints (sm..2xl), then
    pseudo-classes (hover, disabled); groups without tokens are skipped.
    """

    if text == "":
        return ConversionResult(result_css="", not_found=[])

    lookup = table if table is not None else default_cheatsheet()
    classified = classify(split_tokens(text))
    results = [
        resolve_group(tokens, lookup, group.type_tag) for group, tokens in classified.groups()
    ]
    return assemble(results, lookup)


def docs_search_url(token: str) -> str:
    """Return a documentation search link for an unresolved class."""

    return DOCS_SEARCH_URL + quote(token, safe="")
