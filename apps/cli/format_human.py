"""Human-readable not-found report for CLI output."""

from __future__ import annotations

from collections import Counter

from core.convert.assembler import ConversionResult
from core.convert.engine import docs_search_url


def render_not_found_report(result: ConversionResult) -> str:
    """Render one-screen summary of unresolved classes with docs links."""

    if not result.not_found:
        return "not_found: none"

    counter: Counter[str] = Counter(result.not_found)
    lines = [f"not_found: {len(result.not_found)}"]
    for token in dict.fromkeys(result.not_found):
        count = counter[token]
        suffix = f" (x{count})" if count > 1 else ""
        lines.append(f"  {token}{suffix} -> {docs_search_url(token)}")
    return "\n".join(lines)
