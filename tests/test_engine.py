from __future__ import annotations

from types import MappingProxyType

import pytest

from core.cheatsheet.models import DirectDeclaration, LookupTable
from core.convert.engine import convert, docs_search_url


def test_empty_input_returns_empty_result() -> None:
    result = convert("")

    assert result.result_css == ""
    assert result.not_found == []


def test_whitespace_input_returns_empty_result() -> None:
    result = convert(" \n\t ")

    assert result.result_css == ""
    assert result.not_found == []


def test_known_padding_class() -> None:
    result = convert("p-4")

    assert "padding: 1rem;" in result.result_css
    assert result.not_found == []


def test_arbitrary_width() -> None:
    result = convert("w-[37px]")

    assert "width: 37px;" in result.result_css
    assert result.not_found == []


def test_breakpoint_class_wrapped_in_media_query() -> None:
    result = convert("sm:text-center")

    assert result.result_css.strip() == "@media (min-width: 640px) { \n  text-align: center;\n }"
    assert result.not_found == []


def test_2xl_breakpoint_prefix_is_stripped() -> None:
    result = convert("2xl:p-4")

    assert "@media (min-width: 1536px)" in result.result_css
    assert "padding: 1rem;" in result.result_css
    assert result.not_found == []


def test_unknown_class_is_reported() -> None:
    result = convert("totally-unknown-class")

    assert result.result_css.strip() == ""
    assert result.not_found == ["totally-unknown-class"]


def test_hover_block_and_bare_unknown_token() -> None:
    result = convert("hover:bg-red-500 unknown-token")

    assert ":hover {\n background-color: #ef4444;\n}" in result.result_css
    assert result.not_found == ["unknown-token"]
    assert "hover:bg-red-500" not in result.not_found


def test_modified_unknown_token_keeps_prefix() -> None:
    result = convert("md:nope disabled:nada p-4")

    assert result.not_found == ["md:nope", "disabled:nada"]


def test_group_order_base_breakpoints_pseudo() -> None:
    result = convert("hover:underline lg:p-2 sm:p-1 m-4")

    css = result.result_css
    assert css.index("margin: 1rem;") < css.index("(min-width: 640px)")
    assert css.index("(min-width: 640px)") < css.index("(min-width: 1024px)")
    assert css.index("(min-width: 1024px)") < css.index(":hover")


def test_found_in_one_group_is_not_found_in_another() -> None:
    result = convert("sm:p-4 hover:bogus-4")

    assert result.not_found == ["hover:bogus-4"]


def test_alias_row_from_default_table() -> None:
    result = convert("grow shrink-0")

    assert "flex-grow: 1;" in result.result_css
    assert "flex-shrink: 0;" in result.result_css
    assert result.not_found == []


def test_conversion_is_idempotent() -> None:
    text = "p-4 sm:text-center hover:bg-red-500 w-[12px] nope"

    first = convert(text)
    second = convert(text)

    assert first == second


def test_injected_table_is_used() -> None:
    table = LookupTable(
        rows=(DirectDeclaration(short_name="card", css="border-radius: 4px;"),),
        breakpoints=MappingProxyType({}),
    )

    result = convert("card p-4", table)

    assert result.result_css == "\nborder-radius: 4px;"
    assert result.not_found == ["p-4"]


@pytest.mark.parametrize(
    ("token", "expected_suffix"),
    [("bg-red-500", "bg-red-500"), ("sm:w-[1px]", "sm%3Aw-%5B1px%5D")],
)
def test_docs_search_url(token: str, expected_suffix: str) -> None:
    url = docs_search_url(token)

    assert url.startswith("https://google.com/search?btnI=1&q=site:tailwindcss.com/docs%20")
    assert url.endswith(expected_suffix)
