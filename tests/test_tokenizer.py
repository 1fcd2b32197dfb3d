from __future__ import annotations

from core.convert.tokenizer import BASE_GROUP, ModifierGroup, classify, match_modifier, split_tokens


def test_split_tokens_handles_any_whitespace() -> None:
    assert split_tokens("  p-4\n\tbg-red-500   text-center \n") == [
        "p-4",
        "bg-red-500",
        "text-center",
    ]


def test_split_tokens_keeps_duplicates_in_order() -> None:
    assert split_tokens("p-4 m-2 p-4") == ["p-4", "m-2", "p-4"]


def test_split_tokens_empty_input() -> None:
    assert split_tokens("") == []
    assert split_tokens(" \n ") == []


def test_match_modifier_strips_prefixes() -> None:
    assert match_modifier("sm:p-4") == (ModifierGroup(kind="breakpoint", key="sm"), "p-4")
    assert match_modifier("2xl:p-4") == (ModifierGroup(kind="breakpoint", key="2xl"), "p-4")
    assert match_modifier("hover:underline") == (
        ModifierGroup(kind="pseudo", key="hover"),
        "underline",
    )
    assert match_modifier("p-4") == (BASE_GROUP, "p-4")


def test_token_starting_with_modifier_word_is_base() -> None:
    classified = classify(["hoverable", "small", "disabled-look", "xl-card"])

    assert classified.base == ["hoverable", "small", "disabled-look", "xl-card"]
    assert classified.breakpoints == {}
    assert classified.pseudo == {}


def test_classify_groups_in_fixed_order() -> None:
    classified = classify(
        ["hover:underline", "p-4", "2xl:m-2", "sm:p-2", "disabled:opacity-50", "sm:m-1"]
    )

    assert classified.base == ["p-4"]
    assert list(classified.breakpoints) == ["sm", "2xl"]
    assert classified.breakpoints["sm"] == ["p-2", "m-1"]
    assert classified.breakpoints["2xl"] == ["m-2"]
    assert list(classified.pseudo) == ["hover", "disabled"]

    tags = [group.type_tag for group, _ in classified.groups()]
    assert tags == ["core", "sm", "2xl", "hover", "disabled"]


def test_unknown_modifier_stays_in_base() -> None:
    classified = classify(["focus:underline"])

    assert classified.base == ["focus:underline"]
