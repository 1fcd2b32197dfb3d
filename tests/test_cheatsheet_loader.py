from __future__ import annotations

from pathlib import Path

import pytest

from core.cheatsheet.loader import default_cheatsheet, load_cheatsheet
from core.cheatsheet.models import AliasedDeclaration, DirectDeclaration

_BREAKPOINTS = """
breakpoints:
  sm: "@media (min-width: 640px) { ... }"
  md: "@media (min-width: 768px) { ... }"
  lg: "@media (min-width: 1024px) { ... }"
  xl: "@media (min-width: 1280px) { ... }"
  2xl: "@media (min-width: 1536px) { ... }"
"""


def test_load_default_cheatsheet() -> None:
    table = load_cheatsheet()

    assert len(table) > 100
    assert DirectDeclaration(short_name="p-4", css="padding: 1rem;") in table.rows
    assert table.breakpoint_template("sm") == "@media (min-width: 640px) { ... }"
    assert table.breakpoint_template("2xl") == "@media (min-width: 1536px) { ... }"


def test_default_cheatsheet_is_cached() -> None:
    assert default_cheatsheet() is default_cheatsheet()


def test_load_cheatsheet_builds_both_row_variants(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text(
        _BREAKPOINTS
        + """
sections:
  - title: Flexbox
    content:
      - title: Flex Grow
        table:
          - ["flex", "display: flex;"]
          - ["flex-grow", "grow", "flex-grow: 1"]
""",
        encoding="utf-8",
    )

    table = load_cheatsheet(path)

    assert table.rows == (
        DirectDeclaration(short_name="flex", css="display: flex;"),
        AliasedDeclaration(short_name="flex-grow", alias="grow", css="flex-grow: 1"),
    )


def test_load_cheatsheet_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Cheatsheet file not found"):
        load_cheatsheet(tmp_path / "missing.yaml")


def test_load_cheatsheet_raises_for_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text("breakpoints: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_cheatsheet(path)


def test_load_cheatsheet_raises_for_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_cheatsheet(path)


def test_load_cheatsheet_raises_for_one_field_row(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text(
        _BREAKPOINTS
        + """
sections:
  - title: Layout
    content:
      - title: Display
        table:
          - ["block"]
""",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Invalid cheatsheet schema"):
        load_cheatsheet(path)


def test_load_cheatsheet_raises_for_missing_breakpoint(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text(
        """
breakpoints:
  sm: "@media (min-width: 640px) { ... }"
sections: []
""",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Invalid cheatsheet schema"):
        load_cheatsheet(path)


def test_load_cheatsheet_raises_for_template_without_placeholder(tmp_path: Path) -> None:
    path = tmp_path / "cheatsheet.yaml"
    path.write_text(
        _BREAKPOINTS.replace("(min-width: 768px) { ... }", "(min-width: 768px) { }")
        + "sections: []\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Invalid cheatsheet schema"):
        load_cheatsheet(path)
