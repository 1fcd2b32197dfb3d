"""CLI I/O helpers for input reading and atomic output writing."""

from __future__ import annotations

import json
import sys
import tempfile
from pathlib import Path
from typing import Any


def read_input(classes: str | None, input_path: Path | None) -> str:
    """Return raw class input from the argument, a file, or stdin."""

    if classes is not None:
        return classes
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    return sys.stdin.read()


def dump_json(payload: dict[str, Any]) -> str:
    """Serialize a payload for JSON output mode."""

    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)


def write_text_atomic(path: Path, text: str) -> None:
    """Write text atomically using a temporary file + replace."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        prefix=f"{path.name}.",
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        tmp.write(text)
        if not text.endswith("\n"):
            tmp.write("\n")

    try:
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
