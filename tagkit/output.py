"""File writers: rendered text, JSON tag index."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def save_text(content: str, output_path: Path) -> None:
    """Save rendered text to file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")


def save_json(data: Any, output_path: Path) -> int:
    """Save data as indented JSON.

    Returns file size in bytes.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(dump_json(data))
    return output_path.stat().st_size


def dump_json(data: Any) -> bytes:
    return orjson.dumps(data, option=orjson.OPT_INDENT_2)
