"""Output helpers for the lkecred CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def _default_serializer(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def emit(data: Any, fmt: str, output_path: Path | None = None) -> None:
    if fmt == "json":
        rendered = json.dumps(data, indent=2, ensure_ascii=False, default=_default_serializer)
    elif fmt == "md":
        rendered = _to_markdown(data)
    elif fmt == "table":
        rendered = _to_table(data)
    else:
        raise ValueError(f"Unsupported format: {fmt}")

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + ("\n" if not rendered.endswith("\n") else ""), encoding="utf-8")
    else:
        print(rendered)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _to_markdown(data: Any) -> str:
    if isinstance(data, dict):
        lines = ["| Key | Value |", "| --- | --- |"]
        for key, value in data.items():
            lines.append(f"| {key} | {_cell(value)} |")
        return "\n".join(lines)
    return str(data)


def _to_table(data: Any) -> str:
    if isinstance(data, dict):
        width = max(len(str(key)) for key in data.keys()) if data else 0
        return "\n".join(f"{str(key).ljust(width)} : {_cell(value)}" for key, value in data.items())
    return str(data)


__all__ = ["emit"]
