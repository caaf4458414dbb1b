"""JSON file helpers for the todo collection.

``read_json`` hands back ``default`` while the file does not exist yet;
``write_json`` swaps the new content in with ``os.replace`` so readers
never observe a half-written collection.
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any, Optional

JSON_INDENT = 2


def read_json(path: str, default: Optional[Any] = None) -> Any:
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, data: Any) -> None:
    folder = os.path.dirname(path) or "."
    os.makedirs(folder, exist_ok=True)
    text = json.dumps(data, ensure_ascii=False, indent=JSON_INDENT) + "\n"
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=folder, prefix=".todos-", suffix=".json", delete=False
    ) as tmp:
        tmp.write(text)
    try:
        os.replace(tmp.name, path)
    except OSError:
        os.remove(tmp.name)
        raise
