"""ID helpers for todo items.

Todo ids are creation timestamps in milliseconds. ``new_todo_id`` keeps them
unique within a collection when two items land in the same millisecond.
"""

from __future__ import annotations

import time
from typing import Iterable, Optional


def now_millis() -> int:
    return int(time.time() * 1000)


def new_todo_id(existing: Iterable[int], now: Optional[int] = None) -> int:
    """Return the current time in ms, bumped past the largest existing id.

    ``now`` can be passed to pin the clock.
    """
    candidate = now_millis() if now is None else now
    highest = max(existing, default=None)
    if highest is not None and candidate <= highest:
        return highest + 1
    return candidate
