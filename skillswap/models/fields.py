"""
Field coercion helpers shared by the SkillSwap data models.

Rows come from a trusted store but may miss fields or carry loose types
(strings for numbers, None for flags). They are coerced here, once.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional


def coerce_int(value: Any, default: int, lo: int, hi: int) -> int:
    """Coerce to an int clamped into [lo, hi]; missing or non-numeric -> default."""
    if value is None or isinstance(value, bool):
        return int(default)
    try:
        val = int(float(value))
    except (TypeError, ValueError):
        return int(default)
    return int(min(max(val, lo), hi))


def coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y", "t")
    return bool(value)


def coerce_str(value: Any) -> str:
    return "" if value is None else str(value)


def coerce_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def new_id() -> str:
    return uuid.uuid4().hex


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
