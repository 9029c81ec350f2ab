from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def truncate_string(value: Optional[str], limit: int = 800) -> Optional[str]:
    if not value:
        return None
    text = value.strip()
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def kebab_case(name: str) -> str:
    return name.replace("_", "-")


__all__ = ["now_iso", "truncate_string", "kebab_case"]
