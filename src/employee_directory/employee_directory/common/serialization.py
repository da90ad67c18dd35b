from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


def as_sample_string(value: Any) -> str:
    """Samples are stored as text whatever the client sent."""
    return value if isinstance(value, str) else str(value)
