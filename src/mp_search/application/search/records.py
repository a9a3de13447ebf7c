"""Application search – record field access."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["field_value"]


def field_value(record: Any, name: str) -> Any:
    """Read field *name* from a mapping or an attribute bag; missing is ``None``."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)
