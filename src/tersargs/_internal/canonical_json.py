"""Canonical JSON serialization for command output.

Byte-stable output lets callers diff or snapshot results across runs and
platforms.
"""

import json
from typing import Any

from pydantic import BaseModel


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (non-ASCII identifiers are written as-is)
    - Sorted keys
    - Stable separators (",", ":")
    - List order preserved (tuples of flags are already in first-seen order)

    Args:
        obj: JSON-compatible object, or a pydantic model (dumped in JSON mode)

    Returns:
        Canonical JSON string
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )
