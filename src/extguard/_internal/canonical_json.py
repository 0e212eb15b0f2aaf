"""Centralized canonical JSON serialization.

Used for report files, CLI JSON output and test snapshots, so that
analyzing the same package twice produces byte-identical output.
"""

import json
from typing import Any

from pydantic import BaseModel


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization for byte-stable reports.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Stable separators (",", ":")
    - Lists keep their order (issue order is meaningful for display)

    Args:
        obj: Python object or pydantic model to serialize

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
