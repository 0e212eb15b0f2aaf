"""Manifest lookup, parsing and tolerant field access.

The analyzed manifest is untrusted generated JSON, so every accessor here
degrades to an empty value instead of raising when a field has the wrong
shape. Shape problems are reported by the schema pass, not here.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from extguard.contracts import Artifact


MANIFEST_NAME = "manifest.json"
SUPPORTED_MANIFEST_VERSION = 3


class ManifestParseError(ValueError):
    """Raised when manifest content is not a JSON object."""
    pass


def find_manifest(artifacts: Sequence[Artifact]) -> Optional[Artifact]:
    """Return the first artifact named exactly ``manifest.json``."""
    for artifact in artifacts:
        if artifact.name == MANIFEST_NAME:
            return artifact
    return None


def parse_manifest(content: str) -> Dict[str, Any]:
    """Parse manifest text into a key-value document.

    Raises:
        ManifestParseError: If the content is not valid JSON or its top-level
            value is not an object.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(
            f"{e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except RecursionError as e:
        raise ManifestParseError("nesting too deep") from e
    if not isinstance(data, dict):
        raise ManifestParseError(
            f"top-level value must be an object, got {_json_type_name(data)}"
        )
    return data


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def section(manifest: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return ``manifest[key]`` if it is an object, else an empty dict."""
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def object_list(value: Any) -> List[Dict[str, Any]]:
    """Return the object entries of a JSON array (non-objects skipped)."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def string_list(value: Any) -> List[str]:
    """Return the string entries of a JSON array, order and duplicates kept."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def non_blank(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def declared_permissions(manifest: Dict[str, Any]) -> List[str]:
    return string_list(manifest.get("permissions"))


def declared_host_permissions(manifest: Dict[str, Any]) -> List[str]:
    return string_list(manifest.get("host_permissions"))


def icon_paths(manifest: Dict[str, Any]) -> List[str]:
    """Icon file paths from ``icons`` and ``action.default_icon``, in declaration order.

    ``action.default_icon`` may be a size-to-path mapping or a single path.
    """
    paths: List[str] = []
    icons = manifest.get("icons")
    if isinstance(icons, dict):
        paths.extend(v for v in icons.values() if isinstance(v, str))
    default_icon = section(manifest, "action").get("default_icon")
    if isinstance(default_icon, str):
        paths.append(default_icon)
    elif isinstance(default_icon, dict):
        paths.extend(v for v in default_icon.values() if isinstance(v, str))
    return paths
