"""Schema compliance pass for Manifest V3 documents."""

import json
from typing import Any, Dict, List, Set, Tuple

from extguard.codes import IssueCode, IssueLevel
from extguard.contracts import Issue
from .manifest import SUPPORTED_MANIFEST_VERSION, icon_paths, is_string_list, non_blank, section


# (manifest path, replacement) for fields removed in Manifest V3
DEPRECATED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("browser_action", "action"),
    ("background.scripts", "background.service_worker"),
    ("background.page", "background.service_worker"),
)

# Top-level fields that must be arrays of strings when present
STRING_LIST_FIELDS: Tuple[str, ...] = ("permissions", "host_permissions")


def _has_field(manifest: Dict[str, Any], dotted: str) -> bool:
    head, _, tail = dotted.partition(".")
    if not tail:
        return head in manifest
    return tail in section(manifest, head)


def _is_supported_version(value: Any) -> bool:
    # JSON true must not compare equal to 1, and "3" is not 3
    return not isinstance(value, (bool, str)) and value == SUPPORTED_MANIFEST_VERSION


def check_schema(manifest: Dict[str, Any], artifact_names: Set[str]) -> List[Issue]:
    """Check required fields, icons and deprecated fields.

    Every violation is its own issue; nothing here aborts.
    """
    issues: List[Issue] = []

    found_version = manifest.get("manifest_version")
    if not _is_supported_version(found_version):
        found = json.dumps(found_version) if "manifest_version" in manifest else "missing"
        issues.append(Issue(
            level=IssueLevel.ERROR,
            code=IssueCode.UNSUPPORTED_MANIFEST_VERSION,
            message=(
                f"Not Manifest V3 (manifest_version: {found}); "
                f"manifest_version must be {SUPPORTED_MANIFEST_VERSION}"
            ),
            path="manifest_version",
        ))

    if not non_blank(manifest.get("name")):
        issues.append(Issue(
            level=IssueLevel.ERROR,
            code=IssueCode.MISSING_NAME,
            message="Missing extension name",
            path="name",
        ))
    if not non_blank(manifest.get("version")):
        issues.append(Issue(
            level=IssueLevel.ERROR,
            code=IssueCode.MISSING_VERSION,
            message="Missing version",
            path="version",
        ))
    if not non_blank(manifest.get("description")):
        issues.append(Issue(
            level=IssueLevel.WARNING,
            code=IssueCode.MISSING_DESCRIPTION,
            message="Missing description",
            path="description",
        ))

    for field in STRING_LIST_FIELDS:
        if field in manifest and not is_string_list(manifest[field]):
            issues.append(Issue(
                level=IssueLevel.ERROR,
                code=IssueCode.INVALID_FIELD_TYPE,
                message=f"Invalid {field}: must be an array of strings",
                path=field,
            ))
    if "icons" in manifest and not isinstance(manifest["icons"], dict):
        issues.append(Issue(
            level=IssueLevel.ERROR,
            code=IssueCode.INVALID_FIELD_TYPE,
            message="Invalid icons: must be an object mapping sizes to file paths",
            path="icons",
        ))

    for icon in icon_paths(manifest):
        if icon not in artifact_names:
            issues.append(Issue(
                level=IssueLevel.ERROR,
                code=IssueCode.MISSING_ICON,
                message=f"Missing icon file: {icon}",
                path=icon,
            ))

    for field, replacement in DEPRECATED_FIELDS:
        if _has_field(manifest, field):
            issues.append(Issue(
                level=IssueLevel.ERROR,
                code=IssueCode.DEPRECATED_FIELD,
                message=f"Uses deprecated {field}; use {replacement} in Manifest V3",
                path=field,
            ))

    return issues
