"""Referential integrity pass: manifest references vs. package contents."""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Set

from extguard.codes import IssueCode, IssueLevel
from extguard.contracts import Artifact, Issue
from .manifest import MANIFEST_NAME, icon_paths, object_list, section, string_list


@dataclass(frozen=True)
class Reference:
    """A file path named inside the manifest."""
    path: str
    field: str  # Manifest location, e.g. "content_scripts[0].js"


def collect_references(manifest: Dict[str, Any]) -> List[Reference]:
    """Collect referenced paths in manifest declaration order.

    Icons are not included here; the schema pass reports missing icons.
    """
    refs: List[Reference] = []

    def _add(value: Any, field: str) -> None:
        if isinstance(value, str) and value:
            refs.append(Reference(path=value, field=field))

    _add(section(manifest, "background").get("service_worker"), "background.service_worker")
    _add(section(manifest, "action").get("default_popup"), "action.default_popup")
    _add(manifest.get("options_page"), "options_page")
    _add(section(manifest, "options_ui").get("page"), "options_ui.page")

    for i, rule in enumerate(object_list(manifest.get("content_scripts"))):
        for key in ("js", "css"):
            for path in string_list(rule.get(key)):
                _add(path, f"content_scripts[{i}].{key}")

    for i, rule in enumerate(object_list(manifest.get("web_accessible_resources"))):
        for path in string_list(rule.get("resources")):
            _add(path, f"web_accessible_resources[{i}].resources")

    return refs


def check_references(manifest: Dict[str, Any], artifacts: Sequence[Artifact]) -> List[Issue]:
    """Report missing referenced files (errors), then orphaned files (info).

    Comparison is exact and case-sensitive; paths are not normalized.
    """
    issues: List[Issue] = []
    names = [a.name for a in artifacts]
    present: Set[str] = set(names)
    refs = collect_references(manifest)

    for ref in refs:
        if ref.path not in present:
            issues.append(Issue(
                level=IssueLevel.ERROR,
                code=IssueCode.MISSING_REFERENCED_FILE,
                message=f"Missing referenced file: {ref.path} ({ref.field})",
                path=ref.path,
            ))

    referenced = {ref.path for ref in refs}
    referenced.update(icon_paths(manifest))
    for name in names:
        if name == MANIFEST_NAME or name in referenced:
            continue
        issues.append(Issue(
            level=IssueLevel.INFO,
            code=IssueCode.ORPHANED_FILE,
            message=f"Orphaned file: {name} (not referenced in manifest)",
            path=name,
        ))

    return issues
