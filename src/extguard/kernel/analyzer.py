"""Package analyzer: merges all check passes into one report.

Analysis runs in two stages. ``_resolve_manifest`` either returns a
terminal report (manifest missing or unparseable) or the parsed manifest.
``_accumulate`` is only reached with a parsed manifest; it always runs every
pass and never aborts.

Issue order is fixed: schema (including icons), permission policy,
referential integrity (missing files, then orphans), security scan
(artifact order, then rule order).
"""

from typing import Any, Dict, List, Sequence, Union

from extguard.codes import IssueCode, IssueLevel
from extguard.contracts import Artifact, Issue, Report
from .classify import classify
from .manifest import (
    MANIFEST_NAME,
    ManifestParseError,
    declared_permissions,
    find_manifest,
    parse_manifest,
)
from .permissions import check_permissions
from .references import check_references
from .schema import check_schema
from .security import scan_artifacts


def _terminal(code: IssueCode, message: str) -> Report:
    return Report(
        type="unknown",
        permissions=[],
        issues=[Issue(level=IssueLevel.ERROR, code=code, message=message, path=MANIFEST_NAME)],
    )


def _resolve_manifest(artifacts: Sequence[Artifact]) -> Union[Report, Dict[str, Any]]:
    manifest_artifact = find_manifest(artifacts)
    if manifest_artifact is None:
        return _terminal(IssueCode.MANIFEST_MISSING, f"Missing {MANIFEST_NAME}")
    try:
        return parse_manifest(manifest_artifact.content)
    except ManifestParseError as e:
        return _terminal(
            IssueCode.MANIFEST_PARSE_ERROR,
            f"Invalid {MANIFEST_NAME}: JSON parse error: {e}",
        )


def _accumulate(manifest: Dict[str, Any], artifacts: Sequence[Artifact]) -> Report:
    names = {a.name for a in artifacts}
    issues: List[Issue] = []
    issues.extend(check_schema(manifest, names))
    issues.extend(check_permissions(manifest))
    issues.extend(check_references(manifest, artifacts))
    issues.extend(scan_artifacts(artifacts))
    return Report(
        type=classify(manifest),
        permissions=declared_permissions(manifest),
        issues=issues,
    )


def analyze_package(artifacts: Sequence[Artifact]) -> Report:
    """Analyze a package and return a freshly built report.

    Never raises on package content: a missing or unparseable manifest is a
    terminal report, every other violation is an accumulated issue.
    """
    resolved = _resolve_manifest(artifacts)
    if isinstance(resolved, Report):
        return resolved
    return _accumulate(resolved, artifacts)
