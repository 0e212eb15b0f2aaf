"""Lexical security scan over script and markup artifacts.

Rules are plain pattern matches over raw text, so a construct inside a
comment or string literal still triggers. False positives are acceptable;
missing a dangerous construct is not.
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from extguard.codes import IssueCode, IssueLevel
from extguard.contracts import Artifact, Issue


# Stylesheets and manifest.json are never scanned
SCANNED_EXTENSIONS: Tuple[str, ...] = (".js", ".mjs", ".cjs", ".ts", ".html", ".htm")


@dataclass(frozen=True)
class SecurityRule:
    """One entry of the scan table."""
    code: IssueCode
    level: IssueLevel
    pattern: re.Pattern
    message: str


SECURITY_RULES: Tuple[SecurityRule, ...] = (
    SecurityRule(
        code=IssueCode.DYNAMIC_CODE_EXECUTION,
        level=IssueLevel.ERROR,
        pattern=re.compile(r"\beval\s*\("),
        message="Uses eval(): dynamic code execution is blocked in Manifest V3",
    ),
    SecurityRule(
        code=IssueCode.DYNAMIC_CODE_EXECUTION,
        level=IssueLevel.ERROR,
        pattern=re.compile(r"\bnew\s+Function\s*\("),
        message="Uses new Function(): dynamic code execution is blocked in Manifest V3",
    ),
    SecurityRule(
        code=IssueCode.UNSAFE_DOM_SINK,
        level=IssueLevel.WARNING,
        pattern=re.compile(r"\.(?:innerHTML|outerHTML)\s*\+?=(?!=)|\.insertAdjacentHTML\s*\("),
        message="Writes HTML via innerHTML/outerHTML: possible XSS, prefer textContent",
    ),
    SecurityRule(
        code=IssueCode.UNSAFE_DOM_SINK,
        level=IssueLevel.WARNING,
        pattern=re.compile(r"\bdocument\.write(?:ln)?\s*\("),
        message="Uses document.write(): unsafe DOM write",
    ),
    SecurityRule(
        code=IssueCode.BASE64_DECODE,
        level=IssueLevel.WARNING,
        pattern=re.compile(r"\batob\s*\("),
        message="Uses atob(): base64 decoding is often used to hide code",
    ),
    SecurityRule(
        code=IssueCode.COOKIE_ACCESS,
        level=IssueLevel.WARNING,
        pattern=re.compile(r"\bdocument\.cookie\b|\bchrome\.cookies\b"),
        message="Accesses cookies: possible session hijacking",
    ),
    SecurityRule(
        code=IssueCode.KEYBOARD_LISTENER,
        level=IssueLevel.WARNING,
        pattern=re.compile(
            r"addEventListener\s*\(\s*[\"'`]key(?:down|up|press)[\"'`]|\bonkey(?:down|up|press)\s*="
        ),
        message="Listens to keyboard events: possible keylogging",
    ),
    SecurityRule(
        code=IssueCode.CREDENTIAL_IDENTIFIER,
        level=IssueLevel.WARNING,
        pattern=re.compile(
            r"password|passwd|credential|api[_-]?key|secret[_-]?key|access[_-]?token",
            re.IGNORECASE,
        ),
        message="References credentials (password, API key or token): check they are not collected or hardcoded",
    ),
    SecurityRule(
        code=IssueCode.NETWORK_CALL,
        level=IssueLevel.INFO,
        pattern=re.compile(r"\bfetch\s*\(|\bXMLHttpRequest\b"),
        message="Makes network requests (fetch/XMLHttpRequest): review destinations",
    ),
    SecurityRule(
        code=IssueCode.REMOTE_SCRIPT,
        level=IssueLevel.ERROR,
        pattern=re.compile(r"<script\b[^>]*\bsrc\s*=\s*[\"']?(?:https?:)?//", re.IGNORECASE),
        message="Loads remote script: Manifest V3 forbids remotely hosted code",
    ),
)


def is_scannable(name: str) -> bool:
    return name.lower().endswith(SCANNED_EXTENSIONS)


def scan_artifact(artifact: Artifact) -> List[Issue]:
    """Test every rule against one artifact, in table order."""
    return [
        Issue(
            level=rule.level,
            code=rule.code,
            message=f"{artifact.name}: {rule.message}",
            path=artifact.name,
        )
        for rule in SECURITY_RULES
        if rule.pattern.search(artifact.content)
    ]


def scan_artifacts(artifacts: Sequence[Artifact]) -> List[Issue]:
    """Scan qualifying artifacts in package order."""
    issues: List[Issue] = []
    for artifact in artifacts:
        if is_scannable(artifact.name):
            issues.extend(scan_artifact(artifact))
    return issues
