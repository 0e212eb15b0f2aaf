"""Markdown rendering of analysis reports."""

from typing import List

from extguard.contracts import Issue, Report
from extguard.kernel.permissions import describe_permission


TYPE_LABELS = {
    "content_script": "Content script",
    "popup": "Popup",
    "background": "Background service worker",
    "hybrid": "Hybrid (popup + content script)",
    "unknown": "Unknown",
}


def _issue_section(title: str, issues: List[Issue]) -> List[str]:
    if not issues:
        return []
    lines = [f"### {title} ({len(issues)})", ""]
    for issue in issues:
        lines.append(f"- `{issue.code}` {issue.message}")
    lines.append("")
    return lines


def generate_markdown_report(report: Report, package_name: str = "") -> str:
    """Generate a markdown validation report.

    No timestamp is included, so identical reports render identically.
    """
    lines = []

    lines.append("# Extension Validation Report")
    lines.append("")
    if package_name:
        lines.append(f"Package: `{package_name}`")
        lines.append("")

    if report.ok:
        lines.append("## [OK] Status: READY TO INSTALL")
    else:
        lines.append("## [!] Status: NEEDS FIXES")
    lines.append("")

    lines.append("### Summary")
    lines.append("")
    lines.append(f"- **Type**: {TYPE_LABELS.get(report.type, report.type)}")
    lines.append(f"- **Errors**: {len(report.errors)}")
    lines.append(f"- **Warnings**: {len(report.warnings)}")
    lines.append(f"- **Info**: {len(report.infos)}")
    lines.append("")

    lines.append("### Permissions")
    lines.append("")
    if report.permissions:
        for permission in report.permissions:
            lines.append(f"- `{permission}`: {describe_permission(permission)}")
    else:
        lines.append("None declared.")
    lines.append("")

    lines.extend(_issue_section("Errors", report.errors))
    lines.extend(_issue_section("Warnings", report.warnings))
    lines.extend(_issue_section("Info", report.infos))

    return "\n".join(lines).rstrip("\n") + "\n"
