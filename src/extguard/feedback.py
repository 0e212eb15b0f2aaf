"""Fix-request feedback for the regenerate-on-error loop.

The engine does not regenerate anything itself; callers send the returned
text as a new generation request and analyze the resulting package from
scratch.
"""

from typing import Optional

from extguard.contracts import Report


FIX_REQUEST_PREFIX = "Fix the following validation errors: "


def build_fix_request(report: Report) -> Optional[str]:
    """Return the fix request for a report's error-level issues, or None if there are none."""
    errors = report.errors
    if not errors:
        return None
    return FIX_REQUEST_PREFIX + ", ".join(issue.message for issue in errors)
