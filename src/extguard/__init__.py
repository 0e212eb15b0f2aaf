"""extguard: static validation of generated browser extension packages."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("extguard")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from extguard.api import analyze, analyze_path, analyze_text, extract_artifacts, describe_permission
from extguard.contracts import Artifact, Issue, Report
from extguard.codes import IssueCode, IssueLevel
from extguard.feedback import build_fix_request

__all__ = [
    "__version__",
    "analyze",
    "analyze_path",
    "analyze_text",
    "extract_artifacts",
    "describe_permission",
    "build_fix_request",
    "Artifact",
    "Issue",
    "Report",
    "IssueCode",
    "IssueLevel",
]
