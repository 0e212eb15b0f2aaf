"""Public API for extguard.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple, Union

from extguard.contracts import Artifact, Report
from extguard.kernel.analyzer import analyze_package
from extguard.kernel.blocks import extract_blocks
from extguard.kernel.permissions import describe_permission
from extguard._internal.io.package import load_package


PackageInput = Union[
    str,
    os.PathLike,
    Sequence[Artifact],
    Sequence[Mapping[str, Any]],
    Sequence[Tuple[str, str]],
]


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def _coerce_artifact(item: Any) -> Artifact:
    if isinstance(item, Artifact):
        return item
    if isinstance(item, Mapping):
        return Artifact(name=item["name"], content=item["content"])
    if isinstance(item, tuple) and len(item) == 2:
        name, content = item
        return Artifact(name=name, content=content)
    raise TypeError(
        f"Unsupported artifact type: {type(item).__name__}. "
        "Expected Artifact, a {'name', 'content'} mapping or a (name, content) pair."
    )


def _coerce_artifacts(items: Sequence[Any]) -> List[Artifact]:
    return [_coerce_artifact(item) for item in items]


def extract_artifacts(raw: str) -> List[Artifact]:
    """Split a generated text blob into artifacts (fenced ```name sections)."""
    return extract_blocks(raw)


def analyze_text(raw: str) -> Report:
    """Extract artifacts from a text blob and analyze them."""
    return analyze_package(extract_blocks(raw))


def analyze_path(path: Union[str, os.PathLike, Path]) -> Report:
    """Analyze a package directory or a text blob file on disk."""
    return analyze_package(load_package(_normalize_path(path)))


def analyze(package: PackageInput) -> Report:
    """
    Analyze an extension package.

    Args:
        package: One of
            - a sequence of Artifact, of {"name", "content"} mappings or of
              (name, content) pairs
            - raw generated text containing fenced file blocks (str)
            - a filesystem path (Path / os.PathLike) to a package directory
              or a text blob file

    A plain ``str`` is always treated as generated text; wrap it in
    ``Path`` to analyze a file.

    Returns:
        Report with type, permissions and ordered issues
    """
    if isinstance(package, str):
        return analyze_text(package)
    if isinstance(package, os.PathLike):
        return analyze_path(package)
    if isinstance(package, (list, tuple)):
        return analyze_package(_coerce_artifacts(package))
    raise TypeError(f"Unsupported package type: {type(package).__name__}")


__all__ = [
    "extract_artifacts",
    "analyze",
    "analyze_text",
    "analyze_path",
    "describe_permission",
]
