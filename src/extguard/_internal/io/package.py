"""Package I/O helpers (internal).

Loads artifacts from a package directory or a generated text blob, and
writes extracted artifacts back to disk.
"""

from pathlib import Path, PurePosixPath
from typing import List, Sequence, Union

from extguard.contracts import Artifact
from extguard.kernel.blocks import extract_blocks


class PackageLoadError(ValueError):
    """Raised when a package cannot be loaded from or written to disk."""
    pass


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def load_package_dir(path: Union[str, Path]) -> List[Artifact]:
    """Load every file under a package directory as an artifact.

    Names are POSIX paths relative to the directory, in sorted order. Hidden
    files and directories are skipped. Binary files (e.g. PNG icons) are kept
    so they count as present; undecodable bytes are replaced.
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"Package directory not found: {root}")
    if not root.is_dir():
        raise PackageLoadError(f"Not a directory: {root}")

    artifacts: List[Artifact] = []
    for file_path in sorted(p for p in root.rglob("*") if p.is_file()):
        relative = file_path.relative_to(root)
        if _is_hidden(relative):
            continue
        content = file_path.read_bytes().decode("utf-8", errors="replace")
        artifacts.append(Artifact(name=relative.as_posix(), content=content))
    return artifacts


def load_text_blob(path: Union[str, Path]) -> List[Artifact]:
    """Load a generated text blob and extract its fenced artifacts."""
    blob_path = Path(path)
    if not blob_path.exists():
        raise FileNotFoundError(f"Text blob not found: {blob_path}")
    return extract_blocks(blob_path.read_text(encoding="utf-8"))


def load_package(path: Union[str, Path]) -> List[Artifact]:
    """Load a package from a directory or a text blob file."""
    package_path = Path(path)
    if package_path.is_dir():
        return load_package_dir(package_path)
    return load_text_blob(package_path)


def _safe_relative(name: str) -> PurePosixPath:
    relative = PurePosixPath(name)
    if relative.is_absolute() or ".." in relative.parts or not relative.parts:
        raise PackageLoadError(f"Refusing to write artifact outside output directory: {name}")
    return relative


def write_artifacts(artifacts: Sequence[Artifact], output_dir: Union[str, Path]) -> List[Path]:
    """Write artifacts under ``output_dir``; returns written paths in order.

    All names are checked before anything is written.
    """
    out = Path(output_dir)
    targets = [(out.joinpath(*_safe_relative(a.name).parts), a) for a in artifacts]
    written: List[Path] = []
    for target, artifact in targets:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content + "\n", encoding="utf-8")
        written.append(target)
    return written
