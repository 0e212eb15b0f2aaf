"""Performance sentinel packages and budgets.

Sentinels are synthesized in memory at realistic-to-large sizes (tens of
files of up to a few tens of kilobytes). Budgets can be overridden with
``EXTGUARD_MAX_*_MS`` environment variables on slow CI machines.
"""

from __future__ import annotations

import json
import os
from time import perf_counter
from typing import List, Tuple

from extguard.contracts import Artifact, Report
from extguard.kernel.analyzer import analyze_package


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_MANY_FILES_MS = _budget_from_env("EXTGUARD_MAX_MANY_FILES_MS", 200.0)
MAX_LARGE_SCRIPTS_MS = _budget_from_env("EXTGUARD_MAX_LARGE_SCRIPTS_MS", 300.0)

_SCRIPT_LINE = "const el = document.createElement('div'); el.textContent = 'row';\n"


def many_files_package(count: int = 60) -> List[Artifact]:
    """A hybrid package whose manifest references ``count`` content scripts."""
    names = [f"scripts/content_{i:03d}.js" for i in range(count)]
    manifest = {
        "manifest_version": 3,
        "name": "Sentinel: many files",
        "version": "1.0.0",
        "description": "Performance sentinel",
        "action": {"default_popup": "popup.html"},
        "permissions": ["storage", "activeTab"],
        "content_scripts": [{"js": [name], "matches": ["*://*.example.com/*"]} for name in names],
    }
    artifacts = [Artifact(name="manifest.json", content=json.dumps(manifest, indent=2))]
    artifacts.append(Artifact(name="popup.html", content="<html><body></body></html>"))
    artifacts.extend(Artifact(name=name, content=_SCRIPT_LINE * 20) for name in names)
    return artifacts


def large_scripts_package(count: int = 20, size_kb: int = 40) -> List[Artifact]:
    """A background package with ``count`` scripts of about ``size_kb`` KB each."""
    repeat = (size_kb * 1024) // len(_SCRIPT_LINE)
    manifest = {
        "manifest_version": 3,
        "name": "Sentinel: large scripts",
        "version": "1.0.0",
        "description": "Performance sentinel",
        "background": {"service_worker": "bg.js"},
        "web_accessible_resources": [
            {"resources": [f"lib/chunk_{i:02d}.js" for i in range(count)], "matches": ["<all_urls>"]}
        ],
    }
    artifacts = [
        Artifact(name="manifest.json", content=json.dumps(manifest, indent=2)),
        Artifact(name="bg.js", content=_SCRIPT_LINE * repeat),
    ]
    artifacts.extend(
        Artifact(name=f"lib/chunk_{i:02d}.js", content=_SCRIPT_LINE * repeat) for i in range(count)
    )
    return artifacts


def run_sentinel(artifacts: List[Artifact]) -> Tuple[float, Report]:
    """Analyze a sentinel package and return elapsed ms plus the report."""
    start = perf_counter()
    report = analyze_package(artifacts)
    elapsed_ms = (perf_counter() - start) * 1000.0
    return elapsed_ms, report
