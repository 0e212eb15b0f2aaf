"""Performance sentinels (gated)."""

from __future__ import annotations

import pytest

from extguard.kernel.analyzer import analyze_package
from extguard._internal.benchmarks import (
    MAX_LARGE_SCRIPTS_MS,
    MAX_MANY_FILES_MS,
    large_scripts_package,
    many_files_package,
    run_sentinel,
)


def _assert_budget(benchmark, max_ms: float) -> None:
    mean_ms = benchmark.stats.stats.mean * 1000.0
    assert mean_ms < max_ms, f"Mean {mean_ms:.2f} ms exceeded budget {max_ms:.2f} ms"


@pytest.mark.perf
def test_many_files_sentinel(benchmark):
    artifacts = many_files_package()
    report = benchmark.pedantic(lambda: analyze_package(artifacts), rounds=5, iterations=1)

    assert report.type == "hybrid"
    assert report.issues == []

    _assert_budget(benchmark, MAX_MANY_FILES_MS)


@pytest.mark.perf
def test_large_scripts_sentinel(benchmark):
    artifacts = large_scripts_package()
    report = benchmark.pedantic(lambda: analyze_package(artifacts), rounds=5, iterations=1)

    assert report.type == "background"
    assert report.errors == []

    _assert_budget(benchmark, MAX_LARGE_SCRIPTS_MS)


@pytest.mark.perf
def test_run_sentinel_reports_elapsed():
    elapsed_ms, report = run_sentinel(many_files_package(count=5))
    assert elapsed_ms >= 0.0
    assert report.ok
