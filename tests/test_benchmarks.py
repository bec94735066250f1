"""Structural tests for the pathnames benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_parse_throughput")
    assert hasattr(mod, "bench_normalize_throughput")


def test_parse_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_parse_throughput

    result = bench_parse_throughput()
    assert result["operation"] == "path_parse_throughput"
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]


def test_normalize_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_normalize_throughput

    result = bench_normalize_throughput()
    assert "avg_latency_ms" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]
