"""Benchmark: path parse and normalize throughput.

Measures how many parse and normalize operations can complete per second
using the public pathnames API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pathnames

_ITERATIONS: int = 20_000

_SAMPLE_PATH = "/srv/www/./site/../static/css/../../assets/img/logo.png"


def _report(operation: str, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_parse_throughput() -> dict[str, object]:
    """Benchmark Unix path parsing throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    engine = pathnames.get_engine("unix")
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        engine.parse(_SAMPLE_PATH)
    return _report("path_parse_throughput", time.perf_counter() - start)


def bench_normalize_throughput() -> dict[str, object]:
    """Benchmark lexical normalization of an already-parsed path."""
    engine = pathnames.get_engine("unix")
    value = engine.parse(_SAMPLE_PATH)
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        engine.normalize(value)
    return _report("path_normalize_throughput", time.perf_counter() - start)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_parse_throughput, "parse_throughput_baseline.json"),
        (bench_normalize_throughput, "normalize_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
