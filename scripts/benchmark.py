#!/usr/bin/env python3
"""Benchmark script for fsfilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

_PATHS = [Path(f"/project/src/pkg/module_{i}.{'py' if i % 3 else 'txt'}") for i in range(1000)]


def benchmark_import_time() -> float:
    """Measure import time of fsfilter package."""
    start = time.perf_counter()
    import fsfilter  # noqa: F401

    return time.perf_counter() - start


def benchmark_and_accept() -> float:
    """Measure shape A evaluation of a three-child AndFileFilter."""
    from fsfilter.infrastructure.filters import all_of, negate, prefix_filter, suffix_filter, wildcard_filter

    flt = all_of(suffix_filter(".py"), negate(prefix_filter("test_")), wildcard_filter("module_*"))

    start = time.perf_counter()
    for _ in range(100):
        for path in _PATHS:
            flt.accept(path)
    return time.perf_counter() - start


def benchmark_and_visit() -> float:
    """Measure shape C evaluation with precomputed attributes."""
    from fsfilter.domain.model.file_attributes import FileAttributes
    from fsfilter.infrastructure.filters import FILE, all_of, size_filter, suffix_filter

    flt = all_of(FILE, suffix_filter(".py"), size_filter(512))
    attrs = FileAttributes(size=1024, is_regular_file=True)

    start = time.perf_counter()
    for _ in range(100):
        for path in _PATHS:
            flt.accept_path(path, attrs)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run fsfilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "AND accept (100k paths)", "unit": "seconds", "value": benchmark_and_accept()},
        {"name": "AND accept_path (100k paths)", "unit": "seconds", "value": benchmark_and_visit()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
