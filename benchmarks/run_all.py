"""
linbench Benchmark Suite — Unified Runner

Runs every section of bench_core and writes combined results as JSON
(machine-readable) and a Markdown summary.

Usage:
    cd benchmarks
    python run_all.py            # full 5 s budget per benchmark
    python run_all.py --quick    # 0.5 s budget per benchmark
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from datetime import datetime, timezone

# Add parent to path so we can import linbench from the source tree
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "packages", "python", "src"))

import bench_core

logger = logging.getLogger("linbench.benchmarks")


def main() -> None:
    quick = "--quick" in sys.argv[1:]
    if "--verbose" in sys.argv[1:]:
        logging.basicConfig(level=logging.DEBUG)

    print("=" * 60)
    print("linbench Benchmark Suite")
    print(f"Date: {datetime.now(timezone.utc).isoformat()}")
    print("=" * 60)
    print()

    overall_start = time.perf_counter()
    core = bench_core.run_all(quick=quick)
    total_sec = time.perf_counter() - overall_start

    results = {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "total_seconds": round(total_sec, 2),
            "linbench_version": _get_version(),
            "python_version": sys.version.split()[0],
            "quick": quick,
        },
        "core": core,
    }

    # ── Save JSON ─────────────────────────────────────────────

    out_dir = os.path.join(os.path.dirname(__file__), "results")
    os.makedirs(out_dir, exist_ok=True)

    json_path = os.path.join(out_dir, "benchmark_results.json")
    with open(json_path, "w") as f:
        json.dump(results, f, indent=2)
    print(f"\nJSON results saved to: {json_path}")

    # ── Generate Markdown summary ─────────────────────────────

    md_path = os.path.join(out_dir, "benchmark_summary.md")
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(_generate_markdown(results))
    print(f"Markdown summary saved to: {md_path}")

    print(f"\nTotal benchmark time: {total_sec:.1f}s")


def _get_version() -> str:
    try:
        import linbench
    except ImportError:
        logger.warning("linbench not importable; version unknown")
        return "unknown"
    return linbench.__version__


def _generate_markdown(results) -> str:
    meta = results["metadata"]
    lines = [
        "# linbench Benchmark Results",
        "",
        f"**Date:** {meta['timestamp']}  ",
        f"**Version:** {meta['linbench_version']}  ",
        f"**Python:** {meta['python_version']}  ",
        f"**Total Time:** {meta['total_seconds']}s  ",
        "**Statistical method:** OLS slope of elapsed ns over iteration count",
        "",
    ]

    for section, entries in results["core"].items():
        if section == "baseline":
            continue
        lines += [
            "---",
            "",
            f"## {section.capitalize()}",
            "",
            "| Benchmark | ns/iter | R² | Samples |",
            "|-----------|---------|----|---------|",
        ]
        for name, entry in entries.items():
            analysis = entry["analysis"]
            if analysis is None:
                lines.append(f"| {name} | not enough samples | – | {entry['n_samples']} |")
            else:
                lines.append(
                    f"| {name} | {analysis['slope_ns']:,.3f} | "
                    f"{analysis['r_squared']:.3f} | {entry['n_samples']} |"
                )
        lines.append("")

    base = results["core"]["baseline"]
    lines += [
        "---",
        "",
        "## Regression vs fixed-batch baseline",
        "",
        f"Fixed-batch mean: {base['batch']['mean_ns']:,.3f} ns/call "
        f"(min {base['batch']['min_ns']:,.3f}, n={base['batch']['n_trials']})  ",
        f"Slope / batch mean: {base['ratio']}",
        "",
    ]
    return "\n".join(lines)


if __name__ == "__main__":
    main()
