"""
Example 01: Basic Benchmarks
============================

Times a small function with the default options, then with a shorter
budget, and shows what happens when the data cannot support an estimate.

Use case: checking how much an iterative Fibonacci costs per call.
"""

from linbench import Options, bench, format_result, run

# ── 1. Default options ───────────────────────────────────────────

print("=== 1. Default Options ===\n")

opts = Options()
print(f"  growth factor: {opts.growth_factor}")
print(f"  time budget:   {opts.time_budget}")
print(f"  memory budget: {opts.memory_budget}\n")


def iterative_fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


# ── 2. Running a benchmark ───────────────────────────────────────

print("=== 2. Iterative Fibonacci ===\n")

short = opts.with_time_budget(1.0)
result = bench(short, "iterative_16", lambda: iterative_fib(16))
# iterative_16 (1.0s) ...                  281.733 ns/iter (0.998 R²)

print(f"\n  samples taken:      {len(result.samples)}")
print(f"  largest batch:      {result.samples[-1].iterations:,} calls")
if result.analysis is not None:
    print(f"  fixed overhead:     {result.analysis.intercept:,.1f} ns per batch")

# ── 3. Insufficient data ─────────────────────────────────────────

print("\n=== 3. Not Enough Samples ===\n")

# A strategy that refuses every round produces no samples at all.
refused = run(short, "refused", lambda iterations: None, sink=None)
print(f"  {format_result(refused)}")
print(f"  sufficient: {refused.sufficient}")
