"""
Example 02: Excluding Setup and Teardown
========================================

``bench_setup`` builds every input before the clock starts, and
``bench_drop`` releases every result after it stops.  Both hold one value
per iteration in memory, so the memory budget caps how far they go.

Use case: timing ``sorted`` without timing the list shuffle that feeds it.
"""

import random

from linbench import Bytes, Options, bench, bench_drop, bench_setup

opts = Options().with_time_budget(1.0)
rng = random.Random(42)


def shuffled():
    values = list(range(100))
    rng.shuffle(values)
    return values


# ── 1. Setup cost included vs excluded ───────────────────────────

print("=== 1. Setup Excluded ===\n")

bench(opts, "shuffle_then_sort_100", lambda: sorted(shuffled()))
bench_setup(opts, "sort_100", shuffled, sorted)

# ── 2. Teardown cost excluded ────────────────────────────────────

print("\n=== 2. Drop Excluded ===\n")


class Node:
    def __init__(self):
        self.children = [object() for _ in range(16)]


bench(opts, "node_alloc_and_free", Node)
bench_drop(opts, "node_alloc", Node)

# ── 3. Memory budget ─────────────────────────────────────────────

print("\n=== 3. Memory Budget ===\n")

tight = opts.with_memory_budget(Bytes.kib(64))
result = bench_drop(tight, "node_alloc_64k", Node)
print(f"\n  stopped after {len(result.samples)} samples, "
      f"largest batch {result.samples[-1].iterations if result.samples else 0} nodes")
