#!/usr/bin/env python3
"""
Performance script for the red-black tree.

Benchmarks:
1. Sequential insert throughput
2. Random insert throughput
3. Lookup throughput (hits and misses)
4. Range query performance
5. Random removal throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Tree height against the 2 * log2(n + 1) bound
"""

import logging
import math
import os
import random
import statistics
import sys
import time

from redblack import RedBlackTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self, seed: int | None = None):
        self.tree = RedBlackTree()
        self.rng = random.Random(seed)

    def reset(self) -> None:
        self.tree.clear()

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_ms": min(latencies) / 1_000_000,
            "max_ms": max(latencies) / 1_000_000,
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def _timed(self, name: str, operation, values: list) -> dict:
        latencies = []
        hits = 0

        start_time = time.perf_counter_ns()
        for value in values:
            op_start = time.perf_counter_ns()
            if operation(value):
                hits += 1
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": name,
            "count": len(values),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(values) / elapsed if elapsed else float("inf"),
            "hit_rate": hits / len(values) if values else 0.0,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def run_sequential_insert(self, count: int) -> dict:
        """Insert 0..count-1 in ascending order, the worst case for an unbalanced BST."""
        self.print_header(f"Sequential Insert Test: {count} operations")
        return self._timed("Sequential Insert", self.tree.insert, list(range(count)))

    def run_random_insert(self, count: int) -> dict:
        self.print_header(f"Random Insert Test: {count} operations")
        values = list(range(count))
        self.rng.shuffle(values)
        return self._timed("Random Insert", self.tree.insert, values)

    def run_lookup(self, count: int, key_range: int) -> dict:
        self.print_header(f"Lookup Test: {count} operations over [0, {key_range})")
        values = [self.rng.randrange(key_range) for _ in range(count)]
        return self._timed("Lookup", self.tree.contains, values)

    def run_range_query(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        self.print_header(f"Range Query Test: {num_queries} queries of width {range_size}")

        def query(start: int) -> bool:
            return any(True for _ in self.tree.iterator(start, start + range_size))

        starts = [self.rng.randrange(max(1, total_keys - range_size)) for _ in range(num_queries)]
        return self._timed("Range Query", query, starts)

    def run_random_remove(self, count: int) -> dict:
        self.print_header(f"Random Remove Test: {count} operations")
        values = list(self.tree)
        self.rng.shuffle(values)
        return self._timed("Random Remove", self.tree.remove, values[:count])

    def check_height(self) -> None:
        size = len(self.tree)
        bound = 2 * math.log2(size + 1)
        height = self.tree.height()
        print(f"\nTree size {size}, height {height}, bound {bound:.2f}")
        if height > bound:
            logger.error(f"Height {height} exceeds red-black bound {bound:.2f}")

    @staticmethod
    def print_header(title: str) -> None:
        print(f"\n{'='*60}")
        print(title)
        print(f"{'='*60}")

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")
        print(f"  Hit rate: {results['hit_rate']*100:.2f}%")

        if 'median_ms' in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.4f}/{results['p95_ms']:.4f}/{results['p99_ms']:.4f} ms")


def run_tests(count: int) -> list[dict]:
    test = PerformanceTest()
    results = []

    print(f"\n{'#'*60}")
    print(f"# Red-Black Tree Performance Test ({count} values)")
    print(f"{'#'*60}")

    results.append(test.run_sequential_insert(count))
    test.check_height()
    test.reset()

    results.append(test.run_random_insert(count))
    test.check_height()
    results.append(test.run_lookup(count, key_range=count * 2))
    results.append(test.run_range_query(num_queries=count // 100 or 1, range_size=100, total_keys=count))
    results.append(test.run_random_remove(count // 2))
    test.check_height()
    test.tree.validate()

    print(f"\n{'#'*60}")
    print(f"# Test Complete!")
    print(f"{'#'*60}\n")
    return results


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(10_000)
    else:
        run_tests(int(sys.argv[1]) if len(sys.argv) > 1 else 200_000)
