#!/usr/bin/env python3
"""Performance benchmarks for fixedset containers."""

import random
import statistics
import string
import sys
import os
import time

import numpy as np

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fixedset import HashSet, SortedStringSet, StringSet


class Benchmark:
    """Base benchmark class with utilities."""

    @staticmethod
    def format_throughput(ops_per_sec):
        """Format throughput with appropriate units."""
        if ops_per_sec > 1e6:
            return f"{ops_per_sec/1e6:.2f} Mops/s"
        elif ops_per_sec > 1e3:
            return f"{ops_per_sec/1e3:.2f} Kops/s"
        else:
            return f"{ops_per_sec:.2f} ops/s"

    @staticmethod
    def measure_latency(func, args, warmup=100):
        """Measure latency of func(arg) for each arg, in nanoseconds."""
        for arg in args[:warmup]:
            func(arg)

        latencies = []
        for arg in args:
            start = time.perf_counter_ns()
            func(arg)
            end = time.perf_counter_ns()
            latencies.append(end - start)

        latencies.sort()
        return {
            'avg': statistics.mean(latencies),
            'p50': latencies[int(len(latencies) * 0.50)],
            'p90': latencies[int(len(latencies) * 0.90)],
            'p99': latencies[int(len(latencies) * 0.99)],
        }

    @staticmethod
    def random_words(count, length=8, seed=0):
        rng = random.Random(seed)
        words = set()
        while len(words) < count:
            words.add("".join(rng.choices(string.ascii_lowercase, k=length)))
        return list(words)


class SetBenchmark(Benchmark):
    """Add/find/remove benchmarks across set types."""

    FACTORIES = [
        ("StringSet", StringSet),
        ("SortedStringSet", SortedStringSet),
        ("HashSet", lambda capacity: HashSet(capacity)),
    ]

    def benchmark_throughput(self, capacity=20000, load=0.75):
        """Benchmark add, find and remove throughput."""
        print(f"\n=== Throughput (capacity {capacity}, load {load:.0%}) ===")
        words = self.random_words(int(capacity * load))

        for name, factory in self.FACTORIES:
            s = factory(capacity)

            start = time.perf_counter()
            for word in words:
                s.add(word)
            add_rate = len(words) / (time.perf_counter() - start)

            start = time.perf_counter()
            for word in words:
                s.find(word)
            find_rate = len(words) / (time.perf_counter() - start)

            start = time.perf_counter()
            for word in words:
                s.remove(word)
            remove_rate = len(words) / (time.perf_counter() - start)

            print(f"{name:16} Add: {self.format_throughput(add_rate):>14}, "
                  f"Find: {self.format_throughput(find_rate):>14}, "
                  f"Remove: {self.format_throughput(remove_rate):>14}")

    def benchmark_latency(self, capacity=10000):
        """Benchmark find latency on a half-full StringSet."""
        print("\n=== StringSet Find Latency (nanoseconds) ===")
        words = self.random_words(capacity // 2)
        s = StringSet(capacity)
        for word in words:
            s.add(word)

        stats = self.measure_latency(s.find, words)
        print(f"Find: avg={stats['avg']:.0f}, p50={stats['p50']:.0f}, "
              f"p90={stats['p90']:.0f}, p99={stats['p99']:.0f}")

    def benchmark_tombstone_degradation(self, capacity=4096, rounds=8):
        """Show how tombstones lengthen probes for missing keys."""
        print("\n=== Tombstone Probe Degradation ===")
        s = StringSet(capacity)
        live = capacity // 4
        words = self.random_words(live * (rounds + 1), seed=1)
        missing = self.random_words(1000, length=9, seed=2)

        for word in words[:live]:
            s.add(word)

        for round_number in range(rounds):
            old = words[round_number * live:(round_number + 1) * live]
            new = words[(round_number + 1) * live:(round_number + 2) * live]
            for word in old:
                s.remove(word)
            for word in new:
                s.add(word)

            lengths = np.array([s.probe_length(word) for word in missing])
            print(f"Round {round_number + 1}: tombstones={s.tombstones:5}, "
                  f"miss probe mean={lengths.mean():8.1f}, max={lengths.max():5}")


def main():
    """Run all benchmarks."""
    print("=== fixedset Python Performance Benchmarks ===")
    print(f"NumPy version: {np.__version__}")

    bench = SetBenchmark()
    bench.benchmark_throughput()
    bench.benchmark_latency()
    bench.benchmark_tombstone_degradation()

    print("\n=== Benchmarks Complete ===")


if __name__ == "__main__":
    main()
