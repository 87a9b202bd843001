"""Compare KD-tree radius search against a linear scan on random points."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from geokdtree.geo_point import Point
from geokdtree.kd_tree import KDTree
from geokdtree.sphere_helper import distance as sphere_distance

_LAT_RANGE = (-math.pi / 2.0 + 0.2, math.pi / 2.0 - 0.2)
_LON_RANGE = (-math.pi + 0.2, math.pi - 0.2)


@dataclass
class BenchmarkResult:
    """Timings per query and any disagreement between tree and linear search."""

    tree_times: list[float] = field(default_factory=list)
    simple_times: list[float] = field(default_factory=list)
    mismatches: list[tuple[Point, float, Point, Point]] = field(default_factory=list)

    @property
    def average_tree_time(self) -> float:
        return sum(self.tree_times) / len(self.tree_times) if self.tree_times else math.nan

    @property
    def average_simple_time(self) -> float:
        return sum(self.simple_times) / len(self.simple_times) if self.simple_times else math.nan


def generate_points(amount: int, rng: random.Random) -> list[Point]:
    """Generate ``amount`` points with ids 0..amount-1, kept away from poles and antimeridian."""
    return [
        Point(idx, rng.uniform(*_LAT_RANGE), rng.uniform(*_LON_RANGE))
        for idx in range(amount)
    ]


def run_benchmark(
    amount: int = 10_000,
    n_stop: int = 300,
    n_queries: int = 100,
    radius: float = 1.0,
    seed: int | None = None,
) -> BenchmarkResult:
    """Time random radius queries on a KD-tree and on a linear scan of the same points."""
    rng = random.Random(seed)
    points = generate_points(amount, rng)
    tree = KDTree(points, n_stop, radius)
    result = BenchmarkResult()

    for _ in range(n_queries):
        target = Point(amount + 1, rng.uniform(*_LAT_RANGE), rng.uniform(*_LON_RANGE))
        dist = abs(rng.uniform(*_LON_RANGE)) / 100.0

        start = time.perf_counter()
        found = tree.search_by_distance(target, dist)
        result.tree_times.append(time.perf_counter() - start)
        found.sort(key=lambda p: p.id)

        start = time.perf_counter()
        simple = [p for p in points if sphere_distance(target, p, radius) <= dist]
        result.simple_times.append(time.perf_counter() - start)

        result.mismatches.extend(
            (target, dist, left, right)
            for left, right in zip(found, simple)
            if left.id != right.id
        )

    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark KD-tree radius search.")
    parser.add_argument("--amount", type=int, default=10_000, help="number of points")
    parser.add_argument("--n-stop", type=int, default=300, help="maximum points per leaf")
    parser.add_argument("--queries", type=int, default=100, help="number of queries")
    parser.add_argument("--radius", type=float, default=1.0, help="sphere radius")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    result = run_benchmark(args.amount, args.n_stop, args.queries, args.radius, args.seed)
    for target, dist, left, right in result.mismatches:
        print(f"{target!r}, {dist!r}, {left!r}, {right!r}")
    print(f"Average time for tree = {result.average_tree_time!r}")
    print(f"Average time for simple search = {result.average_simple_time!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())