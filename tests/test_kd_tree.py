import math
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from geokdtree.geo_point import Point
from geokdtree.kd_tree import KDTree
from geokdtree.sphere_helper import distance as sphere_distance

LAT_LOW, LAT_HIGH = -math.pi / 2.0 + 0.2, math.pi / 2.0 - 0.2
LON_LOW, LON_HIGH = -math.pi + 0.2, math.pi - 0.2


def _random_points(seed, amount):
    rng = random.Random(seed)
    return [
        Point(i, rng.uniform(LAT_LOW, LAT_HIGH), rng.uniform(LON_LOW, LON_HIGH))
        for i in range(amount)
    ]


def _brute_ids(points, target, dist, radius):
    return sorted(p.id for p in points if sphere_distance(target, p, radius) <= dist)


@pytest.mark.parametrize("seed", [1, 2, 3])
@pytest.mark.parametrize("n_stop", [1, 5, 50])
def test_matches_brute_force(seed, n_stop):
    points = _random_points(seed, 600)
    tree = KDTree(points, n_stop, 1.0)
    rng = random.Random(seed + 100)
    for _ in range(15):
        target = Point(-1, rng.uniform(LAT_LOW, LAT_HIGH), rng.uniform(LON_LOW, LON_HIGH))
        dist = abs(rng.uniform(LON_LOW, LON_HIGH)) / 10.0
        found = sorted(p.id for p in tree.search_by_distance(target, dist))
        assert found == _brute_ids(points, target, dist, 1.0)


def test_single_leaf_matches_brute_force():
    points = _random_points(9, 200)
    tree = KDTree(points, 1000, 1.0)
    target = Point(-1, 0.1, 0.2)
    found = sorted(p.id for p in tree.search_by_distance(target, 0.5))
    assert found == _brute_ids(points, target, 0.5, 1.0)


def test_empty_tree_returns_nothing():
    tree = KDTree([], 10, 1.0)
    assert tree.search_by_distance(Point(0, 0.0, 0.0), 1.0) == []


def test_zero_n_stop_with_points_raises():
    with pytest.raises(ValueError):
        KDTree([Point(0, 0.0, 0.0), Point(1, 0.1, 0.1)], 0, 1.0)


def test_polar_query_matches_brute_force():
    points = _random_points(4, 400)
    tree = KDTree(points, 10, 1.0)
    target = Point(-1, math.pi / 2.0 - 0.3, 1.0)
    found = sorted(p.id for p in tree.search_by_distance(target, 0.5))
    assert found == _brute_ids(points, target, 0.5, 1.0)
    assert found


def test_query_across_antimeridian():
    points = [
        Point(0, 0.0, -math.pi + 0.005),
        Point(1, 0.0, math.pi - 0.02),
        Point(2, 0.0, 0.0),
        Point(3, 0.01, -math.pi + 0.01),
    ]
    tree = KDTree(points, 1, 1.0)
    target = Point(-1, 0.0, math.pi - 0.01)
    found = sorted(p.id for p in tree.search_by_distance(target, 0.05))
    assert found == _brute_ids(points, target, 0.05, 1.0)
    assert 0 in found and 2 not in found


def test_radius_scales_distance():
    points = _random_points(5, 300)
    tree = KDTree(points, 8, 6371.0)
    target = Point(-1, 0.2, -0.7)
    found = sorted(p.id for p in tree.search_by_distance(target, 1500.0))
    assert found == _brute_ids(points, target, 1500.0, 6371.0)


coords = st.tuples(
    st.floats(LAT_LOW, LAT_HIGH, allow_nan=False),
    st.floats(LON_LOW, LON_HIGH, allow_nan=False),
)


@settings(max_examples=50, deadline=None)
@given(
    st.lists(coords, min_size=1, max_size=80),
    coords,
    st.floats(0.0, 0.8, allow_nan=False),
    st.integers(1, 10),
)
def test_results_are_within_distance_and_from_input(raw, query, dist, n_stop):
    points = [Point(i, lat, lon) for i, (lat, lon) in enumerate(raw)]
    tree = KDTree(points, n_stop, 1.0)
    target = Point(-1, *query)
    found = tree.search_by_distance(target, dist)
    assert set(p.id for p in found) <= set(_brute_ids(points, target, dist, 1.0))
    assert all(sphere_distance(target, p, 1.0) <= dist for p in found)