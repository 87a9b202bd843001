"""KD-tree over points on a sphere for radius queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Union

import math

from geokdtree.geo_point import Point
from geokdtree.search_box import SearchBox
from geokdtree.sphere_helper import distance as sphere_distance
from geokdtree.sphere_helper import find_box

# (point attribute, box lower-bound field, box upper-bound field) per dimension
_AXES = (
    ("lat", "lat_from", "lat_to"),
    ("lon", "lon_from", "lon_to"),
)

_WHOLE_SPHERE = SearchBox(
    lat_from=-math.pi / 2.0,
    lat_to=math.pi / 2.0,
    lon_from=-math.pi,
    lon_to=math.pi,
)


@dataclass(frozen=True)
class _Leaf:
    points: tuple[Point, ...]


@dataclass(frozen=True)
class _Node:
    splitter: float
    dimension: int
    left: _TreeNode
    right: _TreeNode


_TreeNode = Union[_Leaf, _Node]


def _variance(values: Sequence[float]) -> float:
    mean = sum(values) / len(values)
    return sum((x - mean) ** 2 for x in values) / len(values)


def _choose_dimension(points: Sequence[Point]) -> int:
    """Split along the coordinate with the larger spread: 0 = latitude, 1 = longitude."""
    lat_var = _variance([p.lat for p in points])
    lon_var = _variance([p.lon for p in points])
    return 0 if lat_var > lon_var else 1


def _build(points: Sequence[Point], n_stop: int) -> _TreeNode:
    if len(points) <= n_stop:
        return _Leaf(tuple(points))

    dimension = _choose_dimension(points)
    coord = _AXES[dimension][0]
    ordered = sorted(points, key=lambda p: getattr(p, coord))

    median = (len(ordered) - 1) // 2
    splitter = (getattr(ordered[median], coord) + getattr(ordered[median + 1], coord)) / 2.0

    return _Node(
        splitter=splitter,
        dimension=dimension,
        left=_build(ordered[: median + 1], n_stop),
        right=_build(ordered[median + 1 :], n_stop),
    )


class KDTree:
    """Static two-dimensional KD-tree of latitude/longitude points on a sphere.

    ``n_stop`` is the largest number of points kept in one leaf; denser
    regions are not split further.
    """

    def __init__(self, points: Iterable[Point], n_stop: int, sphere_radius: float) -> None:
        point_list = list(points)
        if point_list and n_stop < 1:
            raise ValueError("n_stop must be at least 1 for a non-empty tree")
        self.n_stop = n_stop
        self.sphere_radius = sphere_radius
        self._root = _build(point_list, n_stop)

    def search_by_distance(self, point: Point, distance: float) -> list[Point]:
        """Return every stored point within ``distance`` of ``point`` along the sphere."""
        candidates: list[Point] = []
        for target in find_box(point, distance, self.sphere_radius):
            candidates.extend(self._search(self._root, _WHOLE_SPHERE, target))
        return [
            candidate
            for candidate in candidates
            if sphere_distance(point, candidate, self.sphere_radius) <= distance
        ]

    def _search(self, node: _TreeNode, current: SearchBox, target: SearchBox) -> Iterator[Point]:
        if SearchBox.nested_box(current, target):
            yield from self._extract_all(node)
            return

        if isinstance(node, _Leaf):
            yield from (p for p in node.points if target.is_inside(p))
            return

        _, lo, hi = _AXES[node.dimension]
        split = node.splitter
        target_lo = getattr(target, lo)
        target_hi = getattr(target, hi)
        left_box = replace(current, **{hi: split})
        right_box = replace(current, **{lo: split})

        if target_lo <= split < target_hi:
            yield from self._search(node.left, left_box, replace(target, **{hi: split}))
            yield from self._search(node.right, right_box, replace(target, **{lo: split}))
        elif target_lo < split and target_hi <= split:
            yield from self._search(node.left, left_box, target)
        else:
            yield from self._search(node.right, right_box, target)

    def _extract_all(self, node: _TreeNode) -> Iterator[Point]:
        if isinstance(node, _Leaf):
            yield from node.points
        else:
            yield from self._extract_all(node.left)
            yield from self._extract_all(node.right)