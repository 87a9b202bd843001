"""Spherical geometry helpers: haversine distance and search-box bounds."""

from __future__ import annotations

import math

from geokdtree.geo_point import Point
from geokdtree.search_box import SearchBox

_HALF_PI = math.pi / 2.0

_MAX_ITERATIONS = 1000
_DIFF_STEP = 1e-7
_GRADIENT_TOLERANCE = 1e-6
_ARMIJO_C = 0.5
_MIN_STEP = 1e-12


def hav(x: float) -> float:
    """Haversine of an angle."""
    return (1.0 - math.cos(x)) / 2.0


def archav(h: float) -> float:
    """Inverse haversine; 0 for values outside [0, 1]."""
    if 0.0 <= h <= 1.0:
        return math.acos(1.0 - 2.0 * h)
    return 0.0


def distance(p1: Point, p2: Point, radius: float) -> float:
    """Great-circle distance between two points on a sphere of the given radius."""
    d_lat = p1.lat - p2.lat
    d_lon = p1.lon - p2.lon
    angle = archav(hav(d_lat) + math.cos(p1.lat) * math.cos(p2.lat) * hav(d_lon))
    return angle * radius


def _max_lon_offset(lat: float, d_lat: float) -> float:
    """Largest longitude difference reachable within angular distance ``d_lat``.

    Found by gradient descent with numerical differentiation on the negated
    offset, starting at ``lat``. The returned value is the minimum found.
    """
    h_d = hav(d_lat)
    cos_lat = math.cos(lat)

    def objective(x: float) -> float:
        dividend = h_d - hav(x - lat)
        divisor = math.cos(x) * cos_lat
        if divisor == 0.0 or abs(divisor) < abs(dividend):
            return 0.0
        return -archav(dividend / divisor)

    x = lat
    value = objective(x)
    for _ in range(_MAX_ITERATIONS):
        grad = (objective(x + _DIFF_STEP) - objective(x - _DIFF_STEP)) / (2.0 * _DIFF_STEP)
        if not math.isfinite(grad) or abs(grad) < _GRADIENT_TOLERANCE:
            break
        step = 1.0
        while step > _MIN_STEP:
            candidate = x - step * grad
            candidate_value = objective(candidate)
            if candidate_value <= value - _ARMIJO_C * step * grad * grad:
                break
            step *= 0.5
        else:
            break
        x, value = candidate, candidate_value
    return value


def find_box(point: Point, distance: float, radius: float) -> tuple[SearchBox, ...]:
    """Return one or two boxes that together cover every point within ``distance``.

    Two boxes are returned when the covered region crosses the antimeridian.
    """
    d_lat = distance / radius

    if point.lat + d_lat >= _HALF_PI:
        return (
            SearchBox(
                lat_from=max(point.lat - d_lat, -_HALF_PI),
                lat_to=_HALF_PI,
                lon_from=-math.pi,
                lon_to=math.pi,
            ),
        )

    if point.lat - d_lat <= -_HALF_PI:
        return (
            SearchBox(
                lat_from=-_HALF_PI,
                lat_to=min(point.lat + d_lat, _HALF_PI),
                lon_from=-math.pi,
                lon_to=math.pi,
            ),
        )

    d_lon = abs(_max_lon_offset(point.lat, d_lat))
    lat_from = point.lat - d_lat
    lat_to = point.lat + d_lat

    if d_lon >= math.pi:
        return (SearchBox(lat_from, lat_to, -math.pi, math.pi),)

    if point.lon + d_lon > math.pi:
        delta = point.lon + d_lon - math.pi
        return (
            SearchBox(lat_from, lat_to, point.lon - d_lon, math.pi),
            SearchBox(lat_from, lat_to, -math.pi, min(delta - math.pi, point.lon - d_lon)),
        )

    if point.lon - d_lon < -math.pi:
        delta = d_lon - point.lon - math.pi
        return (
            SearchBox(lat_from, lat_to, -math.pi, point.lon + d_lon),
            SearchBox(lat_from, lat_to, max(math.pi - delta, point.lon + d_lon), math.pi),
        )

    return (SearchBox(lat_from, lat_to, point.lon - d_lon, point.lon + d_lon),)