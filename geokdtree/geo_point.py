"""Geographic point stored as angular coordinates in radians."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on a sphere with an identifier, latitude and longitude in radians."""

    id: int
    lat: float
    lon: float