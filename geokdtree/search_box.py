"""Axis-aligned latitude/longitude rectangle used to bound searches."""

from __future__ import annotations

from dataclasses import dataclass

from geokdtree.geo_point import Point


@dataclass(frozen=True)
class SearchBox:
    """A closed rectangle in (latitude, longitude) space, in radians."""

    lat_from: float
    lat_to: float
    lon_from: float
    lon_to: float

    def is_inside(self, point: Point) -> bool:
        """Return True if the point lies within the box, borders included."""
        return (
            self.lat_from <= point.lat <= self.lat_to
            and self.lon_from <= point.lon <= self.lon_to
        )

    @staticmethod
    def nested_box(box_internal: SearchBox, box_external: SearchBox) -> bool:
        """Return True if ``box_internal`` lies entirely within ``box_external``."""
        return (
            box_external.lat_from <= box_internal.lat_from
            and box_internal.lat_to <= box_external.lat_to
            and box_external.lon_from <= box_internal.lon_from
            and box_internal.lon_to <= box_external.lon_to
        )