"""Geospatial helpers shared by the check-in workflow and the gym stores."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    latitude: float | Decimal
    longitude: float | Decimal


def to_decimal_degrees(value: float | str | Decimal) -> Decimal:
    """Convert a degree value to Decimal through its shortest string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def distance_between(point_a: Coordinate, point_b: Coordinate) -> float:
    """Compute the great-circle (haversine) distance between two points in kilometres.

    Decimal coordinates are accepted and converted to float for the trigonometry.
    The intermediate value is clamped to [0, 1] to avoid floating point drift near
    antipodal points.
    """

    if point_a == point_b:
        return 0.0

    lat1 = float(point_a.latitude)
    lng1 = float(point_a.longitude)
    lat2 = float(point_b.latitude)
    lng2 = float(point_b.longitude)

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lng2 - lng1)

    sin_dphi = math.sin(dphi / 2.0)
    sin_dlambda = math.sin(dlambda / 2.0)

    a = sin_dphi**2 + math.cos(phi1) * math.cos(phi2) * sin_dlambda**2
    a = min(1.0, max(0.0, a))
    c = 2.0 * math.asin(math.sqrt(a))
    return EARTH_RADIUS_KM * c


__all__ = ["EARTH_RADIUS_KM", "Coordinate", "distance_between", "to_decimal_degrees"]
