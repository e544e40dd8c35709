#!/usr/bin/env python3
"""Great-circle distance helpers for place search"""

import math
from typing import Optional, Tuple
from urllib.parse import quote

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate distance between two points using Haversine formula"""
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lng2 - lng1)
    a = math.sin(dphi/2)**2 + math.cos(p1)*math.cos(p2)*math.sin(dlmb/2)**2
    # rounding can push a a hair past 1.0 for antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_from(origin: Optional[Tuple[float, float]], lat: Optional[float], lng: Optional[float]) -> Optional[float]:
    """Distance in km from origin, or None when either side has no coordinates."""
    if origin is None or lat is None or lng is None:
        return None
    return haversine_km(origin[0], origin[1], lat, lng)


def within_radius(distance_km: Optional[float], radius_m: Optional[float]) -> bool:
    """Radius filtering is best-effort: unknown distances always pass."""
    if radius_m is None or distance_km is None:
        return True
    return distance_km * 1000.0 <= radius_m


def geo_bbox(lat: float, lng: float, radius_m: float) -> Tuple[float, float, float, float]:
    """Get bounding box for geo prefiltering (lat_min, lat_max, lng_min, lng_max)."""
    R = EARTH_RADIUS_KM * 1000.0
    lat_delta = radius_m / R * (180.0 / math.pi)
    # longitude degrees shrink towards the poles: size the box at its poleward
    # edge so it covers the whole circle, and stop before cos() reaches 0
    edge_lat = min(90.0, abs(lat) + lat_delta)
    cos_lat = max(math.cos(math.radians(edge_lat)), 1e-6)
    lng_delta = radius_m / (R * cos_lat) * (180.0 / math.pi)

    return (
        lat - lat_delta,
        lat + lat_delta,
        lng - lng_delta,
        lng + lng_delta,
    )


def build_directions_url(
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    address: Optional[str] = None,
    place_id: Optional[str] = None,
) -> Optional[str]:
    """Google Maps directions deep link from the best available locator."""
    if lat is not None and lng is not None:
        return f"https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"
    if place_id:
        return f"https://www.google.com/maps/dir/?api=1&destination_place_id={quote(place_id, safe='')}"
    if address:
        return f"https://www.google.com/maps/dir/?api=1&destination={quote(address, safe='')}"
    return None
