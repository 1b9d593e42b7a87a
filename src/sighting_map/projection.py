"""Normalize sighting coordinates into a bounded 2D display space.

Positions are percentages of the map canvas: ``x`` grows east, ``y`` grows
south (latitude increases toward the top of the display). Every position is
clamped to ``[MARKER_MIN, MARKER_MAX]`` so markers never sit flush against
the container edge.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from sighting_map.schemas import Bounds, MapProjection, ProjectedPosition, ProjectedSighting

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sighting_map.schemas import Sighting

# Reference point used when there is nothing to bound (Montpelier, VT)
FALLBACK_LAT = 44.2619
FALLBACK_LNG = -72.5806

MARKER_MIN = 5.0
MARKER_MAX = 95.0
CENTER = 50.0


def compute_bounds(sightings: Sequence[Sighting]) -> Bounds:
    """Tight bounding box of ``sightings``.

    An empty collection yields a zero-size box at the fallback point.
    """
    if not sightings:
        return Bounds(
            min_lat=FALLBACK_LAT,
            max_lat=FALLBACK_LAT,
            min_lng=FALLBACK_LNG,
            max_lng=FALLBACK_LNG,
        )

    lats = [s.latitude for s in sightings]
    lngs = [s.longitude for s in sightings]
    return Bounds(min_lat=min(lats), max_lat=max(lats), min_lng=min(lngs), max_lng=max(lngs))


def _clamp(value: float) -> float:
    return max(MARKER_MIN, min(MARKER_MAX, value))


def _axis(offset: float, span: float) -> float:
    """Scale ``offset`` along an axis of width ``span`` to 0-100, clamped.

    A zero-width axis puts the point in the middle.
    """
    if span == 0:
        return CENTER
    ratio = offset / span * 100
    if math.isnan(ratio):
        return CENTER
    return _clamp(ratio)


def project(lat: float, lng: float, bounds: Bounds) -> ProjectedPosition:
    """Map a coordinate to its marker position within ``bounds``.

    Coordinates outside ``bounds`` land on the nearest clamped edge.
    """
    x = _axis(lng - bounds.min_lng, bounds.lng_span)
    y = _axis(bounds.max_lat - lat, bounds.lat_span)
    return ProjectedPosition(x=x, y=y)


def project_sightings(sightings: Sequence[Sighting]) -> MapProjection:
    """Project every sighting using bounds computed once for the collection."""
    bounds = compute_bounds(sightings)
    positions = []
    for sighting in sightings:
        pos = project(sighting.latitude, sighting.longitude, bounds)
        positions.append(ProjectedSighting(id=sighting.id, x=pos.x, y=pos.y))
    return MapProjection(bounds=bounds, positions=positions)
