"""Simplified map renderer for sightings.

Places one marker per sighting on a plain canvas using percentage offsets
from ``projection.project_sightings``. There are no map tiles; the canvas is
a stylized backdrop sized to the collection's bounding box.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sighting_map.projection import project_sightings
from sighting_map.renderers import render_template
from sighting_map.renderers.formatting import format_coordinate, format_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from sighting_map.schemas import Sighting


def build_sightings_map_html(sightings: Sequence[Sighting], tz: tzinfo | None = None) -> str:
    """Build the map fragment: markers, legend, and bounds readout.

    Args:
        sightings: Sightings to plot, usually the filtered view.
        tz: Zone for tooltip dates. None keeps each timestamp's own zone.
    """
    projection = project_sightings(sightings)
    markers = []
    for sighting, pos in zip(sightings, projection.positions, strict=True):
        ts = sighting.timestamp.astimezone(tz) if tz else sighting.timestamp
        markers.append(
            {
                "id": pos.id,
                "left": f"{pos.x:.2f}",
                "top": f"{pos.y:.2f}",
                "species": sighting.species,
                "date": format_date(ts),
            }
        )

    bounds = projection.bounds
    return render_template(
        "sightings_map.html.j2",
        markers=markers,
        count=len(sightings),
        origin=format_coordinate(bounds.min_lat, bounds.min_lng),
    )
