"""Sighting card list renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sighting_map.renderers import render_template
from sighting_map.renderers.formatting import format_coordinate, format_date, format_time

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from sighting_map.schemas import Sighting


def build_sightings_list_html(sightings: Sequence[Sighting], tz: tzinfo | None = None) -> str:
    """Build a card per sighting, in the order given.

    Renders an empty-state card when there is nothing to show.
    """
    if not sightings:
        return render_template("sightings_list_empty.html.j2")

    cards = []
    for s in sightings:
        ts = s.timestamp.astimezone(tz) if tz else s.timestamp
        cards.append(
            {
                "species": s.species,
                "description": s.description,
                "reported_by": s.reported_by,
                "coordinates": format_coordinate(s.latitude, s.longitude),
                "date": format_date(ts),
                "time": format_time(ts),
            }
        )

    return render_template("sightings_list.html.j2", cards=cards, total=len(cards))
