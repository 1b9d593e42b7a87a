"""Sighting record sources.

The core (``filtering``, ``projection``) only ever sees validated ``Sighting``
models; everything that reads raw records lives here.

Public API:
  - sightings: load_sightings, parse_sighting, parse_sightings, new_sighting
"""

from sighting_map.datasources.sightings import (
    load_sightings,
    new_sighting,
    parse_sighting,
    parse_sightings,
)

__all__ = [
    "load_sightings",
    "new_sighting",
    "parse_sighting",
    "parse_sightings",
]
