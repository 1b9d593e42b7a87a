"""Sighting Map - filter and map geotagged wildlife sighting reports.

Architecture::

    schemas.py      Pydantic models (Sighting, FilterCriteria, Bounds, projections)
    filtering.py    Search / species / time-window filtering (pure)
    projection.py   Bounding box + lat/lng -> clamped canvas position (pure)
    datasources/    Raw JSON records -> validated Sighting models
    renderers/      Pure data -> HTML (map, card list, active filters)
    flows/          Prefect orchestration (build renders the static page)
    config.py       Environment-driven settings

Data flow: datasources -> filtering -> projection -> renderers -> site/
"""

__version__ = "0.1.0"

from sighting_map.config import Settings
from sighting_map.filtering import clear_criteria, distinct_species, filter_sightings
from sighting_map.projection import compute_bounds, project, project_sightings
from sighting_map.schemas import (
    ALL_SPECIES,
    Bounds,
    FilterCriteria,
    MapProjection,
    ProjectedPosition,
    ProjectedSighting,
    Sighting,
    TimeWindow,
)

__all__ = [
    "ALL_SPECIES",
    "Bounds",
    "FilterCriteria",
    "MapProjection",
    "ProjectedPosition",
    "ProjectedSighting",
    "Settings",
    "Sighting",
    "TimeWindow",
    "__version__",
    "clear_criteria",
    "compute_bounds",
    "distinct_species",
    "filter_sightings",
    "project",
    "project_sightings",
]
