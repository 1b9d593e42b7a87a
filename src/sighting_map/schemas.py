"""
Domain models for sighting map.

Pydantic models for sighting records, filter criteria, and map projection
output. Records are frozen: the filter and projection code hands back new
collections and never mutates what it was given.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Sentinel species value meaning "do not filter by species"
ALL_SPECIES = "all"


# =============================================================================
# Sightings
# =============================================================================


class Sighting(BaseModel):
    """A single geotagged wildlife observation."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, populate_by_name=True)

    id: str = Field(..., description="Stable unique identifier")
    species: str
    description: str
    reported_by: str | None = Field(default=None, alias="reportedBy")
    latitude: float
    longitude: float
    timestamp: datetime

    @field_validator("species")
    @classmethod
    def _species_required(cls, value: str) -> str:
        if not value:
            msg = "Species is required"
            raise ValueError(msg)
        return value

    @field_validator("description")
    @classmethod
    def _description_required(cls, value: str) -> str:
        if not value:
            msg = "Description is required"
            raise ValueError(msg)
        return value

    @field_validator("reported_by")
    @classmethod
    def _blank_reporter_is_absent(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("latitude")
    @classmethod
    def _latitude_in_range(cls, value: float) -> float:
        if not -90 <= value <= 90:
            msg = "Invalid latitude"
            raise ValueError(msg)
        return value

    @field_validator("longitude")
    @classmethod
    def _longitude_in_range(cls, value: float) -> float:
        if not -180 <= value <= 180:
            msg = "Invalid longitude"
            raise ValueError(msg)
        return value


# =============================================================================
# Filtering
# =============================================================================


class TimeWindow(StrEnum):
    """How far back a sighting may be to pass the time filter."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"

    @property
    def label(self) -> str:
        return _TIME_WINDOW_LABELS[self]


_TIME_WINDOW_LABELS = {
    TimeWindow.ALL: "All time",
    TimeWindow.TODAY: "Today",
    TimeWindow.WEEK: "Past week",
    TimeWindow.MONTH: "Past month",
}


class FilterCriteria(BaseModel):
    """Search, species, and time constraints for narrowing a collection.

    Every field defaults to its inactive value, so ``FilterCriteria()``
    matches everything. Unusable values (an unknown time window, a missing
    species) fall back to the inactive value instead of failing validation.
    """

    model_config = ConfigDict(frozen=True)

    search_term: str | None = None
    species: str = ALL_SPECIES
    time_window: TimeWindow = TimeWindow.ALL

    @field_validator("search_term", mode="before")
    @classmethod
    def _search_term_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("species", mode="before")
    @classmethod
    def _species_or_all(cls, value: Any) -> str:
        return value if isinstance(value, str) and value else ALL_SPECIES

    @field_validator("time_window", mode="before")
    @classmethod
    def _unknown_window_is_all(cls, value: Any) -> TimeWindow:
        try:
            return TimeWindow(value)
        except (TypeError, ValueError):
            return TimeWindow.ALL

    @property
    def search_active(self) -> bool:
        return bool(self.search_term and self.search_term.strip())

    @property
    def species_active(self) -> bool:
        return bool(self.species) and self.species != ALL_SPECIES

    @property
    def time_active(self) -> bool:
        return self.time_window != TimeWindow.ALL

    @property
    def is_active(self) -> bool:
        """True when at least one criterion narrows the collection."""
        return self.search_active or self.species_active or self.time_active


# =============================================================================
# Projection
# =============================================================================


class Bounds(BaseModel):
    """Tight lat/lng bounding box of a sighting collection."""

    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lng_span(self) -> float:
        return self.max_lng - self.min_lng


class ProjectedPosition(BaseModel):
    """Marker position in percent-of-canvas units."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class ProjectedSighting(ProjectedPosition):
    """A projected position tagged with the sighting it belongs to."""

    id: str


class MapProjection(BaseModel):
    """Positions for one render pass plus the bounds they were computed from."""

    model_config = ConfigDict(frozen=True)

    bounds: Bounds
    positions: list[ProjectedSighting] = Field(default_factory=list)
