"""Sighting record loading and parsing.

Turns raw JSON records into validated ``Sighting`` models. Malformed records
are dropped here so the filter and projection code can assume valid input.
"""

from __future__ import annotations

import json
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from sighting_map.schemas import Sighting

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


# =============================================================================
# Parsing
# =============================================================================


def parse_sighting(raw: dict[str, Any]) -> Sighting | None:
    """Parse a single sighting record. Returns None if it fails validation."""
    record = dict(raw)
    if not record.get("id"):
        record["id"] = str(uuid.uuid4())
    else:
        record["id"] = str(record["id"])

    try:
        return Sighting.model_validate(record)
    except ValidationError:
        return None


def parse_sightings(raw_records: Iterable[dict[str, Any]]) -> list[Sighting]:
    """Parse records in order, skipping the ones that fail validation."""
    sightings: list[Sighting] = []
    for raw in raw_records:
        parsed = parse_sighting(raw)
        if parsed is not None:
            sightings.append(parsed)
    return sightings


# =============================================================================
# Loading
# =============================================================================


def load_sightings(path: Path) -> list[Sighting]:
    """Load sightings from a JSON file.

    The file holds either a bare list of records or a metadata envelope
    (``{"meta": {...}, "data": [...]}``). A missing file yields no sightings.

    Raises:
        ValueError: If the file is not valid JSON or holds no record list.
    """
    if not path.exists():
        return []

    try:
        with path.open() as f:
            payload: Any = json.load(f)
    except json.JSONDecodeError as e:
        msg = f"Invalid sightings file {path}: {e}"
        raise ValueError(msg) from e

    records = payload.get("data", []) if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        msg = f"Expected a list of sightings in {path}"
        raise ValueError(msg)

    return parse_sightings(r for r in records if isinstance(r, dict))


# =============================================================================
# Creation
# =============================================================================


def new_sighting(
    species: str,
    description: str,
    latitude: float,
    longitude: float,
    reported_by: str | None = None,
    timestamp: datetime | None = None,
) -> Sighting:
    """Create a freshly reported sighting with a new id.

    Raises:
        pydantic.ValidationError: If any field is invalid.
    """
    return Sighting(
        id=str(uuid.uuid4()),
        species=species,
        description=description,
        latitude=latitude,
        longitude=longitude,
        reported_by=reported_by,
        timestamp=timestamp or datetime.now(UTC),
    )
