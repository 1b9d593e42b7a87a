"""Multi-criterion filtering of a sighting collection.

All filters are AND-ed together and each one is skipped when inactive, so the
default ``FilterCriteria()`` returns the collection unchanged. Nothing here
raises: unusable criteria fall back to "match all".

The reference instant ``now`` is always passed in by the caller. Callers that
want "today" to mean local midnight should pass an aware ``now`` in the
viewer's timezone (see ``config.Settings.now``).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from sighting_map.schemas import ALL_SPECIES, FilterCriteria, Sighting, TimeWindow

if TYPE_CHECKING:
    from collections.abc import Iterable


def clear_criteria() -> FilterCriteria:
    """Criteria used by the "Clear" action: nothing active."""
    return FilterCriteria(search_term="", species=ALL_SPECIES, time_window=TimeWindow.ALL)


def distinct_species(sightings: Iterable[Sighting]) -> list[str]:
    """Sorted, deduplicated species names for the species selector.

    Pass the full, unfiltered collection so the options stay stable while the
    user is filtering.
    """
    return sorted({s.species for s in sightings})


def window_start(window: TimeWindow, now: datetime) -> datetime | None:
    """Earliest timestamp admitted by ``window``, or None for no limit.

    ``today`` truncates to midnight in ``now``'s own timezone, ``week`` steps
    back seven days, and ``month`` steps back one calendar month (a month-end
    date clamps to the last day of the shorter month).
    """
    if window == TimeWindow.TODAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if window == TimeWindow.WEEK:
        return now - timedelta(days=7)
    if window == TimeWindow.MONTH:
        return now - relativedelta(months=1)
    return None


def _comparable(timestamp: datetime, reference: datetime) -> datetime:
    """Align tz-awareness of ``timestamp`` with ``reference`` for comparison.

    A naive timestamp is read as wall time in ``reference``'s zone. Against a
    naive ``reference``, an aware timestamp is converted to host-local wall
    time.
    """
    if reference.tzinfo is None and timestamp.tzinfo is not None:
        return timestamp.astimezone().replace(tzinfo=None)
    if reference.tzinfo is not None and timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=reference.tzinfo)
    return timestamp


def matches_search(sighting: Sighting, term: str) -> bool:
    """Case-insensitive substring match on species, description, or reporter."""
    needle = term.strip().casefold()
    if not needle:
        return True
    fields = (sighting.species, sighting.description, sighting.reported_by)
    return any(needle in value.casefold() for value in fields if value)


def matches(sighting: Sighting, criteria: FilterCriteria, now: datetime) -> bool:
    """True when ``sighting`` passes every active criterion."""
    if criteria.search_active and not matches_search(sighting, criteria.search_term or ""):
        return False

    if criteria.species_active and sighting.species != criteria.species:
        return False

    start = window_start(criteria.time_window, now)
    return start is None or _comparable(sighting.timestamp, start) >= start


def filter_sightings(
    sightings: Iterable[Sighting],
    criteria: FilterCriteria | None = None,
    now: datetime | None = None,
) -> list[Sighting]:
    """Return the sightings matching ``criteria``, in their original order.

    Args:
        sightings: Collection to filter. Not modified.
        criteria: Active constraints. None means no filtering.
        now: Reference instant for the time window. Only read when a time
            window is active; defaults to the current local time.

    Returns:
        New list of matching sightings.
    """
    if criteria is None or not criteria.is_active:
        return list(sightings)

    if now is None:
        now = datetime.now().astimezone()

    return [s for s in sightings if matches(s, criteria, now)]
