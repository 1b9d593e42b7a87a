"""
Prefect flow for building the static sightings page.

Loads the sighting collection, narrows it with the given filter criteria,
and renders the map, list, and active-filter summary into one HTML page.

Run locally:
    python -m sighting_map.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from sighting_map.config import get_settings
from sighting_map.datasources.sightings import load_sightings
from sighting_map.filtering import filter_sightings
from sighting_map.renderers import render_template
from sighting_map.renderers.filter_summary import build_filter_summary_html
from sighting_map.renderers.sightings_list import build_sightings_list_html
from sighting_map.renderers.sightings_map import build_sightings_map_html
from sighting_map.schemas import FilterCriteria, Sighting

PAGE_TITLE = "Wildlife Sightings"


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-sightings")
def load_sightings_task(path: Path) -> list[Sighting]:
    """Load and validate the sighting collection."""
    return load_sightings(path)


@task(name="filter-sightings")
def filter_sightings_task(
    sightings: list[Sighting],
    criteria: FilterCriteria,
    now: datetime,
) -> list[Sighting]:
    """Narrow the collection to the active criteria."""
    return filter_sightings(sightings, criteria, now)


@task(name="build-html")
def build_html(
    shown: list[Sighting],
    total: int,
    criteria: FilterCriteria,
    now: datetime,
) -> str:
    """Assemble the page from the filtered sightings."""
    tz = now.tzinfo
    return render_template(
        "page.html.j2",
        title=PAGE_TITLE,
        shown=len(shown),
        total=total,
        generated_at=now.strftime("%Y-%m-%d %H:%M"),
        filter_summary_html=build_filter_summary_html(criteria),
        map_html=build_sightings_map_html(shown, tz),
        list_html=build_sightings_list_html(shown, tz),
    )


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all(
    criteria: FilterCriteria | None = None,
    now: datetime | None = None,
    data_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build the static sightings page.

    Args:
        criteria: Filters to apply. None shows every sighting.
        now: Reference instant for time windows. Defaults to the current
            time in the configured timezone.
        data_dir: Overrides ``settings.data_dir``.
    """
    settings = get_settings()
    base = data_dir or settings.data_dir
    criteria = criteria or FilterCriteria()
    if now is None:
        now = settings.now()

    sightings_path = base / settings.sightings_path.name
    print(f"Loading sightings from {sightings_path}...")
    sightings = load_sightings_task(sightings_path)

    if not sightings:
        print("No sightings found. Nothing to build.")
        return {"error": "no data"}

    print(f"Filtering {len(sightings)} sightings...")
    shown = filter_sightings_task(sightings, criteria, now)
    if not shown:
        print("Warning: No sightings match the current filters.")

    print("Building HTML...")
    html = build_html(shown, len(sightings), criteria, now)

    print("Writing site...")
    output_path = write_site(html, base / settings.site_dir.name)

    print(f"Site built: {output_path}")
    return {"sightings": len(sightings), "shown": len(shown), "output": str(output_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
