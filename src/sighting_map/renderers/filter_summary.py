"""Active filter chips shown above the results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sighting_map.renderers import render_template

if TYPE_CHECKING:
    from sighting_map.schemas import FilterCriteria


def active_filter_labels(criteria: FilterCriteria) -> list[str]:
    """One label per active criterion, in search/species/time order."""
    labels: list[str] = []
    if criteria.search_active:
        labels.append(f'Search: "{(criteria.search_term or "").strip()}"')
    if criteria.species_active:
        labels.append(f"Species: {criteria.species}")
    if criteria.time_active:
        labels.append(f"Time: {criteria.time_window.label}")
    return labels


def build_filter_summary_html(criteria: FilterCriteria) -> str:
    """Chip row for the active filters, or an empty string when none are set."""
    labels = active_filter_labels(criteria)
    if not labels:
        return ""
    return render_template("filter_summary.html.j2", labels=labels)
