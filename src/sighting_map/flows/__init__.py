"""
Prefect flows for the sighting site.

Flows:
- build: Load sightings, apply filter criteria, render the map page

Usage (local):
    python -m sighting_map.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-site/default'
"""
