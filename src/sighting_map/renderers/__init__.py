"""Pure rendering functions: sightings -> HTML strings.

All renderers follow the same pattern:
  - Input: ``Sighting`` models, ``FilterCriteria``, or projection output
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which assembles the page.

Public API:
  - sightings_map: build_sightings_map_html
  - sightings_list: build_sightings_list_html
  - filter_summary: active_filter_labels, build_filter_summary_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that prepares plain
   values and calls ``render_template("{name}.html.j2", ...)``.
2. Add the template to ``templates/``. Templates produce fragments; CSS lives
   in ``templates/page.html.j2``.
3. Call the build function from ``flows/build.py:build_html`` and add a
   placeholder for it in ``page.html.j2``.
4. Add tests asserting on the returned HTML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
