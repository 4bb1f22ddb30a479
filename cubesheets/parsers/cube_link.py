"""
Cube Cobra link parsing.

Turns whatever the user typed into a sheet cell (a bare cube ID or a link
to any page of the cube) into a cube ID. Only the shape of the string is
checked; whether the cube exists is left to the fetch.
"""

import re

from cubesheets.config import settings

# Bare cube IDs: short IDs ("abc") and custom slugs ("my-vintage_cube")
_CUBE_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")

# Any cube page URL; the ID is the last path segment before the end or the query.
# Example: https://cubecobra.com/cube/overview/my-cube?view=table
_CUBE_LINK_PATTERN = re.compile(
    rf"{re.escape(settings.cube_cobra_host)}/.*/(?P<cube_id>[a-zA-Z0-9_-]+?)(?:$|\?)",
    re.IGNORECASE,
)


def resolve_cube_id(id_or_link: str | None) -> str | None:
    """
    Find the cube ID in a cube ID or a link to a cube page.

    Args:
        id_or_link: Cube ID or Cube Cobra URL, possibly padded with whitespace

    Returns:
        The cube ID, or None if the input is empty or no ID can be found
    """
    if id_or_link is None:
        return None

    trimmed = id_or_link.strip()
    if not trimmed:
        return None

    if _CUBE_ID_PATTERN.fullmatch(trimmed):
        return trimmed

    match = _CUBE_LINK_PATTERN.search(trimmed)
    if match is None:
        return None

    return match.group("cube_id")


def overview_url_for_cube(cube_id: str) -> str:
    """URL of the cube's overview page on Cube Cobra."""
    return f"{settings.cube_cobra_url}/cube/overview/{cube_id}"
