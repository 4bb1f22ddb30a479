"""
Sheet query functions.

The two entry points a spreadsheet host calls: a sorted card table with
the requested columns, and raw cube metadata. Each call resolves the cube
ID, fetches the cube once and returns a fresh result.
"""

import logging
from typing import Any

import httpx

from cubesheets.models.cube import Cube
from cubesheets.models.failure import InvalidCubeLinkError
from cubesheets.parsers.cube_link import resolve_cube_id
from cubesheets.parsers.field_names import flatten_fields, normalize_field_names
from cubesheets.services.card_fields import format_card_field
from cubesheets.services.card_sorter import sort_cards
from cubesheets.services.cube_client import fetch_cube

logger = logging.getLogger(__name__)


def _fetch_resolved_cube(id_or_link: str | None, client: httpx.Client | None) -> Cube:
    cube_id = resolve_cube_id(id_or_link)
    if cube_id is None:
        raise InvalidCubeLinkError(id_or_link)
    return fetch_cube(cube_id, client=client)


def list_cube_cards(
    id_or_link: str | None,
    fields: Any,
    client: httpx.Client | None = None,
) -> list[list[Any]]:
    """
    List the mainboard of a cube with the requested fields for each card.

    Cards are sorted by color identity, type, mana value and name.

    Args:
        id_or_link: Cube ID or link to any page of the cube
        fields: Field names, possibly nested (e.g. a sheet range)
        client: Optional httpx client for connection reuse

    Returns:
        One row per card, one column per requested field

    Raises:
        InvalidCubeLinkError: If no cube ID can be found in id_or_link
        CubeFetchError: If the cube cannot be fetched
        MissingCardDataError: If a card lacks data a field or the sort needs
    """
    field_names = normalize_field_names(fields)
    logger.debug("Listing cube %s with fields %s", id_or_link, field_names)

    cube = _fetch_resolved_cube(id_or_link, client)
    sorted_cards = sort_cards(cube.mainboard)

    return [[format_card_field(card, field) for field in field_names] for card in sorted_cards]


def get_cube_metadata(
    id_or_link: str | None,
    fields: Any,
    client: httpx.Client | None = None,
) -> list[Any]:
    """
    Fetch top-level attributes of a cube, such as its name or owner.

    Field names are used as-is. Attributes the cube doesn't have come back
    as None.

    Raises:
        InvalidCubeLinkError: If no cube ID can be found in id_or_link
        CubeFetchError: If the cube cannot be fetched
    """
    field_names = flatten_fields(fields)
    logger.debug("Fetching metadata %s for cube %s", field_names, id_or_link)

    cube = _fetch_resolved_cube(id_or_link, client)

    return [cube.attribute(field) for field in field_names]
